"""Cosmetic presets: dot colours, backgrounds, fonts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dottime.core.timecalc import DotCell
from dottime.io.yaml_loader import load_package_yaml
from dottime.utils.exceptions import ConfigError

PRESETS_TABLE = "theme/tables/presets.yaml"


@dataclass(frozen=True, slots=True)
class DotColors:
    """Colours for the three cell states."""

    name: str
    passed: str
    empty: str
    today: str


def _table() -> dict[str, Any]:
    data: dict[str, Any] = load_package_yaml(PRESETS_TABLE)
    return data


def dot_color_presets() -> list[str]:
    """Preset keys in display order."""
    return list(_table()["dot_colors"])


def background_presets() -> list[str]:
    return list(_table()["backgrounds"])


def font_presets() -> list[str]:
    return list(_table()["fonts"])


def dot_colors(preset: str = "default") -> DotColors:
    """Look up a dot colour preset.

    Raises:
        ConfigError: If the preset does not exist.
    """
    presets = _table()["dot_colors"]
    if preset not in presets:
        raise ConfigError(
            f"Unknown dot colour preset {preset!r}; choose from {', '.join(presets)}"
        )
    entry = presets[preset]
    return DotColors(
        name=entry["name"],
        passed=entry["passed"],
        empty=entry["empty"],
        today=entry["today"],
    )


def cell_color(cell: DotCell, colors: DotColors) -> str:
    """Fill colour for a cell. Today wins over passed, passed over empty."""
    if cell.is_today:
        return colors.today
    if cell.is_passed:
        return colors.passed
    return colors.empty


def background_color(preset: str) -> str:
    """Tint for a background preset, ``"transparent"`` when unknown."""
    entry = _table()["backgrounds"].get(preset)
    return entry["color"] if entry else "transparent"


def background_name(preset: str) -> str:
    entry = _table()["backgrounds"].get(preset)
    return entry["name"] if entry else preset.title()


def font_family(preset: str) -> str:
    """CSS font family for a font preset, falling back to the system font."""
    fonts = _table()["fonts"]
    entry = fonts.get(preset, fonts["system"])
    return str(entry["family"])


def surface_colors() -> dict[str, str]:
    """Base background and text colours of the app."""
    return dict(_table()["surface"])
