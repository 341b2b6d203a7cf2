"""YAML data file loader for theme tables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


@lru_cache(maxsize=None)
def load_package_yaml(relative_path: str) -> Any:
    """Load a YAML file relative to the dottime package root.

    Results are cached per path, so callers must not mutate them.

    Args:
        relative_path: Path relative to ``src/dottime/``,
            e.g. ``"theme/tables/presets.yaml"``.
    """
    package_root = Path(__file__).resolve().parent.parent
    return load_yaml(package_root / relative_path)
