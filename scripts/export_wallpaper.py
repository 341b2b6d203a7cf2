#!/usr/bin/env python3
"""Export the dot grid as a PNG wallpaper.

Usage:
    python scripts/export_wallpaper.py [month|year|life] [--birth-year 1990]
        [--preset default] [--out docs/images/wallpaper.png]

Colours come from the packaged theme presets, so the image matches the app.
"""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib.colors as mcolors
import matplotlib.pyplot as plt

from dottime.config.defaults import DEFAULT_BIRTH_YEAR
from dottime.core.clock import today
from dottime.core.grid import cell_positions, grid_layout, n_rows
from dottime.core.timecalc import VIEW_MODES, compute_time_data, generate_dot_cells
from dottime.theme.presets import cell_color, dot_colors, surface_colors

# iPhone-ish lock screen, in inches at DPI
FIGSIZE = (3.9, 8.44)
DPI = 300

OUT_DIR = Path(__file__).resolve().parent.parent / "docs" / "images"


def _to_mpl(color: str) -> tuple[float, float, float, float] | str:
    """Convert ``rgba(r, g, b, a)`` strings to a matplotlib RGBA tuple."""
    if color.startswith("rgba("):
        r, g, b, a = (float(p) for p in color[5:-1].split(","))
        return (r / 255, g / 255, b / 255, a)
    return mcolors.to_rgba(color)


def export_wallpaper(view_mode: str, birth_year: int, preset: str, out: Path) -> None:
    """Render one wallpaper PNG for today's date."""
    now = today()
    time_data = compute_time_data(view_mode, birth_year, now)
    cells = generate_dot_cells(time_data, view_mode, now)
    layout = grid_layout(view_mode)
    colors = dot_colors(preset)
    surface = surface_colors()

    cols, rows = cell_positions(len(cells), layout.columns)
    fig, ax = plt.subplots(figsize=FIGSIZE)
    fig.patch.set_facecolor(surface["background"])
    ax.set_facecolor(surface["background"])
    ax.scatter(
        cols,
        -rows,
        s=(layout.dot_size * 0.6) ** 2,
        c=[_to_mpl(cell_color(c, colors)) for c in cells],
        linewidths=0,
    )
    ax.set_xlim(-1, layout.columns)
    ax.set_ylim(-max(n_rows(len(cells), layout.columns), 1) - 4, 2)
    ax.set_aspect("equal")
    ax.axis("off")
    ax.text(
        0,
        1,
        f"{time_data.remaining_units} {time_data.label}",
        color=surface["text"],
        fontsize=10,
        fontweight="light",
    )

    fig.savefig(out, dpi=DPI, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"  Saved {out}")


if __name__ == "__main__":
    import matplotlib

    matplotlib.use("Agg")

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("view", nargs="?", default="year", choices=VIEW_MODES)
    parser.add_argument("--birth-year", type=int, default=DEFAULT_BIRTH_YEAR)
    parser.add_argument("--preset", default="default")
    parser.add_argument("--out", type=Path, default=None)
    args = parser.parse_args()

    out = args.out or OUT_DIR / f"wallpaper_{args.view}.png"
    out.parent.mkdir(parents=True, exist_ok=True)
    export_wallpaper(args.view, args.birth_year, args.preset, out)
