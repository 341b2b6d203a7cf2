"""Chart components for the Streamlit app."""

from __future__ import annotations

from collections.abc import Sequence

import plotly.graph_objects as go

from app.components.theme import TODAY_HALO_SCALE, halo_color
from dottime.core.grid import cell_positions, grid_layout, n_rows
from dottime.core.timecalc import DotCell, TimeData
from dottime.theme.presets import cell_color, dot_colors, surface_colors

_UNIT_NAMES = {"month": "Day", "year": "Day", "life": "Year"}

# First-run intro: four weeks with two days gone and today on the third
PREVIEW_CELLS = 28
PREVIEW_PASSED = 2


def dot_grid_chart(
    cells: Sequence[DotCell],
    view_mode: str,
    preset: str = "default",
    screen_width: float = 390.0,
) -> go.Figure:
    """Create the dot grid: one marker per cell, coloured by state.

    The today cell, if any, gets a second, larger translucent marker
    underneath it as a glow.
    """
    layout = grid_layout(view_mode, screen_width)
    colors = dot_colors(preset)
    cols, rows = cell_positions(len(cells), layout.columns)
    pitch = layout.dot_size + layout.gap
    x = cols * pitch
    y = -rows * pitch  # row 0 at the top
    unit = _UNIT_NAMES.get(view_mode, "Unit")

    fig = go.Figure()

    today = [i for i, c in enumerate(cells) if c.is_today]
    if today:
        i = today[0]
        fig.add_trace(
            go.Scatter(
                x=[x[i]],
                y=[y[i]],
                mode="markers",
                marker=dict(
                    size=layout.dot_size * TODAY_HALO_SCALE,
                    color=halo_color(colors.today),
                    line=dict(width=0),
                ),
                hoverinfo="skip",
                name="today-halo",
            )
        )

    fig.add_trace(
        go.Scatter(
            x=x,
            y=y,
            mode="markers",
            marker=dict(
                size=layout.dot_size,
                color=[cell_color(c, colors) for c in cells],
                line=dict(width=0),
            ),
            customdata=[c.index + 1 for c in cells],
            hovertemplate=f"{unit} %{{customdata}}<extra></extra>",
            name="dots",
        )
    )

    height_rows = max(n_rows(len(cells), layout.columns), 1)
    fig.update_layout(
        width=screen_width,
        height=height_rows * pitch + 80,
        xaxis=dict(visible=False, range=[-pitch, layout.columns * pitch]),
        yaxis=dict(visible=False, range=[-height_rows * pitch, pitch], scaleanchor="x"),
        showlegend=False,
    )
    return fig


def progress_bar_chart(time_data: TimeData, preset: str = "default") -> go.Figure:
    """Create a thin horizontal bar showing the elapsed fraction."""
    colors = dot_colors(preset)
    surface = surface_colors()
    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=[time_data.progress],
            y=[""],
            orientation="h",
            marker=dict(color=colors.today),
            hovertemplate=f"{time_data.progress:.1%} elapsed<extra></extra>",
            name="elapsed",
        )
    )
    fig.add_trace(
        go.Bar(
            x=[1.0 - time_data.progress],
            y=[""],
            orientation="h",
            marker=dict(color=colors.empty),
            hoverinfo="skip",
            name="remaining",
        )
    )
    fig.update_layout(
        barmode="stack",
        height=60,
        xaxis=dict(visible=False, range=[0, 1]),
        yaxis=dict(visible=False),
        paper_bgcolor=surface["background"],
        plot_bgcolor=surface["background"],
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False,
    )
    return fig


def preview_cells() -> list[DotCell]:
    """Sample cells shown on the first-run intro."""
    return [
        DotCell(index=i, is_passed=i < PREVIEW_PASSED, is_today=i == PREVIEW_PASSED)
        for i in range(PREVIEW_CELLS)
    ]
