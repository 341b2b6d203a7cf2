"""Custom Plotly theme for dottime charts."""

from __future__ import annotations

import plotly.graph_objects as go
import plotly.io as pio

from dottime.config.defaults import DEFAULT_OVERLAY_OPACITY
from dottime.theme.presets import background_color, font_family, surface_colors

# Halo drawn around the today dot, as a multiple of the dot size
TODAY_HALO_SCALE = 1.6
TODAY_HALO_OPACITY = 0.35

TEMPLATE_NAME = "dottime"


def _make_rgba(hex_color: str, alpha: float) -> str:
    """Convert hex color string to rgba() with given alpha."""
    hex_color = hex_color.lstrip("#")
    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)
    return f"rgba({r}, {g}, {b}, {alpha})"


def halo_color(color: str) -> str:
    """Translucent version of a colour for the today halo."""
    if color.startswith("#") and len(color) == 7:
        return _make_rgba(color, TODAY_HALO_OPACITY)
    return color


def apply_background(
    fig: go.Figure,
    background: str,
    font: str = "system",
    custom_uri: str | None = None,
    overlay_opacity: float = DEFAULT_OVERLAY_OPACITY,
) -> None:
    """Tint the figure with a background preset and set the font.

    A ``"custom"`` background with an image URI stretches the image behind
    the whole figure and darkens it with a black layer of ``overlay_opacity``.
    """
    tint = background_color(background)
    base = surface_colors()["background"]
    plot_bg = base if tint == "transparent" else tint
    if background == "custom" and custom_uri:
        fig.add_layout_image(
            source=custom_uri,
            xref="paper",
            yref="paper",
            x=0,
            y=1,
            sizex=1,
            sizey=1,
            xanchor="left",
            yanchor="top",
            sizing="stretch",
            layer="below",
        )
        plot_bg = f"rgba(0, 0, 0, {overlay_opacity})"
    fig.update_layout(
        paper_bgcolor=base,
        plot_bgcolor=plot_bg,
        font=dict(family=font_family(font)),
    )


def register_theme() -> None:
    """Register and activate the dottime Plotly template."""
    surface = surface_colors()
    dottime_layout = go.Layout(
        font=dict(family=font_family("system"), size=13, color=surface["text"]),
        title_font=dict(size=16),
        plot_bgcolor=surface["background"],
        paper_bgcolor=surface["background"],
        xaxis=dict(visible=False, showgrid=False, zeroline=False),
        yaxis=dict(visible=False, showgrid=False, zeroline=False),
        showlegend=False,
        hovermode="closest",
        margin=dict(l=20, r=20, t=40, b=20),
    )

    pio.templates[TEMPLATE_NAME] = go.layout.Template(layout=dottime_layout)
    pio.templates.default = TEMPLATE_NAME
