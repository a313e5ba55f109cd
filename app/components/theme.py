"""Light and dark Plotly themes for firstmillion charts."""

from __future__ import annotations

import plotly.graph_objects as go
import plotly.io as pio

LIGHT_TEMPLATE = "firstmillion"
DARK_TEMPLATE = "firstmillion_dark"

# Total balance / invested principal, per mode
LIGHT_PALETTE = {"total": "#991B1B", "invested": "#52525B", "milestone": "#1E3A8A"}
DARK_PALETTE = {"total": "#F87171", "invested": "#94A3B8", "milestone": "#60A5FA"}

AREA_FILL_OPACITY = 0.10

# Font stack
_FONT_FAMILY = "Inter, -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif"


def make_rgba(hex_color: str, alpha: float) -> str:
    """Convert hex color string to rgba() with given alpha."""
    hex_color = hex_color.lstrip("#")
    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)
    return f"rgba({r}, {g}, {b}, {alpha})"


def palette(dark: bool = False) -> dict[str, str]:
    """Return the series colors for the current mode."""
    return DARK_PALETTE if dark else LIGHT_PALETTE


def template_name(dark: bool = False) -> str:
    return DARK_TEMPLATE if dark else LIGHT_TEMPLATE


def add_milestone_hline(fig: go.Figure, amount: float, dark: bool = False) -> None:
    """Add a dotted reference line at the milestone balance."""
    fig.add_hline(
        y=amount,
        line_dash="dot",
        line_color=palette(dark)["milestone"],
        line_width=1,
    )


def add_milestone_vline(fig: go.Figure, month: int, dark: bool = False) -> None:
    """Mark the month the milestone is first reached."""
    fig.add_vline(
        x=month,
        line_dash="dash",
        line_color=palette(dark)["milestone"],
        line_width=1.5,
        annotation_text="R$ 1 milhão",
        annotation_font_size=11,
        annotation_font_color=palette(dark)["milestone"],
    )


def _layout(dark: bool) -> go.Layout:
    grid = "#334155" if dark else "#F1F5F9"
    text = "#CBD5E1" if dark else "#475569"
    background = "#1E293B" if dark else "white"
    return go.Layout(
        font=dict(family=_FONT_FAMILY, size=13, color=text),
        title_font=dict(size=16),
        colorway=[palette(dark)["total"], palette(dark)["invested"]],
        plot_bgcolor=background,
        paper_bgcolor=background,
        xaxis=dict(gridcolor=grid, zerolinecolor=grid, showgrid=False),
        yaxis=dict(gridcolor=grid, zerolinecolor=grid, griddash="dash", tickprefix="R$ "),
        hovermode="x unified",
        separators=",.",
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="left",
            x=0,
        ),
        margin=dict(l=60, r=20, t=60, b=40),
    )


def register_theme(dark: bool = False) -> None:
    """Register both firstmillion Plotly templates and activate one of them."""
    pio.templates[LIGHT_TEMPLATE] = go.layout.Template(layout=_layout(dark=False))
    pio.templates[DARK_TEMPLATE] = go.layout.Template(layout=_layout(dark=True))
    pio.templates.default = template_name(dark)
