"""Chart components for the Streamlit app."""

from __future__ import annotations

import plotly.graph_objects as go

from app.components.theme import (
    AREA_FILL_OPACITY,
    add_milestone_hline,
    add_milestone_vline,
    make_rgba,
    palette,
    template_name,
)
from firstmillion.analytics.metrics import as_arrays, chart_points, composition
from firstmillion.config.defaults import MILESTONE_AMOUNT
from firstmillion.core.engine import ProjectionResult, SummaryStats
from firstmillion.io.formatting import format_currency, format_duration, format_month_label


def growth_chart(result: ProjectionResult, dark: bool = False) -> go.Figure:
    """Area chart of the accumulated total against the amount invested."""
    points = chart_points(result.snapshots)
    cols = as_arrays(points)
    colors = palette(dark)
    hover_time = [format_duration(int(m)) for m in cols["month"]]

    fig = go.Figure()

    fig.add_trace(
        go.Scatter(
            x=cols["month"],
            y=cols["total"],
            mode="lines",
            fill="tozeroy",
            fillcolor=make_rgba(colors["total"], AREA_FILL_OPACITY),
            line=dict(color=colors["total"], width=3),
            name="Total Acumulado",
            customdata=[[t, format_currency(v)] for t, v in zip(hover_time, cols["total"], strict=True)],
            hovertemplate="%{customdata[0]}: %{customdata[1]}<extra></extra>",
        )
    )

    fig.add_trace(
        go.Scatter(
            x=cols["month"],
            y=cols["invested"],
            mode="lines",
            line=dict(color=colors["invested"], width=2, dash="dash"),
            name="Valor Investido",
            customdata=[format_currency(v) for v in cols["invested"]],
            hovertemplate="%{customdata}<extra></extra>",
        )
    )

    # Year-end ticks once the horizon passes a year, otherwise every plotted month
    tick_months = [int(m) for m in cols["month"] if m > 0 and m % 12 == 0] or [
        int(m) for m in cols["month"]
    ]
    fig.update_xaxes(
        tickmode="array",
        tickvals=tick_months,
        ticktext=[format_month_label(m) for m in tick_months],
    )

    months_to_million = result.summary.months_to_million
    if months_to_million is not None:
        add_milestone_hline(fig, MILESTONE_AMOUNT, dark=dark)
        add_milestone_vline(fig, months_to_million, dark=dark)

    fig.update_layout(
        title="Evolução do Patrimônio",
        xaxis_title="Tempo",
        yaxis_title="Patrimônio (R$)",
        yaxis_tickformat=",.0f",
        template=template_name(dark),
        height=450,
    )
    return fig


def composition_chart(summary: SummaryStats, dark: bool = False) -> go.Figure:
    """Donut chart of invested principal versus interest earned."""
    parts = composition(summary)
    colors = palette(dark)
    values = list(parts.values())

    fig = go.Figure(
        go.Pie(
            labels=list(parts.keys()),
            values=values,
            hole=0.55,
            marker=dict(colors=[colors["invested"], colors["total"]]),
            customdata=[format_currency(v) for v in values],
            hovertemplate="%{label}: %{customdata}<extra></extra>",
            textinfo="percent",
            sort=False,
        )
    )
    fig.update_layout(
        title="Composição do Patrimônio",
        template=template_name(dark),
        height=400,
        showlegend=True,
    )
    return fig


def monthly_interest_chart(result: ProjectionResult, dark: bool = False) -> go.Figure:
    """Bar chart of the interest earned in each month."""
    cols = as_arrays(result.snapshots[1:])

    fig = go.Figure(
        go.Bar(
            x=cols["month"],
            y=cols["interest_month"],
            marker_color=palette(dark)["total"],
            name="Juros do Mês",
            customdata=[format_currency(v) for v in cols["interest_month"]],
            hovertemplate="Mês %{x}: %{customdata}<extra></extra>",
        )
    )
    fig.update_layout(
        title="Juros Ganhos por Mês",
        xaxis_title="Mês",
        yaxis_title="Juros (R$)",
        yaxis_tickformat=",.0f",
        template=template_name(dark),
        height=350,
    )
    return fig
