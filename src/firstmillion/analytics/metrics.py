"""Metrics and views derived from a projection run."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, fields

import numpy as np
import pandas as pd

from firstmillion.core.engine import MonthlySnapshot, SummaryStats

INVESTED_LABEL = "Valor Investido"
INTEREST_LABEL = "Total em Juros"

# Above this many snapshots, charts switch to one point per year.
LONG_TERM_THRESHOLD = 60


def return_on_investment(summary: SummaryStats) -> float:
    """Interest earned as a percentage of the amount invested (0 if nothing invested)."""
    if summary.total_invested <= 0:
        return 0.0
    return (summary.total_amount - summary.total_invested) / summary.total_invested * 100


def yearly_breakdown(snapshots: Sequence[MonthlySnapshot]) -> list[MonthlySnapshot]:
    """Select one snapshot per completed year.

    A horizon that ends mid-year also gets its final snapshot so the last
    row always shows the final balance.
    """
    rows = [s for s in snapshots if s.month > 0 and s.month % 12 == 0]
    if snapshots:
        last = snapshots[-1]
        if last.month % 12 != 0:
            rows.append(last)
    return rows


def chart_points(
    snapshots: Sequence[MonthlySnapshot],
    long_term_threshold: int = LONG_TERM_THRESHOLD,
) -> list[MonthlySnapshot]:
    """Thin a snapshot sequence for plotting.

    Short horizons keep every month. Long ones keep the first and last
    snapshots plus every year end.
    """
    if len(snapshots) <= long_term_threshold:
        return list(snapshots)
    last_index = len(snapshots) - 1
    return [
        s
        for i, s in enumerate(snapshots)
        if i == 0 or i == last_index or s.month % 12 == 0
    ]


def composition(summary: SummaryStats) -> dict[str, float]:
    """Split the final balance into invested principal and interest."""
    return {
        INVESTED_LABEL: summary.total_invested,
        INTEREST_LABEL: summary.total_interest,
    }


def as_arrays(snapshots: Sequence[MonthlySnapshot]) -> dict[str, np.ndarray]:
    """Column-wise numpy arrays keyed by snapshot field name."""
    return {
        f.name: np.array([getattr(s, f.name) for s in snapshots])
        for f in fields(MonthlySnapshot)
    }


def schedule_frame(snapshots: Sequence[MonthlySnapshot]) -> pd.DataFrame:
    """Snapshots as a DataFrame, one row per month."""
    columns = [f.name for f in fields(MonthlySnapshot)]
    return pd.DataFrame([asdict(s) for s in snapshots], columns=columns)
