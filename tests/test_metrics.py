"""Tests for projection metrics and views."""

from __future__ import annotations

import numpy as np
import pytest

from firstmillion.analytics.metrics import (
    INTEREST_LABEL,
    INVESTED_LABEL,
    as_arrays,
    chart_points,
    composition,
    return_on_investment,
    schedule_frame,
    yearly_breakdown,
)
from firstmillion.config.schema import PeriodType, RateType
from firstmillion.core.engine import ProjectionResult, SummaryStats, project


def _months(period: float, period_type: PeriodType = PeriodType.MONTHS) -> ProjectionResult:
    return project(1000, 100, 1, RateType.MONTHLY, period, period_type)


class TestReturnOnInvestment:
    def test_positive(self) -> None:
        summary = SummaryStats(
            total_invested=1000, total_interest=500, total_amount=1500, months_to_million=None
        )
        assert return_on_investment(summary) == pytest.approx(50.0)

    def test_nothing_invested(self) -> None:
        summary = SummaryStats(
            total_invested=0, total_interest=0, total_amount=0, months_to_million=None
        )
        assert return_on_investment(summary) == 0.0

    def test_zero_rate(self) -> None:
        result = project(1000, 100, 0, RateType.YEARLY, 2, PeriodType.YEARS)
        assert return_on_investment(result.summary) == pytest.approx(0.0)


class TestYearlyBreakdown:
    def test_whole_years(self) -> None:
        rows = yearly_breakdown(_months(2, PeriodType.YEARS).snapshots)
        assert [r.month for r in rows] == [12, 24]

    def test_partial_final_year(self) -> None:
        rows = yearly_breakdown(_months(30).snapshots)
        assert [r.month for r in rows] == [12, 24, 30]

    def test_less_than_a_year(self) -> None:
        rows = yearly_breakdown(_months(5).snapshots)
        assert [r.month for r in rows] == [5]

    def test_zero_period(self) -> None:
        assert yearly_breakdown(_months(0).snapshots) == []

    def test_thirty_years(self, thirty_year_result: ProjectionResult) -> None:
        rows = yearly_breakdown(thirty_year_result.snapshots)
        assert len(rows) == 30
        assert rows[-1] == thirty_year_result.final


class TestChartPoints:
    def test_short_horizon_keeps_all(self) -> None:
        snaps = _months(25).snapshots
        assert chart_points(snaps) == list(snaps)

    def test_threshold_is_inclusive(self) -> None:
        snaps = _months(59).snapshots
        assert len(chart_points(snaps)) == 60

    def test_long_horizon_keeps_year_ends(self) -> None:
        points = chart_points(_months(65).snapshots)
        assert [p.month for p in points] == [0, 12, 24, 36, 48, 60, 65]

    def test_thirty_years(self, thirty_year_result: ProjectionResult) -> None:
        points = chart_points(thirty_year_result.snapshots)
        assert len(points) == 31
        assert points[0].month == 0
        assert points[-1].month == 360


class TestComposition:
    def test_labels_and_values(self, thirty_year_result: ProjectionResult) -> None:
        parts = composition(thirty_year_result.summary)
        assert list(parts) == [INVESTED_LABEL, INTEREST_LABEL]
        assert parts[INVESTED_LABEL] == pytest.approx(180_000)
        assert sum(parts.values()) == pytest.approx(thirty_year_result.summary.total_amount)


class TestTabularViews:
    def test_as_arrays(self) -> None:
        cols = as_arrays(_months(12).snapshots)
        assert set(cols) == {"month", "year", "invested", "interest", "total", "interest_month"}
        assert isinstance(cols["total"], np.ndarray)
        assert len(cols["month"]) == 13
        np.testing.assert_allclose(cols["total"], cols["invested"] + cols["interest"])

    def test_as_arrays_empty(self) -> None:
        cols = as_arrays([])
        assert len(cols["month"]) == 0

    def test_schedule_frame(self, thirty_year_result: ProjectionResult) -> None:
        df = schedule_frame(thirty_year_result.snapshots)
        assert list(df.columns) == [
            "month",
            "year",
            "invested",
            "interest",
            "total",
            "interest_month",
        ]
        assert len(df) == 361
        assert df["invested"].iloc[-1] == pytest.approx(180_000)
