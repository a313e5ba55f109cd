"""Tests for Timeline."""

from __future__ import annotations

from firstmillion.config.schema import PeriodType
from firstmillion.core.timeline import Timeline


class TestTimeline:
    def test_years_to_months(self) -> None:
        tl = Timeline.from_period(30, PeriodType.YEARS)
        assert tl.n_months == 360
        assert tl.n_points == 361

    def test_months_unchanged(self) -> None:
        tl = Timeline.from_period(18, PeriodType.MONTHS)
        assert tl.n_months == 18

    def test_fractional_months_truncate(self) -> None:
        assert Timeline.from_period(5.5, PeriodType.MONTHS).n_months == 5
        assert Timeline.from_period(5.99, PeriodType.MONTHS).n_months == 5

    def test_fractional_years(self) -> None:
        assert Timeline.from_period(1.5, PeriodType.YEARS).n_months == 18

    def test_zero_and_negative(self) -> None:
        assert Timeline.from_period(0, PeriodType.YEARS).n_months == 0
        assert Timeline.from_period(-2, PeriodType.MONTHS).n_months == 0

    def test_months_iteration(self) -> None:
        tl = Timeline.from_period(4, PeriodType.MONTHS)
        assert list(tl.months()) == [1, 2, 3, 4]
        assert list(Timeline.from_period(0, PeriodType.MONTHS).months()) == []

    def test_year_at(self) -> None:
        tl = Timeline.from_period(3, PeriodType.YEARS)
        assert tl.year_at(0) == 0
        assert tl.year_at(11) == 0
        assert tl.year_at(12) == 1
        assert tl.year_at(35) == 2

    def test_month_of_year(self) -> None:
        tl = Timeline.from_period(3, PeriodType.YEARS)
        assert tl.month_of_year(0) == 0
        assert tl.month_of_year(13) == 1
        assert tl.month_of_year(24) == 0

    def test_is_year_end(self) -> None:
        tl = Timeline.from_period(3, PeriodType.YEARS)
        assert not tl.is_year_end(0)
        assert not tl.is_year_end(11)
        assert tl.is_year_end(12)
        assert tl.is_year_end(36)
