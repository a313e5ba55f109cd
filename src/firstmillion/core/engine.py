"""Projection engine: month-by-month compounding of a deposit plus contributions."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from loguru import logger

from firstmillion import __version__
from firstmillion.config.defaults import MILESTONE_AMOUNT
from firstmillion.config.schema import MONTHS_PER_YEAR, PeriodType, ProjectionInputs, RateType
from firstmillion.core.timeline import Timeline


@dataclass(frozen=True, slots=True)
class MonthlySnapshot:
    """Account state at the end of one month.

    Attributes:
        month: Month index, 0 is the starting point.
        year: Whole years elapsed (``month // 12``).
        invested: Cumulative principal (initial deposit plus contributions).
        interest: Cumulative interest, always ``total - invested``.
        total: Balance after the month's interest and contribution.
        interest_month: Interest earned during this month only.
    """

    month: int
    year: int
    invested: float
    interest: float
    total: float
    interest_month: float


@dataclass(frozen=True, slots=True)
class SummaryStats:
    """Aggregates of a projection run, taken from the final snapshot."""

    total_invested: float
    total_interest: float
    total_amount: float
    months_to_million: int | None


@dataclass(frozen=True)
class ProjectionResult:
    """Output of a projection run.

    Unpacks as ``snapshots, summary = project(...)``.
    """

    snapshots: tuple[MonthlySnapshot, ...]
    summary: SummaryStats
    monthly_rate: float
    n_months: int
    engine_version: str = ""

    def __iter__(self) -> Iterator[Any]:
        return iter((self.snapshots, self.summary))

    @property
    def final(self) -> MonthlySnapshot:
        return self.snapshots[-1]


def monthly_rate(rate: float, rate_type: RateType) -> float:
    """Convert a nominal percentage rate to an effective monthly decimal rate.

    A yearly rate is spread over 12 compounding steps so that
    ``(1 + monthly) ** 12 == 1 + rate / 100``. A monthly rate is used as is.
    Yearly rates at or below -100% have no real 12th root and yield ``nan``.
    """
    if rate_type == RateType.YEARLY:
        growth = 1 + rate / 100
        if growth < 0:
            return math.nan
        return growth ** (1 / MONTHS_PER_YEAR) - 1
    return rate / 100


def project(
    initial: float,
    monthly: float,
    rate: float,
    rate_type: RateType,
    period: float,
    period_type: PeriodType,
    *,
    milestone: float = MILESTONE_AMOUNT,
) -> ProjectionResult:
    """Simulate monthly compounding and collect per-month snapshots.

    Interest for a month accrues on the balance carried in from the previous
    month; that month's contribution is added afterwards and starts earning
    the following month. Inputs are not validated: any finite values are
    simulated as given.

    Args:
        initial: Balance at month 0.
        monthly: Contribution added at the end of every month.
        rate: Nominal interest rate in percent (10 means 10%).
        rate_type: Whether ``rate`` is yearly or monthly.
        period: Horizon length; fractional month counts are truncated.
        period_type: Unit of ``period``.
        milestone: Balance whose first crossing is reported.

    Returns:
        ProjectionResult with ``n_months + 1`` snapshots and the summary.
    """
    timeline = Timeline.from_period(period, period_type)
    rate_per_month = monthly_rate(rate, rate_type)
    logger.debug(
        "Projecting {} months at monthly rate {:.6%} (initial={}, monthly={})",
        timeline.n_months,
        rate_per_month,
        initial,
        monthly,
    )

    current_total = initial
    total_invested = initial
    months_to_million: int | None = 0 if initial >= milestone else None

    snapshots = [
        MonthlySnapshot(
            month=0,
            year=0,
            invested=initial,
            interest=0.0,
            total=initial,
            interest_month=0.0,
        )
    ]

    for month in timeline.months():
        interest_amount = current_total * rate_per_month
        current_total += interest_amount + monthly
        total_invested += monthly

        if months_to_million is None and current_total >= milestone:
            months_to_million = month
            logger.debug("Milestone of {} reached at month {}", milestone, month)

        snapshots.append(
            MonthlySnapshot(
                month=month,
                year=timeline.year_at(month),
                invested=total_invested,
                interest=current_total - total_invested,
                total=current_total,
                interest_month=interest_amount,
            )
        )

    summary = SummaryStats(
        total_invested=total_invested,
        total_interest=current_total - total_invested,
        total_amount=current_total,
        months_to_million=months_to_million,
    )

    return ProjectionResult(
        snapshots=tuple(snapshots),
        summary=summary,
        monthly_rate=rate_per_month,
        n_months=timeline.n_months,
        engine_version=__version__,
    )


def project_inputs(inputs: ProjectionInputs) -> ProjectionResult:
    """Run :func:`project` on validated inputs."""
    return project(
        inputs.initial,
        inputs.monthly,
        inputs.rate,
        inputs.rate_type,
        inputs.period,
        inputs.period_type,
    )
