"""Monthly timeline for a projection."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from firstmillion.config.schema import MONTHS_PER_YEAR, PeriodType


@dataclass(frozen=True, slots=True)
class Timeline:
    """Monthly time grid derived from the requested horizon.

    Attributes:
        period: Horizon length as entered.
        period_type: Unit of ``period``.
        n_months: Number of simulated months after month 0. Fractional
            horizons are truncated.
    """

    period: float
    period_type: PeriodType
    n_months: int

    @classmethod
    def from_period(cls, period: float, period_type: PeriodType) -> Timeline:
        """Create a Timeline from a horizon length and its unit."""
        if period_type == PeriodType.YEARS:
            total_months = period * MONTHS_PER_YEAR
        else:
            total_months = period
        n_months = max(0, math.floor(total_months))
        return cls(period=period, period_type=period_type, n_months=n_months)

    @property
    def n_points(self) -> int:
        """Number of snapshots, including month 0."""
        return self.n_months + 1

    def months(self) -> Iterator[int]:
        """Iterate over simulated months 1..n_months."""
        return iter(range(1, self.n_months + 1))

    def year_at(self, month: int) -> int:
        """Return the number of whole years elapsed at ``month``."""
        return month // MONTHS_PER_YEAR

    def month_of_year(self, month: int) -> int:
        """Return the months elapsed since the last whole year (0-11)."""
        return month % MONTHS_PER_YEAR

    def is_year_end(self, month: int) -> bool:
        """Check if ``month`` closes a whole year."""
        return month > 0 and month % MONTHS_PER_YEAR == 0
