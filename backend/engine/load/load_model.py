"""Illustrative site consumption profile.

The estimator does not simulate load; the profile only supplies the
baseline annual demand cap and is echoed back to callers for context.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SiteLoadProfile:
    """Annual electricity consumption summary for a single site."""

    name: str
    annual_consumption_kwh: float
    average_daily_kwh: float
    peak_demand_kw: float          # highest half-hour demand on bills
    working_days_per_year: int
    monthly_kwh: tuple[float, ...]  # January first

    def monthly_share(self) -> tuple[float, ...]:
        """Fraction of the summed monthly consumption falling in each month."""
        monthly = np.asarray(self.monthly_kwh, dtype=np.float64)
        total = float(monthly.sum())
        if total <= 0.0:
            return tuple(0.0 for _ in self.monthly_kwh)
        return tuple(float(x) for x in monthly / total)


# Large rail-estate site; the monthly split keeps the same seasonal shape
# as the bills and is informational only.
DEFAULT_LOAD_PROFILE = SiteLoadProfile(
    name="Network Rail",
    annual_consumption_kwh=424_000.0,
    average_daily_kwh=1160.0,
    peak_demand_kw=210.0,
    working_days_per_year=260,
    monthly_kwh=(
        32_000.0, 31_000.0, 33_000.0, 35_000.0, 36_000.0, 38_000.0,
        39_000.0, 40_000.0, 37_000.0, 36_000.0, 34_000.0, 33_000.0,
    ),
)
