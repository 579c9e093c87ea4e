"""
System-level PV configuration and energy yield.

Holds the immutable estimator configuration (site, array, tariff, cost
coefficients and the monthly irradiance tables) and the conversion from
plane-of-array irradiation to delivered AC energy.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from engine.load.load_model import DEFAULT_LOAD_PROFILE
from .irradiance import MONTHS_PER_YEAR

# Rough cost assumptions used for maintenance and ballpark install CAPEX.
MAINTENANCE_COST_PER_KWP_YEAR: float = 18.0
INSTALL_COST_PER_KWP: float = 1050.0

# Monthly-mean daily irradiation (kWh/m^2/day), Manchester-ish climate.
BASELINE_GHI_DAILY: tuple[float, ...] = (
    0.8, 1.5, 2.6, 3.6, 4.6, 4.9, 4.8, 4.3, 3.1, 2.1, 1.0, 0.7,
)
BASELINE_DHI_DAILY: tuple[float, ...] = (
    0.6, 0.9, 1.2, 1.5, 1.6, 1.6, 1.6, 1.4, 1.2, 0.9, 0.6, 0.5,
)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PVSystemConfig:
    """Inputs for a single no-export savings estimate.

    The array is assumed to face due south (azimuth 0 deg). Numeric
    fields are deliberately not range-checked: out-of-range values give
    non-physical but well-defined results.

    ``annual_demand_kwh`` of ``None`` means the self-consumable energy is
    unbounded.
    """

    # --- Site & array ---
    latitude_deg: float = 53.4
    tilt_deg: float = 35.0
    array_kwp: float = 4.0
    albedo: float = 0.20
    performance_ratio: float = 0.86   # ~14 % system losses

    # --- Tariff & demand ---
    import_rate_per_kwh: float = 0.28
    annual_demand_kwh: float | None = DEFAULT_LOAD_PROFILE.annual_consumption_kwh

    # --- Cost coefficients ---
    maintenance_cost_per_kwp_year: float = MAINTENANCE_COST_PER_KWP_YEAR
    install_cost_per_kwp: float = INSTALL_COST_PER_KWP

    # --- Climate ---
    ghi_daily: tuple[float, ...] = BASELINE_GHI_DAILY
    dhi_daily: tuple[float, ...] = BASELINE_DHI_DAILY

    def __post_init__(self) -> None:
        for name in ("ghi_daily", "dhi_daily"):
            values = tuple(float(v) for v in getattr(self, name))
            if len(values) != MONTHS_PER_YEAR:
                raise ValueError(
                    f"{name} must have {MONTHS_PER_YEAR} values, got {len(values)}"
                )
            object.__setattr__(self, name, values)

    def with_overrides(self, **overrides: Any) -> PVSystemConfig:
        """Return a copy with *overrides* applied; ``self`` is unchanged."""
        return dataclasses.replace(self, **overrides)


BASELINE_CONFIG = PVSystemConfig()


# ---------------------------------------------------------------------------
# Energy yield
# ---------------------------------------------------------------------------

def specific_yield(annual_poa_kwh_m2: float, performance_ratio: float) -> float:
    """Specific yield (kWh/kWp/year).

    At STC a 1 kWp array delivers 1 kWh per kWh/m^2 of POA irradiation,
    so the yield is simply POA scaled by the performance ratio.
    """
    return annual_poa_kwh_m2 * performance_ratio


def annual_energy(specific_yield_kwh_per_kwp: float, capacity_kwp: float) -> float:
    """Annual AC energy (kWh) for an array of *capacity_kwp*."""
    return specific_yield_kwh_per_kwp * capacity_kwp
