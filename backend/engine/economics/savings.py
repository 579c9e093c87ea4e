"""Annual savings for a self-consumption (no-export) PV system.

Every generated kWh up to the site's annual demand offsets a grid
import at the flat import rate; anything above the demand is wasted.
Maintenance is a linear per-kWp charge and the install cost is reported
for information only.

All monetary values are in the tariff's currency.  Energy is in kWh.
Nothing here is rounded.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from engine.solar.pv_system import annual_energy, specific_yield


@dataclass(frozen=True)
class SavingsResult:
    """Annual energy and money figures for one estimate."""

    specific_yield_kwh_per_kwp: float
    pv_annual_kwh: float
    self_use_kwh: float
    demand_cap_applied: bool
    avoided_import_cost: float
    annual_maintenance_cost: float
    net_annual_savings: float
    estimated_install_cost: float


def demand_cap(annual_demand_kwh: float | None) -> float:
    """Self-consumption ceiling (kWh/year); ``inf`` when no demand is given.

    Negative demand is treated as zero.
    """
    if annual_demand_kwh is None:
        return math.inf
    return max(0.0, annual_demand_kwh)


def compute_savings(
    annual_poa_kwh_m2: float,
    array_kwp: float,
    performance_ratio: float,
    import_rate_per_kwh: float,
    annual_demand_kwh: float | None,
    maintenance_cost_per_kwp_year: float,
    install_cost_per_kwp: float,
) -> SavingsResult:
    """Project annual POA irradiation into energy and money figures.

    Parameters
    ----------
    annual_poa_kwh_m2 : float
        Plane-of-array irradiation (kWh/m^2/year).
    array_kwp : float
        Rated array capacity (kWp).
    performance_ratio : float
        Fraction of theoretical yield delivered after system losses.
    import_rate_per_kwh : float
        Price of each avoided grid import.
    annual_demand_kwh : float or None
        Annual site demand capping self-consumption; ``None`` = no cap.
    maintenance_cost_per_kwp_year, install_cost_per_kwp : float
        Linear cost coefficients.

    Returns
    -------
    SavingsResult
        Net savings may be negative when maintenance exceeds the
        avoided import cost.
    """
    yield_kwh_per_kwp = specific_yield(annual_poa_kwh_m2, performance_ratio)
    pv_kwh = annual_energy(yield_kwh_per_kwp, array_kwp)

    cap = demand_cap(annual_demand_kwh)
    self_use = min(pv_kwh, cap)
    cap_applied = math.isfinite(cap) and pv_kwh > cap

    avoided = self_use * import_rate_per_kwh
    maintenance = array_kwp * maintenance_cost_per_kwp_year

    return SavingsResult(
        specific_yield_kwh_per_kwp=yield_kwh_per_kwp,
        pv_annual_kwh=pv_kwh,
        self_use_kwh=self_use,
        demand_cap_applied=cap_applied,
        avoided_import_cost=avoided,
        annual_maintenance_cost=maintenance,
        net_annual_savings=avoided - maintenance,
        estimated_install_cost=array_kwp * install_cost_per_kwp,
    )
