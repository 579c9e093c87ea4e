"""Estimate orchestrator for no-export PV savings.

``estimate`` wires together the monthly irradiance transposition and the
savings aggregation into a single pure calculation.  It holds no state:
the same configuration always produces an identical result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from engine.economics.savings import SavingsResult, compute_savings
from engine.load.load_model import DEFAULT_LOAD_PROFILE, SiteLoadProfile
from engine.solar.irradiance import TranspositionResult, transpose_monthly
from engine.solar.pv_system import PVSystemConfig

logger = logging.getLogger(__name__)

# Arrays are modelled facing due south only.
AZIMUTH_DEG: float = 0.0


@dataclass(frozen=True)
class EstimateResult:
    """Unrounded outcome of one estimate plus the inputs that produced it."""

    config: PVSystemConfig
    transposition: TranspositionResult
    savings: SavingsResult
    annual_ghi_kwh_m2: float
    annual_dhi_kwh_m2: float
    avg_sunset_hour_angle_deg: float
    load_profile: SiteLoadProfile = DEFAULT_LOAD_PROFILE

    @property
    def annual_poa_kwh_m2(self) -> float:
        return self.transposition.annual_poa_kwh_m2


def estimate(
    config: PVSystemConfig,
    load_profile: SiteLoadProfile = DEFAULT_LOAD_PROFILE,
) -> EstimateResult:
    """Estimate annual PV yield and import savings for *config*.

    Raises
    ------
    ValueError
        If the monthly irradiance tables are not 12 values long.
    """
    transposition = transpose_monthly(
        latitude_deg=config.latitude_deg,
        tilt_deg=config.tilt_deg,
        albedo=config.albedo,
        ghi_daily=config.ghi_daily,
        dhi_daily=config.dhi_daily,
    )

    savings = compute_savings(
        annual_poa_kwh_m2=transposition.annual_poa_kwh_m2,
        array_kwp=config.array_kwp,
        performance_ratio=config.performance_ratio,
        import_rate_per_kwh=config.import_rate_per_kwh,
        annual_demand_kwh=config.annual_demand_kwh,
        maintenance_cost_per_kwp_year=config.maintenance_cost_per_kwp_year,
        install_cost_per_kwp=config.install_cost_per_kwp,
    )

    monthly = transposition.monthly
    annual_ghi = sum(m.ghi_monthly for m in monthly)
    annual_dhi = sum(m.dhi_monthly for m in monthly)
    avg_sunset = (
        sum(m.sunset_hour_angle_deg for m in monthly) / len(monthly)
        if monthly else 0.0
    )

    logger.debug(
        "Estimate: %.1f kWp, POA %.1f kWh/m2, PV %.0f kWh/year, net %.2f",
        config.array_kwp,
        transposition.annual_poa_kwh_m2,
        savings.pv_annual_kwh,
        savings.net_annual_savings,
    )
    if savings.demand_cap_applied:
        logger.info(
            "Demand cap applied: %.0f kWh/year generated, %.0f kWh/year usable",
            savings.pv_annual_kwh,
            savings.self_use_kwh,
        )

    return EstimateResult(
        config=config,
        transposition=transposition,
        savings=savings,
        annual_ghi_kwh_m2=annual_ghi,
        annual_dhi_kwh_m2=annual_dhi,
        avg_sunset_hour_angle_deg=avg_sunset,
        load_profile=load_profile,
    )
