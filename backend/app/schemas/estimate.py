"""Pydantic schemas for the savings estimate response.

Rounding happens here and nowhere else: energy totals to whole kWh,
money to 2 dp, yield and irradiance diagnostics to 1 dp. Figures that
overflow to infinity (or become NaN) are reported as null.
"""
import math
from typing import Literal

from pydantic import BaseModel, Field

from engine.load.load_model import SiteLoadProfile
from engine.simulation.runner import AZIMUTH_DEG, EstimateResult
from engine.solar.irradiance import MonthlySolarDetail

UNBOUNDED = "unbounded"


def _finite(value: float, ndigits: int) -> float | None:
    if not math.isfinite(value):
        return None
    return round(value, ndigits)


class InputsUsed(BaseModel):
    array_kwp: float
    tilt_deg: float
    latitude_deg: float
    performance_ratio: float
    import_rate_per_kwh: float
    annual_demand_kwh: float | Literal["unbounded"] = Field(
        description="Annual demand cap in kWh, or 'unbounded' when no cap applies"
    )
    maintenance_cost_per_kwp_year: float
    install_cost_per_kwp: float


class CostAssumptions(BaseModel):
    maintenance_cost_per_kwp_year: float
    install_cost_per_kwp: float


class MonthlySolarDetailResponse(BaseModel):
    month_index: int
    month_label: str
    ghi_daily: float
    dhi_daily: float
    ghi_monthly: float = Field(description="kWh/m² for the month")
    dhi_monthly: float = Field(description="kWh/m² for the month")
    poa_monthly: float = Field(description="kWh/m² for the month on the array plane")
    beam_fraction: float
    sunset_hour_angle_deg: float

    @classmethod
    def from_detail(cls, detail: MonthlySolarDetail) -> "MonthlySolarDetailResponse":
        return cls(
            month_index=detail.month_index,
            month_label=detail.month_label,
            ghi_daily=detail.ghi_daily,
            dhi_daily=detail.dhi_daily,
            ghi_monthly=round(detail.ghi_monthly, 1),
            dhi_monthly=round(detail.dhi_monthly, 1),
            poa_monthly=round(detail.poa_monthly, 1),
            beam_fraction=detail.beam_fraction,
            sunset_hour_angle_deg=detail.sunset_hour_angle_deg,
        )


class SolarStory(BaseModel):
    latitude_deg: float
    tilt_deg: float
    azimuth_deg: float = AZIMUTH_DEG
    array_kwp: float
    annual_ghi_kwh_m2: float
    annual_dhi_kwh_m2: float
    annual_poa_kwh_m2: float
    avg_sunset_hour_angle_deg: float
    monthly: list[MonthlySolarDetailResponse]


class SiteLoadProfileResponse(BaseModel):
    name: str
    annual_consumption_kwh: float
    average_daily_kwh: float
    peak_demand_kw: float
    working_days_per_year: int
    monthly_kwh: list[float]

    @classmethod
    def from_profile(cls, profile: SiteLoadProfile) -> "SiteLoadProfileResponse":
        return cls(
            name=profile.name,
            annual_consumption_kwh=profile.annual_consumption_kwh,
            average_daily_kwh=profile.average_daily_kwh,
            peak_demand_kw=profile.peak_demand_kw,
            working_days_per_year=profile.working_days_per_year,
            monthly_kwh=list(profile.monthly_kwh),
        )


class EstimateResponse(BaseModel):
    inputs_used: InputsUsed
    # Energy and money figures are null when they overflow
    pv_annual_kwh: float | None
    self_use_kwh: float | None
    avoided_import_cost: float | None
    annual_maintenance_cost: float | None
    net_annual_savings: float | None = Field(description="May be negative")
    specific_yield_kwh_per_kwp: float
    annual_poa_kwh_m2: float
    demand_cap_applied: bool
    estimated_install_cost: float | None
    cost_assumptions_used: CostAssumptions
    solar_story: SolarStory
    site_load_profile: SiteLoadProfileResponse

    @classmethod
    def from_result(cls, result: EstimateResult) -> "EstimateResponse":
        cfg = result.config
        sav = result.savings

        return cls(
            inputs_used=InputsUsed(
                array_kwp=cfg.array_kwp,
                tilt_deg=cfg.tilt_deg,
                latitude_deg=cfg.latitude_deg,
                performance_ratio=cfg.performance_ratio,
                import_rate_per_kwh=cfg.import_rate_per_kwh,
                annual_demand_kwh=(
                    cfg.annual_demand_kwh
                    if cfg.annual_demand_kwh is not None and math.isfinite(cfg.annual_demand_kwh)
                    else UNBOUNDED
                ),
                maintenance_cost_per_kwp_year=cfg.maintenance_cost_per_kwp_year,
                install_cost_per_kwp=cfg.install_cost_per_kwp,
            ),
            pv_annual_kwh=_finite(sav.pv_annual_kwh, 0),
            self_use_kwh=_finite(sav.self_use_kwh, 0),
            avoided_import_cost=_finite(sav.avoided_import_cost, 2),
            annual_maintenance_cost=_finite(sav.annual_maintenance_cost, 2),
            net_annual_savings=_finite(sav.net_annual_savings, 2),
            specific_yield_kwh_per_kwp=round(sav.specific_yield_kwh_per_kwp, 1),
            annual_poa_kwh_m2=round(result.annual_poa_kwh_m2, 1),
            demand_cap_applied=sav.demand_cap_applied,
            estimated_install_cost=_finite(sav.estimated_install_cost, 2),
            cost_assumptions_used=CostAssumptions(
                maintenance_cost_per_kwp_year=cfg.maintenance_cost_per_kwp_year,
                install_cost_per_kwp=cfg.install_cost_per_kwp,
            ),
            solar_story=SolarStory(
                latitude_deg=cfg.latitude_deg,
                tilt_deg=cfg.tilt_deg,
                array_kwp=cfg.array_kwp,
                annual_ghi_kwh_m2=round(result.annual_ghi_kwh_m2, 1),
                annual_dhi_kwh_m2=round(result.annual_dhi_kwh_m2, 1),
                annual_poa_kwh_m2=round(result.annual_poa_kwh_m2, 1),
                avg_sunset_hour_angle_deg=round(result.avg_sunset_hour_angle_deg, 1),
                monthly=[
                    MonthlySolarDetailResponse.from_detail(m)
                    for m in result.transposition.monthly
                ],
            ),
            site_load_profile=SiteLoadProfileResponse.from_profile(result.load_profile),
        )
