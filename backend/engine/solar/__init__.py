"""
Solar PV engine module.

Provides monthly irradiance transposition (Liu-Jordan beam factor with
isotropic diffuse and ground-reflected terms) and the system-level
configuration and energy-yield helpers used by the savings estimator.
"""

from .irradiance import (
    DAYS_IN_MONTH,
    MID_MONTH_DAY_OF_YEAR,
    MONTH_LABELS,
    MonthlySolarDetail,
    TranspositionResult,
    declination,
    liu_jordan_rb,
    sunset_hour_angle,
    transpose_monthly,
)
from .pv_system import (
    BASELINE_CONFIG,
    PVSystemConfig,
    annual_energy,
    specific_yield,
)

__all__ = [
    # irradiance
    "DAYS_IN_MONTH",
    "MID_MONTH_DAY_OF_YEAR",
    "MONTH_LABELS",
    "MonthlySolarDetail",
    "TranspositionResult",
    "declination",
    "liu_jordan_rb",
    "sunset_hour_angle",
    "transpose_monthly",
    # pv_system
    "BASELINE_CONFIG",
    "PVSystemConfig",
    "annual_energy",
    "specific_yield",
]
