"""
Irradiance transposition module for converting monthly-mean horizontal
irradiance (GHI, DHI) to plane-of-array (POA) irradiation on a
south-facing tilted surface.

Beam irradiation is transposed with the Liu-Jordan daily geometric
factor ``Rb`` evaluated on each month's representative day; diffuse
irradiation uses the isotropic-sky model and the ground-reflected term
uses a fixed albedo.

References
----------
- Liu B.Y.H., Jordan R.C., "Daily insolation on surfaces tilted towards
  the equator", ASHRAE Journal, 3(10):53-59, 1961.
- Cooper P.I., "The absorption of radiation in solar stills", Solar
  Energy, 12(3):333-346, 1969.
- Duffie J.A., Beckman W.A., "Solar Engineering of Thermal Processes",
  Wiley, 2013 (sections 1.6, 2.19).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

MONTHS_PER_YEAR: int = 12

# Non-leap year
DAYS_IN_MONTH = np.array(
    [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31],
    dtype=np.float64,
)

# Representative ("average") day of each month, Klein 1977
MID_MONTH_DAY_OF_YEAR = np.array(
    [15, 46, 74, 105, 135, 166, 196, 227, 258, 288, 319, 349],
    dtype=np.float64,
)

MONTH_LABELS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class MonthlySolarDetail:
    """Diagnostic record for one calendar month.

    Monthly totals are in kWh/m^2/month and are left unrounded; the
    beam fraction (2 dp) and sunset hour angle (1 dp) are display values.
    """

    month_index: int
    month_label: str
    ghi_daily: float
    dhi_daily: float
    ghi_monthly: float
    dhi_monthly: float
    poa_monthly: float
    beam_fraction: float
    sunset_hour_angle_deg: float


@dataclass(frozen=True)
class TranspositionResult:
    """Annual plane-of-array irradiation and its monthly breakdown."""

    annual_poa_kwh_m2: float
    monthly: tuple[MonthlySolarDetail, ...]


def _as_monthly(name: str, values: Sequence[float]) -> NDArray[np.float64]:
    arr = np.asarray(values, dtype=np.float64)
    if arr.shape != (MONTHS_PER_YEAR,):
        raise ValueError(
            f"{name} must have shape ({MONTHS_PER_YEAR},), got {arr.shape}"
        )
    return arr


def declination(day_of_year: NDArray[np.float64] | float) -> NDArray[np.float64]:
    """Solar declination (radians) using Cooper's equation.

    Parameters
    ----------
    day_of_year : array_like
        Day of year (1-365).
    """
    day_of_year = np.asarray(day_of_year, dtype=np.float64)
    return np.radians(23.45) * np.sin(np.radians(360.0 * (284.0 + day_of_year) / 365.0))


def sunset_hour_angle(
    latitude_rad: float,
    declination_rad: NDArray[np.float64] | float,
) -> NDArray[np.float64]:
    """Sunset hour angle (radians) on a horizontal surface.

    The ``acos`` argument is clipped to [-1, 1] so polar day/night
    months return pi or 0 instead of NaN.
    """
    x = -np.tan(latitude_rad) * np.tan(declination_rad)
    return np.arccos(np.clip(x, -1.0, 1.0))


def liu_jordan_rb(
    latitude_rad: float,
    tilt_rad: float,
    declination_rad: NDArray[np.float64],
    sunset_rad: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Ratio of daily beam irradiation on a south-facing tilted plane to
    that on the horizontal plane.

    Returns 0.0 where the horizontal-plane denominator is exactly zero.
    """
    declination_rad = np.asarray(declination_rad, dtype=np.float64)
    sunset_rad = np.asarray(sunset_rad, dtype=np.float64)

    num = (
        np.cos(latitude_rad - tilt_rad) * np.cos(declination_rad) * np.sin(sunset_rad)
        + sunset_rad * np.sin(latitude_rad - tilt_rad) * np.sin(declination_rad)
    )
    den = (
        np.cos(latitude_rad) * np.cos(declination_rad) * np.sin(sunset_rad)
        + sunset_rad * np.sin(latitude_rad) * np.sin(declination_rad)
    )
    den_safe = np.where(den != 0.0, den, 1.0)
    return np.where(den != 0.0, num / den_safe, 0.0)


def transpose_monthly(
    latitude_deg: float,
    tilt_deg: float,
    albedo: float,
    ghi_daily: Sequence[float],
    dhi_daily: Sequence[float],
) -> TranspositionResult:
    """Transpose monthly-mean daily GHI/DHI to plane-of-array irradiation.

    Processing per month
    ~~~~~~~~~~~~~~~~~~~~
    1. Monthly horizontal totals ``H = GHI * days``, ``Hd = DHI * days``
       and beam ``Hb = H - Hd`` (not clamped).
    2. Declination on the representative day, sunset hour angle.
    3. Liu-Jordan ``Rb`` for a south-facing plane (azimuth 0 deg).
    4. ``H_tilt = Hb*Rb + Hd*(1+cos b)/2 + H*albedo*(1-cos b)/2``.

    Parameters
    ----------
    latitude_deg : float
        Site latitude in degrees (positive north).
    tilt_deg : float
        Surface tilt from horizontal in degrees.
    albedo : float
        Ground reflectance (0-1).
    ghi_daily, dhi_daily : sequence of 12 floats
        Monthly-mean daily global / diffuse horizontal irradiation
        (kWh/m^2/day), January first.

    Returns
    -------
    TranspositionResult
        Annual POA irradiation (kWh/m^2/year) and 12 monthly records.

    Raises
    ------
    ValueError
        If either monthly sequence does not have exactly 12 elements.
    """
    ghi = _as_monthly("ghi_daily", ghi_daily)
    dhi = _as_monthly("dhi_daily", dhi_daily)

    phi = np.radians(latitude_deg)
    beta = np.radians(tilt_deg)

    h_global = ghi * DAYS_IN_MONTH
    h_diffuse = dhi * DAYS_IN_MONTH
    h_beam = h_global - h_diffuse

    delta = declination(MID_MONTH_DAY_OF_YEAR)
    ws = sunset_hour_angle(phi, delta)
    rb = liu_jordan_rb(phi, beta, delta, ws)

    h_tilt = (
        h_beam * rb
        + h_diffuse * (1.0 + np.cos(beta)) / 2.0
        + h_global * albedo * (1.0 - np.cos(beta)) / 2.0
    )

    ghi_safe = np.where(h_global > 0.0, h_global, 1.0)
    beam_fraction = np.where(
        h_global > 0.0, np.maximum(0.0, h_beam) / ghi_safe, 0.0,
    )
    sunset_deg = np.degrees(ws)

    monthly = tuple(
        MonthlySolarDetail(
            month_index=m,
            month_label=MONTH_LABELS[m],
            ghi_daily=float(ghi[m]),
            dhi_daily=float(dhi[m]),
            ghi_monthly=float(h_global[m]),
            dhi_monthly=float(h_diffuse[m]),
            poa_monthly=float(h_tilt[m]),
            beam_fraction=round(float(beam_fraction[m]), 2),
            sunset_hour_angle_deg=round(float(sunset_deg[m]), 1),
        )
        for m in range(MONTHS_PER_YEAR)
    )

    return TranspositionResult(
        annual_poa_kwh_m2=float(np.sum(h_tilt)),
        monthly=monthly,
    )
