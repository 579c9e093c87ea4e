"""Shared test fixtures for the estimator engine and API tests."""

from __future__ import annotations

import pytest

from engine.solar.pv_system import BASELINE_CONFIG, PVSystemConfig


# ======================================================================
# Configuration fixtures
# ======================================================================

@pytest.fixture
def baseline_config() -> PVSystemConfig:
    """Baseline site: Manchester-ish, 4 kWp at 35 deg, 424 MWh demand."""
    return BASELINE_CONFIG


@pytest.fixture
def uncapped_config() -> PVSystemConfig:
    """Baseline site with no annual demand cap."""
    return BASELINE_CONFIG.with_overrides(annual_demand_kwh=None)


@pytest.fixture
def pure_diffuse_june() -> dict[str, list[float]]:
    """Overcast-sky tables: only June has irradiance, all of it diffuse."""
    ghi = [0.0] * 12
    ghi[5] = 2.0
    return {"ghi_daily": list(ghi), "dhi_daily": list(ghi)}


@pytest.fixture
def monthly_csv_text() -> str:
    """Twelve-row monthly dataset, 1 kWh/m2/day global and 0.5 diffuse."""
    rows = ["month,ghi,dhi"]
    for label in ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                  "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"):
        rows.append(f"{label},1.0,0.5")
    return "\n".join(rows) + "\n"
