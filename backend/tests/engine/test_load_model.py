"""Tests for engine.load.load_model — illustrative site profile."""

from __future__ import annotations

import pytest

from engine.load.load_model import DEFAULT_LOAD_PROFILE, SiteLoadProfile
from engine.solar.pv_system import BASELINE_CONFIG


class TestSiteLoadProfile:
    def test_default_profile(self):
        p = DEFAULT_LOAD_PROFILE
        assert p.name == "Network Rail"
        assert p.annual_consumption_kwh == 424_000.0
        assert p.average_daily_kwh == 1160.0
        assert len(p.monthly_kwh) == 12

    def test_baseline_demand_comes_from_profile(self):
        assert BASELINE_CONFIG.annual_demand_kwh == DEFAULT_LOAD_PROFILE.annual_consumption_kwh

    def test_monthly_share_sums_to_one(self):
        shares = DEFAULT_LOAD_PROFILE.monthly_share()
        assert len(shares) == 12
        assert sum(shares) == pytest.approx(1.0)
        assert shares[7] == max(shares)  # August peak

    def test_monthly_share_empty_profile(self):
        p = SiteLoadProfile(
            name="idle",
            annual_consumption_kwh=0.0,
            average_daily_kwh=0.0,
            peak_demand_kw=0.0,
            working_days_per_year=0,
            monthly_kwh=(0.0,) * 12,
        )
        assert p.monthly_share() == (0.0,) * 12
