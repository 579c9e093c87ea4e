"""Tests for engine.simulation.runner — end-to-end estimate."""

from __future__ import annotations

import pytest

from engine.load.load_model import DEFAULT_LOAD_PROFILE
from engine.simulation.runner import EstimateResult, estimate
from engine.solar.pv_system import PVSystemConfig


class TestEstimate:
    """Tests for estimate()."""

    def test_baseline_plausible_uk_yield(self, baseline_config):
        result = estimate(baseline_config)
        assert isinstance(result, EstimateResult)
        assert result.savings.demand_cap_applied is False
        assert result.savings.pv_annual_kwh < baseline_config.annual_demand_kwh
        assert 700.0 < result.savings.specific_yield_kwh_per_kwp < 1100.0

    def test_baseline_echoes_inputs(self, baseline_config):
        result = estimate(baseline_config)
        assert result.config is baseline_config
        assert result.load_profile == DEFAULT_LOAD_PROFILE
        assert len(result.transposition.monthly) == 12

    def test_cap_below_generation(self, baseline_config):
        cfg = baseline_config.with_overrides(annual_demand_kwh=1000.0)
        result = estimate(cfg)
        assert result.savings.pv_annual_kwh > 1000.0
        assert result.savings.self_use_kwh == 1000.0
        assert result.savings.demand_cap_applied is True

    def test_no_cap_self_use_equals_generation(self, uncapped_config):
        result = estimate(uncapped_config)
        assert result.savings.self_use_kwh == result.savings.pv_annual_kwh
        assert result.savings.demand_cap_applied is False

    def test_idempotent(self, baseline_config):
        assert estimate(baseline_config) == estimate(baseline_config)

    def test_capacity_monotonic(self, uncapped_config):
        small = estimate(uncapped_config.with_overrides(array_kwp=4.0)).savings
        large = estimate(uncapped_config.with_overrides(array_kwp=4.5)).savings
        assert large.pv_annual_kwh > small.pv_annual_kwh
        assert large.avoided_import_cost > small.avoided_import_cost
        assert large.estimated_install_cost > small.estimated_install_cost

    def test_aggregates(self, baseline_config):
        result = estimate(baseline_config)
        monthly = result.transposition.monthly
        assert result.annual_ghi_kwh_m2 == pytest.approx(sum(m.ghi_monthly for m in monthly))
        assert result.annual_dhi_kwh_m2 == pytest.approx(sum(m.dhi_monthly for m in monthly))
        assert result.avg_sunset_hour_angle_deg == pytest.approx(
            sum(m.sunset_hour_angle_deg for m in monthly) / 12
        )
        assert result.annual_poa_kwh_m2 == result.transposition.annual_poa_kwh_m2

    def test_specific_yield_is_poa_times_pr(self, baseline_config):
        result = estimate(baseline_config)
        assert result.savings.specific_yield_kwh_per_kwp == pytest.approx(
            result.annual_poa_kwh_m2 * baseline_config.performance_ratio
        )

    def test_pure_diffuse_flat_array(self, pure_diffuse_june):
        cfg = PVSystemConfig(tilt_deg=0.0, albedo=0.0, **pure_diffuse_june)
        result = estimate(cfg)
        assert result.annual_poa_kwh_m2 == 60.0

    def test_tiny_array_negative_net_savings(self, baseline_config):
        cfg = baseline_config.with_overrides(array_kwp=0.5, import_rate_per_kwh=0.01)
        result = estimate(cfg)
        assert result.savings.net_annual_savings < 0.0

    def test_wrong_length_tables_rejected_before_estimate(self):
        with pytest.raises(ValueError):
            estimate(PVSystemConfig(ghi_daily=(1.0,) * 6))
