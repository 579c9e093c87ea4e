"""Tests for app.schemas.estimate — display rounding and sentinels."""

from __future__ import annotations

import math

from app.schemas.estimate import UNBOUNDED, EstimateResponse
from engine.simulation.runner import estimate


class TestEstimateResponse:
    def test_infinite_demand_reported_unbounded(self, baseline_config):
        cfg = baseline_config.with_overrides(annual_demand_kwh=math.inf)
        resp = EstimateResponse.from_result(estimate(cfg))
        assert resp.inputs_used.annual_demand_kwh == UNBOUNDED
        assert resp.demand_cap_applied is False

    def test_finite_demand_passed_through(self, baseline_config):
        resp = EstimateResponse.from_result(estimate(baseline_config))
        assert resp.inputs_used.annual_demand_kwh == 424_000

    def test_energy_rounded_to_whole_kwh(self, uncapped_config):
        resp = EstimateResponse.from_result(estimate(uncapped_config))
        assert resp.pv_annual_kwh == round(resp.pv_annual_kwh)
        assert resp.self_use_kwh == resp.pv_annual_kwh

    def test_overflowing_figures_are_none(self, baseline_config):
        cfg = baseline_config.with_overrides(array_kwp=1e308)
        resp = EstimateResponse.from_result(estimate(cfg))
        assert resp.pv_annual_kwh is None
        assert resp.estimated_install_cost is None
        assert resp.self_use_kwh == 424_000
        assert resp.specific_yield_kwh_per_kwp > 0
        # Must still serialise as strict JSON
        assert '"pv_annual_kwh":null' in resp.model_dump_json()
