"""Savings estimate endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from app.config import settings
from app.schemas.estimate import EstimateResponse
from app.services.estimate_service import (
    DatasetUnavailableError,
    baseline_config,
    build_config,
)
from engine.simulation.runner import estimate

logger = logging.getLogger(__name__)

router = APIRouter()

# Sent on every OPTIONS reply, with or without an Origin header
PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET,OPTIONS",
}


@router.get(
    "/estimate",
    response_model=EstimateResponse,
    summary="Estimate annual PV savings (no export)",
    description="Annual PV yield, self-consumed energy and avoided import cost for a "
    "south-facing array. Numeric overrides that fail to parse fall back to the baseline.",
)
async def get_estimate(
    request: Request,
    arrayKWp: str | None = Query(default=None, description="Array capacity (kWp)"),
    panelCount: str | None = Query(default=None, description="Panel count; overrides arrayKWp"),
    panelWatt: str | None = Query(default=None, description="Per-panel rating (W)"),
    tiltDeg: str | None = Query(default=None, description="Tilt from horizontal (degrees)"),
    importRate: str | None = Query(default=None, description="Import tariff per kWh"),
    demand: str | None = Query(
        default=None, description="Annual demand cap (kWh), or 'none' or 'Infinity' for no cap"
    ),
    maintenancePerKWp: str | None = Query(default=None, description="O&M cost per kWp per year"),
    installPerKWp: str | None = Query(default=None, description="Install cost per kWp"),
):
    origin = request.headers.get("origin", "same-origin")
    logger.info(
        "estimate query=%r origin=%s",
        request.url.query,
        origin,
        extra={"query": request.url.query, "origin": origin},
    )

    raw = {
        "arrayKWp": arrayKWp,
        "panelCount": panelCount,
        "panelWatt": panelWatt,
        "tiltDeg": tiltDeg,
        "importRate": importRate,
        "demand": demand,
        "maintenancePerKWp": maintenancePerKWp,
        "installPerKWp": installPerKWp,
    }
    params = {k: v for k, v in raw.items() if v is not None}

    try:
        baseline = baseline_config(settings)
    except DatasetUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Irradiance dataset unavailable: {exc}",
        ) from exc

    cfg = build_config(params, baseline, panel_watt_default=settings.panel_watt_default)
    return EstimateResponse.from_result(estimate(cfg))


@router.options("/estimate", include_in_schema=False)
async def estimate_preflight() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=PREFLIGHT_HEADERS)
