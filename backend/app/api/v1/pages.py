"""Read-only pages: dashboard, static assets and plain-text help."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, status
from fastapi.responses import FileResponse, PlainTextResponse, Response

from app.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()

ASSET_CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
}

HELP_TEXT = (
    "Minimal PV annual savings (no export)\n\n"
    "GET / -> dashboard hitting /estimate\n"
    "GET /estimate -> JSON with pv_annual_kwh, self_use_kwh and net_annual_savings\n"
    "Query overrides: arrayKWp, panelCount, panelWatt (W), tiltDeg, importRate, demand,\n"
    "                 maintenancePerKWp, installPerKWp\n"
    "Example: /estimate?panelCount=250&panelWatt=400&tiltDeg=20&importRate=0.24&demand=250000\n"
)


def _asset_path(rel_path: str) -> Path | None:
    """Resolve *rel_path* inside the assets directory, or ``None`` if it escapes."""
    root = Path(settings.assets_dir).resolve()
    candidate = (root / rel_path).resolve()
    if candidate != root and root not in candidate.parents:
        return None
    return candidate


@router.get("/", include_in_schema=False)
@router.get("/index.html", include_in_schema=False)
async def frontend() -> Response:
    path = Path(settings.frontend_path)
    if not path.is_file():
        logger.error("Frontend missing at %s", path)
        return PlainTextResponse(
            "Frontend missing.", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return FileResponse(path, media_type="text/html")


@router.get("/assets/{rel_path:path}", include_in_schema=False)
async def asset(rel_path: str) -> Response:
    path = _asset_path(rel_path)
    if path is None:
        return PlainTextResponse("Forbidden", status_code=status.HTTP_403_FORBIDDEN)
    if not path.is_file():
        return PlainTextResponse("Not found", status_code=status.HTTP_404_NOT_FOUND)

    media_type = ASSET_CONTENT_TYPES.get(path.suffix.lower(), "application/octet-stream")
    return FileResponse(path, media_type=media_type)


@router.get("/help", response_class=PlainTextResponse, summary="Usage help")
async def help_text() -> str:
    return HELP_TEXT


# Registered last: anything unmatched gets the help text, like /help.
@router.get("/{unmatched:path}", include_in_schema=False)
async def fallback(unmatched: str) -> PlainTextResponse:
    return PlainTextResponse(HELP_TEXT)
