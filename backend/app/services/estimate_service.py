import logging
import math
from collections.abc import Mapping

from app.config import Settings
from engine.solar.pv_system import BASELINE_CONFIG, PVSystemConfig
from engine.weather.monthly_dataset import load_monthly_dataset

logger = logging.getLogger(__name__)

# Query parameter -> PVSystemConfig field
NUMERIC_OVERRIDES: dict[str, str] = {
    "arrayKWp": "array_kwp",
    "tiltDeg": "tilt_deg",
    "importRate": "import_rate_per_kwh",
    "maintenancePerKWp": "maintenance_cost_per_kwp_year",
    "installPerKWp": "install_cost_per_kwp",
}

UNBOUNDED_DEMAND_TOKENS = frozenset({"none", "unbounded"})


class DatasetUnavailableError(RuntimeError):
    """The configured irradiance dataset could not be loaded."""


def parse_number(raw: str | None, default: float | None) -> float | None:
    """Parse *raw* as a finite float, returning *default* when it is absent
    or unusable (empty, non-numeric, NaN or infinite)."""
    if raw is None:
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return value


def parse_demand(raw: str | None, default: float | None) -> float | None:
    """Like :func:`parse_number`, but ``none``/``unbounded`` and a positive
    infinity (``Infinity``, ``inf``) remove the cap."""
    if raw is None:
        return default
    token = raw.strip().lower()
    if token in UNBOUNDED_DEMAND_TOKENS:
        return None
    try:
        if float(token) == math.inf:
            return None
    except ValueError:
        return default
    return parse_number(raw, default)


def panel_array_kwp(panel_count: float, panel_watt: float | None, panel_watt_default: float) -> float:
    """Array capacity (kWp) from a panel count and per-panel rating (W)."""
    watts = panel_watt if panel_watt is not None and panel_watt > 0 else panel_watt_default
    return panel_count * watts / 1000.0


def build_config(
    params: Mapping[str, str],
    baseline: PVSystemConfig = BASELINE_CONFIG,
    panel_watt_default: float = 400.0,
) -> PVSystemConfig:
    """Merge request overrides over *baseline* into a new configuration.

    Malformed values keep the baseline value for that field. A usable
    ``panelCount`` takes precedence over ``arrayKWp``.
    """
    overrides: dict[str, float | None] = {}

    for param, field_name in NUMERIC_OVERRIDES.items():
        value = parse_number(params.get(param), None)
        if value is not None:
            overrides[field_name] = value

    if "demand" in params:
        overrides["annual_demand_kwh"] = parse_demand(
            params["demand"], baseline.annual_demand_kwh
        )

    panel_count = parse_number(params.get("panelCount"), None)
    if panel_count is not None:
        panel_watt = parse_number(params.get("panelWatt"), None)
        overrides["array_kwp"] = panel_array_kwp(panel_count, panel_watt, panel_watt_default)

    return baseline.with_overrides(**overrides)


def baseline_config(settings: Settings) -> PVSystemConfig:
    """Baseline configuration, with monthly tables from the configured
    dataset when one is set."""
    if settings.irradiance_dataset is None:
        return BASELINE_CONFIG

    try:
        dataset = load_monthly_dataset(settings.irradiance_dataset)
    except (OSError, ValueError) as exc:
        logger.error("Irradiance dataset %s unusable: %s", settings.irradiance_dataset, exc)
        raise DatasetUnavailableError(str(exc)) from exc

    return BASELINE_CONFIG.with_overrides(
        ghi_daily=dataset.ghi_daily,
        dhi_daily=dataset.dhi_daily,
    )
