# rir_tracker/routes/common.py
from typing import Any, Optional

from flask import current_app

from ..storage import SettingsStore
from ..units import UnitSystem, weight_unit_for


def settings_store() -> SettingsStore:
    return SettingsStore(default=current_app.config.get("DEFAULT_UNIT_SYSTEM", UnitSystem.METRIC))


def current_unit_system() -> UnitSystem:
    return settings_store().get_unit_system()


def unit_payload(system: UnitSystem) -> dict:
    return {"unit_system": system.value, "unit": weight_unit_for(system)}


def _safe_int(v: Any, default: int) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def clamp_limit(v: Optional[str], default: int, upper: int = 50) -> int:
    limit = _safe_int(v, default)
    return max(1, min(limit, upper))
