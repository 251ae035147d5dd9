# rir_tracker/routes/settings_routes.py
from flask import Blueprint, current_app, jsonify, request

from ..forms import FormError
from ..units import UnitSystem
from .common import settings_store, unit_payload

settings_bp = Blueprint("settings", __name__)


@settings_bp.route("", methods=["GET"])
def get_settings():
    return jsonify(unit_payload(settings_store().get_unit_system())), 200


@settings_bp.route("", methods=["PUT"])
def update_settings():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise FormError("Request body must be a JSON object")
    raw = data.get("unit_system") or data.get("unitSystem")

    try:
        system = UnitSystem(raw)
    except ValueError:
        raise FormError("unit_system must be 'metric' or 'imperial'", "unit_system") from None

    if not settings_store().set_unit_system(system):
        return jsonify({"message": "Failed to save settings"}), 500

    current_app.logger.info(f"[settings] unit system -> {system.value}")
    return jsonify(unit_payload(system)), 200
