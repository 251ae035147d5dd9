# rir_tracker/routes/cycle_routes.py
from datetime import date

from flask import Blueprint, current_app, jsonify, request

from ..analytics import cycle_totals, muscle_group_histogram, weekly_breakdown
from ..cycles import (
    Slot,
    available_workouts_for_slot,
    cycle_status,
    resolve_slots,
    status_tone,
    total_workouts,
    workouts_by_slot,
)
from ..forms import FormError, build_cycle, new_exercise_from_template, parse_slot
from ..progression import exercise_progression, progression_source, suggest_next_set
from ..storage import CycleCollection, ExerciseTemplateCollection, WorkoutCollection
from ..units import to_display
from .common import current_unit_system, unit_payload

cycles_bp = Blueprint("cycles", __name__)


# ------------------------------
# Helpers
# ------------------------------
def _cycle_to_dict(cycle, today=None) -> dict:
    today = today or date.today()
    data = cycle.to_dict()
    data["status"] = cycle_status(cycle.start_date, today)
    data["status_tone"] = status_tone(cycle.start_date, today)
    data["total_workouts"] = total_workouts(cycle)
    return data


def _slot_entries_to_list(entries) -> list:
    rows = []
    for entry in entries:
        if entry.found:
            rows.append(
                {
                    "workout_id": entry.workout_id,
                    "found": True,
                    "name": entry.workout.name,
                    "date": entry.workout.workout_date.isoformat(),
                    "exercise_count": len(entry.workout.exercises),
                }
            )
        else:
            rows.append({"workout_id": entry.workout_id, "found": False})
    return rows


def _get_cycle_or_404(cycle_id):
    cycle = CycleCollection().get_by_id(cycle_id)
    if not cycle:
        return None, (jsonify({"message": "Cycle not found"}), 404)
    return cycle, None


# ------------------------------
# GET /api/cycles
# ------------------------------
@cycles_bp.route("", methods=["GET"])
def list_cycles():
    today = date.today()
    cycles = CycleCollection().list()
    return jsonify({"cycles": [_cycle_to_dict(c, today) for c in cycles]}), 200


# ------------------------------
# GET /api/cycles/<id>
# ------------------------------
@cycles_bp.route("/<cycle_id>", methods=["GET"])
def get_cycle(cycle_id):
    cycle, error = _get_cycle_or_404(cycle_id)
    if error:
        return error

    resolved = resolve_slots(cycle, WorkoutCollection().by_id())
    slots = [
        {
            "slot": slot.value,
            "label": slot.label,
            "workouts": _slot_entries_to_list(resolved[slot]),
        }
        for slot in Slot.ordered()
    ]

    return jsonify({"cycle": _cycle_to_dict(cycle), "slots": slots}), 200


# ------------------------------
# POST /api/cycles
# ------------------------------
@cycles_bp.route("", methods=["POST"])
def create_cycle():
    data = request.get_json(silent=True) or {}
    cycles = CycleCollection()

    cycle = build_cycle(data)
    if cycles.get_by_id(cycle.id):
        return jsonify({"message": "Cycle id already exists"}), 409

    if not cycles.save(cycle):
        return jsonify({"message": "Failed to save cycle"}), 500

    current_app.logger.info(f"[cycles] created {cycle.id} '{cycle.name}'")
    return jsonify({"cycle": _cycle_to_dict(cycle)}), 201


# ------------------------------
# PUT /api/cycles/<id>
# ------------------------------
@cycles_bp.route("/<cycle_id>", methods=["PUT"])
def update_cycle(cycle_id):
    cycles = CycleCollection()
    if not cycles.get_by_id(cycle_id):
        return jsonify({"message": "Cycle not found"}), 404

    data = request.get_json(silent=True) or {}
    cycle = build_cycle(data, existing_id=cycle_id)

    if not cycles.save(cycle):
        return jsonify({"message": "Failed to save cycle"}), 500

    current_app.logger.info(f"[cycles] updated {cycle.id}")
    return jsonify({"cycle": _cycle_to_dict(cycle)}), 200


# ------------------------------
# DELETE /api/cycles/<id>
# ------------------------------
@cycles_bp.route("/<cycle_id>", methods=["DELETE"])
def delete_cycle(cycle_id):
    CycleCollection().delete(cycle_id)
    current_app.logger.info(f"[cycles] deleted {cycle_id}")
    return jsonify({"message": "Cycle deleted"}), 200


# ------------------------------
# GET /api/cycles/<id>/analytics
# ------------------------------
@cycles_bp.route("/<cycle_id>/analytics", methods=["GET"])
def cycle_analytics(cycle_id):
    """
    Weekly breakdown, totals and muscle-group distribution of a cycle.
    Volumes and weights are in the current display unit.
    """
    cycle, error = _get_cycle_or_404(cycle_id)
    if error:
        return error

    system = current_unit_system()
    by_slot = workouts_by_slot(cycle, WorkoutCollection().by_id())
    breakdown = weekly_breakdown(cycle, by_slot)

    weeks = []
    for stats in breakdown:
        row = stats.to_dict()
        row["total_volume"] = to_display(stats.total_volume, system)
        row["average_weight"] = to_display(stats.average_weight, system)
        row["average_rir"] = round(stats.average_rir, 2)
        weeks.append(row)

    totals = cycle_totals(breakdown)
    totals["total_volume"] = to_display(totals["total_volume"], system)
    totals["average_rir"] = round(totals["average_rir"], 1)

    all_workouts = [w for slot in Slot.ordered() for w in by_slot[slot]]

    return jsonify(
        {
            "cycle": _cycle_to_dict(cycle),
            "weeks": weeks,
            "totals": totals,
            "muscle_groups": muscle_group_histogram(all_workouts),
            **unit_payload(system),
        }
    ), 200


# ------------------------------
# GET /api/cycles/<id>/suggestion?slot=week2&exercise=Bench%20Press
# ------------------------------
@cycles_bp.route("/<cycle_id>/suggestion", methods=["GET"])
def cycle_suggestion(cycle_id):
    cycle, error = _get_cycle_or_404(cycle_id)
    if error:
        return error

    slot = parse_slot(request.args.get("slot"))
    exercise_name = request.args.get("exercise") or ""
    if not exercise_name:
        raise FormError("exercise is required", "exercise")

    system = current_unit_system()
    workouts_by_id = WorkoutCollection().by_id()
    suggestion = suggest_next_set(cycle, workouts_by_id, slot, exercise_name)
    history = exercise_progression(cycle, workouts_by_id, slot, exercise_name)
    source = progression_source(history)

    return jsonify(
        {
            "slot": slot.value,
            "exercise": exercise_name,
            "suggestion": suggestion.to_dict(),
            "suggestion_display_weight": to_display(suggestion.weight, system),
            "source_workout_id": source.workout.id if source else None,
            "history": [entry.to_dict() for entry in history],
            **unit_payload(system),
        }
    ), 200


# ------------------------------
# GET /api/cycles/<id>/available-workouts?slot=week1
# ------------------------------
@cycles_bp.route("/<cycle_id>/available-workouts", methods=["GET"])
def available_workouts(cycle_id):
    cycle, error = _get_cycle_or_404(cycle_id)
    if error:
        return error

    slot = parse_slot(request.args.get("slot"))
    rows = available_workouts_for_slot(cycle.weeks, WorkoutCollection().list(), slot)
    return jsonify({"slot": slot.value, "workouts": [w.to_dict() for w in rows]}), 200


# ------------------------------
# POST /api/cycles/<id>/slots/<slot>/exercises
# ------------------------------
@cycles_bp.route("/<cycle_id>/slots/<slot>/exercises", methods=["POST"])
def new_slot_exercise(cycle_id, slot):
    """
    Build (without saving) an exercise for a workout planned in ``slot``,
    seeded with the progression suggestion.

    Expected body: {"template_id": "bench-press"}
    """
    cycle, error = _get_cycle_or_404(cycle_id)
    if error:
        return error

    target = parse_slot(slot)
    data = request.get_json(silent=True) or {}
    template_id = data.get("template_id")
    if not template_id:
        raise FormError("template_id is required", "template_id")

    template = ExerciseTemplateCollection().get_by_id(template_id)
    if not template:
        return jsonify({"message": "Exercise not found"}), 404

    suggestion = suggest_next_set(cycle, WorkoutCollection().by_id(), target, template.name)
    exercise = new_exercise_from_template(template, suggestion)
    return jsonify({"exercise": exercise.to_dict()}), 201
