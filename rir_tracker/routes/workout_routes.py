# rir_tracker/routes/workout_routes.py

from flask import Blueprint, current_app, jsonify, request

from ..analytics import sort_workouts, workout_summary
from ..forms import FormError, build_workout
from ..storage import WorkoutCollection
from ..units import to_display
from .common import current_unit_system, unit_payload

workouts_bp = Blueprint("workouts", __name__)


def _workout_to_dict(workout, system) -> dict:
    data = workout.to_dict()
    summary = workout_summary(workout)
    summary["total_volume"] = to_display(summary["total_volume"], system)
    data["summary"] = summary
    return data


# ------------------------------
# GET /api/workouts?sort_by=date&order=desc
# ------------------------------
@workouts_bp.route("", methods=["GET"])
def list_workouts():
    sort_by = request.args.get("sort_by", "date")
    order = request.args.get("order", "desc")
    if sort_by not in ("date", "name"):
        raise FormError("sort_by must be 'date' or 'name'", "sort_by")
    if order not in ("asc", "desc"):
        raise FormError("order must be 'asc' or 'desc'", "order")

    system = current_unit_system()
    rows = sort_workouts(WorkoutCollection().list(), sort_by, order)

    return jsonify(
        {
            "workouts": [_workout_to_dict(w, system) for w in rows],
            "count": len(rows),
            **unit_payload(system),
        }
    ), 200


# ------------------------------
# GET /api/workouts/<id>
# ------------------------------
@workouts_bp.route("/<workout_id>", methods=["GET"])
def get_workout(workout_id):
    workout = WorkoutCollection().get_by_id(workout_id)
    if not workout:
        return jsonify({"message": "Workout not found"}), 404

    system = current_unit_system()
    return jsonify({"workout": _workout_to_dict(workout, system), **unit_payload(system)}), 200


# ------------------------------
# POST /api/workouts
# ------------------------------
@workouts_bp.route("", methods=["POST"])
def create_workout():
    data = request.get_json(silent=True) or {}
    workouts = WorkoutCollection()

    workout = build_workout(data)
    if workouts.get_by_id(workout.id):
        return jsonify({"message": "Workout id already exists"}), 409

    if not workouts.save(workout):
        return jsonify({"message": "Failed to save workout"}), 500

    current_app.logger.info(f"[workouts] created {workout.id} '{workout.name}'")
    return jsonify({"workout": _workout_to_dict(workout, current_unit_system())}), 201


# ------------------------------
# PUT /api/workouts/<id>
# ------------------------------
@workouts_bp.route("/<workout_id>", methods=["PUT"])
def update_workout(workout_id):
    workouts = WorkoutCollection()
    if not workouts.get_by_id(workout_id):
        return jsonify({"message": "Workout not found"}), 404

    data = request.get_json(silent=True) or {}
    workout = build_workout(data, existing_id=workout_id)

    if not workouts.save(workout):
        return jsonify({"message": "Failed to save workout"}), 500

    current_app.logger.info(f"[workouts] updated {workout.id}")
    return jsonify({"workout": _workout_to_dict(workout, current_unit_system())}), 200


# ------------------------------
# DELETE /api/workouts/<id>
# ------------------------------
@workouts_bp.route("/<workout_id>", methods=["DELETE"])
def delete_workout(workout_id):
    # Cycles referencing this id keep it; it then shows as not found.
    WorkoutCollection().delete(workout_id)
    current_app.logger.info(f"[workouts] deleted {workout_id}")
    return jsonify({"message": "Workout deleted"}), 200
