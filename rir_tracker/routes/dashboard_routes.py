# rir_tracker/routes/dashboard_routes.py

from flask import Blueprint, jsonify, request

from ..analytics import (
    RECENT_LIMIT,
    average_rir,
    flatten_sets,
    intensity_label,
    most_trained_muscle_groups,
    recent_workouts,
    total_sets,
    total_volume,
    workout_frequency,
)
from ..storage import WorkoutCollection
from ..units import to_display
from .common import clamp_limit, current_unit_system, unit_payload

# Blueprint for dashboard-related endpoints
dashboard_bp = Blueprint("dashboard", __name__)


# -------------------------
# DASHBOARD OVERVIEW
# -------------------------
@dashboard_bp.route("/overview", methods=["GET"])
def dashboard_overview():
    workouts = WorkoutCollection().list()
    system = current_unit_system()
    limit = clamp_limit(request.args.get("limit"), RECENT_LIMIT)

    avg_rir = average_rir(flatten_sets(workouts))

    recent = [
        {
            "id": w.id,
            "name": w.name,
            "date": w.workout_date.isoformat(),
            "exercise_count": len(w.exercises),
            "total_sets": sum(len(ex.sets) for ex in w.exercises),
        }
        for w in recent_workouts(workouts, limit)
    ]

    stats = {
        "total_workouts": len(workouts),
        "total_sets": total_sets(workouts),
        # rounded only here, at display time
        "total_volume": to_display(total_volume(workouts), system),
        "average_rir": round(avg_rir, 1),
        "intensity": intensity_label(avg_rir) if workouts else None,
        "workouts_per_week": round(workout_frequency(workouts), 1),
        "top_muscle_groups": [
            {"muscle_group": group, "exercises": count}
            for group, count in most_trained_muscle_groups(workouts)
        ],
    }

    return jsonify({"stats": stats, "recent_workouts": recent, **unit_payload(system)}), 200
