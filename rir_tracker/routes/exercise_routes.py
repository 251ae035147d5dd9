# rir_tracker/routes/exercise_routes.py

from flask import Blueprint, jsonify, request

from ..storage import ExerciseTemplateCollection

exercises_bp = Blueprint("exercises", __name__)


def _matches(template, term: str) -> bool:
    term = term.lower()
    return term in template.name.lower() or term in template.muscle_group.lower()


@exercises_bp.route("", methods=["GET"])
def list_exercises():
    """
    List the exercise library.

    GET /api/exercises?q=press&muscle_group=Chest

    ``q`` matches name or muscle group, case-insensitive.
    ``muscle_group`` is an exact filter.
    """
    templates = ExerciseTemplateCollection().list()
    search = (request.args.get("q") or "").strip()
    muscle_group = (request.args.get("muscle_group") or "").strip()

    filtered = templates
    if search:
        filtered = [t for t in filtered if _matches(t, search)]
    if muscle_group:
        filtered = [t for t in filtered if t.muscle_group == muscle_group]

    return jsonify(
        {
            "exercises": [t.to_dict() for t in filtered],
            "muscle_groups": sorted({t.muscle_group for t in templates}),
            "count": len(filtered),
            "total": len(templates),
        }
    ), 200


@exercises_bp.route("/<exercise_id>", methods=["GET"])
def get_exercise(exercise_id):
    """
    Get a single exercise template.

    GET /api/exercises/<exercise_id>
    """
    exercise = ExerciseTemplateCollection().get_by_id(exercise_id)
    if not exercise:
        return jsonify({"message": "Exercise not found"}), 404

    return jsonify({"exercise": exercise.to_dict()}), 200
