# rir_tracker/forms.py
"""
Input validation for records submitted by the client. Invalid input raises
FormError before any record is built, so nothing malformed reaches storage.
"""
import math
from datetime import date
from typing import Any, Dict, Optional

from pydantic import ValidationError

from .cycles import Slot
from .models.records import Cycle, Exercise, ExerciseSet, ExerciseTemplate, Workout, generate_id
from .progression import SuggestedSet
from .units import KG, WEIGHT_UNITS, convert_weight

SLOT_KEYS = {slot.value for slot in Slot.ordered()}


class FormError(Exception):
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


def _required_text(payload: Dict[str, Any], key: str, message: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value.strip():
        raise FormError(message, key)
    return value.strip()


def _optional_text(payload: Dict[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise FormError(f"{key} must be text", key)
    return value.strip() or None


def _validation_error(err: ValidationError) -> FormError:
    first = err.errors()[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return FormError(first.get("msg", "Invalid value"), loc or None)


# ------------------------------
# Workouts
# ------------------------------
def build_workout(payload: Dict[str, Any], existing_id: Optional[str] = None) -> Workout:
    """
    Expected body:
    {
      "name": "Push A",
      "date": "2024-01-01",          # optional, defaults to today
      "unit": "kg",                  # optional unit of the submitted weights
      "notes": "...",                # optional
      "exercises": [
        {"name": "Bench Press", "muscleGroup": "Chest",
         "sets": [{"reps": 8, "weight": 100, "rir": 2}]}
      ]
    }
    """
    if not isinstance(payload, dict):
        raise FormError("Request body must be a JSON object")

    name = _required_text(payload, "name", "Please enter a workout name")

    unit = payload.get("unit") or KG
    if unit not in WEIGHT_UNITS:
        raise FormError(f"unit must be one of {', '.join(WEIGHT_UNITS)}", "unit")

    exercises = payload.get("exercises")
    if not isinstance(exercises, list) or not exercises:
        raise FormError("Please add at least one exercise", "exercises")

    cleaned = []
    for i, exercise in enumerate(exercises):
        field = f"exercises.{i}"
        if not isinstance(exercise, dict):
            raise FormError("Exercise must be an object", field)
        if not str(exercise.get("name") or "").strip():
            raise FormError("Exercise name is required", f"{field}.name")
        sets = exercise.get("sets")
        if not isinstance(sets, list) or not sets:
            raise FormError("Each exercise needs at least one set", f"{field}.sets")

        cleaned_sets = []
        for j, s in enumerate(sets):
            if not isinstance(s, dict):
                raise FormError("Set must be an object", f"{field}.sets.{j}")
            s = dict(s)
            if isinstance(s.get("weight"), float) and not math.isfinite(s["weight"]):
                raise FormError("Weight must be a finite number", f"{field}.sets.{j}.weight")
            if unit != KG and isinstance(s.get("weight"), (int, float)):
                s["weight"] = convert_weight(s["weight"], unit, KG)
            cleaned_sets.append(s)

        cleaned.append({**exercise, "sets": cleaned_sets})

    data = {
        "id": existing_id or payload.get("id") or generate_id(),
        "name": name,
        "date": payload.get("date") or date.today().isoformat(),
        "exercises": cleaned,
        "notes": _optional_text(payload, "notes"),
    }

    try:
        return Workout.model_validate(data)
    except ValidationError as e:
        raise _validation_error(e) from e


# ------------------------------
# Cycles
# ------------------------------
def build_cycle(payload: Dict[str, Any], existing_id: Optional[str] = None) -> Cycle:
    if not isinstance(payload, dict):
        raise FormError("Request body must be a JSON object")

    name = _required_text(payload, "name", "Please enter a cycle name")
    start_date = payload.get("startDate") or payload.get("start_date")
    if not start_date:
        raise FormError("Please select a start date", "startDate")

    weeks = payload.get("weeks") or {}
    if not isinstance(weeks, dict):
        raise FormError("weeks must be an object keyed by slot", "weeks")
    unknown = sorted(set(weeks) - SLOT_KEYS)
    if unknown:
        raise FormError(f"Unknown cycle slot(s): {', '.join(unknown)}", "weeks")
    for key, ids in weeks.items():
        if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
            raise FormError("Slot must be a list of workout ids", f"weeks.{key}")

    data = {
        "id": existing_id or payload.get("id") or generate_id(),
        "name": name,
        "startDate": start_date,
        "weeks": weeks,
        "notes": _optional_text(payload, "notes"),
    }

    try:
        return Cycle.model_validate(data)
    except ValidationError as e:
        raise _validation_error(e) from e


def parse_slot(value: Any, field: str = "slot") -> Slot:
    try:
        return Slot(value)
    except ValueError:
        raise FormError(f"slot must be one of {', '.join(sorted(SLOT_KEYS))}", field) from None


# ------------------------------
# Exercises
# ------------------------------
def new_exercise_from_template(
    template: ExerciseTemplate, suggestion: Optional[SuggestedSet] = None
) -> Exercise:
    """
    A fresh exercise instance for a workout. Name and muscle group are
    copied, so later edits to the template do not touch logged workouts.
    """
    suggestion = suggestion or SuggestedSet()
    return Exercise(
        name=template.name,
        muscle_group=template.muscle_group,
        sets=[ExerciseSet(reps=suggestion.reps, weight=suggestion.weight, rir=suggestion.rir)],
    )
