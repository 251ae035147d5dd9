# rir_tracker/progression.py
"""
Progressive-overload suggestions for a cycle slot, based on what was logged
for the same exercise in the earlier slots of the cycle.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .cycles import Slot, slots_before
from .models.records import Cycle, ExerciseSet, Workout

WEIGHT_INCREMENT = 2.5
RIR_DECREMENT = 0.5

DEFAULT_REPS = 10
DEFAULT_WEIGHT = 0.0
DEFAULT_RIR = 2.0


@dataclass(frozen=True)
class SuggestedSet:
    reps: int = DEFAULT_REPS
    weight: float = DEFAULT_WEIGHT
    rir: float = DEFAULT_RIR

    def to_dict(self) -> dict:
        return {"reps": self.reps, "weight": self.weight, "rir": self.rir}


@dataclass
class ProgressionEntry:
    """One earlier occurrence of the exercise inside the cycle."""

    slot: Slot
    workout: Workout
    sets: List[ExerciseSet] = field(default_factory=list)

    @property
    def best_set(self) -> ExerciseSet:
        return best_set(self.sets)

    @property
    def total_volume(self) -> float:
        return sum((s.volume for s in self.sets), 0.0)

    def to_dict(self) -> dict:
        return {
            "slot": self.slot.value,
            "label": self.slot.label,
            "workout_id": self.workout.id,
            "workout_date": self.workout.workout_date.isoformat(),
            "sets": [s.to_dict() for s in self.sets],
            "best_set": self.best_set.to_dict(),
            "total_volume": self.total_volume,
        }


def best_set(sets: List[ExerciseSet]) -> ExerciseSet:
    """Set with the highest reps * weight; the first one wins a tie."""
    best = sets[0]
    for s in sets[1:]:
        if s.volume > best.volume:
            best = s
    return best


def exercise_progression(
    cycle: Cycle,
    workouts_by_id: Dict[str, Workout],
    target_slot: Slot,
    exercise_name: str,
) -> List[ProgressionEntry]:
    """
    Earlier occurrences of ``exercise_name`` (exact, case-sensitive match)
    in the slots before ``target_slot``, earliest slot first. Ids that do
    not resolve and occurrences without sets are skipped.
    """
    history: List[ProgressionEntry] = []
    for slot in slots_before(target_slot):
        for workout_id in cycle.workout_ids(slot):
            workout = workouts_by_id.get(workout_id)
            if workout is None:
                continue
            for exercise in workout.exercises:
                if exercise.name == exercise_name and exercise.sets:
                    history.append(ProgressionEntry(slot, workout, list(exercise.sets)))
                    break
    return history


def progression_source(history: List[ProgressionEntry]) -> Optional[ProgressionEntry]:
    """
    The occurrence a suggestion is built from: the latest slot with data,
    and within it the workout with the latest date. Equal dates fall back
    to the position in the slot's workout list (last wins).
    """
    if not history:
        return None

    last_slot = history[-1].slot
    candidates = [entry for entry in history if entry.slot == last_slot]
    source = candidates[0]
    for entry in candidates[1:]:
        if entry.workout.workout_date >= source.workout.workout_date:
            source = entry
    return source


def suggest_next_set(
    cycle: Cycle,
    workouts_by_id: Dict[str, Workout],
    target_slot: Slot,
    exercise_name: str,
) -> SuggestedSet:
    """
    Next set for ``exercise_name`` in ``target_slot``: same reps as the best
    previous set, +2.5 weight, 0.5 less RIR (never below 0). Without any
    previous occurrence the default 10 reps / 0 weight / 2 RIR is returned.
    """
    source = progression_source(
        exercise_progression(cycle, workouts_by_id, target_slot, exercise_name)
    )
    if source is None:
        return SuggestedSet()

    best = source.best_set
    return SuggestedSet(
        reps=best.reps,
        weight=best.weight + WEIGHT_INCREMENT,
        rir=max(0.0, best.rir - RIR_DECREMENT),
    )
