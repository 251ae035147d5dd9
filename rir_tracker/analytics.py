# rir_tracker/analytics.py
"""
Statistics derived from workout records.

Every function here is pure and accepts empty input, returning the
zero-value for its result instead of raising. Weights are whatever unit the
records hold (kg in storage); nothing is rounded here.
"""
from collections import Counter
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from .cycles import Slot
from .models.records import Cycle, ExerciseSet, Workout

RECENT_LIMIT = 5
TOP_MUSCLE_GROUPS = 3


@dataclass(frozen=True)
class SlotStats:
    slot: Slot
    label: str
    total_volume: float = 0.0
    total_sets: int = 0
    total_reps: int = 0
    average_rir: float = 0.0
    average_weight: float = 0.0

    def to_dict(self) -> dict:
        data = asdict(self)
        data["slot"] = self.slot.value
        return data


# ------------------------------
# Basic aggregates
# ------------------------------
def flatten_sets(workouts: Iterable[Workout]) -> List[ExerciseSet]:
    return [s for w in workouts for s in w.all_sets()]


def total_sets(workouts: Iterable[Workout]) -> int:
    return sum(len(ex.sets) for w in workouts for ex in w.exercises)


def total_volume(workouts: Iterable[Workout]) -> float:
    return sum((s.volume for s in flatten_sets(workouts)), 0.0)


def total_reps(workouts: Iterable[Workout]) -> int:
    return sum(s.reps for s in flatten_sets(workouts))


def average_rir(sets: Sequence[ExerciseSet]) -> float:
    if not sets:
        return 0.0
    return sum(s.rir for s in sets) / len(sets)


def average_weight(sets: Sequence[ExerciseSet]) -> float:
    if not sets:
        return 0.0
    return sum(s.weight for s in sets) / len(sets)


def muscle_group_histogram(workouts: Iterable[Workout]) -> Dict[str, int]:
    """Muscle group -> number of sets tagged with it."""
    histogram: Dict[str, int] = {}
    for w in workouts:
        for ex in w.exercises:
            histogram[ex.muscle_group] = histogram.get(ex.muscle_group, 0) + len(ex.sets)
    return histogram


def most_trained_muscle_groups(
    workouts: Iterable[Workout], limit: int = TOP_MUSCLE_GROUPS
) -> List[Tuple[str, int]]:
    """
    Top muscle groups ranked by number of exercises (not sets).
    Ties keep the order in which groups were first seen.
    """
    counts = Counter(ex.muscle_group for w in workouts for ex in w.exercises)
    # Counter.most_common is stable for equal counts
    return counts.most_common(limit)


# ------------------------------
# Cycle breakdown
# ------------------------------
def slot_stats(slot: Slot, workouts: Sequence[Workout]) -> SlotStats:
    sets = flatten_sets(workouts)
    return SlotStats(
        slot=slot,
        label=slot.label,
        total_volume=sum((s.volume for s in sets), 0.0),
        total_sets=len(sets),
        total_reps=sum(s.reps for s in sets),
        average_rir=average_rir(sets),
        average_weight=average_weight(sets),
    )


def weekly_breakdown(
    cycle: Cycle, workouts_by_slot: Dict[Slot, List[Workout]]
) -> List[SlotStats]:
    """
    One entry per slot in fixed order (week1..week4, deload). Slots absent
    from ``workouts_by_slot`` or without sets report zeros.
    """
    return [slot_stats(slot, workouts_by_slot.get(slot, [])) for slot in Slot.ordered()]


def cycle_totals(breakdown: Sequence[SlotStats]) -> dict:
    """Summary across a weekly breakdown; average RIR is the mean of slot means."""
    return {
        "total_volume": sum((s.total_volume for s in breakdown), 0.0),
        "total_sets": sum(s.total_sets for s in breakdown),
        "total_reps": sum(s.total_reps for s in breakdown),
        "average_rir": (
            sum(s.average_rir for s in breakdown) / len(breakdown) if breakdown else 0.0
        ),
    }


# ------------------------------
# Frequency / ordering
# ------------------------------
def workout_frequency(workouts: Sequence[Workout]) -> float:
    """Workouts per week between the first and last workout date."""
    if len(workouts) < 2:
        return 0.0

    dates = sorted(w.workout_date for w in workouts)
    elapsed_days = (dates[-1] - dates[0]).days
    if elapsed_days <= 0:
        return 0.0
    return len(workouts) / (elapsed_days / 7)


def sort_workouts(
    workouts: Iterable[Workout], sort_by: str = "date", order: str = "desc"
) -> List[Workout]:
    if sort_by not in ("date", "name"):
        raise ValueError(f"unsupported sort key: {sort_by}")
    if order not in ("asc", "desc"):
        raise ValueError(f"unsupported sort order: {order}")

    if sort_by == "date":
        key = lambda w: w.workout_date  # noqa: E731
    else:
        key = lambda w: w.name.casefold()  # noqa: E731
    return sorted(workouts, key=key, reverse=(order == "desc"))


def recent_workouts(workouts: Iterable[Workout], limit: int = RECENT_LIMIT) -> List[Workout]:
    return sort_workouts(workouts, "date", "desc")[:limit]


def intensity_label(avg_rir: float) -> str:
    if avg_rir <= 1.5:
        return "Very High"
    if avg_rir <= 2.5:
        return "High"
    if avg_rir <= 3.5:
        return "Moderate-High"
    if avg_rir <= 4.5:
        return "Moderate"
    return "Light"


def workout_summary(workout: Workout) -> dict:
    """Per-workout figures shown in list views."""
    sets = workout.all_sets()
    return {
        "total_sets": len(sets),
        "total_volume": sum((s.volume for s in sets), 0.0),
        "average_rir": average_rir(sets),
        "exercise_names": [ex.name for ex in workout.exercises],
    }
