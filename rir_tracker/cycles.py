# rir_tracker/cycles.py
"""
Cycle scheduling helpers: the fixed five-slot layout of a training cycle,
resolution of slot workout ids against the workout collection, and the
status label derived from the cycle start date.
"""
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterable, List, NamedTuple, Optional

if TYPE_CHECKING:
    from .models.records import Cycle, Workout

CYCLE_LENGTH_DAYS = 35
PROGRESSIVE_WEEKS = 4


class Slot(str, Enum):
    WEEK1 = "week1"
    WEEK2 = "week2"
    WEEK3 = "week3"
    WEEK4 = "week4"
    DELOAD = "deload"

    @classmethod
    def ordered(cls) -> List["Slot"]:
        return list(cls)

    @property
    def position(self) -> int:
        return Slot.ordered().index(self)

    @property
    def label(self) -> str:
        if self is Slot.DELOAD:
            return "Deload"
        return f"Week {self.position + 1}"


def slots_before(target: Slot) -> List[Slot]:
    """Slots strictly before ``target``, earliest first."""
    return Slot.ordered()[: target.position]


class SlotEntry(NamedTuple):
    workout_id: str
    workout: Optional["Workout"]

    @property
    def found(self) -> bool:
        return self.workout is not None


# ------------------------------
# Slot resolution
# ------------------------------
def resolve_slots(
    cycle: "Cycle", workouts_by_id: Dict[str, "Workout"]
) -> Dict[Slot, List[SlotEntry]]:
    """
    Resolve every slot's workout ids. Ids with no matching workout are kept
    with ``workout=None`` so callers can show them as not found.
    """
    return {
        slot: [SlotEntry(wid, workouts_by_id.get(wid)) for wid in cycle.workout_ids(slot)]
        for slot in Slot.ordered()
    }


def workouts_by_slot(
    cycle: "Cycle", workouts_by_id: Dict[str, "Workout"]
) -> Dict[Slot, List["Workout"]]:
    resolved = resolve_slots(cycle, workouts_by_id)
    return {
        slot: [entry.workout for entry in entries if entry.found]
        for slot, entries in resolved.items()
    }


def total_workouts(cycle: "Cycle") -> int:
    return sum(len(cycle.workout_ids(slot)) for slot in Slot.ordered())


def available_workouts_for_slot(
    weeks: Dict[Slot, List[str]], workouts: Iterable["Workout"], slot: Slot
) -> List["Workout"]:
    """Workouts not already placed in a slot other than ``slot``."""
    used = {
        wid
        for other, ids in weeks.items()
        if other != slot
        for wid in ids
    }
    return [w for w in workouts if w.id not in used]


# ------------------------------
# Status (always derived, never stored)
# ------------------------------
def days_since_start(start_date: date, today: date) -> int:
    return (today - start_date).days


def cycle_status(start_date: date, today: Optional[date] = None) -> str:
    today = today or date.today()
    days = days_since_start(start_date, today)

    if days < 0:
        return "Upcoming"
    if days <= CYCLE_LENGTH_DAYS:
        week_number = days // 7 + 1
        if week_number <= PROGRESSIVE_WEEKS:
            return f"Week {week_number}"
        return "Deload"
    return "Completed"


def status_tone(start_date: date, today: Optional[date] = None) -> str:
    """Coarse state used for badge colouring: future / active / completed."""
    today = today or date.today()
    days = days_since_start(start_date, today)

    if days < 0:
        return "future"
    if days <= CYCLE_LENGTH_DAYS:
        return "active"
    return "completed"
