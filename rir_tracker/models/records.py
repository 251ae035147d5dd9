# rir_tracker/models/records.py
"""
Stored record shapes. Field names on the wire (and in storage) are the
camelCase keys the browser client writes; attributes are snake_case.
"""
import secrets
import string
from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..cycles import Slot

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 9


def generate_id() -> str:
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


class Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ExerciseSet(Record):
    id: str = Field(default_factory=generate_id)
    reps: int = Field(ge=0)
    weight: float = Field(ge=0, allow_inf_nan=False)  # kg
    rir: float = Field(ge=0, le=5, allow_inf_nan=False)

    @property
    def volume(self) -> float:
        return self.reps * self.weight


class Exercise(Record):
    id: str = Field(default_factory=generate_id)
    name: str
    muscle_group: str = Field(alias="muscleGroup")
    sets: List[ExerciseSet] = Field(default_factory=list)


class Workout(Record):
    id: str = Field(default_factory=generate_id)
    name: str
    workout_date: date = Field(alias="date")
    exercises: List[Exercise] = Field(default_factory=list)
    notes: Optional[str] = None

    def all_sets(self) -> List[ExerciseSet]:
        return [s for exercise in self.exercises for s in exercise.sets]


class ExerciseTemplate(Record):
    id: str
    name: str
    muscle_group: str = Field(alias="muscleGroup")
    equipment: Optional[str] = None
    instructions: Optional[str] = None


class Cycle(Record):
    id: str = Field(default_factory=generate_id)
    name: str
    start_date: date = Field(alias="startDate")
    weeks: Dict[Slot, List[str]] = Field(default_factory=dict, validate_default=True)
    notes: Optional[str] = None

    @field_validator("weeks")
    @classmethod
    def fill_missing_slots(cls, weeks: Dict[Slot, List[str]]) -> Dict[Slot, List[str]]:
        return {slot: list(weeks.get(slot, [])) for slot in Slot.ordered()}

    def workout_ids(self, slot: Slot) -> List[str]:
        return self.weeks.get(slot, [])
