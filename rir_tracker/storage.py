# rir_tracker/storage.py
"""
Persistence gateway.

All state lives in a key-value table: each key holds one JSON document.
Collections are stored whole under a fixed key and rewritten whole on every
change (read, modify in memory, write back; last writer wins).

Nothing in this module raises to its callers: storage failures are logged
and reads degrade to an empty result, writes to a no-op returning False.
"""
import json
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from . import db
from .catalog import EXERCISES
from .models.records import Cycle, ExerciseTemplate, Record, Workout
from .models.storage_entry import StorageEntry
from .units import UnitSystem

logger = logging.getLogger(__name__)

WORKOUTS_KEY = "rir-workouts"
CYCLES_KEY = "rir-cycles"
EXERCISES_KEY = "rir-exercises"
UNIT_SYSTEM_KEY = "unitSystem"

T = TypeVar("T", bound=Record)


class KeyValueStore:
    """JSON values addressed by string keys. Errors propagate from here."""

    def get(self, key: str) -> Any:
        entry = db.session.get(StorageEntry, key)
        if entry is None:
            return None
        return json.loads(entry.value)

    def set(self, key: str, value: Any) -> None:
        payload = json.dumps(value)
        entry = db.session.get(StorageEntry, key)
        if entry is None:
            db.session.add(StorageEntry(key=key, value=payload))
        else:
            entry.value = payload
        db.session.commit()


class RecordCollection(Generic[T]):
    key: str
    model: Type[T]

    def __init__(self, store: Optional[KeyValueStore] = None):
        self.store = store or KeyValueStore()

    # ------------------------------
    # Raw access
    # ------------------------------
    def _read_raw(self) -> Optional[list]:
        """
        Stored JSON array, or None when the key is absent.
        Unreadable or non-array content is logged and read as [].
        """
        try:
            raw = self.store.get(self.key)
        except (SQLAlchemyError, ValueError) as e:
            db.session.rollback()
            logger.error(f"Error reading {self.key}: {e}")
            return []

        if raw is None:
            return None
        if not isinstance(raw, list):
            logger.error(f"Error reading {self.key}: expected a JSON array, got {type(raw).__name__}")
            return []
        return raw

    def _parse(self, raw: list) -> List[T]:
        records: List[T] = []
        for item in raw:
            try:
                records.append(self.model.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping malformed {self.model.__name__} in {self.key}: {e}")
        return records

    def _write(self, records: List[T]) -> bool:
        try:
            self.store.set(self.key, [r.to_dict() for r in records])
            return True
        except (SQLAlchemyError, TypeError, ValueError) as e:
            db.session.rollback()
            logger.error(f"Error writing {self.key}: {e}")
            return False

    # ------------------------------
    # Public API
    # ------------------------------
    def list(self) -> List[T]:
        return self._parse(self._read_raw() or [])

    def get_by_id(self, record_id: str) -> Optional[T]:
        return next((r for r in self.list() if r.id == record_id), None)

    def by_id(self) -> Dict[str, T]:
        return {r.id: r for r in self.list()}

    def save(self, record: T) -> bool:
        """Insert or replace by id; a replaced record keeps its position."""
        records = self.list()
        for i, existing in enumerate(records):
            if existing.id == record.id:
                records[i] = record
                break
        else:
            records.append(record)

        saved = self._write(records)
        if saved:
            logger.debug(f"Saved {self.model.__name__} {record.id} to {self.key}")
        return saved

    def delete(self, record_id: str) -> bool:
        records = self.list()
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            return True
        deleted = self._write(remaining)
        if deleted:
            logger.debug(f"Deleted {self.model.__name__} {record_id} from {self.key}")
        return deleted


class WorkoutCollection(RecordCollection[Workout]):
    key = WORKOUTS_KEY
    model = Workout


class CycleCollection(RecordCollection[Cycle]):
    key = CYCLES_KEY
    model = Cycle


class ExerciseTemplateCollection(RecordCollection[ExerciseTemplate]):
    """Exercise library, seeded from the static catalog on first read."""

    key = EXERCISES_KEY
    model = ExerciseTemplate

    def list(self) -> List[ExerciseTemplate]:
        raw = self._read_raw()
        if raw is None:
            templates = self._parse(EXERCISES)
            if self._write(templates):
                logger.info(f"Seeded {self.key} with {len(templates)} exercise templates")
            return templates
        return self._parse(raw)


class SettingsStore:
    def __init__(self, default: UnitSystem = UnitSystem.METRIC, store: Optional[KeyValueStore] = None):
        self.default = UnitSystem(default)
        self.store = store or KeyValueStore()

    def get_unit_system(self) -> UnitSystem:
        try:
            raw = self.store.get(UNIT_SYSTEM_KEY)
        except (SQLAlchemyError, ValueError) as e:
            db.session.rollback()
            logger.error(f"Error reading {UNIT_SYSTEM_KEY}: {e}")
            return self.default

        if raw is None:
            return self.default
        try:
            return UnitSystem(raw)
        except ValueError:
            logger.warning(f"Ignoring unknown unit system {raw!r}")
            return self.default

    def set_unit_system(self, system: UnitSystem) -> bool:
        system = UnitSystem(system)
        try:
            self.store.set(UNIT_SYSTEM_KEY, system.value)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error saving {UNIT_SYSTEM_KEY}: {e}")
            return False
        logger.info(f"Unit system set to {system.value}")
        return True
