import logging
from unittest import mock

from sqlalchemy.exc import OperationalError

from builders import make_cycle, make_exercise, make_workout
from rir_tracker import db
from rir_tracker.catalog import EXERCISES
from rir_tracker.cycles import Slot
from rir_tracker.models.storage_entry import StorageEntry
from rir_tracker.storage import (
    CYCLES_KEY,
    EXERCISES_KEY,
    UNIT_SYSTEM_KEY,
    WORKOUTS_KEY,
    CycleCollection,
    ExerciseTemplateCollection,
    KeyValueStore,
    SettingsStore,
    WorkoutCollection,
)
from rir_tracker.units import UnitSystem


def _bench_workout(workout_id="w1"):
    return make_workout(workout_id, "2024-01-01", [make_exercise("Bench Press", "Chest", [(8, 100, 2)])])


def _raw(key):
    return db.session.get(StorageEntry, key).value


def test_empty_collection(app_ctx):
    assert WorkoutCollection().list() == []
    assert WorkoutCollection().get_by_id("nope") is None


def test_save_uses_camel_case_layout(app_ctx):
    WorkoutCollection().save(_bench_workout())

    stored = KeyValueStore().get(WORKOUTS_KEY)
    assert stored[0]["id"] == "w1"
    assert stored[0]["date"] == "2024-01-01"
    assert stored[0]["exercises"][0]["muscleGroup"] == "Chest"
    assert "notes" not in stored[0]


def test_save_is_upsert_keeping_position(app_ctx):
    workouts = WorkoutCollection()
    workouts.save(_bench_workout("a"))
    workouts.save(_bench_workout("b"))

    renamed = _bench_workout("a").model_copy(update={"name": "Renamed"})
    workouts.save(renamed)
    workouts.save(renamed)

    rows = workouts.list()
    assert [w.id for w in rows] == ["a", "b"]
    assert rows[0].name == "Renamed"


def test_delete_is_idempotent(app_ctx):
    workouts = WorkoutCollection()
    workouts.save(_bench_workout("a"))

    assert workouts.delete("a") is True
    assert workouts.delete("a") is True
    assert workouts.list() == []


def test_corrupt_json_reads_as_empty_and_is_overwritten(app_ctx):
    db.session.add(StorageEntry(key=WORKOUTS_KEY, value="{not json"))
    db.session.commit()

    assert WorkoutCollection().list() == []

    WorkoutCollection().save(_bench_workout())
    assert [w.id for w in WorkoutCollection().list()] == ["w1"]


def test_non_array_value_reads_as_empty(app_ctx):
    KeyValueStore().set(CYCLES_KEY, {"id": "c1"})
    assert CycleCollection().list() == []


def test_malformed_records_are_skipped(app_ctx):
    KeyValueStore().set(
        WORKOUTS_KEY,
        [
            {"id": "ok", "name": "Fine", "date": "2024-01-01", "exercises": []},
            {"id": "bad", "name": "Broken"},
        ],
    )
    assert [w.id for w in WorkoutCollection().list()] == ["ok"]


def test_storage_failure_degrades(app_ctx):
    store = KeyValueStore()
    with mock.patch.object(store, "get", side_effect=OperationalError("select", {}, Exception("disk"))):
        assert WorkoutCollection(store).list() == []
        assert SettingsStore(store=store).get_unit_system() == UnitSystem.METRIC

    with mock.patch.object(store, "set", side_effect=OperationalError("insert", {}, Exception("full"))):
        assert WorkoutCollection(store).save(_bench_workout()) is False
        assert SettingsStore(store=store).set_unit_system(UnitSystem.IMPERIAL) is False


def test_cycles_round_trip(app_ctx):
    CycleCollection().save(make_cycle({"week1": ["w1"]}))

    cycle = CycleCollection().get_by_id("c1")
    assert cycle.workout_ids(Slot.WEEK1) == ["w1"]
    assert '"startDate": "2024-01-01"' in _raw(CYCLES_KEY)


def test_exercise_library_is_seeded_once(app_ctx):
    templates = ExerciseTemplateCollection().list()
    assert len(templates) == len(EXERCISES)
    assert db.session.get(StorageEntry, EXERCISES_KEY) is not None

    trimmed = templates[:2]
    KeyValueStore().set(EXERCISES_KEY, [t.to_dict() for t in trimmed])
    assert len(ExerciseTemplateCollection().list()) == 2


def test_unit_system_setting(app_ctx):
    settings = SettingsStore()
    assert settings.get_unit_system() == UnitSystem.METRIC

    settings.set_unit_system(UnitSystem.IMPERIAL)
    assert _raw(UNIT_SYSTEM_KEY) == '"imperial"'
    assert SettingsStore().get_unit_system() == UnitSystem.IMPERIAL


def test_unknown_unit_system_falls_back_to_default(app_ctx):
    KeyValueStore().set(UNIT_SYSTEM_KEY, "stones")
    assert SettingsStore(default=UnitSystem.IMPERIAL).get_unit_system() == UnitSystem.IMPERIAL


def test_stored_non_finite_weight_is_skipped(app_ctx):
    stored = (
        '[{"id": "inf", "name": "Broken", "date": "2024-01-01", "exercises": '
        '[{"id": "e1", "name": "Bench Press", "muscleGroup": "Chest", '
        '"sets": [{"id": "s1", "reps": 8, "weight": Infinity, "rir": 2}]}]}]'
    )
    db.session.add(StorageEntry(key=WORKOUTS_KEY, value=stored))
    db.session.commit()

    assert WorkoutCollection().list() == []


def test_storage_failure_is_logged(app_ctx, caplog):
    store = KeyValueStore()
    with mock.patch.object(store, "get", side_effect=OperationalError("select", {}, Exception("disk"))):
        with caplog.at_level(logging.ERROR, logger="rir_tracker.storage"):
            WorkoutCollection(store).list()

    assert any(r.levelno == logging.ERROR and WORKOUTS_KEY in r.getMessage() for r in caplog.records)
