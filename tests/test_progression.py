from builders import make_cycle, make_exercise, make_set, make_workout
from rir_tracker.cycles import Slot
from rir_tracker.progression import (
    SuggestedSet,
    best_set,
    exercise_progression,
    progression_source,
    suggest_next_set,
)


def _bench(workout_id, day, sets):
    return make_workout(workout_id, day, [make_exercise("Bench Press", "Chest", sets)])


def test_no_previous_occurrence_gives_default():
    cycle = make_cycle({"week1": []})
    assert suggest_next_set(cycle, {}, Slot.WEEK2, "Bench Press") == SuggestedSet(10, 0, 2)
    assert suggest_next_set(cycle, {}, Slot.WEEK2, "Bench Press").to_dict() == {
        "reps": 10,
        "weight": 0,
        "rir": 2,
    }


def test_week1_bench_press_scenario():
    w1 = _bench("w1", "2024-01-01", [(8, 100, 2), (6, 110, 1)])
    cycle = make_cycle({"week1": ["w1"]})

    suggestion = suggest_next_set(cycle, {"w1": w1}, Slot.WEEK2, "Bench Press")

    # 8 * 100 = 800 beats 6 * 110 = 660
    assert suggestion == SuggestedSet(reps=8, weight=102.5, rir=1.5)


def test_first_slot_has_no_candidates():
    w1 = _bench("w1", "2024-01-01", [(8, 100, 2)])
    cycle = make_cycle({"week1": ["w1"]})
    assert suggest_next_set(cycle, {"w1": w1}, Slot.WEEK1, "Bench Press") == SuggestedSet()


def test_uses_latest_slot_with_data():
    w1 = _bench("w1", "2024-01-01", [(8, 100, 2)])
    w2 = _bench("w2", "2024-01-08", [(8, 105, 1)])
    cycle = make_cycle({"week1": ["w1"], "week2": ["w2"], "week3": []})

    suggestion = suggest_next_set(cycle, {"w1": w1, "w2": w2}, Slot.DELOAD, "Bench Press")
    assert suggestion == SuggestedSet(reps=8, weight=107.5, rir=0.5)

    history = exercise_progression(cycle, {"w1": w1, "w2": w2}, Slot.DELOAD, "Bench Press")
    assert [entry.slot for entry in history] == [Slot.WEEK1, Slot.WEEK2]


def test_rir_is_floored_at_zero():
    w1 = _bench("w1", "2024-01-01", [(3, 150, 0)])
    cycle = make_cycle({"week1": ["w1"]})
    assert suggest_next_set(cycle, {"w1": w1}, Slot.WEEK2, "Bench Press").rir == 0


def test_dangling_ids_are_skipped():
    w1 = _bench("w1", "2024-01-01", [(8, 100, 2)])
    cycle = make_cycle({"week1": ["w1", "deleted"], "week2": ["gone"]})
    suggestion = suggest_next_set(cycle, {"w1": w1}, Slot.WEEK3, "Bench Press")
    assert suggestion.weight == 102.5


def test_name_match_is_case_sensitive():
    w1 = _bench("w1", "2024-01-01", [(8, 100, 2)])
    cycle = make_cycle({"week1": ["w1"]})
    assert suggest_next_set(cycle, {"w1": w1}, Slot.WEEK2, "bench press") == SuggestedSet()


def test_exercise_without_sets_is_ignored():
    w1 = make_workout("w1", "2024-01-01", [make_exercise("Bench Press", "Chest", [])])
    cycle = make_cycle({"week1": ["w1"]})
    assert exercise_progression(cycle, {"w1": w1}, Slot.WEEK2, "Bench Press") == []


def test_same_slot_prefers_latest_workout_date():
    later = _bench("later", "2024-01-05", [(5, 120, 2)])
    earlier = _bench("earlier", "2024-01-02", [(5, 90, 2)])
    cycle = make_cycle({"week1": ["later", "earlier"]})
    lookup = {"later": later, "earlier": earlier}

    history = exercise_progression(cycle, lookup, Slot.WEEK2, "Bench Press")
    assert progression_source(history).workout.id == "later"
    assert suggest_next_set(cycle, lookup, Slot.WEEK2, "Bench Press").weight == 122.5


def test_same_slot_same_date_last_listed_wins():
    a = _bench("a", "2024-01-02", [(5, 90, 2)])
    b = _bench("b", "2024-01-02", [(5, 95, 2)])
    cycle = make_cycle({"week1": ["a", "b"]})

    history = exercise_progression(cycle, {"a": a, "b": b}, Slot.WEEK2, "Bench Press")
    assert progression_source(history).workout.id == "b"


def test_best_set_tie_keeps_first():
    first = make_set(10, 50, 2)
    second = make_set(5, 100, 1)
    assert best_set([first, second]) is first


def test_progression_entry_summary():
    w1 = _bench("w1", "2024-01-01", [(8, 100, 2), (6, 110, 1)])
    cycle = make_cycle({"week1": ["w1"]})
    entry = exercise_progression(cycle, {"w1": w1}, Slot.WEEK2, "Bench Press")[0]

    data = entry.to_dict()
    assert data["label"] == "Week 1"
    assert data["total_volume"] == 1460
    assert data["best_set"]["reps"] == 8
