import json
from datetime import date

import pytest
from coach_shared import (
    StatsUpdateEvent,
    StatsUpdatePayload,
    WorkoutCompletedEvent,
    WorkoutCompletedPayload,
    dump_event,
    parse_web_app_event,
)


def test_parse_workout_completed_event():
    raw = json.dumps(
        {
            "type": "workout_completed",
            "payload": {"muscleGroupLabel": "Ноги", "setCount": 5, "durationMinutes": 40, "date": "2024-01-01"},
        }
    )
    event = parse_web_app_event(raw)
    assert isinstance(event, WorkoutCompletedEvent)
    assert event.payload.muscle_group_label == "Ноги"
    assert event.payload.set_count == 5
    assert event.payload.duration_minutes == 40
    assert event.payload.date == date(2024, 1, 1)


def test_parse_accepts_legacy_payload_keys():
    raw = json.dumps(
        {"type": "workout_completed", "payload": {"muscleGroup": "Спина", "sets": 3, "date": "2024-02-10"}}
    )
    event = parse_web_app_event(raw)
    assert event.payload.muscle_group_label == "Спина"
    assert event.payload.set_count == 3
    assert event.payload.duration_minutes is None


def test_parse_stats_update_event():
    event = parse_web_app_event('{"type": "stats_update", "payload": {"currentStreak": 7, "bestStreak": 9}}')
    assert isinstance(event, StatsUpdateEvent)
    assert event.payload.current_streak == 7
    assert event.payload.best_streak == 9


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        '{"type": "unknown", "payload": {}}',
        '{"type": "stats_update", "payload": {"currentStreak": 1}}',
        '{"type": "workout_completed", "payload": {"setCount": -1, "muscleGroupLabel": "x", "date": "2024-01-01"}}',
    ],
)
def test_parse_rejects_malformed_events(raw):
    with pytest.raises(ValueError):
        parse_web_app_event(raw)


def test_dump_event_uses_camel_case():
    event = WorkoutCompletedEvent(
        payload=WorkoutCompletedPayload(
            muscle_group_label="Грудь", set_count=4, duration_minutes=30, date=date(2024, 5, 6)
        )
    )
    assert dump_event(event) == {
        "type": "workout_completed",
        "payload": {"muscleGroupLabel": "Грудь", "setCount": 4, "durationMinutes": 30, "date": "2024-05-06"},
    }
    stats = StatsUpdateEvent(payload=StatsUpdatePayload(current_streak=1, best_streak=2))
    assert dump_event(stats)["payload"] == {"currentStreak": 1, "bestStreak": 2}
