from datetime import date

import pytest
from coach_shared import StatsUpdatePayload, WorkoutCompletedPayload

from coach_bot import messages
from coach_bot.api_client import WeekPlan


def test_workout_completed_text():
    text = messages.workout_completed_text(
        WorkoutCompletedPayload(muscle_group_label="Ноги", set_count=5, duration_minutes=40, date=date(2024, 1, 1))
    )
    assert "💪 Группа мышц: Ноги" in text
    assert "📊 Подходов выполнено: 5" in text
    assert "⏱️ Время тренировки: 40 мин" in text
    assert "📅 Дата: 01.01.2024" in text


def test_workout_completed_text_without_duration():
    text = messages.workout_completed_text(
        WorkoutCompletedPayload(muscle_group_label="Спина", set_count=2, date=date(2024, 2, 3))
    )
    assert "⏱️ Время тренировки: —" in text


@pytest.mark.parametrize(
    "streak,expected",
    [
        (0, "Продолжай в том же духе! 💪"),
        (6, "Продолжай в том же духе! 💪"),
        (7, "🎖️ Поздравляю! Ты тренируешься уже неделю подряд!"),
        (29, "🎖️ Поздравляю! Ты тренируешься уже неделю подряд!"),
        (30, "🏅 Невероятно! Месяц регулярных тренировок!"),
        (45, "🏅 Невероятно! Месяц регулярных тренировок!"),
    ],
)
def test_streak_comment_thresholds(streak, expected):
    assert messages.streak_comment(streak) == expected


def test_stats_update_text():
    text = messages.stats_update_text(StatsUpdatePayload(current_streak=3, best_streak=5))
    assert text.startswith("📈 Обновление статистики!")
    assert "🔥 Текущий стрик: 3 дней" in text
    assert "🏆 Лучший стрик: 5 дней" in text


def test_week_plan_text_lists_every_day():
    text = messages.week_plan_text(WeekPlan(week="2024-01", monday="legs", thursday="chest"))
    lines = text.splitlines()
    assert lines[0] == "🗓 План на неделю 2024-01"
    assert lines[2:] == [
        "Пн: Ноги",
        "Вт: Отдых",
        "Ср: Отдых",
        "Чт: Грудь",
        "Пт: Отдых",
        "Сб: Отдых",
        "Вс: Отдых",
    ]


def test_start_text_falls_back_without_name():
    assert "Привет, друг!" in messages.start_text(None)
