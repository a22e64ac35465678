"""Russian chat texts sent by the bot."""

from coach_shared import (
    DAY_NAMES,
    WEEK_DAYS,
    StatsUpdatePayload,
    WorkoutCompletedPayload,
    muscle_group_label,
)

from .api_client import WeekPlan

OPEN_APP_BUTTON = "🏋️ Открыть приложение"
START_BUTTON = "🏋️ Открыть Maratik Coach"
PLAN_BUTTON = "📱 Открыть приложение"
HISTORY_BUTTON = "📊 Посмотреть статистику"

PLAN_TEXT = """🤖 Генерация персонального плана тренировок

Ответь на несколько вопросов, и я составлю для тебя идеальный план:

1️⃣ Сколько дней в неделю готов тренироваться? (3-6)
2️⃣ Какая у тебя цель? (похудение/набор массы/поддержание формы)
3️⃣ Есть ли опыт тренировок? (новичок/средний/продвинутый)
4️⃣ Сколько времени на тренировку? (30-90 минут)

Пока что эта функция в разработке. Используй Mini App для создания плана вручную!"""

HELP_TEXT = """🤖 Команды Maratik Coach:

/start - Начать работу с ботом
/plan - Генерация плана тренировок (скоро)
/week - План на текущую неделю
/help - Показать эту справку

💡 Основная работа происходит в Mini App - нажми кнопку ниже!"""

UNKNOWN_COMMAND_TEXT = "Неизвестная команда. Используй /help для списка доступных команд."

WEB_APP_DATA_ERROR_TEXT = "Произошла ошибка при обработке данных. Попробуй ещё раз."

WEEK_PLAN_UNAVAILABLE_TEXT = "Не удалось загрузить план. Открой Mini App и попробуй ещё раз."

REST_DAY_LABEL = "Отдых"


def start_text(first_name: str | None) -> str:
    name = first_name or "друг"
    return f"""🔥 Привет, {name}! Я Маратик — твой персональный тренер!

💪 Что я умею:
• Составлять планы тренировок
• Отслеживать прогресс
• Вести статистику
• Мотивировать на результат

Нажми кнопку ниже, чтобы начать тренировки!"""


def workout_completed_text(payload: WorkoutCompletedPayload) -> str:
    duration = f"{payload.duration_minutes} мин" if payload.duration_minutes is not None else "—"
    return f"""🎉 Отличная тренировка!

💪 Группа мышц: {payload.muscle_group_label}
📊 Подходов выполнено: {payload.set_count}
⏱️ Время тренировки: {duration}
📅 Дата: {payload.date.strftime("%d.%m.%Y")}

Так держать! Твой прогресс впечатляет! 🔥"""


def streak_comment(current_streak: int) -> str:
    if current_streak >= 30:
        return "🏅 Невероятно! Месяц регулярных тренировок!"
    if current_streak >= 7:
        return "🎖️ Поздравляю! Ты тренируешься уже неделю подряд!"
    return "Продолжай в том же духе! 💪"


def stats_update_text(payload: StatsUpdatePayload) -> str:
    return (
        "📈 Обновление статистики!\n\n"
        f"🔥 Текущий стрик: {payload.current_streak} дней\n"
        f"🏆 Лучший стрик: {payload.best_streak} дней\n\n"
        f"{streak_comment(payload.current_streak)}"
    )


def week_plan_text(plan: WeekPlan) -> str:
    lines = [f"🗓 План на неделю {plan.week}", ""]
    for day in WEEK_DAYS:
        tag = getattr(plan, day)
        label = muscle_group_label(tag) if tag else REST_DAY_LABEL
        lines.append(f"{DAY_NAMES[day]}: {label}")
    return "\n".join(lines)
