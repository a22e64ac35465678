"""Vocabulary shared by the coach API, the bot and the Mini App."""

from .events import (
    StatsUpdateEvent,
    StatsUpdatePayload,
    WebAppEvent,
    WorkoutCompletedEvent,
    WorkoutCompletedPayload,
    dump_event,
    parse_web_app_event,
)
from .muscle_groups import (
    DEFAULT_EXERCISES,
    MUSCLE_GROUP_LABELS,
    DefaultExercise,
    MuscleGroup,
    muscle_group_label,
    parse_muscle_group,
)
from .weeks import (
    DAY_NAMES,
    WEEK_DAYS,
    current_week,
    format_rest_time,
    parse_week_key,
    today_slot,
    week_days,
)
