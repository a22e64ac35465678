"""Week keys and weekday slots.

Week keys are ``YYYY-WW`` strings produced by the Mini App and used verbatim
as the storage key of a week plan, so the numbering below has to agree with
the client exactly. It is not ISO-8601: weeks are counted from January 1 with
Sunday-based weekday numbering.
"""

import math
import re
from datetime import date, timedelta

WEEK_DAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

DAY_NAMES: dict[str, str] = dict(zip(WEEK_DAYS, ("Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс")))

MAX_WEEK = 54

_WEEK_KEY_RE = re.compile(r"^(\d{4})-(\d{2})$")


def platform_weekday(day: date) -> int:
    """Weekday with Sunday=0 .. Saturday=6."""
    return day.isoweekday() % 7


def current_week(day: date | None = None) -> str:
    day = day or date.today()
    jan1 = date(day.year, 1, 1)
    days_since_jan1 = (day - jan1).days
    week = math.ceil((days_since_jan1 + platform_weekday(jan1) + 1) / 7)
    return f"{day.year}-{week:02d}"


def parse_week_key(week_key: str) -> tuple[int, int]:
    match = _WEEK_KEY_RE.match(week_key or "")
    if not match:
        raise ValueError(f"week must look like YYYY-WW, got {week_key!r}")
    year, week = int(match.group(1)), int(match.group(2))
    if not 1 <= week <= MAX_WEEK:
        raise ValueError(f"week number must be between 1 and {MAX_WEEK}, got {week}")
    return year, week


def week_days(week_key: str) -> list[date]:
    """Monday..Sunday dates displayed for ``week_key``."""
    year, week = parse_week_key(week_key)
    first_day = date(year, 1, 1) + timedelta(days=(week - 1) * 7)
    weekday = platform_weekday(first_day)
    offset = -weekday + (-6 if weekday == 0 else 1)
    monday = first_day + timedelta(days=offset)
    return [monday + timedelta(days=i) for i in range(7)]


def today_slot(day: date | None = None) -> str:
    """Plan slot for ``day``, remapping Sunday=0 numbering to Monday first."""
    day = day or date.today()
    return WEEK_DAYS[(platform_weekday(day) + 6) % 7]


def format_rest_time(seconds: int) -> str:
    minutes, secs = divmod(max(int(seconds), 0), 60)
    return f"{minutes}:{secs:02d}"
