from __future__ import annotations

from datetime import date, datetime, time, timezone
import re
from zoneinfo import ZoneInfo

from hearing_lists.locales import copy_for

LONDON_TZ = ZoneInfo("Europe/London")

_CLOCK_TIME_PATTERN = re.compile(
    r"^\s*(?P<hour>\d{1,2})(?:[:.](?P<minute>\d{2}))?\s*(?P<meridiem>[ap])?\.?\s*(?:m\.?)?\s*$",
    re.IGNORECASE,
)


def parse_iso_datetime(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_day_month_year(value: str) -> date:
    return datetime.strptime(value.strip(), "%d/%m/%Y").date()


def parse_date_of_birth(value: str | None) -> date | None:
    if not value or not value.strip():
        return None
    text = value.strip()
    try:
        if "/" in text:
            return parse_day_month_year(text)
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def parse_clock_time(value: str | None) -> time | None:
    """Reads list times such as "10:00", "10.30", "2pm" or "2:30 p.m."."""
    if not value:
        return None
    match = _CLOCK_TIME_PATTERN.match(value)
    if match is None:
        return None
    hour = int(match.group("hour"))
    minute = int(match.group("minute") or 0)
    meridiem = (match.group("meridiem") or "").lower()
    if minute > 59:
        return None
    if meridiem:
        if not 1 <= hour <= 12:
            return None
        hour = hour % 12 + (12 if meridiem == "p" else 0)
    elif hour > 23 or match.group("minute") is None:
        return None
    return time(hour, minute)


def normalize_time_text(value: str | None) -> str:
    return (value or "").strip().replace(".", ":")


def to_display_timezone(value: datetime) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(LONDON_TZ)


def format_display_date(value: date, locale: str | None) -> str:
    months = copy_for(locale)["months"]
    return f"{value.day} {months[value.month - 1]} {value.year}"


def format_clock_time(value: time | datetime) -> str:
    hour = value.hour % 12 or 12
    suffix = "pm" if value.hour >= 12 else "am"
    if value.minute:
        return f"{hour}:{value.minute:02d}{suffix}"
    return f"{hour}{suffix}"


def format_last_updated(value: datetime, locale: str | None) -> str:
    local = to_display_timezone(value)
    connector = copy_for(locale)["at"]
    return f"{format_display_date(local.date(), locale)} {connector} {format_clock_time(local)}"


def format_duration(start: datetime | None, end: datetime | None, locale: str | None) -> str:
    if start is None or end is None or end <= start:
        return ""
    units = copy_for(locale)["durationUnits"]
    hours, minutes = divmod(int((end - start).total_seconds() // 60), 60)
    parts: list[str] = []
    if hours:
        parts.append(f"{hours} {units['hour'] if hours == 1 else units['hours']}")
    if minutes:
        parts.append(f"{minutes} {units['minute'] if minutes == 1 else units['minutes']}")
    return " ".join(parts)


def calculate_age(date_of_birth: date, on: date) -> int | None:
    if date_of_birth > on:
        return None
    age = on.year - date_of_birth.year
    if (on.month, on.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


__all__ = [
    "LONDON_TZ",
    "calculate_age",
    "format_clock_time",
    "format_display_date",
    "format_duration",
    "format_last_updated",
    "normalize_time_text",
    "parse_clock_time",
    "parse_date_of_birth",
    "parse_day_month_year",
    "parse_iso_datetime",
    "to_display_timezone",
]
