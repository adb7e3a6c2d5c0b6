"""Calendar helpers. "Today" is evaluated in the configured server timezone."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from imara.config import get_settings


def get_timezone() -> tzinfo:
    name = get_settings().timezone
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def now() -> datetime:
    return datetime.now(get_timezone())


def today() -> date:
    """Current calendar date in the configured timezone."""
    return now().date()


def days_between(earlier: date, later: date) -> int:
    """Whole calendar days from ``earlier`` to ``later``."""
    return (later - earlier).days


def window_start(anchor: date, days: int) -> date:
    """First date included in a trailing window of ``days`` ending at ``anchor``.

    The window holds exactly ``days`` dates, ``anchor`` included.
    """
    return anchor - timedelta(days=days - 1)
