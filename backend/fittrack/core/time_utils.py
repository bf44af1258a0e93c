import calendar
import math
from datetime import date, datetime, timedelta


def monday_of(d: date) -> date:
    # Monday = 0, Sunday = 6
    return d - timedelta(days=d.weekday())


def week_bounds(d: date) -> tuple[date, date]:
    """Return (monday, sunday) of the week containing `d`."""
    start = monday_of(d)
    return start, start + timedelta(days=6)


def month_bounds(d: date) -> tuple[date, date]:
    """Return (first, last) day of the calendar month containing `d`."""
    last_day = calendar.monthrange(d.year, d.month)[1]
    return d.replace(day=1), d.replace(day=last_day)


def days_in_range(start: date, end: date) -> list[date]:
    """Every day in [start, end], oldest first. Empty if start > end."""
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def percentage_of(value: float, target: float) -> int:
    """
    Percentage of `target` reached by `value`, capped at 100.
    Example: 450 of 1000 -> 45, 1200 of 1000 -> 100
    """
    if target <= 0:
        raise ValueError("target must be > 0")
    return min(100, round_half_up(value / target * 100))


def hhmm_to_time(hhmm: str):
    """Parse time strings into datetime.time.

    Accepts common formats:
      - 'HH:MM' (24h)
      - 'HH:MM:SS' (24h)
      - 'H:MM AM/PM' (12h), case-insensitive
      - 'H AM/PM'

    Returns None for empty strings.
    """
    if hhmm is None:
        return None
    s = hhmm.strip()
    if s == "":
        return None

    candidates = [
        "%H:%M",
        "%H:%M:%S",
        "%I:%M %p",
        "%I %p",
    ]
    for fmt in candidates:
        try:
            return datetime.strptime(s, fmt).time()
        except ValueError:
            continue
    raise ValueError("Time must be in formats like 'HH:MM' or '10:00 AM'")


def time_to_hhmm(t) -> str | None:
    """Format datetime.time -> 'HH:MM'. Returns None if t is None."""
    if t is None:
        return None
    return f"{t.hour:02d}:{t.minute:02d}"


def today_in(tz_name: str | None = None) -> date:
    """Current calendar date in `tz_name` ('local' or None for system tz)."""
    if tz_name and tz_name != "local":
        from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
        try:
            return datetime.now(ZoneInfo(tz_name)).date()
        except ZoneInfoNotFoundError:
            return date.today()
    return date.today()


def get_today() -> date:
    """FastAPI dependency: today's date in the configured timezone."""
    from fittrack.core.config import settings
    return today_in(settings.timezone)
