"""Display formatting for calendar headers, slot labels and the current-time marker."""
from datetime import date, datetime, time
from typing import Optional, Tuple, Union

DateLike = Union[date, datetime]

# Visible timeline window, kept in sync with time_slots
TIMELINE_START = time(8, 0)
TIMELINE_END = time(18, 0)


def format_time_12h(value: Union[datetime, time]) -> str:
    """Convert a wall-clock time to "8:00 AM" / "12:30 PM"."""
    hour, minute = value.hour, value.minute
    period = "AM" if hour < 12 else "PM"
    hour_12 = hour % 12
    hour_12 = 12 if hour_12 == 0 else hour_12
    return f"{hour_12}:{minute:02d} {period}"


def format_date_for_header(day: DateLike) -> str:
    # e.g. "Monday, January 15, 2024"
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


def _short_date(day: DateLike) -> str:
    return f"{day:%b} {day.day}"


def format_week_range_for_header(week_start: DateLike, week_end: DateLike) -> str:
    """
    Format a week range for the calendar header.

    The year is printed once when both ends share it ("Jan 15 - Jan 21, 2024"),
    otherwise on both ends ("Dec 30, 2024 - Jan 5, 2025").
    """
    end_formatted = f"{_short_date(week_end)}, {week_end.year}"
    if week_start.year == week_end.year:
        return f"{_short_date(week_start)} - {end_formatted}"
    return f"{_short_date(week_start)}, {week_start.year} - {end_formatted}"


def format_day_column(day: DateLike) -> Tuple[str, str]:
    """Week grid column header: ("Mon", "Jan 15")."""
    return f"{day:%a}", _short_date(day)


def get_current_time_percentage(now: Optional[datetime] = None) -> float:
    """
    Position of `now` inside the 08:00-18:00 timeline, as a percentage.

    Clamped to [0, 100] so the marker sticks to the edges outside working hours.
    """
    now = now or datetime.now()
    day_start = datetime.combine(now.date(), TIMELINE_START)
    day_end = datetime.combine(now.date(), TIMELINE_END)
    total = (day_end - day_start).total_seconds()
    elapsed = (now - day_start).total_seconds()
    return max(0.0, min(100.0, elapsed / total * 100))
