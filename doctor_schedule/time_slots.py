"""
Time Slot Engine

Pure functions behind the day timeline and the week grid:
- Fixed slot generation (08:00-18:00, 30 minute slots)
- Half-open interval overlap between appointments and slots
- Sub-slot positioning (percentages of one slot)
- Calendar-day filtering and Monday-anchored week helpers

All datetimes are naive local wall-clock values. Slot generation uses plain
wall-clock arithmetic, so DST transition days are not special-cased: the
slots of such a day are still 08:00, 08:30, ... even if an hour was skipped
or repeated overnight.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import List, Protocol, Sequence, TypeVar

from .formatting import DateLike, format_time_12h

WORKDAY_START_HOUR = 8
WORKDAY_END_HOUR = 18
SLOT_MINUTES = 30

# Inclusive end-of-day boundary, millisecond precision
END_OF_DAY = time(23, 59, 59, 999000)


class Timed(Protocol):
    start_time: datetime
    end_time: datetime


T = TypeVar("T", bound=Timed)
S = TypeVar("S")


@dataclass(frozen=True)
class TimeSlot:
    start: datetime
    end: datetime
    label: str


@dataclass(frozen=True)
class SlotPosition:
    """Percentages of one slot. `height` is intentionally not clamped to 100 - top."""
    top: float
    height: float


def _to_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_day(value: DateLike) -> datetime:
    return datetime.combine(_to_date(value), time.min)


def end_of_day(value: DateLike) -> datetime:
    return datetime.combine(_to_date(value), END_OF_DAY)


def is_same_day(a: DateLike, b: DateLike) -> bool:
    return _to_date(a) == _to_date(b)


def generate_time_slots(reference_date: DateLike) -> List[TimeSlot]:
    """
    Generate the fixed working-day slots for the calendar day of `reference_date`.

    Args:
        reference_date: date or datetime; only year/month/day are used

    Returns:
        list[TimeSlot]: 20 contiguous slots, ascending, [08:00, 18:00)
    """
    day = _to_date(reference_date)
    step = timedelta(minutes=SLOT_MINUTES)
    current = datetime.combine(day, time(WORKDAY_START_HOUR))
    window_end = datetime.combine(day, time(WORKDAY_END_HOUR))

    slots = []
    while current < window_end:
        slots.append(TimeSlot(start=current, end=current + step, label=format_time_12h(current)))
        current += step
    return slots


def appointment_overlaps_slot(
    appointment_start: datetime,
    appointment_end: datetime,
    slot_start: datetime,
    slot_end: datetime,
) -> bool:
    # Half-open intervals: touching ends do not overlap
    return appointment_start < slot_end and appointment_end > slot_start


def get_appointments_for_slot(appointments: Sequence[T], slot_start: datetime, slot_end: datetime) -> List[T]:
    """Appointments intersecting [slot_start, slot_end), in input order."""
    return [
        a for a in appointments
        if appointment_overlaps_slot(a.start_time, a.end_time, slot_start, slot_end)
    ]


def get_appointments_for_day(appointments: Sequence[T], day: DateLike) -> List[T]:
    """
    Appointments whose start falls on the calendar day of `day`.

    An appointment running past midnight stays on its start day only.
    """
    target = _to_date(day)
    return [a for a in appointments if a.start_time.date() == target]


def calculate_appointment_position(
    appointment_start: datetime,
    appointment_end: datetime,
    slot_start: datetime,
    slot_end: datetime,
) -> SlotPosition:
    """
    Where an appointment sits relative to one slot, in percent of the slot duration.

    top    = max(0, slot_start - appointment_start) / slot_duration * 100
    height = (appointment_end - appointment_start) / slot_duration * 100

    Multi-slot appointments get a height above 100; clipping per row or
    spanning rows is left to the renderer.
    """
    slot_duration = (slot_end - slot_start).total_seconds()
    before_slot = max(0.0, (slot_start - appointment_start).total_seconds())
    appointment_duration = (appointment_end - appointment_start).total_seconds()
    return SlotPosition(
        top=before_slot / slot_duration * 100,
        height=appointment_duration / slot_duration * 100,
    )


def get_week_start(day: DateLike) -> datetime:
    """Monday 00:00 of the week containing `day`."""
    d = _to_date(day)
    return start_of_day(d - timedelta(days=d.weekday()))


def get_week_end(day: DateLike) -> datetime:
    """Sunday 23:59:59.999 of the week containing `day`."""
    d = _to_date(day)
    return end_of_day(d + timedelta(days=6 - d.weekday()))


def get_week_days(week_start: S) -> List[S]:
    # Monday..Sunday when week_start is a Monday; keeps the input's type and time part
    return [week_start + timedelta(days=i) for i in range(7)]
