from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Dict, List, Optional, Sequence

from .appointments_service import AppointmentsService
from .view_data_service import AppointmentsQuery
from ..ports.appointments_repo import Appointment, Doctor
from ...appointment_types import get_type_config
from ...formatting import (
    format_date_for_header,
    format_day_column,
    format_time_12h,
    format_week_range_for_header,
    get_current_time_percentage,
)
from ...schemas.schedule.schedule import (
    AppointmentCardView,
    DayViewResponse,
    SlotAppointmentView,
    SlotPositionView,
    SlotRowView,
    WeekDayColumn,
    WeekViewResponse,
)
from ...time_slots import (
    DateLike,
    calculate_appointment_position,
    generate_time_slots,
    get_appointments_for_day,
    get_appointments_for_slot,
    get_week_days,
    get_week_end,
    get_week_start,
    is_same_day,
)

EMPTY_DAY_MESSAGE = "No appointments scheduled for this day"
EMPTY_WEEK_MESSAGE = "No appointments scheduled for this week"


class CalendarView(str, Enum):
    DAY = "day"
    WEEK = "week"


def doctor_line(doctor: Optional[Doctor]) -> Optional[str]:
    if not doctor:
        return None
    return f"Dr. {doctor.name} - {doctor.specialty}"


def shift_date(current: DateLike, view: CalendarView, step: int) -> DateLike:
    """Move one day (day view) or one week (week view) per step; negative steps go back."""
    days = 1 if CalendarView(view) == CalendarView.DAY else 7
    return current + timedelta(days=days * step)


def today() -> date:
    return date.today()


def query_for_view(doctor_id: str, day: DateLike, view: CalendarView) -> AppointmentsQuery:
    if CalendarView(view) == CalendarView.WEEK:
        return AppointmentsQuery(
            doctor_id=doctor_id,
            date=day,
            start_date=get_week_start(day),
            end_date=get_week_end(day),
        )
    return AppointmentsQuery(doctor_id=doctor_id, date=day)


@dataclass
class ScheduleViewService:
    """Headless day/week view models built from the slot engine."""
    appointments_service: AppointmentsService

    def build_card(self, appointment: Appointment, compact: bool = False) -> Optional[AppointmentCardView]:
        populated = self.appointments_service.get_populated_appointment(appointment)
        if not populated:
            return None

        type_config = get_type_config(populated.type)
        duration = populated.duration_minutes
        return AppointmentCardView(
            id=populated.id,
            patient_name=populated.patient.name,
            type=populated.type.value,
            type_label=type_config.label,
            color=type_config.color,
            start_time=populated.start_time,
            end_time=populated.end_time,
            time_label=format_time_12h(populated.start_time),
            duration_minutes=duration,
            title=f"{populated.patient.name} - {type_config.label} ({duration} min)",
            notes=None if compact else populated.notes,
            compact=compact,
        )

    def _slot_rows(self, appointments: Sequence[Appointment], day: DateLike, compact: bool) -> List[SlotRowView]:
        cards: Dict[str, Optional[AppointmentCardView]] = {}
        rows = []

        for slot in generate_time_slots(day):
            overlapping = get_appointments_for_slot(appointments, slot.start, slot.end)
            entries = []
            for appointment in overlapping:
                if appointment.id not in cards:
                    cards[appointment.id] = self.build_card(appointment, compact=compact)
                card = cards[appointment.id]
                if card is None:
                    continue
                position = calculate_appointment_position(
                    appointment.start_time, appointment.end_time, slot.start, slot.end
                )
                entries.append(SlotAppointmentView(
                    card=card,
                    position=SlotPositionView(top=position.top, height=position.height),
                    starts_in_slot=slot.start <= appointment.start_time < slot.end,
                ))

            rows.append(SlotRowView(
                start=slot.start,
                end=slot.end,
                label=slot.label,
                appointments=entries,
                is_available=not overlapping,
            ))
        return rows

    def build_day_view(
        self,
        appointments: Sequence[Appointment],
        doctor: Optional[Doctor],
        day: DateLike,
        now: Optional[datetime] = None,
    ) -> DayViewResponse:
        now = now or datetime.now()
        is_empty = len(appointments) == 0
        return DayViewResponse(
            day=day.date() if isinstance(day, datetime) else day,
            header=format_date_for_header(day),
            doctor_line=doctor_line(doctor),
            slots=self._slot_rows(appointments, day, compact=False),
            appointment_count=len(appointments),
            is_empty=is_empty,
            empty_message=EMPTY_DAY_MESSAGE if is_empty else None,
            current_time_percentage=get_current_time_percentage(now) if is_same_day(now, day) else None,
        )

    def build_week_view(
        self,
        appointments: Sequence[Appointment],
        doctor: Optional[Doctor],
        week_start: DateLike,
    ) -> WeekViewResponse:
        week_days = get_week_days(get_week_start(week_start))
        columns = []
        for day in week_days:
            weekday_label, date_label = format_day_column(day)
            columns.append(WeekDayColumn(
                day=day.date(),
                weekday_label=weekday_label,
                date_label=date_label,
                slots=self._slot_rows(get_appointments_for_day(appointments, day), day, compact=True),
            ))

        is_empty = len(appointments) == 0
        return WeekViewResponse(
            week_start=week_days[0].date(),
            week_end=week_days[-1].date(),
            header=format_week_range_for_header(week_days[0], week_days[-1]),
            doctor_line=doctor_line(doctor),
            slot_labels=[slot.label for slot in generate_time_slots(week_days[0])],
            days=columns,
            appointment_count=len(appointments),
            is_empty=is_empty,
            empty_message=EMPTY_WEEK_MESSAGE if is_empty else None,
        )
