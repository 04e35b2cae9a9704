# doctor_schedule/schemas/schedule/schedule.py
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date, datetime


class AppointmentCardView(BaseModel):
    id: str
    patient_name: str
    type: str
    type_label: str
    color: str
    start_time: datetime
    end_time: datetime
    time_label: str  # "9:00 AM"
    duration_minutes: int = Field(ge=0)
    title: str  # tooltip: "John Smith - Checkup (30 min)"
    notes: Optional[str] = None
    compact: bool = False


class SlotPositionView(BaseModel):
    top: float
    height: float  # unclamped, may exceed 100 - top


class SlotAppointmentView(BaseModel):
    card: AppointmentCardView
    position: SlotPositionView
    starts_in_slot: bool


class SlotRowView(BaseModel):
    start: datetime
    end: datetime
    label: str
    appointments: List[SlotAppointmentView] = []
    is_available: bool = True


class DayViewResponse(BaseModel):
    day: date
    header: str
    doctor_line: Optional[str] = None
    slots: List[SlotRowView]
    appointment_count: int
    is_empty: bool
    empty_message: Optional[str] = None
    current_time_percentage: Optional[float] = None


class WeekDayColumn(BaseModel):
    day: date
    weekday_label: str  # "Mon"
    date_label: str  # "Jan 15"
    slots: List[SlotRowView]


class WeekViewResponse(BaseModel):
    week_start: date
    week_end: date
    header: str
    doctor_line: Optional[str] = None
    slot_labels: List[str]
    days: List[WeekDayColumn]
    appointment_count: int
    is_empty: bool
    empty_message: Optional[str] = None
