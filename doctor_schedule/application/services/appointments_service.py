import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from ..ports.appointments_repo import (
    Appointment,
    AppointmentsRepository,
    AppointmentType,
    Doctor,
    Patient,
    PopulatedAppointment,
)
from ...time_slots import appointment_overlaps_slot, end_of_day, start_of_day

logger = logging.getLogger(__name__)


def _as_datetime(value: Union[date, datetime]) -> datetime:
    # A bare date bound means midnight of that date
    if isinstance(value, datetime):
        return value
    return start_of_day(value)


@dataclass
class AppointmentsService:
    repo: AppointmentsRepository

    def get_appointments_by_doctor(self, doctor_id: str) -> List[Appointment]:
        return [a for a in self.repo.list_appointments() if a.doctor_id == doctor_id]

    def get_appointments_by_doctor_and_date(self, doctor_id: str, day: Union[date, datetime]) -> List[Appointment]:
        """
        Appointments of a doctor starting within [day 00:00:00.000, day 23:59:59.999].

        This inclusive window backs the day-view query; it is deliberately
        separate from the calendar-day test in time_slots.get_appointments_for_day.
        """
        window_start = start_of_day(day)
        window_end = end_of_day(day)
        return [
            a for a in self.get_appointments_by_doctor(doctor_id)
            if window_start <= a.start_time <= window_end
        ]

    def get_appointments_by_doctor_and_date_range(
        self,
        doctor_id: str,
        start_date: Union[date, datetime],
        end_date: Union[date, datetime],
    ) -> List[Appointment]:
        range_start = _as_datetime(start_date)
        range_end = _as_datetime(end_date)
        return [
            a for a in self.get_appointments_by_doctor(doctor_id)
            if range_start <= a.start_time <= range_end
        ]

    def get_populated_appointment(self, appointment: Appointment) -> Optional[PopulatedAppointment]:
        doctor = self.repo.get_doctor(appointment.doctor_id)
        patient = self.repo.get_patient(appointment.patient_id)
        if not doctor or not patient:
            logger.warning(
                "Cannot populate appointment %s (doctor %s found=%s, patient %s found=%s)",
                appointment.id, appointment.doctor_id, doctor is not None,
                appointment.patient_id, patient is not None,
            )
            return None
        return PopulatedAppointment.from_appointment(appointment, doctor, patient)

    def get_all_doctors(self) -> List[Doctor]:
        return self.repo.list_doctors()

    def get_doctor_by_id(self, doctor_id: str) -> Optional[Doctor]:
        return self.repo.get_doctor(doctor_id)

    def get_patient_by_id(self, patient_id: str) -> Optional[Patient]:
        return self.repo.get_patient(patient_id)

    @staticmethod
    def sort_appointments_by_time(appointments: Sequence[Appointment]) -> List[Appointment]:
        # sorted() is stable and returns a new list
        return sorted(appointments, key=lambda a: a.start_time)

    @staticmethod
    def get_appointments_by_type(
        appointments: Sequence[Appointment],
        appointment_type: Union[AppointmentType, str],
    ) -> List[Appointment]:
        return [a for a in appointments if a.type == appointment_type]

    @staticmethod
    def appointments_overlap(first: Appointment, second: Appointment) -> bool:
        return appointment_overlaps_slot(first.start_time, first.end_time, second.start_time, second.end_time)
