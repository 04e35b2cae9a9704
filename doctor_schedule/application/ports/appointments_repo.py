from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import List, Optional, Protocol


class AppointmentType(str, Enum):
    CHECKUP = "checkup"
    CONSULTATION = "consultation"
    FOLLOW_UP = "follow-up"
    PROCEDURE = "procedure"


@dataclass(frozen=True)
class Doctor:
    id: str
    name: str
    specialty: str


@dataclass(frozen=True)
class Patient:
    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None


@dataclass(frozen=True)
class Appointment:
    id: str
    doctor_id: str
    patient_id: str
    type: AppointmentType
    start_time: datetime
    end_time: datetime
    notes: Optional[str] = None

    @property
    def duration(self) -> timedelta:
        return self.end_time - self.start_time

    @property
    def duration_minutes(self) -> int:
        return round(self.duration.total_seconds() / 60)


@dataclass(frozen=True)
class PopulatedAppointment:
    """An appointment joined with its doctor and patient at read time."""
    id: str
    doctor_id: str
    patient_id: str
    type: AppointmentType
    start_time: datetime
    end_time: datetime
    doctor: Doctor
    patient: Patient
    notes: Optional[str] = None

    @classmethod
    def from_appointment(cls, appointment: Appointment, doctor: Doctor, patient: Patient) -> "PopulatedAppointment":
        return cls(
            id=appointment.id,
            doctor_id=appointment.doctor_id,
            patient_id=appointment.patient_id,
            type=appointment.type,
            start_time=appointment.start_time,
            end_time=appointment.end_time,
            doctor=doctor,
            patient=patient,
            notes=appointment.notes,
        )

    @property
    def duration_minutes(self) -> int:
        return round((self.end_time - self.start_time).total_seconds() / 60)


class AppointmentsRepository(Protocol):
    def list_appointments(self) -> List[Appointment]:
        ...

    def list_doctors(self) -> List[Doctor]:
        ...

    def get_doctor(self, doctor_id: str) -> Optional[Doctor]:
        ...

    def get_patient(self, patient_id: str) -> Optional[Patient]:
        ...
