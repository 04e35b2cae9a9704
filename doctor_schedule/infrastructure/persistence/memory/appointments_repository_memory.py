import logging
from datetime import date
from typing import Dict, Iterable, List, Optional

from ....application.ports.appointments_repo import (
    Appointment,
    AppointmentsRepository,
    Doctor,
    Patient,
)
from .mock_data import MOCK_DOCTORS, MOCK_PATIENTS, build_mock_appointments

logger = logging.getLogger(__name__)


class InMemoryAppointmentsRepository(AppointmentsRepository):
    """Read-only store seeded once at construction."""

    def __init__(self, doctors: Iterable[Doctor], patients: Iterable[Patient], appointments: Iterable[Appointment]) -> None:
        self._doctors: Dict[str, Doctor] = {d.id: d for d in doctors}
        self._patients: Dict[str, Patient] = {p.id: p for p in patients}
        self._appointments = tuple(appointments)

    def list_appointments(self) -> List[Appointment]:
        return list(self._appointments)

    def list_doctors(self) -> List[Doctor]:
        return list(self._doctors.values())

    def get_doctor(self, doctor_id: str) -> Optional[Doctor]:
        return self._doctors.get(doctor_id)

    def get_patient(self, patient_id: str) -> Optional[Patient]:
        return self._patients.get(patient_id)


def seed_repository(reference_date: Optional[date] = None) -> InMemoryAppointmentsRepository:
    repo = InMemoryAppointmentsRepository(
        doctors=MOCK_DOCTORS,
        patients=MOCK_PATIENTS,
        appointments=build_mock_appointments(reference_date),
    )
    logger.info(
        "Seeded in-memory schedule: %d doctors, %d patients, %d appointments",
        len(repo.list_doctors()), len(MOCK_PATIENTS), len(repo.list_appointments()),
    )
    return repo
