"""
Mock data standing in for the scheduling backend.

Appointments are laid out relative to the Monday of a reference week so the
viewer always has something to show around "today".
"""
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Tuple

from ....application.ports.appointments_repo import Appointment, AppointmentType, Doctor, Patient

MOCK_DOCTORS: List[Doctor] = [
    Doctor(id="doctor-1", name="Sarah Chen", specialty="Family Medicine"),
    Doctor(id="doctor-2", name="Michael Rodriguez", specialty="Cardiology"),
    Doctor(id="doctor-3", name="Emily Johnson", specialty="Pediatrics"),
]

MOCK_PATIENTS: List[Patient] = [
    Patient(id="patient-1", name="John Smith", email="john.smith@email.com", phone="(555) 123-4567"),
    Patient(id="patient-2", name="Jane Doe", email="jane.doe@email.com", phone="(555) 234-5678"),
    Patient(id="patient-3", name="Robert Brown", email="robert.b@email.com", phone="(555) 345-6789"),
    Patient(id="patient-4", name="Maria Garcia", email="maria.g@email.com", phone="(555) 456-7890"),
    Patient(id="patient-5", name="David Lee", email="david.lee@email.com", phone="(555) 567-8901"),
    Patient(id="patient-6", name="Lisa Wang", email="lisa.w@email.com", phone="(555) 678-9012"),
]

# (doctor, patient, type, weekday offset from Monday, "HH:MM" start, minutes, notes)
_SCHEDULE: List[Tuple[str, str, AppointmentType, int, str, int, Optional[str]]] = [
    ("doctor-1", "patient-1", AppointmentType.CHECKUP, 0, "09:00", 30, "Annual physical"),
    ("doctor-1", "patient-2", AppointmentType.CONSULTATION, 0, "10:00", 60, "Persistent headaches"),
    ("doctor-1", "patient-3", AppointmentType.FOLLOW_UP, 0, "11:30", 30, None),
    ("doctor-1", "patient-4", AppointmentType.PROCEDURE, 0, "14:00", 90, "Minor skin lesion removal"),
    ("doctor-1", "patient-5", AppointmentType.CHECKUP, 1, "08:30", 30, None),
    ("doctor-1", "patient-6", AppointmentType.CONSULTATION, 1, "13:15", 45, "Sleep issues"),
    ("doctor-1", "patient-1", AppointmentType.FOLLOW_UP, 2, "09:30", 30, "Lab results review"),
    ("doctor-1", "patient-2", AppointmentType.CHECKUP, 3, "16:00", 30, None),
    ("doctor-1", "patient-3", AppointmentType.CONSULTATION, 4, "10:45", 60, None),
    ("doctor-2", "patient-4", AppointmentType.CONSULTATION, 0, "09:00", 60, "Chest pain evaluation"),
    ("doctor-2", "patient-5", AppointmentType.PROCEDURE, 1, "10:00", 120, "Stress test"),
    ("doctor-2", "patient-6", AppointmentType.FOLLOW_UP, 2, "15:30", 30, None),
    ("doctor-2", "patient-1", AppointmentType.CHECKUP, 4, "08:00", 30, "Blood pressure check"),
    ("doctor-3", "patient-2", AppointmentType.CHECKUP, 0, "08:30", 30, "Well-child visit"),
    ("doctor-3", "patient-3", AppointmentType.CONSULTATION, 2, "11:00", 45, None),
    ("doctor-3", "patient-4", AppointmentType.FOLLOW_UP, 3, "14:30", 30, "Vaccination follow-up"),
]


def build_mock_appointments(reference_date: Optional[date] = None) -> List[Appointment]:
    """
    Build the mock appointments for the week containing `reference_date` (default: today).
    """
    reference_date = reference_date or date.today()
    monday = reference_date - timedelta(days=reference_date.weekday())

    appointments = []
    for index, (doctor_id, patient_id, appt_type, offset, start, minutes, notes) in enumerate(_SCHEDULE, start=1):
        hour, minute = map(int, start.split(":"))
        start_dt = datetime.combine(monday + timedelta(days=offset), time(hour, minute))
        appointments.append(
            Appointment(
                id=f"appt-{index}",
                doctor_id=doctor_id,
                patient_id=patient_id,
                type=appt_type,
                start_time=start_dt,
                end_time=start_dt + timedelta(minutes=minutes),
                notes=notes,
            )
        )
    return appointments
