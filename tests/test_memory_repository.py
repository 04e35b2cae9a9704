from datetime import date

from doctor_schedule.appointment_types import APPOINTMENT_TYPE_CONFIG, get_type_config
from doctor_schedule.application.ports.appointments_repo import AppointmentType
from doctor_schedule.application.services.appointments_service import AppointmentsService
from doctor_schedule.infrastructure.persistence.memory.appointments_repository_memory import seed_repository


def test_seeded_repository_is_consistent():
    repo = seed_repository(date(2024, 1, 17))
    svc = AppointmentsService(repo=repo)
    appointments = repo.list_appointments()

    assert len(repo.list_doctors()) == 3
    assert appointments
    for appt in appointments:
        assert appt.start_time < appt.end_time
        assert date(2024, 1, 15) <= appt.start_time.date() <= date(2024, 1, 21)
        assert svc.get_populated_appointment(appt) is not None


def test_seed_is_deterministic_for_reference_date():
    first = seed_repository(date(2024, 1, 15)).list_appointments()
    second = seed_repository(date(2024, 1, 19)).list_appointments()
    assert first == second


def test_list_returns_copies():
    repo = seed_repository(date(2024, 1, 15))
    listed = repo.list_appointments()
    listed.clear()
    assert repo.list_appointments()


def test_day_query_on_seed():
    svc = AppointmentsService(repo=seed_repository(date(2024, 1, 15)))
    monday = svc.get_appointments_by_doctor_and_date("doctor-1", date(2024, 1, 15))
    assert [a.start_time.strftime("%H:%M") for a in monday] == ["09:00", "10:00", "11:30", "14:00"]


def test_every_type_has_display_config():
    assert set(APPOINTMENT_TYPE_CONFIG) == set(AppointmentType)
    assert get_type_config("follow-up").label == "Follow-up"
