from datetime import date, datetime, timedelta

from doctor_schedule.application.ports.appointments_repo import (
    Appointment,
    AppointmentType,
    Doctor,
    Patient,
)
from doctor_schedule.application.services.appointments_service import AppointmentsService


def make_appt(appt_id: str, start: datetime, minutes: int = 30, doctor_id: str = "d1", patient_id: str = "p1",
              appt_type: AppointmentType = AppointmentType.CHECKUP) -> Appointment:
    return Appointment(appt_id, doctor_id, patient_id, appt_type, start, start + timedelta(minutes=minutes))


class FakeApptRepo:
    def __init__(self, appointments):
        self.appointments = list(appointments)
        self.doctors = {"d1": Doctor("d1", "Sarah Chen", "Family Medicine"), "d2": Doctor("d2", "Ana Ruiz", "Cardiology")}
        self.patients = {"p1": Patient("p1", "John Smith")}

    def list_appointments(self):
        return list(self.appointments)

    def list_doctors(self):
        return list(self.doctors.values())

    def get_doctor(self, doctor_id):
        return self.doctors.get(doctor_id)

    def get_patient(self, patient_id):
        return self.patients.get(patient_id)


def make_service(*appointments) -> AppointmentsService:
    return AppointmentsService(repo=FakeApptRepo(appointments))


def test_by_doctor_filters_on_doctor_id():
    svc = make_service(
        make_appt("a", datetime(2024, 1, 15, 9)),
        make_appt("b", datetime(2024, 1, 15, 9), doctor_id="d2"),
    )
    assert [a.id for a in svc.get_appointments_by_doctor("d1")] == ["a"]
    assert svc.get_appointments_by_doctor("unknown") == []


def test_by_doctor_and_date_window_is_inclusive():
    last_ms = make_appt("last", datetime(2024, 1, 15, 23, 59, 59, 999000), minutes=10)
    midnight = make_appt("midnight", datetime(2024, 1, 16, 0, 0))
    first = make_appt("first", datetime(2024, 1, 15, 0, 0))
    svc = make_service(last_ms, midnight, first)

    assert [a.id for a in svc.get_appointments_by_doctor_and_date("d1", date(2024, 1, 15))] == ["last", "first"]
    assert [a.id for a in svc.get_appointments_by_doctor_and_date("d1", datetime(2024, 1, 16, 15))] == ["midnight"]


def test_by_doctor_and_date_range_is_closed_on_both_ends():
    start = datetime(2024, 1, 15)
    end = datetime(2024, 1, 21, 23, 59, 59, 999000)
    svc = make_service(
        make_appt("on-start", start),
        make_appt("on-end", end),
        make_appt("before", start - timedelta(minutes=1)),
        make_appt("after", datetime(2024, 1, 22)),
        make_appt("other-doctor", datetime(2024, 1, 16, 9), doctor_id="d2"),
    )
    out = svc.get_appointments_by_doctor_and_date_range("d1", start, end)
    assert [a.id for a in out] == ["on-start", "on-end"]


def test_date_range_accepts_plain_dates():
    svc = make_service(make_appt("a", datetime(2024, 1, 17, 9)), make_appt("b", datetime(2024, 1, 18, 9)))
    out = svc.get_appointments_by_doctor_and_date_range("d1", date(2024, 1, 17), date(2024, 1, 18))
    # a bare end date means midnight, so the 18th at 09:00 is outside
    assert [a.id for a in out] == ["a"]


def test_sort_is_stable_and_returns_copy():
    t = datetime(2024, 1, 15, 10)
    first = make_appt("first", t)
    second = make_appt("second", t)
    earlier = make_appt("earlier", t - timedelta(hours=1))
    original = [first, second, earlier]

    out = AppointmentsService.sort_appointments_by_time(original)

    assert [a.id for a in out] == ["earlier", "first", "second"]
    assert [a.id for a in original] == ["first", "second", "earlier"]
    assert out is not original


def test_populated_appointment():
    appt = make_appt("a", datetime(2024, 1, 15, 9))
    svc = make_service(appt)
    populated = svc.get_populated_appointment(appt)
    assert populated.doctor.name == "Sarah Chen"
    assert populated.patient.name == "John Smith"
    assert populated.start_time == appt.start_time
    assert populated.duration_minutes == 30


def test_populated_appointment_missing_doctor_is_none():
    appt = make_appt("a", datetime(2024, 1, 15, 9), doctor_id="ghost")
    svc = make_service(appt)
    assert svc.get_populated_appointment(appt) is None


def test_populated_appointment_missing_patient_is_none():
    appt = make_appt("a", datetime(2024, 1, 15, 9), patient_id="ghost")
    assert make_service(appt).get_populated_appointment(appt) is None


def test_doctor_lookups():
    svc = make_service()
    assert [d.id for d in svc.get_all_doctors()] == ["d1", "d2"]
    assert svc.get_doctor_by_id("d2").specialty == "Cardiology"
    assert svc.get_doctor_by_id("nope") is None
    assert svc.get_patient_by_id("p1").name == "John Smith"


def test_appointments_overlap():
    a = make_appt("a", datetime(2024, 1, 15, 9), minutes=60)
    b = make_appt("b", datetime(2024, 1, 15, 9, 30))
    c = make_appt("c", datetime(2024, 1, 15, 10))
    assert AppointmentsService.appointments_overlap(a, b) is True
    assert AppointmentsService.appointments_overlap(b, a) is True
    assert AppointmentsService.appointments_overlap(a, c) is False


def test_by_type():
    a = make_appt("a", datetime(2024, 1, 15, 9), appt_type=AppointmentType.PROCEDURE)
    b = make_appt("b", datetime(2024, 1, 15, 10))
    assert AppointmentsService.get_appointments_by_type([a, b], "procedure") == [a]
    assert AppointmentsService.get_appointments_by_type([a, b], AppointmentType.CHECKUP) == [b]
    assert AppointmentsService.get_appointments_by_type([a, b], "surgery") == []


def test_duration_is_derived():
    appt = make_appt("a", datetime(2024, 1, 15, 9), minutes=45)
    assert appt.duration == timedelta(minutes=45)
    assert appt.duration_minutes == 45
