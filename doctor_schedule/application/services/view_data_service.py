"""
Appointments View Data

Fetch boundary between the schedule screens and the appointments service.
Each request moves the adapter through idle -> loading -> (success | error)
and runs as an asyncio task on the caller's loop, as if a backend round
trip existed. Requests carry a generation id; a result whose id is no longer
current is dropped, so only the latest request ever reaches the state.
"""

import asyncio
import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, List, Optional

from .appointments_service import AppointmentsService
from ..ports.appointments_repo import Appointment, Doctor
from ...exceptions import (
    AppointmentsFetchError,
    ScheduleError,
    create_error_response,
    create_success_response,
)
from ...time_slots import DateLike, get_week_end, get_week_start

logger = logging.getLogger(__name__)


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class AppointmentsQuery:
    doctor_id: str
    date: DateLike
    start_date: Optional[DateLike] = None
    end_date: Optional[DateLike] = None

    @property
    def is_range(self) -> bool:
        return self.start_date is not None and self.end_date is not None


@dataclass(frozen=True)
class AppointmentsViewState:
    appointments: List[Appointment] = field(default_factory=list)
    doctor: Optional[Doctor] = None
    status: FetchStatus = FetchStatus.IDLE
    error: Optional[ScheduleError] = None
    request_id: int = 0

    @property
    def loading(self) -> bool:
        return self.status == FetchStatus.LOADING

    def to_response(self) -> dict:
        if self.error is not None:
            return create_error_response(self.error.message)
        return create_success_response({
            "doctor": self.doctor,
            "appointments": self.appointments,
            "loading": self.loading,
        })


Listener = Callable[[AppointmentsViewState], None]


class AppointmentsViewAdapter:
    def __init__(self, service: AppointmentsService, latency_seconds: float = 0.0) -> None:
        self.service = service
        self.latency_seconds = latency_seconds
        self._state = AppointmentsViewState()
        self._query: Optional[AppointmentsQuery] = None
        self._generation = 0
        self._task: Optional["asyncio.Task[AppointmentsViewState]"] = None
        self._listeners: List[Listener] = []

    @property
    def state(self) -> AppointmentsViewState:
        return self._state

    @property
    def query(self) -> Optional[AppointmentsQuery]:
        return self._query

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback for every state change; returns the unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def request(self, query: AppointmentsQuery) -> "asyncio.Task[AppointmentsViewState]":
        """
        Dispatch a fetch for `query` and return immediately with the state in `loading`.

        Must be called from a running event loop. Repeating the current query
        returns the existing task instead of starting a new fetch.
        """
        if query == self._query and self._task is not None:
            return self._task

        loop = asyncio.get_running_loop()
        doctor = self.service.get_doctor_by_id(query.doctor_id)

        self._generation += 1
        request_id = self._generation
        self._query = query
        # Register the task before notifying listeners
        task = loop.create_task(self._fetch(request_id, query))
        self._task = task
        logger.debug("Dispatching appointments request %d: %s", request_id, query)

        self._set_state(AppointmentsViewState(
            appointments=[],
            doctor=doctor,
            status=FetchStatus.LOADING,
            error=None,
            request_id=request_id,
        ))
        return task

    async def load(self, query: AppointmentsQuery) -> AppointmentsViewState:
        await self.request(query)
        return self._state

    async def load_day(self, doctor_id: str, day: DateLike) -> AppointmentsViewState:
        return await self.load(AppointmentsQuery(doctor_id=doctor_id, date=day))

    async def load_week(self, doctor_id: str, day: DateLike) -> AppointmentsViewState:
        return await self.load(AppointmentsQuery(
            doctor_id=doctor_id,
            date=day,
            start_date=get_week_start(day),
            end_date=get_week_end(day),
        ))

    def _run_query(self, query: AppointmentsQuery) -> List[Appointment]:
        if query.is_range:
            found = self.service.get_appointments_by_doctor_and_date_range(
                query.doctor_id, query.start_date, query.end_date
            )
        else:
            found = self.service.get_appointments_by_doctor_and_date(query.doctor_id, query.date)
        return self.service.sort_appointments_by_time(found)

    async def _fetch(self, request_id: int, query: AppointmentsQuery) -> AppointmentsViewState:
        try:
            # Always yield once so the caller observes `loading`
            await asyncio.sleep(self.latency_seconds)
            appointments = self._run_query(query)
        except Exception as exc:
            if request_id != self._generation:
                logger.debug("Ignoring failure of stale appointments request %d", request_id)
                return self._state
            logger.exception("Appointments request %d failed for doctor %s", request_id, query.doctor_id)
            error = AppointmentsFetchError()
            error.__cause__ = exc
            self._set_state(replace(self._state, appointments=[], status=FetchStatus.ERROR, error=error))
            return self._state

        if request_id != self._generation:
            logger.debug("Discarding stale appointments result %d (current %d)", request_id, self._generation)
            return self._state

        self._set_state(replace(self._state, appointments=appointments, status=FetchStatus.SUCCESS))
        return self._state

    def _set_state(self, state: AppointmentsViewState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
