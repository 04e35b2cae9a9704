import asyncio
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .application.services.appointments_service import AppointmentsService
from .application.services.schedule_view_service import ScheduleViewService, today
from .application.services.view_data_service import AppointmentsViewAdapter
from .config import Settings, settings
from .infrastructure.persistence.memory.appointments_repository_memory import (
    InMemoryAppointmentsRepository,
    seed_repository,
)

logger = logging.getLogger(__name__)


@dataclass
class Schedule:
    repo: InMemoryAppointmentsRepository
    appointments: AppointmentsService
    adapter: AppointmentsViewAdapter
    views: ScheduleViewService


def log_level(config: Settings) -> int:
    if config.DEBUG:
        return logging.DEBUG
    return getattr(logging, config.LOG_LEVEL.upper())


def configure_logging(config: Settings) -> None:
    logging.basicConfig(
        level=log_level(config),
        format=config.LOG_FORMAT
    )


def build_schedule(config: Optional[Settings] = None, reference_date: Optional[date] = None) -> Schedule:
    config = config or settings
    repo = seed_repository(reference_date)
    appointments = AppointmentsService(repo=repo)
    return Schedule(
        repo=repo,
        appointments=appointments,
        adapter=AppointmentsViewAdapter(appointments, latency_seconds=config.fetch_latency_seconds),
        views=ScheduleViewService(appointments_service=appointments),
    )


async def _render_today(schedule: Schedule, doctor_id: str) -> str:
    day = today()
    state = await schedule.adapter.load_day(doctor_id, day)
    if state.error is not None:
        logger.error("Could not load schedule for %s: %s", doctor_id, state.error.message)
        return str(state.to_response())
    view = schedule.views.build_day_view(state.appointments, state.doctor, day)
    return view.model_dump_json(indent=2)


def main() -> None:
    configure_logging(settings)
    logger.info("Starting %s %s", settings.APP_NAME, settings.APP_VERSION)
    schedule = build_schedule(settings)
    print(asyncio.run(_render_today(schedule, settings.DEFAULT_DOCTOR_ID)))


if __name__ == "__main__":
    main()
