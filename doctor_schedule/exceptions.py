from typing import Any, Optional

FETCH_FAILED_MESSAGE = "Failed to fetch appointments"


class ScheduleError(Exception):
    """Base class for errors surfaced to the schedule presentation layer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AppointmentsFetchError(ScheduleError):
    """Generic, user-facing failure of an appointments fetch; the real cause is chained."""

    def __init__(self, message: str = FETCH_FAILED_MESSAGE):
        super().__init__(message)


def create_error_response(error_message: str) -> dict:
    """Create a standardized error response"""
    return {
        "success": False,
        "data": None,
        "error": error_message
    }


def create_success_response(data: Optional[Any]) -> dict:
    """Create a standardized success response"""
    return {
        "success": True,
        "data": data,
        "error": None
    }
