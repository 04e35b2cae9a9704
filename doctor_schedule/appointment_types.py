# Display configuration per appointment type (label + card color)
from dataclasses import dataclass
from typing import Dict, Union

from .application.ports.appointments_repo import AppointmentType


@dataclass(frozen=True)
class AppointmentTypeConfig:
    label: str
    color: str


APPOINTMENT_TYPE_CONFIG: Dict[AppointmentType, AppointmentTypeConfig] = {
    AppointmentType.CHECKUP: AppointmentTypeConfig(label="Checkup", color="#3b82f6"),
    AppointmentType.CONSULTATION: AppointmentTypeConfig(label="Consultation", color="#10b981"),
    AppointmentType.FOLLOW_UP: AppointmentTypeConfig(label="Follow-up", color="#f59e0b"),
    AppointmentType.PROCEDURE: AppointmentTypeConfig(label="Procedure", color="#8b5cf6"),
}


def get_type_config(appointment_type: Union[AppointmentType, str]) -> AppointmentTypeConfig:
    """Look up label/color for a type; raises ValueError for unknown type strings."""
    return APPOINTMENT_TYPE_CONFIG[AppointmentType(appointment_type)]
