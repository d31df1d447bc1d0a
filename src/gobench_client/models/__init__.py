from .application import ACTIVE_STATUSES, Application, ApplicationStatus
from .scenario import decode_scenario, encode_scenario

__all__ = [
    "Application",
    "ApplicationStatus",
    "ACTIVE_STATUSES",
    "encode_scenario",
    "decode_scenario",
]
