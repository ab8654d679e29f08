from .user import User, Role
from .workout import Workout
from .events import Event
from .event_registrations import EventRegistration
from .progress_snapshot import ProgressSnapshot

__all__ = [
    "User", "Role",
    "Workout",
    "Event", "EventRegistration",
    "ProgressSnapshot",
]
