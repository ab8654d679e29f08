from .session import ApiClientError, ApiSession
from .board import WorkoutBoard

__all__ = ["ApiClientError", "ApiSession", "WorkoutBoard"]
