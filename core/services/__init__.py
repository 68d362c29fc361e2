from core.services.internal import AuthService, ProfileService, WorkoutLogService

__all__ = [
    "AuthService",
    "ProfileService",
    "WorkoutLogService",
]
