from core.services.internal.api_client import APIClient, APIClientHTTPError, APIClientTransportError
from core.services.internal.auth_service import AuthService
from core.services.internal.profile_service import ProfileService
from core.services.internal.table_client import TableClient
from core.services.internal.workout_log_service import WorkoutLogService

__all__ = [
    "APIClient",
    "APIClientHTTPError",
    "APIClientTransportError",
    "AuthService",
    "ProfileService",
    "TableClient",
    "WorkoutLogService",
]
