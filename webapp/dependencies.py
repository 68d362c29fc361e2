import inspect
from typing import Any

from dependency_injector import providers
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.containers import get_container
from core.exceptions import NotAuthenticatedError
from core.services.internal import AuthService, ProfileService, WorkoutLogService
from webapp.schemas import UserContext

bearer_scheme = HTTPBearer(auto_error=False)


async def resolve(provider: providers.Provider, **kwargs: Any) -> Any:
    service = provider(**kwargs)
    if inspect.isawaitable(service):
        service = await service
    return service


async def get_auth_service() -> AuthService:
    return await resolve(get_container().auth_service)


async def optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserContext | None:
    if credentials is None or not credentials.credentials:
        return None
    user = await auth_service.get_user(credentials.credentials)
    if user is None:
        return None
    return UserContext(user=user, access_token=credentials.credentials)


async def current_user(context: UserContext | None = Depends(optional_user)) -> UserContext:
    if context is None:
        raise NotAuthenticatedError()
    return context


async def get_profile_service(context: UserContext = Depends(current_user)) -> ProfileService:
    return await resolve(get_container().profile_service, access_token=context.access_token)


async def get_workout_log_service(context: UserContext = Depends(current_user)) -> WorkoutLogService:
    return await resolve(get_container().workout_log_service, access_token=context.access_token)


def get_draft_cache() -> Any:
    return get_container().draft_cache()
