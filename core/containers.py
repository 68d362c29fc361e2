from typing import AsyncIterator

import httpx
from dependency_injector import containers, providers

from config.app_settings import settings
from core.cache import Cache
from core.services.internal.auth_service import AuthService
from core.services.internal.profile_service import ProfileService
from core.services.internal.workout_log_service import WorkoutLogService


def build_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.API_TIMEOUT,
        follow_redirects=True,
        limits=httpx.Limits(
            max_connections=settings.API_MAX_CONNECTIONS,
            max_keepalive_connections=settings.API_MAX_KEEPALIVE_CONNECTIONS,
        ),
    )


async def http_client_resource() -> AsyncIterator[httpx.AsyncClient]:
    client = build_http_client()
    try:
        yield client
    finally:
        await client.aclose()


class App(containers.DeclarativeContainer):
    http_client = providers.Resource(http_client_resource)

    auth_service = providers.Factory(AuthService, client=http_client, settings=settings)
    profile_service = providers.Factory(ProfileService, client=http_client, settings=settings)
    workout_log_service = providers.Factory(WorkoutLogService, client=http_client, settings=settings)
    draft_cache = providers.Object(Cache.drafts)


_container: App | None = None


def create_container() -> App:
    return App()


def set_container(container: App) -> None:
    global _container
    _container = container


def get_container() -> App:
    if _container is None:
        raise RuntimeError("Container is not initialized")
    return _container
