import os
from types import SimpleNamespace

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("BAAS_URL", "http://baas.test")
os.environ.setdefault("BAAS_ANON_KEY", "anon-key")
os.environ.setdefault("PUBLIC_URL", "http://testserver")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import httpx
import pytest
from dependency_injector import providers

from core.containers import create_container, set_container
from core.services.internal import AuthService, ProfileService, WorkoutLogService
from tests.fakes import VALID_TOKEN, FakeAuthService, FakeDraftCache, FakeProfileService, FakeWorkoutLogStore


@pytest.fixture
def api_settings() -> SimpleNamespace:
    return SimpleNamespace(
        BAAS_URL="http://baas.test",
        BAAS_ANON_KEY="anon-key",
        BAAS_REST_URL=None,
        BAAS_AUTH_URL=None,
        API_MAX_RETRIES=0,
        API_RETRY_INITIAL_DELAY=0.0,
        API_RETRY_BACKOFF_FACTOR=2.0,
        API_RETRY_MAX_DELAY=0.0,
        API_TIMEOUT=5,
    )


@pytest.fixture
def http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient()


@pytest.fixture
def auth_service(http_client, api_settings) -> AuthService:
    return AuthService(http_client, api_settings)


@pytest.fixture
def profile_service(http_client, api_settings) -> ProfileService:
    return ProfileService(http_client, api_settings, access_token=VALID_TOKEN)


@pytest.fixture
def workout_log_service(http_client, api_settings) -> WorkoutLogService:
    return WorkoutLogService(http_client, api_settings, access_token=VALID_TOKEN)


@pytest.fixture
def fake_store() -> FakeWorkoutLogStore:
    return FakeWorkoutLogStore()


@pytest.fixture
def fake_drafts() -> FakeDraftCache:
    return FakeDraftCache()


@pytest.fixture
def fake_auth() -> FakeAuthService:
    return FakeAuthService()


@pytest.fixture
def fake_profiles() -> FakeProfileService:
    return FakeProfileService()


@pytest.fixture
def image_transport() -> httpx.MockTransport:
    return httpx.MockTransport(lambda request: httpx.Response(404))


@pytest.fixture
def container(fake_auth, fake_profiles, fake_store, fake_drafts, image_transport):
    app_container = create_container()
    app_container.http_client.override(providers.Object(httpx.AsyncClient(transport=image_transport)))
    app_container.auth_service.override(providers.Object(fake_auth))
    app_container.profile_service.override(providers.Object(fake_profiles))
    app_container.workout_log_service.override(providers.Object(fake_store))
    app_container.draft_cache.override(providers.Object(fake_drafts))
    set_container(app_container)
    yield app_container
    app_container.reset_override()
