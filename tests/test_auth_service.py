from unittest.mock import patch

import pytest

from core.exceptions import AuthError, FormValidationError
from core.services.internal.api_client import APIClientHTTPError, APIClientTransportError
from core.services.internal.auth_service import PASSWORD_ALPHABET, PASSWORD_LENGTH, generate_secure_password

USER_PAYLOAD = {"id": "user-1", "email": "athlete@example.com", "user_metadata": {"full_name": "Alex Runner"}}
SESSION_PAYLOAD = {
    "access_token": "access",
    "refresh_token": "refresh",
    "expires_in": 3600,
    "token_type": "bearer",
    "user": USER_PAYLOAD,
}


def test_generated_password_shape():
    password = generate_secure_password()
    assert len(password) == PASSWORD_LENGTH == 16
    assert set(password) <= set(PASSWORD_ALPHABET)


def test_generated_passwords_differ():
    assert len({generate_secure_password() for _ in range(20)}) == 20


@pytest.mark.asyncio
async def test_register_signs_out_new_session(auth_service):
    calls = []

    async def mock_api_request(method, url, data=None, **kwargs):
        calls.append((method, url, data, kwargs))
        if url.endswith("/signup"):
            return 200, SESSION_PAYLOAD
        return 204, None

    with patch.object(auth_service, "_api_request", side_effect=mock_api_request):
        credentials = await auth_service.register("  Alex Runner ", " athlete@example.com ")

    signup, logout = calls
    assert signup[1] == "http://baas.test/auth/v1/signup"
    assert signup[2]["email"] == "athlete@example.com"
    assert signup[2]["data"] == {"full_name": "Alex Runner"}
    assert signup[2]["password"] == credentials.password
    assert logout[1] == "http://baas.test/auth/v1/logout"
    assert logout[3]["headers"] == {"Authorization": "Bearer access"}

    assert credentials.username == "athlete@example.com"
    assert credentials.name == "Alex Runner"
    assert len(credentials.password) == 16
    assert credentials.login_link.endswith("/#/login/returning")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "logout_error",
    [
        lambda method, url: APIClientHTTPError(500, "", method=method, url=url),
        lambda method, url: APIClientTransportError(f"ConnectError on {method.upper()} {url}"),
    ],
)
async def test_register_returns_credentials_when_sign_out_fails(auth_service, logout_error):
    async def mock_api_request(method, url, data=None, **kwargs):
        if url.endswith("/signup"):
            return 200, SESSION_PAYLOAD
        raise logout_error(method, url)

    with patch.object(auth_service, "_api_request", side_effect=mock_api_request):
        credentials = await auth_service.register("Alex Runner", "athlete@example.com")

    assert credentials.username == "athlete@example.com"
    assert len(credentials.password) == 16


@pytest.mark.asyncio
async def test_register_without_session_skips_sign_out(auth_service):
    calls = []

    async def mock_api_request(method, url, data=None, **kwargs):
        calls.append(url)
        return 200, USER_PAYLOAD

    with patch.object(auth_service, "_api_request", side_effect=mock_api_request):
        credentials = await auth_service.register("Alex Runner", "athlete@example.com")

    assert calls == ["http://baas.test/auth/v1/signup"]
    assert credentials.username == "athlete@example.com"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "full_name, email, field",
    [
        ("", "athlete@example.com", "form"),
        ("Alex", "   ", "form"),
        ("Alex", "not-an-email", "email"),
        ("Alex", "athlete@example", "email"),
    ],
)
async def test_register_validation(auth_service, full_name, email, field):
    with patch.object(auth_service, "_api_request") as mock_request:
        with pytest.raises(FormValidationError) as exc_info:
            await auth_service.register(full_name, email)
        mock_request.assert_not_called()
    assert exc_info.value.field == field


@pytest.mark.asyncio
async def test_register_surfaces_backend_error(auth_service):
    async def mock_api_request(method, url, data=None, **kwargs):
        raise APIClientHTTPError(422, "", method=method, url=url, reason="User already registered")

    with patch.object(auth_service, "_api_request", side_effect=mock_api_request):
        with pytest.raises(AuthError) as exc_info:
            await auth_service.register("Alex Runner", "athlete@example.com")

    assert exc_info.value.code == 422
    assert exc_info.value.message == "Error creating account: User already registered"


@pytest.mark.asyncio
async def test_sign_up_without_user_in_response(auth_service):
    async def mock_api_request(method, url, data=None, **kwargs):
        return 200, {}

    with patch.object(auth_service, "_api_request", side_effect=mock_api_request):
        with pytest.raises(AuthError) as exc_info:
            await auth_service.sign_up("athlete@example.com", "secret")

    assert exc_info.value.code == 502


@pytest.mark.asyncio
async def test_sign_up_returns_session(auth_service):
    async def mock_api_request(method, url, data=None, **kwargs):
        assert "data" not in data
        return 200, SESSION_PAYLOAD

    with patch.object(auth_service, "_api_request", side_effect=mock_api_request):
        user, session = await auth_service.sign_up("athlete@example.com", "secret")

    assert user.id == "user-1"
    assert session is not None and session.refresh_token == "refresh"


@pytest.mark.asyncio
async def test_sign_in(auth_service):
    async def mock_api_request(method, url, data=None, **kwargs):
        assert url == "http://baas.test/auth/v1/token"
        assert kwargs["params"] == {"grant_type": "password"}
        assert data == {"email": "athlete@example.com", "password": "secret"}
        return 200, SESSION_PAYLOAD

    with patch.object(auth_service, "_api_request", side_effect=mock_api_request):
        session = await auth_service.sign_in("athlete@example.com", "secret")

    assert session.access_token == "access"
    assert session.user.full_name == "Alex Runner"


@pytest.mark.asyncio
async def test_sign_in_rejected(auth_service):
    async def mock_api_request(method, url, data=None, **kwargs):
        raise APIClientHTTPError(400, "", method=method, url=url, reason="Invalid login credentials")

    with patch.object(auth_service, "_api_request", side_effect=mock_api_request):
        with pytest.raises(AuthError) as exc_info:
            await auth_service.sign_in("athlete@example.com", "wrong")

    assert exc_info.value.code == 401
    assert exc_info.value.message == "Invalid login credentials"


@pytest.mark.asyncio
async def test_get_user(auth_service):
    async def mock_api_request(method, url, data=None, **kwargs):
        assert kwargs["headers"] == {"Authorization": "Bearer token"}
        return 200, USER_PAYLOAD

    with patch.object(auth_service, "_api_request", side_effect=mock_api_request):
        user = await auth_service.get_user("token")

    assert user.id == "user-1"
    assert user.full_name == "Alex Runner"


@pytest.mark.asyncio
async def test_get_user_with_expired_token(auth_service):
    async def mock_api_request(method, url, data=None, **kwargs):
        return 401, {"msg": "JWT expired"}

    with patch.object(auth_service, "_api_request", side_effect=mock_api_request):
        assert await auth_service.get_user("expired") is None
