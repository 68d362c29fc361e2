import secrets
from typing import Any

from loguru import logger

from config.app_settings import settings
from core.exceptions import AuthError, FormValidationError, UserServiceError
from core.schemas import AuthSession, AuthUser, GeneratedCredentials
from core.services.internal.api_client import APIClient, APIClientHTTPError
from core.validators import is_valid_email

PASSWORD_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789!@#$%^&*"
PASSWORD_LENGTH = 16


def generate_secure_password(length: int = PASSWORD_LENGTH) -> str:
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))


def _parse_user(payload: dict[str, Any]) -> AuthUser:
    metadata = payload.get("user_metadata") or {}
    return AuthUser(
        id=payload["id"],
        email=payload.get("email"),
        full_name=metadata.get("full_name") if isinstance(metadata, dict) else None,
    )


def _parse_session(payload: dict[str, Any]) -> AuthSession:
    return AuthSession(
        access_token=payload["access_token"],
        refresh_token=payload.get("refresh_token"),
        expires_in=payload.get("expires_in"),
        token_type=payload.get("token_type") or "bearer",
        user=_parse_user(payload["user"]),
    )


class AuthService(APIClient):
    async def sign_up(
        self, email: str, password: str, full_name: str | None = None
    ) -> tuple[AuthUser, AuthSession | None]:
        data: dict[str, Any] = {"email": email, "password": password}
        if full_name:
            data["data"] = {"full_name": full_name}
        try:
            _, payload = await self._api_request("post", f"{self.auth_url}/signup", data)
        except APIClientHTTPError as exc:
            logger.error(f"Sign-up failed for email={email}: {exc.reason or exc.status}")
            raise AuthError(f"Error creating account: {exc.reason or 'sign-up rejected'}", code=exc.status) from exc

        payload = payload or {}
        if "access_token" in payload and isinstance(payload.get("user"), dict):
            session = _parse_session(payload)
            return session.user, session
        if "id" not in payload:
            raise AuthError("Sign-up response did not include a user", code=502, details=str(payload))
        return _parse_user(payload), None

    async def sign_in(self, email: str, password: str) -> AuthSession:
        try:
            _, payload = await self._api_request(
                "post",
                f"{self.auth_url}/token",
                {"email": email, "password": password},
                params={"grant_type": "password"},
            )
        except APIClientHTTPError as exc:
            logger.info(f"Sign-in rejected for email={email}: HTTP {exc.status}")
            raise AuthError(exc.reason or "Invalid email or password", code=401) from exc

        if not isinstance(payload, dict) or "access_token" not in payload:
            raise AuthError("Sign-in response did not include a session", code=502, details=str(payload))
        session = _parse_session(payload)
        logger.debug(f"User {session.user.id} signed in")
        return session

    async def sign_out(self, access_token: str) -> None:
        try:
            await self._api_request(
                "post",
                f"{self.auth_url}/logout",
                headers={"Authorization": f"Bearer {access_token}"},
                allow_statuses={401, 403},
            )
        except APIClientHTTPError as exc:
            logger.warning(f"Sign-out failed: HTTP {exc.status}")
            raise AuthError("Sign-out failed", code=exc.status) from exc

    async def get_user(self, access_token: str) -> AuthUser | None:
        status, payload = await self._api_request(
            "get",
            f"{self.auth_url}/user",
            headers={"Authorization": f"Bearer {access_token}"},
            allow_statuses={401, 403},
        )
        if status in {401, 403} or not isinstance(payload, dict) or "id" not in payload:
            logger.debug(f"Session lookup rejected. HTTP={status}")
            return None
        return _parse_user(payload)

    async def register(self, full_name: str, email: str) -> GeneratedCredentials:
        """Create an account with a generated password and hand the credentials back.

        The new user is signed out right away so the first login happens with
        the generated password.
        """
        full_name = (full_name or "").strip()
        email = (email or "").strip()
        if not full_name or not email:
            raise FormValidationError("form", "Please fill in all fields")
        if not is_valid_email(email):
            raise FormValidationError("email", "Please enter a valid email address")

        password = generate_secure_password()
        user, session = await self.sign_up(email, password, full_name)
        if session is not None:
            try:
                await self.sign_out(session.access_token)
            except UserServiceError as exc:
                logger.warning(f"Sign-out after sign-up failed for user_id={user.id}: {exc}")
        logger.info(f"Account created for user_id={user.id}")

        return GeneratedCredentials(
            username=email,
            password=password,
            name=full_name,
            login_link=settings.LOGIN_URL or "",
        )
