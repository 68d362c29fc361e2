from typing import Any

from fastapi import APIRouter, Depends

from core.schemas import AuthSession, GeneratedCredentials
from core.services.internal import AuthService, ProfileService
from webapp.dependencies import current_user, get_auth_service, get_profile_service
from webapp.schemas import LoginRequest, SignupRequest, UserContext

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=GeneratedCredentials, status_code=201)
async def signup(data: SignupRequest, auth_service: AuthService = Depends(get_auth_service)) -> GeneratedCredentials:
    return await auth_service.register(data.full_name, data.email)


@router.post("/login", response_model=AuthSession)
async def login(data: LoginRequest, auth_service: AuthService = Depends(get_auth_service)) -> AuthSession:
    return await auth_service.sign_in(data.email.strip(), data.password)


@router.post("/logout")
async def logout(
    context: UserContext = Depends(current_user),
    auth_service: AuthService = Depends(get_auth_service),
) -> dict[str, str]:
    await auth_service.sign_out(context.access_token)
    return {"status": "signed_out"}


@router.get("/session")
async def session(
    context: UserContext = Depends(current_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> dict[str, Any]:
    profile = await profile_service.get_profile(context.user.id)
    return {
        "user": context.user.model_dump(),
        "profile": profile.model_dump(mode="json") if profile else None,
    }
