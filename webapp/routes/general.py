from typing import Any

from fastapi import APIRouter, Depends

from config.app_settings import settings
from webapp.dependencies import get_draft_cache, optional_user
from webapp.schemas import UserContext

router = APIRouter(tags=["general"])


@router.get("/")
async def welcome(context: UserContext | None = Depends(optional_user)) -> dict[str, Any]:
    user_name = context.user.full_name if context else None
    return {
        "site_name": settings.SITE_NAME,
        "greeting": f"Welcome, {user_name}" if user_name else "Welcome",
        "authenticated": context is not None,
        "sections": [
            {
                "name": "Training",
                "description": "Access your 8-week progressive overload program, log workouts, and track PRs.",
                "path": "/workouts",
            },
            {
                "name": "Nutrition",
                "description": "Calculate macros, plan meals, and discover healthy alternatives for your goals.",
                "path": "/nutrition/plans",
            },
        ],
    }


@router.get("/health")
async def health(draft_cache: Any = Depends(get_draft_cache)) -> dict[str, str]:
    cache_ok = await draft_cache.healthcheck()
    return {"status": "ok", "cache": "ok" if cache_ok else "unavailable"}
