from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from core.exceptions import (
    AuthError,
    BatchSaveError,
    ExerciseNotFoundError,
    FormValidationError,
    MealPlanNotFoundError,
    MealSwapError,
    NoProgressDataError,
    NotAuthenticatedError,
    ProgressionNotFoundError,
    UserServiceError,
    WorkoutNotFoundError,
)

NOT_FOUND_ERRORS = (
    WorkoutNotFoundError,
    ExerciseNotFoundError,
    MealPlanNotFoundError,
    ProgressionNotFoundError,
    NoProgressDataError,
)


async def not_found_handler(_: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def bad_request_handler(_: Request, exc: Exception) -> JSONResponse:
    content: dict[str, str] = {"detail": str(exc)}
    if isinstance(exc, FormValidationError):
        content["field"] = exc.field
    return JSONResponse(status_code=400, content=content)


async def not_authenticated_handler(_: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def auth_error_handler(_: Request, exc: AuthError) -> JSONResponse:
    status = exc.code if 400 <= exc.code < 500 else 502
    return JSONResponse(status_code=status, content={"detail": exc.message})


async def batch_save_handler(_: Request, exc: BatchSaveError) -> JSONResponse:
    return JSONResponse(
        status_code=502,
        content={
            "detail": exc.message,
            "exercise_id": exc.exercise_id,
            "saved_set_numbers": exc.saved_set_numbers,
        },
    )


async def remote_error_handler(request: Request, exc: UserServiceError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=502, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    for error in NOT_FOUND_ERRORS:
        app.add_exception_handler(error, not_found_handler)
    app.add_exception_handler(MealSwapError, bad_request_handler)
    app.add_exception_handler(FormValidationError, bad_request_handler)
    app.add_exception_handler(NotAuthenticatedError, not_authenticated_handler)
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(BatchSaveError, batch_save_handler)
    app.add_exception_handler(UserServiceError, remote_error_handler)
