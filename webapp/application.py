from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from config.app_settings import settings
from config.logger import configure_loguru
from core.cache import Cache
from core.containers import create_container, set_container
from webapp.errors import register_exception_handlers
from webapp.routes import routers

configure_loguru()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    container = create_container()
    set_container(container)
    init_resources = container.init_resources()
    if init_resources is not None:
        await init_resources
    logger.info(f"{settings.SITE_NAME} started in {settings.ENVIRONMENT} mode")
    try:
        yield
    finally:
        shutdown_resources = container.shutdown_resources()
        if shutdown_resources is not None:
            await shutdown_resources
        await Cache.drafts.close_pool()


def create_app() -> FastAPI:
    application = FastAPI(title=settings.SITE_NAME, debug=settings.DEBUG, lifespan=lifespan)
    register_exception_handlers(application)
    for router in routers:
        application.include_router(router)
    return application


app = create_app()
