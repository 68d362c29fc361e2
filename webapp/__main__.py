import uvicorn

from config.app_settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "webapp.application:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        log_config=None,
        reload=settings.DEBUG,
    )
