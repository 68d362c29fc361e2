# ruff: noqa: E501
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- Core Settings ---
    ENVIRONMENT: Annotated[str, Field(default="development", description="Application environment (e.g., 'development', 'staging', 'production').")]
    DEBUG: bool = Field(default=False, description="Enable application debug mode.")
    SITE_NAME: Annotated[str, Field(default="Hybrid Athlete Blueprint", description="Public name of the application.")]
    PUBLIC_URL: Annotated[str, Field(default="http://localhost:8000", description="Public base URL, used to build the returning-user login link.")]

    # --- Logging ---
    LOG_LEVEL: Annotated[str, Field(default="DEBUG", description="Logging level for the application (e.g., DEBUG, INFO, WARNING).")]

    # --- Web server ---
    APP_HOST: Annotated[str, Field(default="0.0.0.0", description="Interface the web app binds to.")]
    APP_PORT: int = Field(default=8000, description="Port the web app listens on.")

    # --- Backend-as-a-service ---
    BAAS_URL: Annotated[str, Field(default="http://localhost:54321", description="Base URL of the hosted auth + tables backend.")]
    BAAS_ANON_KEY: Annotated[str, Field(default="", description="Public (anon) API key sent with every backend request.")]
    BAAS_REST_URL: Annotated[str | None, Field(default=None, description="Tables endpoint. Auto-derived from BAAS_URL if not set.")]
    BAAS_AUTH_URL: Annotated[str | None, Field(default=None, description="Auth endpoint. Auto-derived from BAAS_URL if not set.")]

    # --- HTTP client ---
    API_TIMEOUT: int = Field(default=10, description="Default timeout in seconds for backend requests.")
    API_MAX_RETRIES: int = Field(default=0, description="Retries for retryable backend failures. 0 disables retrying.")
    API_RETRY_INITIAL_DELAY: float = Field(default=1.0, description="Initial delay in seconds before the first retry.")
    API_RETRY_BACKOFF_FACTOR: float = Field(default=2.0, description="Multiplier applied to the delay after every retry.")
    API_RETRY_MAX_DELAY: float = Field(default=10.0, description="Upper bound for the retry delay in seconds.")
    API_MAX_CONNECTIONS: int = Field(default=50, description="Connection pool size of the shared httpx client.")
    API_MAX_KEEPALIVE_CONNECTIONS: int = Field(default=10, description="Keep-alive connections of the shared httpx client.")

    # --- Drafts (Redis) ---
    REDIS_URL: Annotated[str, Field(default="redis://localhost:6379", description="Redis connection URL for the draft set store.")]
    DRAFT_TTL: int = Field(default=60 * 60 * 24 * 7, description="Seconds an untouched draft hash is kept.")

    # --- Display & export ---
    WEIGHT_UNIT: Annotated[str, Field(default="lbs", description="Unit label shown next to logged weights.")]
    IMAGE_TIMEOUT: float = Field(default=5.0, description="Timeout in seconds for fetching meal images during PDF export.")

    LOGIN_URL: Annotated[str | None, Field(default=None, description="Link handed to new users to log back in. Auto-derived if not set.")]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @field_validator("BAAS_URL", "PUBLIC_URL", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return str(value or "").rstrip("/")

    @model_validator(mode="after")
    def _compute_derived_fields(self) -> "Settings":
        if not self.BAAS_REST_URL:
            self.BAAS_REST_URL = f"{self.BAAS_URL}/rest/v1"
        if not self.BAAS_AUTH_URL:
            self.BAAS_AUTH_URL = f"{self.BAAS_URL}/auth/v1"
        if not self.LOGIN_URL:
            self.LOGIN_URL = f"{self.PUBLIC_URL}/#/login/returning"
        if str(self.ENVIRONMENT).lower() == "production" and not self.BAAS_ANON_KEY:
            raise ValueError("BAAS_ANON_KEY must be set in production")
        return self


settings = Settings()  # noqa
