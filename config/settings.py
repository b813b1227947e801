"""Application settings and configuration management."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or defaults."""

    PRACTICE_API_BASE_URL: str = Field(default="https://ai-backend-orpin-three.vercel.app")
    QUESTION_ENDPOINT: str = "/api/interview/question"
    FEEDBACK_ENDPOINT: str = "/api/interview/feedback"
    HEALTH_ENDPOINT: str = "/health"

    REMOTE_TIMEOUT_S: float = Field(default=20.0, gt=0)
    REMOTE_MAX_RETRIES: int = Field(default=0, ge=0)
    REMOTE_API_KEY_ENV: str | None = None
    HEALTH_CHECK_ON_START: bool = False

    model_config = SettingsConfigDict(env_file=".env", validate_assignment=True, extra="ignore")


settings = Settings()
