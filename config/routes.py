"""Remote route configuration for the practice question and feedback services."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field, model_validator

from .settings import Settings, settings as default_settings

QUESTIONS_ROUTE = "questions"
FEEDBACK_ROUTE = "feedback"
HEALTH_ROUTE = "health"
REQUIRED_ROUTES = (QUESTIONS_ROUTE, FEEDBACK_ROUTE, HEALTH_ROUTE)


class RemoteRoute(BaseModel):
    """Remote endpoint configuration."""

    name: str
    base_url: str
    endpoint: str
    timeout_s: float = Field(ge=0.1)
    max_retries: int = Field(default=0, ge=0)
    api_key_env: str | None = None
    extra_headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}{self.endpoint}"


class AppConfig(BaseModel):
    """Application configuration root."""

    routes: Dict[str, RemoteRoute]
    health_check_on_start: bool = False

    @model_validator(mode="after")
    def _require_routes(self) -> "AppConfig":
        missing = [name for name in REQUIRED_ROUTES if name not in self.routes]
        if missing:
            raise ValueError(f"Configuration is missing routes: {', '.join(missing)}")
        return self

    def route(self, name: str) -> RemoteRoute:
        if name not in self.routes:
            raise KeyError(f"Route '{name}' missing from configuration")
        return self.routes[name]


def load_config(path: Path) -> AppConfig:
    """Load configuration from disk."""

    data = path.read_text(encoding="utf-8")
    return AppConfig.model_validate_json(data)


def default_config(cfg: Optional[Settings] = None) -> AppConfig:
    """Build the route table from environment-backed settings."""

    cfg = cfg or default_settings

    def _route(name: str, endpoint: str) -> RemoteRoute:
        return RemoteRoute(
            name=name,
            base_url=cfg.PRACTICE_API_BASE_URL,
            endpoint=endpoint,
            timeout_s=cfg.REMOTE_TIMEOUT_S,
            max_retries=cfg.REMOTE_MAX_RETRIES,
            api_key_env=cfg.REMOTE_API_KEY_ENV,
        )

    return AppConfig(
        routes={
            QUESTIONS_ROUTE: _route(QUESTIONS_ROUTE, cfg.QUESTION_ENDPOINT),
            FEEDBACK_ROUTE: _route(FEEDBACK_ROUTE, cfg.FEEDBACK_ENDPOINT),
            HEALTH_ROUTE: _route(HEALTH_ROUTE, cfg.HEALTH_ENDPOINT),
        },
        health_check_on_start=cfg.HEALTH_CHECK_ON_START,
    )
