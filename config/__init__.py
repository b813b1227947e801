"""Configuration package for the practice session engine."""
from .routes import (
    FEEDBACK_ROUTE,
    HEALTH_ROUTE,
    QUESTIONS_ROUTE,
    AppConfig,
    RemoteRoute,
    default_config,
    load_config,
)
from .settings import Settings, settings

__all__ = [
    "AppConfig",
    "RemoteRoute",
    "default_config",
    "load_config",
    "FEEDBACK_ROUTE",
    "HEALTH_ROUTE",
    "QUESTIONS_ROUTE",
    "Settings",
    "settings",
]
