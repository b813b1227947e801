"""Observability utilities for the practice session engine."""
from .logger import log_event
from .tracing import span

__all__ = ["log_event", "span"]
