"""Errors surfaced to callers of the practice engine.

Remote failures never appear here; they are absorbed by the fallbacks.
"""
from __future__ import annotations


class PracticeError(Exception):
    """Base class for caller-visible practice errors."""


class UserInputInvalid(PracticeError, ValueError):
    """Rejected user input (empty role, empty answer, blank keyword)."""


class InvalidSessionState(PracticeError):
    """Operation is not valid in the controller's current state."""


__all__ = ["PracticeError", "UserInputInvalid", "InvalidSessionState"]
