from __future__ import annotations  # Re-export practice engine public API

from .controller import SessionController
from .errors import InvalidSessionState, PracticeError, UserInputInvalid
from .feedback import FeedbackIntegrator, fallback_feedback
from .profile_store import ProfileStore
from .question_bank import SKILL_CATEGORIES, find_category, related_keywords, synthesize
from .surfaces import SURFACES, InterviewCoachSurface, PracticeSurface, SkillsPracticeSurface, get_surface
from .types import (
    AnsweredQuestion,
    FeedbackRecord,
    Profile,
    Question,
    Session,
    SessionSummary,
    SkillCategory,
)

__all__ = [
    "AnsweredQuestion",
    "FeedbackIntegrator",
    "FeedbackRecord",
    "InterviewCoachSurface",
    "InvalidSessionState",
    "PracticeError",
    "PracticeSurface",
    "Profile",
    "ProfileStore",
    "Question",
    "SKILL_CATEGORIES",
    "SURFACES",
    "Session",
    "SessionController",
    "SessionSummary",
    "SkillCategory",
    "SkillsPracticeSurface",
    "UserInputInvalid",
    "fallback_feedback",
    "find_category",
    "get_surface",
    "related_keywords",
    "synthesize",
]
