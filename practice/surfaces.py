"""Practice surfaces: how each UI flavour turns a profile into remote requests."""
from __future__ import annotations

from typing import Any, Dict, Tuple

from .profile_store import ProfileStore
from .question_bank import related_keywords
from .question_source import QuestionRequest
from .types import Profile

COMPANY_TYPES: Tuple[str, ...] = ("startup", "big_tech", "mnc", "consulting")
INTERVIEW_ROUNDS: Tuple[str, ...] = ("technical", "behavioral", "system_design", "hr")


class PracticeSurface:
    """Base surface; subclasses decide the request shapes and fallback subject."""

    name = "base"
    title = "Practice"
    # Whether a health probe may precede the question request.
    checks_health = False

    def default_profile(self) -> ProfileStore:
        return ProfileStore()

    def primary_subject(self, profile: Profile) -> str:
        return profile.job_role_or_skill

    def question_request(self, profile: Profile) -> QuestionRequest:
        raise NotImplementedError

    def feedback_profile(self, profile: Profile) -> Dict[str, Any]:
        raise NotImplementedError


class InterviewCoachSurface(PracticeSurface):
    """Mock interviews driven by the full candidate profile."""

    name = "interview"
    title = "Interview Coach"
    checks_health = True

    def default_profile(self) -> ProfileStore:
        return ProfileStore(
            job_role_or_skill="Frontend Developer",
            experience_level=2,
            keywords=("React", "JavaScript", "CSS"),
            context_tags={"company_type": "startup", "interview_round": "technical"},
        )

    def question_request(self, profile: Profile) -> QuestionRequest:
        return QuestionRequest(
            job_role=profile.job_role_or_skill,
            years_experience=profile.experience_level,
            technical_keywords=list(profile.keywords),
            company_type=profile.tag("company_type", COMPANY_TYPES[0]),
            interview_round=profile.tag("interview_round", INTERVIEW_ROUNDS[0]),
            focus_area=profile.tag("focus_area"),
        )

    def feedback_profile(self, profile: Profile) -> Dict[str, Any]:
        return self.question_request(profile).model_dump()


class SkillsPracticeSurface(PracticeSurface):
    """Skill drills: ``job_role_or_skill`` names the skill being practiced."""

    name = "skills"
    title = "Skills Practice"

    JOB_ROLE = "Software Developer"
    YEARS_EXPERIENCE = "2-5"
    COMPANY_TYPE = "Tech Company"
    INTERVIEW_ROUND = "Technical"

    def _keywords(self, skill: str) -> list[str]:
        return [skill, *related_keywords(skill)]

    def question_request(self, profile: Profile) -> QuestionRequest:
        skill = profile.job_role_or_skill
        return QuestionRequest(
            job_role=self.JOB_ROLE,
            years_experience=self.YEARS_EXPERIENCE,
            technical_keywords=self._keywords(skill),
            company_type=self.COMPANY_TYPE,
            interview_round=self.INTERVIEW_ROUND,
            focus_area=skill,
        )

    def feedback_profile(self, profile: Profile) -> Dict[str, Any]:
        return {
            "job_role": self.JOB_ROLE,
            "years_experience": self.YEARS_EXPERIENCE,
            "technical_keywords": self._keywords(profile.job_role_or_skill),
        }


SURFACES: Dict[str, PracticeSurface] = {
    InterviewCoachSurface.name: InterviewCoachSurface(),
    SkillsPracticeSurface.name: SkillsPracticeSurface(),
}


def get_surface(name: str) -> PracticeSurface:
    if name not in SURFACES:
        raise KeyError(f"Unknown practice surface: {name}")
    return SURFACES[name]


__all__ = [
    "COMPANY_TYPES",
    "INTERVIEW_ROUNDS",
    "InterviewCoachSurface",
    "PracticeSurface",
    "SURFACES",
    "SkillsPracticeSurface",
    "get_surface",
]
