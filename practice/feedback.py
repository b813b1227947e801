"""Remote answer feedback with a fixed local fallback."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from config import FEEDBACK_ROUTE, AppConfig
from remote_gateway import HttpClient, RemoteGatewayError, post_json

from .types import FeedbackRecord, Profile, Question

logger = logging.getLogger(__name__)

FALLBACK_SCORE = 7.0
FALLBACK_KEYWORD_MATCH = 70.0
FALLBACK_ASSESSMENT = (
    "Thanks for your answer! While we couldn't generate AI feedback at the moment, "
    "remember to focus on clear explanations with practical examples."
)
FALLBACK_SUGGESTION = (
    "Try to include more specific examples and cover the key concepts mentioned in the question."
)
FALLBACK_STRENGTHS = ("Completed the answer", "Engaged with the question")

ProfileFormatter = Callable[[Profile], Dict[str, Any]]


def fallback_feedback() -> FeedbackRecord:
    return FeedbackRecord(
        score=FALLBACK_SCORE,
        keyword_match_percent=FALLBACK_KEYWORD_MATCH,
        assessment=FALLBACK_ASSESSMENT,
        improvement_suggestion=FALLBACK_SUGGESTION,
        strengths=FALLBACK_STRENGTHS,
    )


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class RemoteFeedback(BaseModel):
    """Feedback reply as sent by the remote service, tolerant of field naming."""

    score: float = Field(allow_inf_nan=False)
    keyword_match: float = Field(
        allow_inf_nan=False,
        validation_alias=AliasChoices(
            "keyword_match", "keywordMatch", "keyword_match_percent", "keywordMatchPercent"
        ),
    )
    assessment: str = Field(min_length=1)
    improvement_suggestion: str = Field(
        min_length=1,
        validation_alias=AliasChoices("improvement_suggestion", "improvementSuggestion"),
    )
    strengths: List[str] = Field(default_factory=list)

    @field_validator("strengths", mode="before")
    @classmethod
    def _to_str_list(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            raise ValueError("strengths must be a list of strings")
        return [item.strip() for item in value if isinstance(item, str) and item.strip()]

    def to_record(self) -> FeedbackRecord:
        return FeedbackRecord(
            score=_clamp(self.score, 0.0, 10.0),
            keyword_match_percent=_clamp(self.keyword_match, 0.0, 100.0),
            assessment=self.assessment.strip(),
            improvement_suggestion=self.improvement_suggestion.strip(),
            strengths=tuple(self.strengths),
        )


class FeedbackOutcome(BaseModel):
    record: FeedbackRecord
    source: Literal["remote", "fallback"]
    error: Optional[str] = None


def default_profile_payload(profile: Profile) -> Dict[str, Any]:
    return {
        "job_role": profile.job_role_or_skill,
        "years_experience": profile.experience_level,
        "technical_keywords": list(profile.keywords),
        **profile.context_tags,
    }


class FeedbackIntegrator:
    """Requests feedback for one answer and always resolves to a :class:`FeedbackRecord`."""

    def __init__(
        self,
        config: AppConfig,
        *,
        client: Optional[HttpClient] = None,
        profile_formatter: ProfileFormatter = default_profile_payload,
    ) -> None:
        self.config = config
        self.client = client
        self.profile_formatter = profile_formatter

    async def assess(self, question: Question, answer_text: str, profile: Profile) -> FeedbackOutcome:
        payload = {
            "question": question.to_wire(),
            "userAnswer": answer_text,
            "profile": self.profile_formatter(profile),
        }
        try:
            remote = await post_json(
                payload,
                RemoteFeedback,
                cfg=self.config.route(FEEDBACK_ROUTE),
                client=self.client,
            )
        except RemoteGatewayError as exc:
            logger.warning("Feedback unavailable for question %s (%s); using fallback", question.id, exc.kind)
            return FeedbackOutcome(record=fallback_feedback(), source="fallback", error=exc.kind)
        return FeedbackOutcome(record=remote.to_record(), source="remote")

    async def evaluate(self, question: Question, answer_text: str, profile: Profile) -> FeedbackRecord:
        outcome = await self.assess(question, answer_text, profile)
        return outcome.record


__all__ = [
    "FALLBACK_KEYWORD_MATCH",
    "FALLBACK_SCORE",
    "FALLBACK_STRENGTHS",
    "FeedbackIntegrator",
    "FeedbackOutcome",
    "RemoteFeedback",
    "default_profile_payload",
    "fallback_feedback",
]
