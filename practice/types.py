"""Shared type definitions for practice sessions."""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

Difficulty = Literal["easy", "medium", "hard"]
SessionStatus = Literal["idle", "active", "complete"]
QuestionOrigin = Literal["remote", "fallback"]
ExperienceLevel = Union[int, str]


class Profile(BaseModel):
    """Immutable snapshot of who is practicing and what they want questions about."""

    job_role_or_skill: str
    experience_level: ExperienceLevel = 0
    keywords: Tuple[str, ...] = ()
    context_tags: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @field_validator("keywords", mode="after")
    @classmethod
    def _unique_keywords(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        # Ordered set: first occurrence wins.
        return tuple(dict.fromkeys(value))

    def tag(self, key: str, default: str = "") -> str:
        return self.context_tags.get(key) or default


class Question(BaseModel):
    """A single practice question as issued by the remote service or the fallback bank."""

    id: str = ""
    prompt: str = Field(min_length=1, validation_alias=AliasChoices("prompt", "question"))
    hint: Optional[str] = None
    time_limit_minutes: int = Field(
        default=5,
        ge=0,
        validation_alias=AliasChoices("time_limit_minutes", "timeLimitMinutes"),
    )
    difficulty: Difficulty = "medium"
    category: str = "General"
    expected_keywords: Tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("expected_keywords", "expectedKeywords"),
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("difficulty", mode="before")
    @classmethod
    def _normalize_difficulty(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("hint", mode="before")
    @classmethod
    def _blank_hint(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_wire(self) -> Dict[str, Any]:
        """Shape used by the remote feedback contract."""

        return {
            "id": self.id,
            "question": self.prompt,
            "hint": self.hint,
            "time_limit_minutes": self.time_limit_minutes,
            "difficulty": self.difficulty,
            "category": self.category,
            "expected_keywords": list(self.expected_keywords),
        }


class FeedbackRecord(BaseModel):
    score: float = Field(ge=0, le=10)
    keyword_match_percent: float = Field(ge=0, le=100)
    assessment: str
    improvement_suggestion: str
    strengths: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


class AnsweredQuestion(BaseModel):
    question: Question
    answer_text: str
    feedback: FeedbackRecord

    model_config = ConfigDict(frozen=True)


class Session(BaseModel):
    """One run of question -> answer -> feedback cycles bound to a profile snapshot.

    ``len(answer_log) <= current_index <= len(questions)`` holds at all times;
    the two are equal unless questions were skipped.
    """

    session_id: str
    surface: str
    generation: int
    profile_snapshot: Profile
    questions: Tuple[Question, ...] = Field(min_length=1)
    feedback_rubric: Dict[str, Any] = Field(default_factory=dict)
    source: QuestionOrigin
    current_index: int = 0
    answer_log: List[AnsweredQuestion] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def is_complete(self) -> bool:
        return self.current_index >= self.total

    @property
    def current_question(self) -> Optional[Question]:
        if self.is_complete:
            return None
        return self.questions[self.current_index]

    def record_answer(self, entry: AnsweredQuestion) -> None:
        """Append ``entry`` and advance to the next question in one step."""

        if self.is_complete:
            raise RuntimeError("session already complete")
        self.answer_log.append(entry)
        self.current_index += 1

    def skip_current(self) -> Question:
        if self.is_complete:
            raise RuntimeError("session already complete")
        question = self.questions[self.current_index]
        self.skipped.append(question.id)
        self.current_index += 1
        return question


class SessionSummary(BaseModel):
    total: int
    answered: int
    skipped: int
    average_score: Optional[float] = None
    average_keyword_match: Optional[float] = None
    complete: bool


class SkillCategory(BaseModel):
    id: str
    name: str
    skills: Tuple[str, ...]

    model_config = ConfigDict(frozen=True)
