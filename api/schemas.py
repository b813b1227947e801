"""Pydantic schemas for the practice session API."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from practice.types import AnsweredQuestion, FeedbackRecord, Profile, Question, SessionStatus


class ProfilePayload(BaseModel):
    job_role_or_skill: str = ""
    experience_level: Union[int, str] = 0
    keywords: List[str] = Field(default_factory=list)
    context_tags: Dict[str, str] = Field(default_factory=dict)

    def to_profile(self) -> Profile:
        return Profile(
            job_role_or_skill=self.job_role_or_skill,
            experience_level=self.experience_level,
            keywords=tuple(self.keywords),
            context_tags=dict(self.context_tags),
        )


class KeywordReq(BaseModel):
    keyword: str


class KeywordResp(BaseModel):
    changed: bool
    profile: ProfilePayload


class StartReq(BaseModel):
    profile: Optional[ProfilePayload] = None


class AnswerReq(BaseModel):
    answer: str


class SessionResp(BaseModel):
    surface: str
    status: SessionStatus
    busy: bool = False
    session_id: Optional[str] = None
    source: Optional[str] = None
    position: int = 0
    total: int = 0
    question: Optional[Question] = None
    answer_log: List[AnsweredQuestion] = Field(default_factory=list)
    last_feedback: Optional[FeedbackRecord] = None
    feedback_rubric: Dict[str, Any] = Field(default_factory=dict)
    event_log: List[Dict[str, Any]] = Field(default_factory=list)
