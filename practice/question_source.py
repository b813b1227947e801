"""Remote question batch requests."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, Field, model_validator

from config import HEALTH_ROUTE, QUESTIONS_ROUTE, AppConfig
from remote_gateway import HttpClient, post_json, probe

from .types import ExperienceLevel, Question


class QuestionRequest(BaseModel):  # Wire payload for the question contract
    job_role: str
    years_experience: ExperienceLevel
    technical_keywords: List[str] = Field(default_factory=list)
    company_type: str = ""
    interview_round: str = ""
    focus_area: str = ""


class QuestionBatch(BaseModel):  # Validated reply from the question contract
    questions: List[Question] = Field(min_length=1)
    feedback_rubric: Optional[Dict[str, Any]] = Field(
        default=None,
        validation_alias=AliasChoices("feedback_rubric", "feedbackRubric"),
    )

    @model_validator(mode="after")
    def _number_questions(self) -> "QuestionBatch":
        # Questions without an id take their 1-based position.
        self.questions = [
            question if question.id else question.model_copy(update={"id": str(position)})
            for position, question in enumerate(self.questions, start=1)
        ]
        return self


async def fetch_questions(
    request: QuestionRequest,
    *,
    config: AppConfig,
    client: Optional[HttpClient] = None,
    health_check: Optional[bool] = None,
) -> QuestionBatch:
    """Request a question batch; raises a ``RemoteGatewayError`` subclass on any failure.

    ``health_check`` overrides ``config.health_check_on_start`` when given.
    """

    if health_check is None:
        health_check = config.health_check_on_start
    if health_check:
        await probe(config.route(HEALTH_ROUTE), client=client)
    return await post_json(
        request.model_dump(),
        QuestionBatch,
        cfg=config.route(QUESTIONS_ROUTE),
        client=client,
    )


__all__ = ["QuestionBatch", "QuestionRequest", "fetch_questions"]
