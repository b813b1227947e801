"""Session state machine shared by every practice surface.

``idle`` -> ``active`` -> ``complete``; ``start`` may be called from any state and
always replaces the current session, ``reset`` always returns to ``idle``.

``start`` and ``submit_answer`` are two-phase: they suspend on a remote call and
then resolve into a valid next state. A generation counter, bumped by ``start``
and ``reset``, marks which session a pending call belongs to; results that
resolve under an older generation are discarded.
"""
from __future__ import annotations

import logging
import uuid
from collections import deque
from statistics import mean
from typing import Any, Deque, Dict, List, Optional, Tuple, Union

from config import AppConfig, default_config
from observability import log_event, span
from remote_gateway import HttpClient, RemoteGatewayError

from .errors import InvalidSessionState, UserInputInvalid
from .feedback import FeedbackIntegrator
from .profile_store import ProfileStore
from .question_bank import synthesize
from .question_source import fetch_questions
from .surfaces import PracticeSurface
from .types import AnsweredQuestion, Profile, Question, QuestionOrigin, Session, SessionStatus, SessionSummary

logger = logging.getLogger(__name__)

EVENT_LOG_LIMIT = 200


class SessionController:
    """Owns the single active :class:`Session` for one practice surface."""

    def __init__(
        self,
        surface: PracticeSurface,
        *,
        config: Optional[AppConfig] = None,
        client: Optional[HttpClient] = None,
        integrator: Optional[FeedbackIntegrator] = None,
    ) -> None:
        self.surface = surface
        self.config = config or default_config()
        self.client = client
        self.integrator = integrator or FeedbackIntegrator(
            self.config,
            client=client,
            profile_formatter=surface.feedback_profile,
        )
        self.events: Deque[Dict[str, Any]] = deque(maxlen=EVENT_LOG_LIMIT)
        self._session: Optional[Session] = None
        self._generation = 0
        self._pending_start: Optional[int] = None
        self._pending_answer: Optional[Tuple[int, int]] = None

    # ------------------------------------------------------------------
    # State inspection
    # ------------------------------------------------------------------
    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def status(self) -> SessionStatus:
        if self._session is None:
            return "idle"
        if self._session.is_complete:
            return "complete"
        return "active"

    @property
    def busy(self) -> bool:
        """True while a ``start`` or ``submit_answer`` for the current generation is in flight."""

        if self._pending_start == self._generation:
            return True
        return self._pending_answer is not None and self._pending_answer[0] == self._generation

    def current_question(self) -> Optional[Question]:
        if self._session is None:
            return None
        return self._session.current_question

    def progress(self) -> Tuple[int, int]:
        """``(position, total)`` for a "Question x of N" display; ``(0, 0)`` when idle."""

        if self._session is None:
            return 0, 0
        total = self._session.total
        return min(self._session.current_index + 1, total), total

    def summary(self) -> SessionSummary:
        session = self._require_session("summarize")
        scores = [entry.feedback.score for entry in session.answer_log]
        matches = [entry.feedback.keyword_match_percent for entry in session.answer_log]
        return SessionSummary(
            total=session.total,
            answered=len(session.answer_log),
            skipped=len(session.skipped),
            average_score=round(mean(scores), 1) if scores else None,
            average_keyword_match=round(mean(matches), 1) if matches else None,
            complete=session.is_complete,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    async def start(self, profile: Union[Profile, ProfileStore]) -> Optional[Session]:
        """Begin a new session from ``profile``, discarding any existing one.

        Returns the installed session, or ``None`` when a newer ``start``/``reset``
        superseded this call while it was waiting on the question service.
        """

        snapshot = profile.snapshot() if isinstance(profile, ProfileStore) else profile
        if not snapshot.job_role_or_skill.strip():
            raise UserInputInvalid("A job role or skill is required to start a session.")

        self._generation += 1
        generation = self._generation
        self._session = None
        self._pending_start = generation
        try:
            questions, rubric, source = await self._load_questions(snapshot, generation)
        finally:
            if self._pending_start == generation:
                self._pending_start = None

        if generation != self._generation:
            self._record("stale_start_discarded", None, generation=generation)
            return None

        session = Session(
            session_id=str(uuid.uuid4()),
            surface=self.surface.name,
            generation=generation,
            profile_snapshot=snapshot,
            questions=tuple(questions),
            feedback_rubric=rubric,
            source=source,
        )
        self._session = session
        self._record("session_started", session.session_id, source=source, total=session.total)
        return session

    async def submit_answer(self, text: str) -> Optional[AnsweredQuestion]:
        """Evaluate ``text`` against the current question and advance.

        Returns the appended record; ``None`` if a submission for this session is
        already in flight or the session was replaced before feedback arrived.
        """

        session = self._require_active("submit an answer")
        if text is None or not text.strip():
            raise UserInputInvalid("Answer text is required.")
        if self.busy:
            logger.info("Ignoring submission while feedback is pending for session %s", session.session_id)
            return None

        generation = session.generation
        index = session.current_index
        question = session.questions[index]
        token = (generation, index)
        self._pending_answer = token
        try:
            with span(self.events, "feedback", generation=generation, index=index) as entry:
                outcome = await self.integrator.assess(question, text, session.profile_snapshot)
                entry["outcome"] = outcome.source
        finally:
            if self._pending_answer == token:
                self._pending_answer = None

        if generation != self._generation or self._session is not session or session.current_index != index:
            self._record("stale_feedback_discarded", session.session_id, generation=generation, index=index)
            return None

        if outcome.error:
            self._record(
                "feedback_fallback",
                session.session_id,
                level=logging.WARNING,
                index=index,
                error=outcome.error,
            )
        record = AnsweredQuestion(question=question, answer_text=text, feedback=outcome.record)
        session.record_answer(record)
        self._record("answer_recorded", session.session_id, index=index, score=record.feedback.score)
        if session.is_complete:
            self._record("session_completed", session.session_id, outcome="complete")
        return record

    def skip(self) -> Question:
        """Advance past the current question without recording an answer."""

        session = self._require_active("skip a question")
        if self.busy:
            raise InvalidSessionState("Cannot skip while feedback is pending.")
        index = session.current_index
        question = session.skip_current()
        self._record("question_skipped", session.session_id, index=index)
        if session.is_complete:
            self._record("session_completed", session.session_id, outcome="complete")
        return question

    def reset(self) -> None:
        self._generation += 1
        previous = self._session
        self._session = None
        self._record("session_reset", previous.session_id if previous else None)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    async def _load_questions(
        self, snapshot: Profile, generation: int
    ) -> Tuple[List[Question], Dict[str, Any], QuestionOrigin]:
        request = self.surface.question_request(snapshot)
        with span(self.events, "questions", generation=generation) as entry:
            try:
                batch = await fetch_questions(
                    request,
                    config=self.config,
                    client=self.client,
                    health_check=self.config.health_check_on_start and self.surface.checks_health,
                )
            except RemoteGatewayError as exc:
                entry["outcome"] = "fallback"
                self._record(
                    "question_fallback",
                    None,
                    level=logging.WARNING,
                    generation=generation,
                    error=exc.kind,
                )
                questions, rubric = synthesize(self.surface.primary_subject(snapshot))
                return questions, dict(rubric), "fallback"
            entry["outcome"] = "remote"
        return list(batch.questions), dict(batch.feedback_rubric or {}), "remote"

    def _require_session(self, action: str) -> Session:
        if self._session is None:
            raise InvalidSessionState(f"Cannot {action}: no session has been started.")
        return self._session

    def _require_active(self, action: str) -> Session:
        session = self._require_session(action)
        if session.is_complete:
            raise InvalidSessionState(f"Cannot {action}: the session is complete.")
        return session

    def _record(self, kind: str, session_id: Optional[str], *, level: int = logging.INFO, **fields: Any) -> None:
        event = log_event(kind, session_id, level=level, surface=self.surface.name, **fields)
        self.events.append(event)


__all__ = ["SessionController", "EVENT_LOG_LIMIT"]
