"""FastAPI routes exposing the practice engine to a browser front-end."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException

from api.schemas import AnswerReq, KeywordReq, KeywordResp, ProfilePayload, SessionResp, StartReq
from config import AppConfig
from practice import (
    SKILL_CATEGORIES,
    InvalidSessionState,
    ProfileStore,
    SessionController,
    SessionSummary,
    SkillCategory,
    UserInputInvalid,
    get_surface,
)
from remote_gateway import HttpClient


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/practice")


class Workspace:
    """Profile store plus controller for one surface."""

    def __init__(self, surface_name: str, *, config: Optional[AppConfig], client: Optional[HttpClient]) -> None:
        surface = get_surface(surface_name)
        self.profile: ProfileStore = surface.default_profile()
        self.controller = SessionController(surface, config=config, client=client)


_WORKSPACES: Dict[str, Workspace] = {}
_CONFIG: Optional[AppConfig] = None
_CLIENT: Optional[HttpClient] = None


def reset_workspaces(*, config: Optional[AppConfig] = None, client: Optional[HttpClient] = None) -> None:
    """Drop every workspace; new ones are built with ``config``/``client``."""

    global _CONFIG, _CLIENT
    _WORKSPACES.clear()
    _CONFIG = config
    _CLIENT = client


def _workspace(surface: str) -> Workspace:
    if surface not in _WORKSPACES:
        try:
            _WORKSPACES[surface] = Workspace(surface, config=_CONFIG, client=_CLIENT)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"unknown surface '{surface}'") from exc
    return _WORKSPACES[surface]


def _profile_payload(store: ProfileStore) -> ProfilePayload:
    snap = store.snapshot()
    return ProfilePayload(
        job_role_or_skill=snap.job_role_or_skill,
        experience_level=snap.experience_level,
        keywords=list(snap.keywords),
        context_tags=dict(snap.context_tags),
    )


def _session_resp(ws: Workspace) -> SessionResp:
    controller = ws.controller
    session = controller.session
    position, total = controller.progress()
    resp = SessionResp(
        surface=controller.surface.name,
        status=controller.status,
        busy=controller.busy,
        position=position,
        total=total,
        event_log=list(controller.events),
    )
    if session is None:
        return resp
    resp.session_id = session.session_id
    resp.source = session.source
    resp.question = controller.current_question()
    resp.answer_log = list(session.answer_log)
    resp.last_feedback = session.answer_log[-1].feedback if session.answer_log else None
    resp.feedback_rubric = dict(session.feedback_rubric)
    return resp


@router.get("/skills", response_model=List[SkillCategory])
def list_skills() -> List[SkillCategory]:
    return list(SKILL_CATEGORIES)


@router.get("/{surface}/profile", response_model=ProfilePayload)
def get_profile(surface: str) -> ProfilePayload:
    return _profile_payload(_workspace(surface).profile)


@router.put("/{surface}/profile", response_model=ProfilePayload)
def put_profile(surface: str, req: ProfilePayload) -> ProfilePayload:
    ws = _workspace(surface)
    try:
        ws.profile.replace(req.to_profile())
    except UserInputInvalid as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _profile_payload(ws.profile)


@router.post("/{surface}/profile/keywords", response_model=KeywordResp)
def add_keyword(surface: str, req: KeywordReq) -> KeywordResp:
    ws = _workspace(surface)
    try:
        changed = ws.profile.add_keyword(req.keyword)
    except UserInputInvalid as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return KeywordResp(changed=changed, profile=_profile_payload(ws.profile))


@router.delete("/{surface}/profile/keywords/{keyword}", response_model=KeywordResp)
def remove_keyword(surface: str, keyword: str) -> KeywordResp:
    ws = _workspace(surface)
    changed = ws.profile.remove_keyword(keyword)
    return KeywordResp(changed=changed, profile=_profile_payload(ws.profile))


@router.post("/{surface}/start", response_model=SessionResp)
async def start(surface: str, req: Optional[StartReq] = None) -> SessionResp:
    ws = _workspace(surface)
    try:
        if req is not None and req.profile is not None:
            ws.profile.replace(req.profile.to_profile())
        await ws.controller.start(ws.profile)
    except UserInputInvalid as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _session_resp(ws)


@router.get("/{surface}/session", response_model=SessionResp)
def get_session(surface: str) -> SessionResp:
    return _session_resp(_workspace(surface))


@router.post("/{surface}/answer", response_model=SessionResp)
async def answer(surface: str, req: AnswerReq) -> SessionResp:
    ws = _workspace(surface)
    try:
        record = await ws.controller.submit_answer(req.answer)
    except UserInputInvalid as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except InvalidSessionState as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    if record is None:
        logger.info("Answer for surface %s was not applied", surface)
    return _session_resp(ws)


@router.post("/{surface}/skip", response_model=SessionResp)
def skip(surface: str) -> SessionResp:
    ws = _workspace(surface)
    try:
        ws.controller.skip()
    except InvalidSessionState as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _session_resp(ws)


@router.post("/{surface}/reset", response_model=SessionResp)
def reset(surface: str) -> SessionResp:
    ws = _workspace(surface)
    ws.controller.reset()
    return _session_resp(ws)


@router.get("/{surface}/summary", response_model=SessionSummary)
def summary(surface: str) -> SessionSummary:
    ws = _workspace(surface)
    try:
        return ws.controller.summary()
    except InvalidSessionState as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
