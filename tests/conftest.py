import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import default_config
from config.settings import Settings

BASE_URL = "http://practice.test"


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeClient:
    """Scripted async HTTP client keyed by endpoint suffix.

    A route value may be a response, an exception to raise, or a list of either
    consumed one per call.
    """

    def __init__(self, routes: Optional[Dict[str, Any]] = None) -> None:
        self.routes = dict(routes or {})
        self.calls: List[Dict[str, Any]] = []

    async def post(self, url, *, json, headers, timeout):
        self.calls.append({"method": "POST", "url": url, "json": json, "headers": headers})
        return self._reply(url)

    async def get(self, url, *, headers, timeout):
        self.calls.append({"method": "GET", "url": url, "headers": headers})
        return self._reply(url)

    def _reply(self, url: str):
        for suffix, value in self.routes.items():
            if url.endswith(suffix):
                if isinstance(value, list):
                    value = value.pop(0)
                if isinstance(value, BaseException):
                    raise value
                return value
        raise ConnectionError(f"no route for {url}")


class GatedClient(FakeClient):
    """FakeClient whose replies for gated suffixes wait until :meth:`release`."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None, gated: tuple = ()) -> None:
        super().__init__(routes)
        self.gated = set(gated)
        self.waiting = 0
        self._gate = asyncio.Event()

    async def post(self, url, *, json, headers, timeout):
        if any(url.endswith(suffix) for suffix in self.gated):
            self.waiting += 1
            await self._gate.wait()
        return await super().post(url, json=json, headers=headers, timeout=timeout)

    def ungate(self, suffix: str) -> None:
        self.gated.discard(suffix)

    def release(self) -> None:
        self._gate.set()


def question_payload() -> Dict[str, Any]:
    return {
        "questions": [
            {
                "id": 11,
                "question": "How does React reconcile the virtual DOM?",
                "hint": "Think about keys",
                "time_limit_minutes": 4,
                "difficulty": "Easy",
                "category": "Technical",
                "expected_keywords": ["diffing", "keys"],
            },
            {
                "question": "Design a component library for a large team.",
                "timeLimitMinutes": 8,
                "difficulty": "hard",
                "category": "Design",
                "expectedKeywords": ["tokens", "accessibility"],
            },
        ],
        "feedback_rubric": {"excellent": "Covers trade-offs"},
    }


def feedback_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "score": 8.5,
        "keyword_match": 80,
        "assessment": "Clear and structured.",
        "improvement_suggestion": "Mention memoization.",
        "strengths": ["Structure", "Examples"],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def app_config():
    return default_config(
        Settings(_env_file=None, PRACTICE_API_BASE_URL=BASE_URL, REMOTE_TIMEOUT_S=0.5)
    )


@pytest.fixture
def remote_ok():
    return FakeClient(
        {
            "/api/interview/question": FakeResponse(200, question_payload()),
            "/api/interview/feedback": FakeResponse(200, feedback_payload()),
        }
    )


@pytest.fixture
def remote_down():
    return FakeClient({})
