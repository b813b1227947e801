import json

import pytest
from pydantic import ValidationError

from config import FEEDBACK_ROUTE, HEALTH_ROUTE, QUESTIONS_ROUTE, default_config, load_config
from config.settings import Settings


def _route(name: str, endpoint: str) -> dict:
    return {"name": name, "base_url": "http://local", "endpoint": endpoint, "timeout_s": 2}


def test_settings_defaults():
    settings = Settings(_env_file=None)
    assert settings.QUESTION_ENDPOINT == "/api/interview/question"
    assert settings.FEEDBACK_ENDPOINT == "/api/interview/feedback"
    assert settings.REMOTE_TIMEOUT_S > 0
    assert settings.HEALTH_CHECK_ON_START is False


def test_default_config_builds_routes():
    cfg = default_config(
        Settings(_env_file=None, PRACTICE_API_BASE_URL="http://svc/", REMOTE_TIMEOUT_S=3)
    )
    assert cfg.route(QUESTIONS_ROUTE).url == "http://svc/api/interview/question"
    assert cfg.route(FEEDBACK_ROUTE).url == "http://svc/api/interview/feedback"
    assert cfg.route(HEALTH_ROUTE).timeout_s == 3
    with pytest.raises(KeyError):
        cfg.route("missing")


def test_load_config_from_file(tmp_path):
    path = tmp_path / "app_config.json"
    path.write_text(
        json.dumps(
            {
                "routes": {
                    "questions": _route("questions", "/q"),
                    "feedback": _route("feedback", "/f"),
                    "health": _route("health", "/h"),
                },
                "health_check_on_start": True,
            }
        ),
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.health_check_on_start is True
    assert cfg.route("questions").max_retries == 0
    assert cfg.route("feedback").url == "http://local/f"


def test_load_config_rejects_missing_routes(tmp_path):
    path = tmp_path / "app_config.json"
    path.write_text(json.dumps({"routes": {"questions": _route("questions", "/q")}}), encoding="utf-8")
    with pytest.raises(ValidationError) as info:
        load_config(path)
    assert "feedback" in str(info.value)
    assert "health" in str(info.value)
