import asyncio

import pytest

import practice_cli
from practice import InterviewCoachSurface, ProfileStore, SessionController, SkillsPracticeSurface


def _reader(lines):
    script = iter(lines)

    def read(_prompt):
        for line in script:
            return line
        raise EOFError

    return read


def test_build_profile_applies_flags():
    args = practice_cli.build_parser().parse_args(
        ["--role", "Backend Developer", "--experience", "5", "--keyword", "Go", "--keyword", "React", "--company-type", "big_tech"]
    )
    store = practice_cli.build_profile(args)
    snap = store.snapshot()
    assert snap.job_role_or_skill == "Backend Developer"
    assert snap.experience_level == 5
    assert snap.keywords == ("React", "JavaScript", "CSS", "Go")
    assert snap.tag("company_type") == "big_tech"
    assert snap.tag("interview_round") == "technical"


def test_run_session_with_fallback_questions(app_config, remote_down, capsys):
    controller = SessionController(InterviewCoachSurface(), config=app_config, client=remote_down)
    store = ProfileStore("Data Engineer")
    asyncio.run(
        practice_cli.run_session(controller, store, read=_reader(["", "my first answer", "/skip", "last one"]))
    )
    out = capsys.readouterr().out
    assert "built-in practice questions" in out
    assert "Question 1 of 3" in out
    assert "Question 3 of 3" in out
    assert "Answer text is required." in out
    assert "Score: 7/10" in out
    assert "Answered 2 of 3 (skipped 1)." in out
    assert controller.status == "complete"


def test_run_session_quit_early(app_config, remote_ok, capsys):
    controller = SessionController(SkillsPracticeSurface(), config=app_config, client=remote_ok)
    asyncio.run(practice_cli.run_session(controller, ProfileStore("React"), read=_reader(["/quit"])))
    out = capsys.readouterr().out
    assert "Question 1 of 2" in out
    assert "Answered 0 of 2 (skipped 0)." in out
    assert "Average score" not in out
    assert controller.status == "active"


def test_list_skills(capsys):
    practice_cli.main(["--list-skills"])
    out = capsys.readouterr().out
    assert "cloud" in out
    assert "Kubernetes" in out


def test_blank_role_is_a_usage_error(capsys):
    with pytest.raises(SystemExit):
        practice_cli.main(["--role", "   "])


def test_list_single_category(capsys):
    practice_cli.main(["--list-skills", "--category", "mobile"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("mobile")


def test_closed_input_ends_session_with_summary(app_config, remote_down, capsys):
    controller = SessionController(InterviewCoachSurface(), config=app_config, client=remote_down)
    asyncio.run(practice_cli.run_session(controller, ProfileStore("Data Engineer"), read=_reader(["first answer"])))
    out = capsys.readouterr().out
    assert "Question 2 of 3" in out
    assert "Answered 1 of 3 (skipped 0)." in out
    assert controller.status == "active"
