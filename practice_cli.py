"""Terminal driver for running one practice session."""
from __future__ import annotations

import argparse
import asyncio
from typing import Callable, List, Optional

from practice import (
    SKILL_CATEGORIES,
    SURFACES,
    AnsweredQuestion,
    ProfileStore,
    Question,
    SessionController,
    UserInputInvalid,
    find_category,
    get_surface,
)
from practice.surfaces import COMPANY_TYPES, INTERVIEW_ROUNDS

SKIP_COMMAND = "/skip"
QUIT_COMMAND = "/quit"


def print_skills(category_id: Optional[str] = None) -> None:
    categories = SKILL_CATEGORIES
    if category_id:
        match = find_category(category_id)
        categories = (match,) if match else ()
    for category in categories:
        print(f"{category.id:<10} {category.name}: {', '.join(category.skills)}")


def _print_question(question: Question, position: int, total: int) -> None:
    print()
    print(f"Question {position} of {total}  [{question.category} • {question.difficulty} • {question.time_limit_minutes} min]")
    print(question.prompt)
    if question.hint:
        print(f"Hint: {question.hint}")
    if question.expected_keywords:
        print(f"Key concepts to cover: {', '.join(question.expected_keywords)}")


def _print_feedback(entry: AnsweredQuestion) -> None:
    fb = entry.feedback
    print(f"Score: {fb.score:g}/10   Keyword match: {fb.keyword_match_percent:g}%")
    print(fb.assessment)
    for strength in fb.strengths:
        print(f"  + {strength}")
    print(f"Improve: {fb.improvement_suggestion}")


def build_profile(args: argparse.Namespace) -> ProfileStore:
    store = get_surface(args.surface).default_profile()
    if args.role:
        store.set_job_role_or_skill(args.role)
    if args.experience is not None:
        store.set_experience_level(int(args.experience) if args.experience.isdigit() else args.experience)
    for keyword in args.keyword or []:
        store.add_keyword(keyword)
    for key, value in (("company_type", args.company_type), ("interview_round", args.round), ("focus_area", args.focus)):
        if value is not None:
            store.set_context_tag(key, value)
    return store


async def run_session(
    controller: SessionController,
    store: ProfileStore,
    *,
    read: Callable[[str], str] = input,
) -> None:
    session = await controller.start(store)
    if session is None:
        return
    if session.source == "fallback":
        print("(Question service unavailable; using built-in practice questions.)")
    while controller.status == "active":
        question = controller.current_question()
        position, total = controller.progress()
        _print_question(question, position, total)
        try:
            text = read("Your answer> ").strip()
        except EOFError:
            print()
            break
        if text == QUIT_COMMAND:
            break
        if text == SKIP_COMMAND:
            controller.skip()
            continue
        try:
            entry = await controller.submit_answer(text)
        except UserInputInvalid as exc:
            print(exc)
            continue
        if entry is not None:
            _print_feedback(entry)

    summary = controller.summary()
    print()
    print(f"Answered {summary.answered} of {summary.total} (skipped {summary.skipped}).")
    if summary.average_score is not None:
        print(f"Average score {summary.average_score}/10, keyword match {summary.average_keyword_match}%.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a practice session in the terminal")
    parser.add_argument("--surface", choices=sorted(SURFACES), default="interview")
    parser.add_argument("--role", help="Job role (interview) or skill (skills)")
    parser.add_argument("--experience", help="Years of experience")
    parser.add_argument("--keyword", action="append", help="Technical keyword; repeatable")
    parser.add_argument("--company-type", choices=COMPANY_TYPES)
    parser.add_argument("--round", choices=INTERVIEW_ROUNDS)
    parser.add_argument("--focus")
    parser.add_argument("--list-skills", action="store_true", help="Show the skill catalog and exit")
    parser.add_argument("--category", help="Limit --list-skills to one category id")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_skills:
        print_skills(args.category)
        return

    try:
        store = build_profile(args)
    except UserInputInvalid as exc:
        parser.error(str(exc))
    controller = SessionController(get_surface(args.surface))
    try:
        asyncio.run(run_session(controller, store))
    except UserInputInvalid as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
