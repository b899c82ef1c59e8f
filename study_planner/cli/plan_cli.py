"""Command-line client for the study plan endpoint."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date

import requests

from study_planner.assessment.diagnostic import QUIZ_QUESTIONS, weak_topics_from_answers
from study_planner.config import settings


def run_quiz() -> dict[int, str]:
    """Ask the diagnostic quiz on the terminal and return the answers."""
    answers: dict[int, str] = {}
    for q in QUIZ_QUESTIONS:
        print(f"{q.id}. {q.question}")
        for idx, option in enumerate(q.options, start=1):
            print(f"   {idx}) {option}")
        try:
            choice = input("> ").strip()
        except EOFError:
            print()
            break
        if choice.isdigit() and 1 <= int(choice) <= len(q.options):
            answers[q.id] = q.options[int(choice) - 1]
    return answers


def request_plan(url: str, payload: dict, timeout: int) -> tuple[dict | None, str | None]:
    """POST ``payload`` and return ``(plan, error)``; exactly one is set."""
    try:
        resp = requests.post(url, json=payload, timeout=timeout)
    except requests.RequestException as exc:
        return None, f"Backend unreachable: {exc}"
    if resp.status_code != 200:
        try:
            body = resp.json()
        except ValueError:
            body = None
        message = body.get("error") if isinstance(body, dict) else None
        return None, f"Error {resp.status_code}: {message or resp.text}"
    try:
        plan = resp.json()
    except ValueError:
        return None, "Backend returned a response that is not JSON"
    if not isinstance(plan, dict):
        return None, "Backend returned an unexpected plan payload"
    return plan, None


def format_plan(plan: dict) -> str:
    lines = [
        f"Study plan {plan.get('startDate')} -> {plan.get('deadline')} "
        f"({plan.get('totalHours', 0)} h total)"
    ]
    for task in plan.get("tasks") or []:
        status = "x" if task.get("completed") else " "
        lines.append(f"[{status}] {task.get('date')}  {task.get('topic')} ({task.get('estimatedHours')} h)")
        for item in task.get("tasks") or []:
            lines.append(f"      - {item}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a study plan")
    parser.add_argument(
        "--url",
        default=f"{settings.backend_url}/api/generate-study-plan",
        help="Study plan endpoint URL",
    )
    parser.add_argument("--hours", type=float, required=True, help="Hours available per week")
    parser.add_argument("--start", default=date.today().isoformat(), help="Start date (YYYY-MM-DD)")
    parser.add_argument("--deadline", required=True, help="Deadline (YYYY-MM-DD)")
    parser.add_argument("--weak-topic", action="append", default=[], dest="weak_topics")
    parser.add_argument("--material", action="append", default=[], dest="materials")
    parser.add_argument("--quiz", action="store_true", help="Take the diagnostic quiz first")
    parser.add_argument("--json", action="store_true", help="Print the raw JSON plan")
    parser.add_argument(
        "--timeout",
        type=int,
        default=180,
        help="Request timeout in seconds",
    )
    args = parser.parse_args(argv)

    weak_topics = list(args.weak_topics)
    if args.quiz:
        weak_topics += weak_topics_from_answers(run_quiz())

    payload = {
        "hoursPerWeek": args.hours,
        "startDate": args.start,
        "deadline": args.deadline,
        "weakTopics": list(dict.fromkeys(weak_topics)),
        "materialNames": args.materials,
    }

    plan, error = request_plan(args.url, payload, args.timeout)
    if error:
        print(error, file=sys.stderr)
        return 1

    print(json.dumps(plan, indent=2) if args.json else format_plan(plan))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
