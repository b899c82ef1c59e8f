"""Progress summary for a study plan the user is working through."""

from __future__ import annotations

from datetime import date

from study_planner.assessment.diagnostic import topic_mastery
from study_planner.schemas.assessment import ProgressReport
from study_planner.schemas.study_plan import StudyPlan


def summarize_progress(
    plan: StudyPlan, answers: dict[int, str] | None = None, today: date | None = None
) -> ProgressReport:
    today_iso = (today or date.today()).isoformat()
    completed = [task for task in plan.tasks if task.completed]
    today_task = next((task for task in plan.tasks if task.date == today_iso), None)
    return ProgressReport(
        total_tasks=len(plan.tasks),
        completed_tasks=len(completed),
        remaining_tasks=len(plan.tasks) - len(completed),
        total_hours=plan.total_hours,
        completed_hours=sum(task.estimated_hours for task in completed),
        today_task=today_task,
        mastery=topic_mastery(answers or {}),
    )
