"""Study plan generation prompt template."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from study_planner.schemas.study_plan import STUDY_PLAN_OUTPUT_SCHEMA, PlanConstraints

BEGINNER_FALLBACK = "None identified. Assume beginner level on all topics."

STUDY_PLAN_PROMPT = """\
You are an expert IT certification coach. A student needs a personalized study plan.

Student's constraints and details:
- Weak Topics (prioritize these): {weak_topics}
- Available Study Time: {hours_per_week} hours per week.
- Start Date: {start_date}
- Deadline: {deadline}
- Available Study Materials (titles): {materials}

Task:
Create a detailed, day-by-day study plan from the start date to the deadline.
- Distribute the study hours evenly across the weeks.
- Break down topics into smaller, manageable tasks.
- Ensure weak topics get more attention.
- Be realistic about what can be achieved in the given time.
- Generate tasks like "Read chapter X on [topic]", "Complete practice quiz on [topic]", "Watch video on [sub-topic]", "Lab: Configure a basic firewall".
- The final output must be a valid JSON object matching the provided schema.
"""


@dataclass(frozen=True)
class PlanRequest:
    prompt_text: str
    output_schema: dict[str, Any]


def _format_hours(hours: float) -> str:
    return str(int(hours)) if float(hours).is_integer() else str(hours)


def build_prompt(constraints: PlanConstraints) -> PlanRequest:
    """Render the prompt for ``constraints`` and pair it with the output schema.

    Constraints are used as given; validation happens at the request boundary.
    """
    weak_topics = ", ".join(constraints.weak_topics) or BEGINNER_FALLBACK
    materials = ", ".join(constraints.material_names) or "None"
    prompt_text = STUDY_PLAN_PROMPT.format(
        weak_topics=weak_topics,
        hours_per_week=_format_hours(constraints.hours_per_week),
        start_date=constraints.start_date.isoformat(),
        deadline=constraints.deadline.isoformat(),
        materials=materials,
    )
    return PlanRequest(prompt_text=prompt_text, output_schema=STUDY_PLAN_OUTPUT_SCHEMA)
