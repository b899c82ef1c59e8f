"""Plan generation gateway: prompt, model call, parse, normalize."""

import json
import logging

from pydantic import ValidationError

from study_planner.errors import ExternalServiceError, MalformedPlanError
from study_planner.llm.model_factory import PlanModel, get_plan_model
from study_planner.prompts.study_plan import build_prompt
from study_planner.schemas.study_plan import PlanConstraints, StudyPlan
from study_planner.utils.llm_parse import parse_json_with_schema

logger = logging.getLogger("uvicorn.error")


def normalize_plan(plan: StudyPlan) -> StudyPlan:
    """Return a copy of ``plan`` with every task marked not completed."""
    tasks = [task.model_copy(update={"completed": False}) for task in plan.tasks]
    return plan.model_copy(update={"tasks": tasks})


def generate_study_plan(constraints: PlanConstraints, model: PlanModel | None = None) -> StudyPlan:
    """Generate a fresh study plan for ``constraints``.

    Makes exactly one model call. Nothing is retried or cached; callers retry
    by calling again.

    Parameters
    ----------
    constraints : PlanConstraints
    model : PlanModel, optional
        Defaults to the configured provider.

    Returns
    -------
    StudyPlan
        Normalized plan; no task is marked completed.

    Raises
    ------
    ExternalServiceError
        The model call failed or returned an empty body.
    MalformedPlanError
        The response is not a valid study plan.
    """
    request = build_prompt(constraints)
    if model is None:
        model = get_plan_model()

    logger.info("Plan LLM call started (provider=%s)", getattr(model, "name", "unknown"))
    try:
        raw = model.generate_json(request.prompt_text, request.output_schema)
    except Exception as exc:
        logger.exception("Plan LLM call failed")
        raise ExternalServiceError("Study plan model call failed") from exc
    logger.info("Plan LLM call finished")

    if not raw or not raw.strip():
        raise ExternalServiceError("Study plan model returned an empty response")

    try:
        plan = parse_json_with_schema(raw, StudyPlan)
    except (json.JSONDecodeError, ValidationError, RecursionError) as exc:
        logger.error("Plan response did not match the schema: %s", exc)
        raise MalformedPlanError("Study plan response could not be parsed") from exc

    return normalize_plan(plan)
