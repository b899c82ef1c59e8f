"""FastAPI application exposing study plan generation."""

from contextlib import asynccontextmanager
import concurrent.futures
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from study_planner.agents.plan_gateway import generate_study_plan
from study_planner.assessment.diagnostic import QUIZ_QUESTIONS, topic_mastery, weak_topics_from_answers
from study_planner.assessment.progress import summarize_progress
from study_planner.config import settings
from study_planner.errors import PlanGenerationError
from study_planner.llm.model_factory import ensure_llm_configured
from study_planner.schemas.assessment import (
    ProgressReport,
    ProgressRequest,
    PublicQuizQuestion,
    QuizAnswers,
    WeakTopicsResponse,
)
from study_planner.schemas.study_plan import ErrorResponse, PlanConstraints, StudyPlan

logger = logging.getLogger("uvicorn.error")


class GenerationTimeout(Exception):
    pass


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_llm_configured()
    yield


app = FastAPI(title="Study Planner", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(RequestValidationError)
async def invalid_request_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.info("Rejected %s %s: %d validation error(s)", request.method, request.url.path, len(errors))
    details = [
        {"field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"), "message": err.get("msg", "")}
        for err in errors
    ]
    if any(err.get("type") == "missing" for err in errors):
        return _error(400, "Missing required fields in request body.", details)
    return _error(400, "Invalid request body.", details)


@app.exception_handler(PlanGenerationError)
async def generation_failed_handler(request: Request, exc: PlanGenerationError):
    logger.error("Study plan generation failed: %s", exc)
    return _error(500, "Failed to generate study plan.")


@app.exception_handler(GenerationTimeout)
async def generation_timeout_handler(request: Request, exc: GenerationTimeout):
    return _error(504, "Study plan generation timed out.")


@app.post(
    "/api/generate-study-plan",
    response_model=StudyPlan,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
)
def generate(constraints: PlanConstraints):
    """Generate a study plan for the submitted constraints.

    The model call runs under ``generation_timeout_seconds``; a slow provider
    yields 504 instead of holding the request open.
    """
    logger.info(
        "Study plan requested: %s to %s, %s h/week, %d weak topic(s)",
        constraints.start_date,
        constraints.deadline,
        constraints.hours_per_week,
        len(constraints.weak_topics),
    )
    executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
    try:
        future = executor.submit(generate_study_plan, constraints)
        done, _ = concurrent.futures.wait([future], timeout=settings.generation_timeout_seconds)
        if not done:
            logger.error("Study plan generation timed out")
            raise GenerationTimeout()
        plan = future.result()
    finally:
        executor.shutdown(wait=False)
    logger.info("Study plan generated with %d task(s)", len(plan.tasks))
    return plan


@app.get("/api/health")
def health():
    return {"status": "ok", "message": "Backend is running", "provider": settings.llm_provider}


@app.get("/api/quiz/questions", response_model=list[PublicQuizQuestion])
def quiz_questions():
    """Diagnostic quiz without answer keys."""
    return [PublicQuizQuestion(**q.model_dump(exclude={"correct_answer"})) for q in QUIZ_QUESTIONS]


@app.post("/api/quiz/weak-topics", response_model=WeakTopicsResponse)
def quiz_weak_topics(payload: QuizAnswers):
    return WeakTopicsResponse(
        weak_topics=weak_topics_from_answers(payload.answers),
        mastery=topic_mastery(payload.answers),
    )


@app.post("/api/progress", response_model=ProgressReport)
def progress(payload: ProgressRequest):
    return summarize_progress(payload.plan, payload.quiz_answers, payload.today)
