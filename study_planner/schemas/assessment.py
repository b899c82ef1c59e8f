"""Schemas for the diagnostic quiz and progress report."""

from __future__ import annotations

from datetime import date

from pydantic import Field

from study_planner.schemas.study_plan import CamelModel, StudyPlan, StudyTask


class QuizQuestion(CamelModel):
    id: int
    question: str
    options: list[str]
    correct_answer: str
    topic: str


class PublicQuizQuestion(CamelModel):
    """A quiz question as shown to the user, without its answer."""

    id: int
    question: str
    options: list[str]
    topic: str


class QuizAnswers(CamelModel):
    answers: dict[int, str] = Field(default_factory=dict)


class TopicMastery(CamelModel):
    topic: str
    mastery: float


class WeakTopicsResponse(CamelModel):
    weak_topics: list[str]
    mastery: list[TopicMastery]


class ProgressRequest(CamelModel):
    plan: StudyPlan
    quiz_answers: dict[int, str] = Field(default_factory=dict)
    today: date | None = None


class ProgressReport(CamelModel):
    total_tasks: int
    completed_tasks: int
    remaining_tasks: int
    total_hours: float
    completed_hours: float
    today_task: StudyTask | None = None
    mastery: list[TopicMastery] = Field(default_factory=list)
