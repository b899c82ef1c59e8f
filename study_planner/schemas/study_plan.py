"""Request and response schemas for study plan generation."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON with the UI."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UploadedFile(CamelModel):
    """File metadata as sent by the upload page. Content is never sent."""

    name: str
    type: str | None = None
    size: int | None = None


class PlanConstraints(CamelModel):
    """What the user can commit to and where they need the most help."""

    hours_per_week: float = Field(gt=0)
    start_date: date
    deadline: date
    weak_topics: list[str]
    material_names: list[str] = Field(default_factory=list)
    uploaded_files: list[UploadedFile] = Field(default_factory=list, exclude=True)

    @field_validator("hours_per_week", mode="before")
    @classmethod
    def _reject_bool_hours(cls, value):
        if isinstance(value, bool):
            raise ValueError("hoursPerWeek must be a number")
        return value

    @field_validator("weak_topics")
    @classmethod
    def _unique_topics(cls, topics: list[str]) -> list[str]:
        return list(dict.fromkeys(topics))

    @model_validator(mode="after")
    def _check_dates_and_materials(self) -> "PlanConstraints":
        if self.deadline < self.start_date:
            raise ValueError("deadline must not precede startDate")
        if self.uploaded_files:
            self.material_names = self.material_names + [f.name for f in self.uploaded_files]
            self.uploaded_files = []
        return self


class StudyTask(CamelModel):
    date: str
    topic: str
    subtasks: list[str] = Field(alias="tasks", min_length=1)
    estimated_hours: float = Field(ge=0)
    completed: bool = False


class StudyPlan(CamelModel):
    tasks: list[StudyTask] = Field(default_factory=list)
    start_date: str
    deadline: str
    total_hours: float = Field(ge=0)


class ErrorResponse(BaseModel):
    error: str
    details: list[dict[str, Any]] | None = None


STUDY_PLAN_OUTPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "tasks": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "date": {"type": "string", "description": "Date in YYYY-MM-DD format."},
                    "topic": {"type": "string"},
                    "tasks": {"type": "array", "items": {"type": "string"}},
                    "estimatedHours": {"type": "number"},
                    "completed": {"type": "boolean", "description": "Default to false"},
                },
                "required": ["date", "topic", "tasks", "estimatedHours", "completed"],
            },
        },
        "startDate": {"type": "string"},
        "deadline": {"type": "string"},
        "totalHours": {"type": "number"},
    },
    "required": ["tasks", "startDate", "deadline", "totalHours"],
}
