"""Plan model selection by configured provider."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from study_planner.config import settings
from study_planner.errors import ConfigurationError
from study_planner.llm.gemini_client import GeminiPlanModel
from study_planner.llm.ollama_client import OllamaPlanModel

logger = logging.getLogger(__name__)


class PlanModel(Protocol):
    name: str

    def generate_json(self, prompt: str, schema: dict[str, Any]) -> str:
        """Return the raw JSON text produced for ``prompt`` under ``schema``."""
        ...


def ensure_llm_configured() -> None:
    """Fail fast when the configured provider is missing its credential.

    Called once at startup; requests never re-check it.
    """
    provider = settings.llm_provider
    if provider == "gemini" and not settings.gemini_api_key:
        raise ConfigurationError(
            "GEMINI_API_KEY environment variable not set. Please create a .env file and add it."
        )
    logger.info("LLM provider configured: %s", provider)


def get_plan_model() -> PlanModel:
    if settings.llm_provider == "ollama":
        return OllamaPlanModel()
    return GeminiPlanModel()
