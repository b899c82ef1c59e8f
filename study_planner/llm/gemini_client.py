"""Google Gemini plan model.

Requires GEMINI_API_KEY (or the legacy API_KEY) in the environment.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from google import genai

from study_planner.config import settings
from study_planner.errors import ConfigurationError

logger = logging.getLogger(__name__)


def to_gemini_schema(schema: dict[str, Any]) -> dict[str, Any]:
    """Translate a JSON schema into Gemini's dialect (upper-case type names)."""
    converted: dict[str, Any] = {}
    for key, value in schema.items():
        if key == "type" and isinstance(value, str):
            converted[key] = value.upper()
        elif key == "properties" and isinstance(value, dict):
            converted[key] = {name: to_gemini_schema(prop) for name, prop in value.items()}
        elif key == "items" and isinstance(value, dict):
            converted[key] = to_gemini_schema(value)
        else:
            converted[key] = value
    return converted


class GeminiPlanModel:
    """Structured JSON generation through the Gemini API."""

    name = "gemini"

    def __init__(self, api_key: str | None = None, model_id: str | None = None):
        self._api_key = api_key if api_key is not None else settings.gemini_api_key
        self._model_id = model_id or settings.gemini_model

    @property
    def model_id(self) -> str:
        return self._model_id

    def _get_client(self):
        if not self._api_key:
            raise ConfigurationError(
                "GEMINI_API_KEY not set. Add it to the environment or the .env file."
            )
        return genai.Client(api_key=self._api_key)

    def generate_json(self, prompt: str, schema: dict[str, Any]) -> str:
        client = self._get_client()
        config = genai.types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=to_gemini_schema(schema),
        )

        start_time = time.time()
        response = client.models.generate_content(
            model=self._model_id,
            contents=prompt,
            config=config,
        )
        duration_ms = int((time.time() - start_time) * 1000)

        text = (response.text or "").strip()
        logger.info("Gemini call completed: model=%s %dms %d chars", self._model_id, duration_ms, len(text))
        return text
