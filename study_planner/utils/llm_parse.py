"""LLM JSON parsing helpers with schema validation."""

from __future__ import annotations

import json
from typing import Type, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def _extract_json_object(raw: str) -> str | None:
    if not raw:
        return None
    start = raw.find("{")
    if start == -1:
        return None
    depth = 0
    for idx in range(start, len(raw)):
        char = raw[idx]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return raw[start : idx + 1]
    return None


def parse_json_with_schema(raw: str, schema: Type[T]) -> T:
    """Validate ``raw`` against ``schema``.

    Models without native structured output sometimes wrap the object in a
    code fence or prose; the first balanced ``{...}`` block is tried next.
    Raises ``json.JSONDecodeError`` or ``pydantic.ValidationError``.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        extracted = _extract_json_object(raw)
        if extracted is None:
            raise
        data = json.loads(extracted)
    return schema.model_validate(data)
