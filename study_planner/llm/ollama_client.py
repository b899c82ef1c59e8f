"""Ollama-backed plan model for local development."""

from __future__ import annotations

from typing import Any

from langchain_ollama import ChatOllama

from study_planner.config import settings


def get_chat_model(schema: dict[str, Any] | None = None):
    """Return a ChatOllama instance configured from settings.

    Parameters
    ----------
    schema : dict, optional
        JSON schema passed as Ollama's ``format`` to constrain the output.

    Returns
    -------
    langchain_ollama.ChatOllama
        A chat model connected to the local Ollama server.
    """
    return ChatOllama(
        base_url=settings.ollama_base_url,
        model=settings.ollama_model,
        format=schema or "json",
        temperature=0,
        client_kwargs={"timeout": settings.ollama_timeout_seconds},
    )


class OllamaPlanModel:
    """Structured JSON generation through a local Ollama server."""

    name = "ollama"

    def generate_json(self, prompt: str, schema: dict[str, Any]) -> str:
        llm = get_chat_model(schema)
        response = llm.invoke(prompt)
        return getattr(response, "content", str(response)).strip()
