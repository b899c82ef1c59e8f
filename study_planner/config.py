"""Application configuration loaded from environment variables."""

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Type-safe configuration sourced from .env / environment."""

    # Model provider
    llm_provider: Literal["gemini", "ollama"] = "gemini"
    generation_timeout_seconds: int = 120

    # Gemini
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )
    gemini_model: str = "gemini-2.5-flash"

    # Ollama (local development)
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.2"
    ollama_timeout_seconds: int = 120

    # HTTP
    cors_allow_origins: list[str] = ["*"]
    backend_url: str = "http://127.0.0.1:5001"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
