"""
Configuration settings for talentparse.

Values come from the environment (a local .env file is honoured). Nothing here
is read at import time: call load_settings() and hand the result to the
parser, brief generator or feedback analyzer that needs it.
"""

from __future__ import annotations
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# LLM Provider Configuration
# "openai" talks to any OpenAI-compatible endpoint (DeepSeek by default),
# "ollama" to a local Ollama server.
DEFAULT_PROVIDER = "openai"

DEFAULT_MODEL = {
    "ollama": "llama3.1",
    "openai": "deepseek-chat",
}

DEFAULT_BASE_URL = "https://api.deepseek.com/v1"
DEFAULT_OLLAMA_BASE_URL = "http://localhost:11434"
DEFAULT_TIMEOUT = 30.0

# Per-call sampling parameters
EXTRACTION_PARAMS = {"temperature": 0.3, "max_tokens": 2000}
BRIEF_PARAMS = {"temperature": 0.5, "max_tokens": 300}
FEEDBACK_PARAMS = {"temperature": 0.3, "max_tokens": 1000}


@dataclass(frozen=True)
class Settings:
    provider: str = DEFAULT_PROVIDER
    model: str = DEFAULT_MODEL[DEFAULT_PROVIDER]
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    ollama_base_url: str = DEFAULT_OLLAMA_BASE_URL


def get_model_for_provider(provider: str | None = None) -> str:
    """Get the default model for the specified provider."""
    provider = provider or DEFAULT_PROVIDER
    return DEFAULT_MODEL.get(provider, DEFAULT_MODEL[DEFAULT_PROVIDER])


def load_settings() -> Settings:
    """Build Settings from the process environment and .env."""
    load_dotenv()
    provider = os.getenv("LLM_PROVIDER", DEFAULT_PROVIDER).lower()
    return Settings(
        provider=provider,
        model=os.getenv("LLM_MODEL") or get_model_for_provider(provider),
        api_key=(
            os.getenv("LLM_API_KEY")
            or os.getenv("DEEPSEEK_API_KEY")
            or os.getenv("OPENAI_API_KEY")
            or ""
        ),
        base_url=os.getenv("LLM_BASE_URL") or os.getenv("DEEPSEEK_API_URL") or DEFAULT_BASE_URL,
        timeout=float(os.getenv("LLM_TIMEOUT", DEFAULT_TIMEOUT)),
        ollama_base_url=os.getenv("OLLAMA_BASE_URL", DEFAULT_OLLAMA_BASE_URL),
    )
