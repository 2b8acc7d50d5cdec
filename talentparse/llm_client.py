"""
LLM client abstraction layer to support multiple providers.

Every client sends exactly one request per chat() call: no retries, and a
timeout surfaces as an ordinary exception for the caller to handle.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .config import Settings

try:
    from ollama import Client as OllamaAPI
except ImportError:
    OllamaAPI = None

try:
    from openai import OpenAI
except ImportError:
    OpenAI = None


class LLMResponse:
    """Unified response object for LLM responses."""

    def __init__(self, content: Optional[str]):
        self.message = MessageContent(content)


class MessageContent:
    """Message content wrapper."""

    def __init__(self, content: Optional[str]):
        self.content = content


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    def chat(
        self,
        model: str,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Send a chat request to the LLM provider."""


class OllamaClient(LLMClient):
    """Ollama client implementation."""

    def __init__(self, host: str, timeout: Optional[float] = None):
        if OllamaAPI is None:
            raise ImportError("ollama package is required for OllamaClient")
        self.client = OllamaAPI(host=host, timeout=timeout)

    def chat(self, model, messages, temperature=None, max_tokens=None) -> LLMResponse:
        options = {}
        if temperature is not None:
            options["temperature"] = temperature
        if max_tokens is not None:
            options["num_predict"] = max_tokens
        response = self.client.chat(model=model, messages=messages, options=options or None)
        return LLMResponse(response.message.content)


class OpenAIClient(LLMClient):
    """Client for OpenAI-compatible chat completion endpoints (OpenAI, DeepSeek)."""

    def __init__(self, api_key: str, base_url: str | None = None, timeout: float | None = None):
        if OpenAI is None:
            raise ImportError("openai package is required for OpenAIClient")
        if not api_key:
            raise ValueError("An API key is required. Set LLM_API_KEY or pass api_key.")

        # the SDK sends it as "Authorization: Bearer <key>"
        self.client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)

    def chat(self, model, messages, temperature=None, max_tokens=None) -> LLMResponse:
        kwargs = {}
        if temperature is not None:
            kwargs["temperature"] = temperature
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        response = self.client.chat.completions.create(model=model, messages=messages, **kwargs)
        if not response.choices:
            return LLMResponse(None)
        return LLMResponse(response.choices[0].message.content)


def get_llm_client(settings: Settings) -> LLMClient:
    """Factory function to get the appropriate LLM client based on configuration."""
    provider = settings.provider.lower()
    if provider == "openai":
        return OpenAIClient(settings.api_key, settings.base_url, settings.timeout)
    elif provider == "ollama":
        return OllamaClient(settings.ollama_base_url, settings.timeout)
    else:
        raise ValueError(f"Unsupported LLM provider: {settings.provider}")
