# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Optional AI text-completion capability.

Every backend returns a :class:`CompletionOutcome` instead of raising, so
callers must handle the unavailable branch explicitly and fall back to
their deterministic path.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

import anthropic
import httpx

from bountyagent.core.config import Settings
from bountyagent.core.exceptions import AIServiceError, ConfigurationError

logger = logging.getLogger("bountyagent.ai.completion")


@dataclass(frozen=True)
class CompletionOutcome:
    """Either response text or the reason no text is available."""

    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.text is not None

    @classmethod
    def unavailable(cls, reason: str) -> CompletionOutcome:
        return cls(text=None, error=reason)


class CompletionService(ABC):
    """A prompt-in, text-out service bounded by a timeout."""

    name: str = "completion"

    def __init__(self, timeout: float) -> None:
        self._timeout = timeout

    @abstractmethod
    async def _request(self, prompt: str, system: str | None) -> str:
        """Perform the backend call and return the raw text."""
        ...

    async def complete(self, prompt: str, *, system: str | None = None) -> CompletionOutcome:
        try:
            text = await asyncio.wait_for(self._request(prompt, system), timeout=self._timeout)
        except TimeoutError:
            logger.warning("%s completion timed out after %.1fs", self.name, self._timeout)
            return CompletionOutcome.unavailable(f"timed out after {self._timeout}s")
        except (anthropic.APIError, httpx.HTTPError, AIServiceError) as exc:
            logger.warning("%s completion failed: %s", self.name, exc)
            return CompletionOutcome.unavailable(str(exc))
        except Exception as exc:
            logger.warning("Unexpected error from %s completion: %s", self.name, exc)
            return CompletionOutcome.unavailable(str(exc))

        if not text or not text.strip():
            logger.warning("%s returned an empty response", self.name)
            return CompletionOutcome.unavailable("empty response")
        return CompletionOutcome(text=text)


class AnthropicCompletionService(CompletionService):
    """Anthropic Messages API backend."""

    name = "anthropic"

    def __init__(
        self,
        settings: Settings,
        client: anthropic.AsyncAnthropic | None = None,
    ) -> None:
        super().__init__(settings.ai_timeout)
        if client is None and not settings.anthropic_api_key:
            raise ConfigurationError("anthropic backend requires BOUNTYAGENT_ANTHROPIC_API_KEY")
        self._client = client or anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)
        self._model = settings.llm_model
        self._max_tokens = settings.llm_max_tokens
        self._temperature = settings.llm_temperature

    async def _request(self, prompt: str, system: str | None) -> str:
        kwargs: dict[str, object] = {}
        if system:
            kwargs["system"] = system
        response = await self._client.messages.create(
            model=self._model,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            messages=[{"role": "user", "content": prompt}],
            **kwargs,
        )
        return "".join(block.text for block in response.content if block.type == "text")


class OllamaCompletionService(CompletionService):
    """Local Ollama backend using the non-streaming ``/api/generate`` endpoint."""

    name = "ollama"

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings.ai_timeout)
        self._host = settings.ollama_host.rstrip("/")
        self._model = settings.ollama_model

    async def _request(self, prompt: str, system: str | None) -> str:
        payload: dict[str, object] = {
            "model": self._model,
            "prompt": prompt,
            "stream": False,
            "format": "json",
        }
        if system:
            payload["system"] = system

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            resp = await client.post(f"{self._host}/api/generate", json=payload)
            resp.raise_for_status()
            data = resp.json()
        if not isinstance(data, dict) or "response" not in data:
            raise AIServiceError(f"unexpected Ollama response: {str(data)[:200]}")
        return str(data["response"])


def build_completion_service(settings: Settings) -> CompletionService | None:
    """Return the configured backend, or None when AI is disabled or unusable."""
    if not settings.ai_enabled:
        return None

    backend = settings.ai_backend.strip().lower()
    if backend == "ollama":
        return OllamaCompletionService(settings)
    if backend == "anthropic":
        if not settings.anthropic_api_key:
            logger.warning("Anthropic API key not configured; AI enhancements disabled")
            return None
        return AnthropicCompletionService(settings)

    logger.warning("Unknown AI backend %r; AI enhancements disabled", settings.ai_backend)
    return None
