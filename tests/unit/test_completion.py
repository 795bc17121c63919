# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the AI completion backends."""

from __future__ import annotations

import asyncio
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import respx

from bountyagent.ai.completion import (
    AnthropicCompletionService,
    CompletionService,
    OllamaCompletionService,
    build_completion_service,
)
from bountyagent.core.config import Settings
from bountyagent.core.exceptions import ConfigurationError

OLLAMA_URL = "http://ollama.test:11434/api/generate"


def _settings(**overrides) -> Settings:
    fields = {
        "ai_enabled": True,
        "ai_backend": "ollama",
        "ai_timeout": 2.0,
        "ollama_host": "http://ollama.test:11434/",
        "anthropic_api_key": "",
    }
    fields.update(overrides)
    return Settings(_env_file=None, **fields)


class _SlowService(CompletionService):
    name = "slow"

    async def _request(self, prompt: str, system: str | None) -> str:
        await asyncio.sleep(5)
        return "late"


class _BrokenService(CompletionService):
    name = "broken"

    async def _request(self, prompt: str, system: str | None) -> str:
        raise RuntimeError("backend exploded")


# ---------------------------------------------------------------------------
# Shared behaviour
# ---------------------------------------------------------------------------


class TestCompletionService:
    async def test_timeout_is_unavailable(self) -> None:
        outcome = await _SlowService(timeout=0.05).complete("hi")
        assert not outcome.ok
        assert "timed out" in (outcome.error or "")

    async def test_unexpected_error_is_unavailable(self) -> None:
        outcome = await _BrokenService(timeout=1.0).complete("hi")
        assert not outcome.ok
        assert outcome.error == "backend exploded"


# ---------------------------------------------------------------------------
# Ollama
# ---------------------------------------------------------------------------


class TestOllamaCompletionService:
    @respx.mock
    async def test_generate_request(self) -> None:
        route = respx.post(OLLAMA_URL).mock(
            return_value=httpx.Response(200, json={"response": '{"findings": []}', "done": True})
        )
        outcome = await OllamaCompletionService(_settings()).complete("scan", system="be terse")

        assert outcome.ok
        assert outcome.text == '{"findings": []}'
        body = json.loads(route.calls.last.request.content)
        assert body == {
            "model": "deepseek-r1:1.5b",
            "prompt": "scan",
            "stream": False,
            "format": "json",
            "system": "be terse",
        }

    @respx.mock
    async def test_server_error(self) -> None:
        respx.post(OLLAMA_URL).mock(return_value=httpx.Response(500, text="boom"))
        outcome = await OllamaCompletionService(_settings()).complete("scan")
        assert not outcome.ok
        assert outcome.error

    @respx.mock
    async def test_connection_refused(self) -> None:
        respx.post(OLLAMA_URL).mock(side_effect=httpx.ConnectError("refused"))
        outcome = await OllamaCompletionService(_settings()).complete("scan")
        assert not outcome.ok

    @respx.mock
    async def test_unexpected_shape(self) -> None:
        respx.post(OLLAMA_URL).mock(return_value=httpx.Response(200, json=["not", "a", "dict"]))
        outcome = await OllamaCompletionService(_settings()).complete("scan")
        assert not outcome.ok
        assert "unexpected Ollama response" in (outcome.error or "")

    @respx.mock
    async def test_empty_response(self) -> None:
        respx.post(OLLAMA_URL).mock(return_value=httpx.Response(200, json={"response": "  "}))
        outcome = await OllamaCompletionService(_settings()).complete("scan")
        assert outcome.error == "empty response"


# ---------------------------------------------------------------------------
# Anthropic
# ---------------------------------------------------------------------------


class TestAnthropicCompletionService:
    async def test_joins_text_blocks(self) -> None:
        client = MagicMock()
        client.messages.create = AsyncMock(
            return_value=SimpleNamespace(
                content=[
                    SimpleNamespace(type="text", text='{"a": '),
                    SimpleNamespace(type="thinking", thinking="..."),
                    SimpleNamespace(type="text", text="1}"),
                ]
            )
        )
        service = AnthropicCompletionService(
            _settings(ai_backend="anthropic", llm_model="claude-test"), client=client
        )
        outcome = await service.complete("prompt", system="sys")

        assert outcome.text == '{"a": 1}'
        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-test"
        assert kwargs["system"] == "sys"
        assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]

    def test_requires_api_key(self) -> None:
        with pytest.raises(ConfigurationError):
            AnthropicCompletionService(_settings(ai_backend="anthropic"))


class TestBuildCompletionService:
    def test_disabled(self) -> None:
        assert build_completion_service(_settings(ai_enabled=False)) is None

    def test_ollama(self) -> None:
        assert isinstance(build_completion_service(_settings()), OllamaCompletionService)

    def test_anthropic_without_key(self) -> None:
        assert build_completion_service(_settings(ai_backend="anthropic")) is None

    def test_anthropic_with_key(self) -> None:
        service = build_completion_service(
            _settings(ai_backend="anthropic", anthropic_api_key="sk-test")
        )
        assert isinstance(service, AnthropicCompletionService)

    def test_unknown_backend(self) -> None:
        assert build_completion_service(_settings(ai_backend="gpt-local")) is None
