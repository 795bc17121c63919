# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Optional AI enhancements: completion backends, prioritization, response parsing."""

from bountyagent.ai.completion import (
    AnthropicCompletionService,
    CompletionOutcome,
    CompletionService,
    OllamaCompletionService,
    build_completion_service,
)
from bountyagent.ai.prioritizer import Prioritizer

__all__ = [
    "AnthropicCompletionService",
    "CompletionOutcome",
    "CompletionService",
    "OllamaCompletionService",
    "Prioritizer",
    "build_completion_service",
]
