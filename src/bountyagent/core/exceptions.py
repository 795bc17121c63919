# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for bountyagent."""


class BountyAgentError(Exception):
    """Base exception for all bountyagent errors."""


class ConfigurationError(BountyAgentError):
    """Invalid or missing configuration."""


class AdapterError(BountyAgentError):
    """A tool adapter could not interpret its raw output."""


class ScanError(BountyAgentError):
    """The scan produced nothing to report (total pipeline failure)."""


class AIServiceError(BountyAgentError):
    """Error communicating with the AI completion service."""


class AIResponseError(BountyAgentError):
    """The AI completion service returned an unusable response."""
