# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pathlib import Path
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BOUNTYAGENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Tool adapters
    tools_enabled: bool = True
    enabled_adapters: Annotated[list[str], NoDecode] = [
        "pattern-analysis",
        "semgrep",
        "bandit",
        "eslint",
        "ai-exploration",
    ]
    adapter_timeout: float = 120.0
    scan_timeout: float = 600.0

    @field_validator("enabled_adapters", mode="before")
    @classmethod
    def _parse_enabled_adapters(cls, v: object) -> list[str]:
        if isinstance(v, str):
            return [a.strip() for a in v.split(",") if a.strip()]
        return v if isinstance(v, list) else []

    # Baseline pattern analysis
    pattern_max_files: int = 2000
    pattern_max_file_bytes: int = 1_048_576

    # AI completion service
    ai_enabled: bool = True
    ai_backend: str = "ollama"  # "ollama" or "anthropic"
    ai_timeout: float = 60.0
    anthropic_api_key: str = ""
    llm_model: str = "claude-sonnet-4-6"
    llm_max_tokens: int = 4096
    llm_temperature: float = 0.0
    ollama_host: str = "http://localhost:11434"
    ollama_model: str = "deepseek-r1:1.5b"

    # Prioritizer
    prioritizer_enabled: bool = True
    prioritizer_max_findings: int = 20

    # Exploit synthesis
    ai_exploits_enabled: bool = False
    max_exploits: int = 3

    @field_validator("max_exploits")
    @classmethod
    def _cap_max_exploits(cls, v: int) -> int:
        return max(0, min(v, 3))

    # AI exploration
    exploration_enabled: bool = True
    exploration_max_files: int = 10
    exploration_max_chars: int = 2000

    # Workflow trigger
    workflow_host: str = ""
    workflow_namespace: str = "security"
    workflow_flow_id: str = "bugbounty-security-scan"
    workflow_timeout: float = 5.0

    # Output
    report_path: Path = Path("scan-report.json")

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


def get_settings() -> Settings:
    return Settings()
