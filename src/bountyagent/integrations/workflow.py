# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Fire-and-forget trigger for an external workflow orchestrator."""

from __future__ import annotations

import logging

import httpx

from bountyagent.core.config import Settings

logger = logging.getLogger("bountyagent.integrations.workflow")


class WorkflowTrigger:
    """Starts a flow execution via ``POST {host}/api/v1/executions``.

    Failures are logged and reported as ``False``; they never reach the scan.
    """

    def __init__(
        self,
        host: str,
        *,
        namespace: str = "security",
        flow_id: str = "bugbounty-security-scan",
        timeout: float = 5.0,
        scan_depth: str = "STANDARD",
    ) -> None:
        self._host = host.rstrip("/")
        self._namespace = namespace
        self._flow_id = flow_id
        self._timeout = timeout
        self._scan_depth = scan_depth

    @classmethod
    def from_settings(cls, settings: Settings) -> WorkflowTrigger | None:
        if not settings.workflow_host:
            return None
        return cls(
            settings.workflow_host,
            namespace=settings.workflow_namespace,
            flow_id=settings.workflow_flow_id,
            timeout=settings.workflow_timeout,
        )

    @property
    def url(self) -> str:
        return f"{self._host}/api/v1/executions"

    def build_payload(self, target: str, scan_root: str) -> dict[str, object]:
        return {
            "namespace": self._namespace,
            "flowId": self._flow_id,
            "inputs": {
                "repo_url": target,
                "target_path": scan_root,
                "scan_depth": self._scan_depth,
            },
        }

    async def trigger(self, target: str, scan_root: str) -> bool:
        payload = self.build_payload(target, scan_root)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(self.url, json=payload)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Workflow trigger failed for %s: %s", self.url, exc)
            return False

        logger.info(
            "Workflow %s.%s triggered (status %s)",
            self._namespace,
            self._flow_id,
            response.status_code,
        )
        return True
