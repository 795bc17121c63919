# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""bountyagent integrations with external services."""

from bountyagent.integrations.workflow import WorkflowTrigger

__all__ = ["WorkflowTrigger"]
