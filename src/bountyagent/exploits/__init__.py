# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Exploit synthesis: category templates plus an optional AI fallback."""

from bountyagent.exploits.synthesizer import ExploitSynthesizer
from bountyagent.exploits.templates import TEMPLATES, ExploitTemplate, template_for

__all__ = ["TEMPLATES", "ExploitSynthesizer", "ExploitTemplate", "template_for"]
