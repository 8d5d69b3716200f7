# profilemark:header:start
#
#   project      : ProfileMark
#   file         : __init__.py
#   file_relpath : src/profilemark/provision/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Provisioning flow around the profile core.

`run_plan` executes a `ProvisionPlan` step by step: package index refresh and
upgrade, repositories, packages, vendor installers, static files, profile blocks
and profile lines. Collaborator commands go through a `CommandRunner`.
"""

from __future__ import annotations

from profilemark.provision.plan import ProvisionReport, StepKind, StepOutcome, run_plan
from profilemark.provision.system import CommandRunner, command_exists

__all__ = [
    "CommandRunner",
    "ProvisionReport",
    "StepKind",
    "StepOutcome",
    "command_exists",
    "run_plan",
]
