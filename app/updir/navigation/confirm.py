"""Confirmation collaborators for the navigator.

Every function here matches the navigator's Confirm signature
``(description, action) -> bool`` so callers can swap an interactive
prompt for a deterministic approve, deny or dry-run gate.
"""

import logging
import os
import sys
from collections.abc import Mapping
from typing import TextIO

import typer
from rich.markup import escape

from updir.navigation.models import ConfirmationRequest
from updir.navigation.navigator import Confirm
from updir.utils.formatting import err_console

logger = logging.getLogger(__name__)

# Environment variables set by CI systems and build agents
AUTOMATION_ENV_VARS: tuple[str, ...] = (
    "JENKINS_URL",
    "GITHUB_ACTIONS",
    "TF_BUILD",
    "CI",
    "BUILD_ID",
    "RUNNER_OS",
    "SYSTEM_TEAMPROJECT",
    "TEAMCITY_VERSION",
    "TRAVIS",
    "APPVEYOR",
    "CIRCLECI",
    "GITLAB_CI",
    "AZURE_PIPELINES",
)


def auto_approve(description: str, action: str) -> bool:
    """Approve every request."""
    return True


def auto_deny(description: str, action: str) -> bool:
    """Decline every request."""
    return False


def prompt_confirm(description: str, action: str) -> bool:
    """Ask the user on the terminal (prompt on stderr). Defaults to yes."""
    request = ConfirmationRequest(description=description, action=action)
    return typer.confirm(request.prompt, default=True, err=True)


def what_if(description: str, action: str) -> bool:
    """Report what would happen (on stderr) and decline."""
    err_console.print(
        f'[muted]What if: Performing "{action}" on target "{escape(description)}".[/]'
    )
    return False


def is_unattended(
    environ: Mapping[str, str] | None = None,
    stdin: TextIO | None = None,
) -> bool:
    """Detect whether updir runs without a user to answer prompts.

    Args:
        environ: Environment to inspect. Defaults to os.environ.
        stdin: Input stream to inspect. Defaults to sys.stdin.

    Returns:
        True if an automation environment variable is set or stdin
        is not an interactive terminal.
    """
    env = os.environ if environ is None else environ
    if any(env.get(name) for name in AUTOMATION_ENV_VARS):
        return True

    stream = sys.stdin if stdin is None else stdin
    try:
        return not stream.isatty()
    except (AttributeError, ValueError):
        # Closed or replaced stream
        return True


def select_confirm(*, force: bool, dry_run: bool, ask: bool = True) -> Confirm:
    """Pick the confirmation gate for a CLI invocation.

    Args:
        force: Bypass confirmation (``--force``).
        dry_run: Only report what would happen (``--dry-run``).
        ask: Whether the user's settings ask for confirmation.

    Returns:
        A Confirm callable.
    """
    if dry_run:
        return what_if
    if force or not ask:
        return auto_approve
    if is_unattended():
        logger.info("Unattended session detected, approving without prompt")
        return auto_approve
    return prompt_confirm
