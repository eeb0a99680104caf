"""Parent-directory navigation with a confirmation gate.

Each step computes the parent of the session's location, asks the supplied
confirm callback for approval and only then changes the location. A step
ends in exactly one terminal state: navigated, at_root, declined or failed.
"""

import logging
from collections.abc import Callable
from pathlib import PurePath

from updir.navigation.models import (
    CHANGE_LOCATION,
    ConfirmationRequest,
    NavigationResult,
    NavigationStatus,
)
from updir.navigation.session import LocationSession

logger = logging.getLogger(__name__)

# (description, action) -> approved
Confirm = Callable[[str, str], bool]


def parent_of(path: PurePath) -> PurePath | None:
    """Get the parent of a path.

    Args:
        path: Path to inspect.

    Returns:
        The parent path, or None if the path is a filesystem root.
    """
    parent = path.parent
    if parent == path:
        return None
    return parent


def _describe(current: PurePath, parent: PurePath, level: int, levels: int) -> str:
    description = f"from '{current}' to '{parent}'"
    if levels > 1:
        description += f" (level {level} of {levels})"
    return description


def navigate_up(session: LocationSession, confirm: Confirm) -> NavigationResult:
    """Move the session one level up, if confirmed.

    Args:
        session: Session owning the current location.
        confirm: Approval callback, called with (description, action).
            Not called when the location is a root.

    Returns:
        NavigationResult describing the terminal state.
    """
    return navigate_up_levels(session, 1, confirm)


def navigate_up_levels(
    session: LocationSession,
    levels: int,
    confirm: Confirm,
) -> NavigationResult:
    """Move the session up several levels, confirming each step.

    Stops at the first root, declined step or failed location change.
    Steps already taken are kept.

    Args:
        session: Session owning the current location.
        levels: Number of parent steps to take (>= 1).
        confirm: Approval callback, called once per step.

    Returns:
        NavigationResult whose status is that of the last step attempted.

    Raises:
        ValueError: If levels is less than 1.
    """
    if levels < 1:
        msg = f"levels must be at least 1, got {levels}"
        raise ValueError(msg)

    origin = session.location
    moved = 0

    for level in range(1, levels + 1):
        current = session.location
        parent = parent_of(current)
        if parent is None:
            logger.debug("Cannot go up further - at root level: %s", current)
            return NavigationResult(NavigationStatus.AT_ROOT, origin, current, moved)

        request = ConfirmationRequest(
            description=_describe(current, parent, level, levels),
            action=CHANGE_LOCATION,
        )
        if not confirm(request.description, request.action):
            logger.debug("Declined: %s", request.description)
            return NavigationResult(NavigationStatus.DECLINED, origin, current, moved)

        try:
            session.change_to(parent)
        except OSError as e:
            logger.info("Cannot change location to %s: %s", parent, e)
            return NavigationResult(
                NavigationStatus.FAILED,
                origin,
                current,
                moved,
                error=str(e) or type(e).__name__,
            )
        moved += 1

    return NavigationResult(NavigationStatus.NAVIGATED, origin, session.location, moved)
