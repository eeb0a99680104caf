"""Navigation domain models.

This module defines the data structures exchanged by the navigator:
the confirmation request shown before a move and the terminal result
of a navigation attempt.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath

CHANGE_LOCATION = "Change location"


class NavigationStatus(str, Enum):
    """Terminal outcome of a navigation attempt.

    Attributes:
        NAVIGATED: The location was changed to the parent.
        AT_ROOT: The location is a filesystem root; nothing to do.
        DECLINED: The confirmation gate refused the move.
        FAILED: The location change itself failed (permission, I/O).
    """

    NAVIGATED = "navigated"
    AT_ROOT = "at_root"
    DECLINED = "declined"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ConfirmationRequest:
    """A state-changing action awaiting approval.

    Attributes:
        description: What will happen, e.g. ``from '/a/b' to '/a'``.
        action: Short label of the action.
    """

    description: str
    action: str = CHANGE_LOCATION

    @property
    def prompt(self) -> str:
        """Question text for interactive prompts."""
        return f"{self.action}: {self.description}?"


@dataclass(frozen=True, slots=True)
class NavigationResult:
    """Result of a navigation attempt.

    Attributes:
        status: Terminal status of the attempt.
        origin: Location before the attempt.
        location: Location after the attempt.
        levels_moved: Number of parent steps actually taken.
        error: Reason text when status is FAILED, None otherwise.
    """

    status: NavigationStatus
    origin: PurePath
    location: PurePath
    levels_moved: int = 0
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate result consistency."""
        if self.levels_moved < 0:
            msg = f"levels_moved cannot be negative, got {self.levels_moved}"
            raise ValueError(msg)
        if self.status == NavigationStatus.FAILED and not self.error:
            msg = "Failed navigation requires an error reason"
            raise ValueError(msg)

    @property
    def moved(self) -> bool:
        """Check if the location changed."""
        return self.levels_moved > 0

    @property
    def succeeded(self) -> bool:
        """Check if the attempt ended in a non-error state."""
        return self.status != NavigationStatus.FAILED

    @property
    def failed(self) -> bool:
        """Check if the location change failed."""
        return self.status == NavigationStatus.FAILED
