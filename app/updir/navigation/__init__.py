"""Parent-directory navigation.

This module provides the owned location session, the confirmation-gated
navigator and the directory listing used after a move.
"""

from updir.navigation.listing import DirectoryEntry, EntryType, list_directory
from updir.navigation.models import ConfirmationRequest, NavigationResult, NavigationStatus
from updir.navigation.navigator import Confirm, navigate_up, navigate_up_levels, parent_of
from updir.navigation.session import LocationSession

__all__ = [
    "Confirm",
    "ConfirmationRequest",
    "DirectoryEntry",
    "EntryType",
    "LocationSession",
    "NavigationResult",
    "NavigationStatus",
    "list_directory",
    "navigate_up",
    "navigate_up_levels",
    "parent_of",
]
