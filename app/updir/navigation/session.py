"""Owned current-location state.

A LocationSession holds the "current location" that navigation reads and
mutates. It is passed explicitly to the navigator instead of relying on the
process working directory, so callers (and tests) decide what the location
means. The session never calls os.chdir.
"""

import logging
import os
from pathlib import Path, PurePath

logger = logging.getLogger(__name__)


def _normalize(path: PurePath) -> PurePath:
    """Make a concrete path absolute and collapse ``.``/``..`` lexically.

    Symlinks are not resolved, so the location stays the logical path the
    user navigated through. Pure paths have no working directory to anchor
    them and must already be absolute.
    """
    if isinstance(path, Path):
        return Path(os.path.normpath(path.absolute()))
    if not path.is_absolute():
        msg = f"Location must be absolute: {path}"
        raise ValueError(msg)
    return path


class LocationSession:
    """Holds the current location for a navigation session.

    Args:
        location: Starting location. Relative concrete paths are made
            absolute against the process working directory. Pure paths
            must be absolute.
        verify: If True, change_to() checks that the target is an existing,
            traversable directory. With False the session is purely logical.
    """

    def __init__(self, location: PurePath | str, *, verify: bool = True) -> None:
        if isinstance(location, str):
            if not location:
                msg = "Location cannot be empty"
                raise ValueError(msg)
            location = Path(location)
        self._location = _normalize(location)
        self._verify = verify

    @classmethod
    def from_cwd(cls) -> "LocationSession":
        """Create a session starting at the process working directory."""
        return cls(Path.cwd())

    @property
    def location(self) -> PurePath:
        """Current location."""
        return self._location

    @property
    def verify(self) -> bool:
        """Whether location changes are checked against the filesystem."""
        return self._verify

    def change_to(self, path: PurePath) -> PurePath:
        """Set the current location.

        Args:
            path: New location.

        Returns:
            The normalized new location.

        Raises:
            FileNotFoundError: If the target does not exist.
            NotADirectoryError: If the target is not a directory.
            PermissionError: If the target cannot be entered.
            ValueError: If the target is a relative pure path.
        """
        target = _normalize(path)
        if self._verify:
            self._check_enterable(Path(target))
        logger.debug("Location changed: %s -> %s", self._location, target)
        self._location = target
        return target

    @staticmethod
    def _check_enterable(target: Path) -> None:
        if not target.exists():
            raise FileNotFoundError(f"No such directory: {target}")
        if not target.is_dir():
            raise NotADirectoryError(f"Not a directory: {target}")
        if not os.access(target, os.X_OK):
            raise PermissionError(f"Permission denied: {target}")

    def __repr__(self) -> str:
        return f"LocationSession({str(self._location)!r})"
