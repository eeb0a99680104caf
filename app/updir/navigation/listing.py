"""Directory listing shown after a navigation.

The navigator never lists anything itself; the CLI calls list_directory()
on the new location and renders the entries.
"""

import logging
import os
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class EntryType(str, Enum):
    """Type of a directory entry.

    Attributes:
        DIRECTORY: Regular directory.
        FILE: Regular file or other non-directory entry.
        SYMLINK: Symbolic link with a valid target.
        DEAD_SYMLINK: Symbolic link whose target does not exist.
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    DEAD_SYMLINK = "dead_symlink"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One entry of a directory listing.

    Attributes:
        name: Entry name within its directory.
        path: Absolute path of the entry.
        entry_type: Kind of entry.
        size_bytes: Size in bytes (None for directories and dead links).
        mtime: Last modification time in ISO 8601 format (None if unavailable).
    """

    name: str
    path: str
    entry_type: EntryType
    size_bytes: int | None
    mtime: str | None

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Name cannot be empty"
            raise ValueError(msg)


def _read_entry(entry: os.DirEntry[str]) -> DirectoryEntry:
    if entry.is_symlink():
        try:
            st = entry.stat(follow_symlinks=True)
        except FileNotFoundError:
            return DirectoryEntry(entry.name, entry.path, EntryType.DEAD_SYMLINK, None, None)
        entry_type = EntryType.SYMLINK
    else:
        st = entry.stat(follow_symlinks=False)
        entry_type = EntryType.DIRECTORY if entry.is_dir() else EntryType.FILE

    mtime = datetime.fromtimestamp(st.st_mtime, tz=UTC).isoformat()
    size = None if entry_type == EntryType.DIRECTORY else st.st_size
    return DirectoryEntry(entry.name, entry.path, entry_type, size, mtime)


def _sort_key(entry: DirectoryEntry) -> tuple[bool, str, str]:
    return (entry.entry_type != EntryType.DIRECTORY, entry.name.casefold(), entry.name)


def list_directory(
    path: Path,
    *,
    show_hidden: bool = False,
    limit: int | None = None,
) -> list[DirectoryEntry]:
    """List the entries of a directory.

    Directories come first, then everything else, each group sorted by
    case-insensitive name. Entries that cannot be stat'ed are skipped.

    Args:
        path: Directory to list.
        show_hidden: Include entries whose name starts with a dot.
        limit: Maximum number of entries to return.

    Returns:
        Sorted list of entries.

    Raises:
        OSError: If the directory itself cannot be read.
    """
    entries: list[DirectoryEntry] = []
    with os.scandir(path) as it:
        for raw in it:
            if not show_hidden and raw.name.startswith("."):
                continue
            try:
                entries.append(_read_entry(raw))
            except OSError as e:
                logger.warning("Skipping unreadable entry %s: %s", raw.path, e)

    entries.sort(key=_sort_key)
    logger.debug("Listed %d entries in %s", len(entries), path)
    return entries[:limit] if limit else entries
