"""Shared Rich display functions for navigation results and listings."""

from rich.markup import escape
from rich.table import Table

from updir.navigation.listing import DirectoryEntry, EntryType
from updir.navigation.models import NavigationResult, NavigationStatus
from updir.utils.formatting import format_size, print_error, print_info, print_success

_TYPE_LABELS: dict[EntryType, str] = {
    EntryType.DIRECTORY: "dir",
    EntryType.FILE: "file",
    EntryType.SYMLINK: "link",
    EntryType.DEAD_SYMLINK: "dead link",
}


def create_listing_table(title: str, entries: list[DirectoryEntry]) -> Table:
    """Create a Rich table displaying directory entries.

    Builds a formatted table with Type, Name, Size, and Modified columns.
    Each entry type is styled distinctly.

    Args:
        title: Table title, usually the listed directory.
        entries: Entries to display, already sorted.

    Returns:
        Rich Table configured for listing display.
    """
    table = Table(
        title=escape(title),
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("Type", width=9)
    table.add_column("Name", no_wrap=True)
    table.add_column("Size", style="info", justify="right")
    table.add_column("Modified", style="muted")

    for entry in entries:
        style = f"entry.{entry.entry_type.value}"
        name = escape(entry.name) + ("/" if entry.entry_type == EntryType.DIRECTORY else "")
        modified = entry.mtime[:19].replace("T", " ") if entry.mtime else "-"
        table.add_row(
            f"[muted]{_TYPE_LABELS[entry.entry_type]}[/]",
            f"[{style}]{name}[/]",
            format_size(entry.size_bytes),
            modified,
        )

    return table


def print_navigation_result(result: NavigationResult) -> None:
    """Print a one-line summary of a navigation attempt."""
    location = escape(str(result.location))
    if result.status == NavigationStatus.NAVIGATED:
        print_success(f"Location: {location}")
    elif result.status == NavigationStatus.AT_ROOT:
        if result.moved:
            print_info(f"Reached root after {result.levels_moved} level(s): {location}")
        else:
            print_info(f"Cannot go up further - at root level: {location}")
    elif result.status == NavigationStatus.DECLINED:
        print_info(f"Location unchanged: {location}")
    else:
        print_error(f"Cannot change location from {location}: {escape(result.error or '')}")
