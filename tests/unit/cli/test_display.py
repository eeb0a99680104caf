"""Unit tests for display helpers."""

from pathlib import PurePosixPath
from unittest.mock import MagicMock, patch

from rich.console import Console
from updir.cli.display import create_listing_table, print_navigation_result
from updir.core.theme import get_theme
from updir.navigation.listing import DirectoryEntry, EntryType
from updir.navigation.models import NavigationResult, NavigationStatus


def _render(table: object) -> str:
    console = Console(theme=get_theme(), width=120, record=True)
    console.print(table)
    return console.export_text()


class TestCreateListingTable:
    """Tests for create_listing_table function."""

    def test_rows(self) -> None:
        """Each entry becomes a row with type, name and size."""
        entries = [
            DirectoryEntry("src", "/p/src", EntryType.DIRECTORY, None, "2024-01-15T10:00:00+00:00"),
            DirectoryEntry("app.py", "/p/app.py", EntryType.FILE, 2048, "2024-01-15T10:00:00+00:00"),
            DirectoryEntry("old", "/p/old", EntryType.DEAD_SYMLINK, None, None),
        ]

        table = create_listing_table("/p", entries)
        text = _render(table)

        assert table.row_count == 3
        assert "src/" in text
        assert "2.0 KB" in text
        assert "dead link" in text
        assert "2024-01-15 10:00:00" in text


class TestPrintNavigationResult:
    """Tests for print_navigation_result function."""

    @patch("updir.cli.display.print_success")
    def test_navigated(self, mock_success: MagicMock) -> None:
        """A move prints the new location."""
        result = NavigationResult(
            NavigationStatus.NAVIGATED, PurePosixPath("/a/b"), PurePosixPath("/a"), 1
        )

        print_navigation_result(result)

        mock_success.assert_called_once_with("Location: /a")

    @patch("updir.cli.display.print_info")
    def test_root_after_moving(self, mock_info: MagicMock) -> None:
        """Reaching the root mid-walk reports the levels taken."""
        result = NavigationResult(
            NavigationStatus.AT_ROOT, PurePosixPath("/a"), PurePosixPath("/"), 1
        )

        print_navigation_result(result)

        assert "after 1 level(s)" in mock_info.call_args.args[0]

    @patch("updir.cli.display.print_error")
    def test_failed(self, mock_error: MagicMock) -> None:
        """Failures print the reason."""
        result = NavigationResult(
            NavigationStatus.FAILED, PurePosixPath("/a"), PurePosixPath("/a"), error="denied"
        )

        print_navigation_result(result)

        assert "denied" in mock_error.call_args.args[0]
