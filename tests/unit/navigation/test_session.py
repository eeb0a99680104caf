"""Unit tests for LocationSession."""

import os
from pathlib import Path, PurePosixPath

import pytest
from updir.navigation.session import LocationSession


class TestLocationSessionInit:
    """Tests for session construction."""

    def test_relative_path_made_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Relative starting paths are anchored at the working directory."""
        monkeypatch.chdir(tmp_path)

        session = LocationSession("sub/../other")

        assert session.location == Path.cwd() / "other"

    def test_accepts_string(self, tmp_path: Path) -> None:
        """A string location is converted to a Path."""
        session = LocationSession(str(tmp_path))
        assert session.location == tmp_path

    def test_rejects_empty_string(self) -> None:
        """An empty location is rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            LocationSession("")

    def test_pure_path_kept_as_given(self) -> None:
        """Pure paths are not resolved against the filesystem."""
        session = LocationSession(PurePosixPath("/x/y"), verify=False)
        assert session.location == PurePosixPath("/x/y")
        assert not session.verify

    def test_rejects_relative_pure_path(self) -> None:
        """A relative pure path has nothing to anchor it."""
        with pytest.raises(ValueError, match="must be absolute"):
            LocationSession(PurePosixPath("a/b"), verify=False)

    def test_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """from_cwd starts at the process working directory."""
        monkeypatch.chdir(tmp_path)

        session = LocationSession.from_cwd()

        assert session.location == Path.cwd()


class TestChangeTo:
    """Tests for LocationSession.change_to."""

    def test_changes_to_existing_directory(self, nested_tree: Path) -> None:
        """change_to updates the location for a valid directory."""
        session = LocationSession(nested_tree / "a" / "b")

        new = session.change_to(nested_tree / "a")

        assert new == nested_tree / "a"
        assert session.location == nested_tree / "a"

    def test_does_not_touch_process_cwd(self, nested_tree: Path) -> None:
        """The process working directory is never changed."""
        before = os.getcwd()
        session = LocationSession(nested_tree / "a" / "b")

        session.change_to(nested_tree)

        assert os.getcwd() == before

    def test_missing_target(self, tmp_path: Path) -> None:
        """A missing target raises FileNotFoundError and keeps the location."""
        session = LocationSession(tmp_path)

        with pytest.raises(FileNotFoundError):
            session.change_to(tmp_path / "missing")

        assert session.location == tmp_path

    def test_file_target(self, nested_tree: Path) -> None:
        """A file target raises NotADirectoryError."""
        session = LocationSession(nested_tree)

        with pytest.raises(NotADirectoryError):
            session.change_to(nested_tree / "a" / "notes.txt")

    def test_untraversable_target(self, nested_tree: Path) -> None:
        """A directory without execute permission raises PermissionError."""
        locked = nested_tree / "a" / "b"
        session = LocationSession(locked / "c")

        with pytest.MonkeyPatch.context() as mp:
            mp.setattr("updir.navigation.session.os.access", lambda *_args: False)
            with pytest.raises(PermissionError, match="Permission denied"):
                session.change_to(locked)

        assert session.location == locked / "c"

    def test_unverified_session_accepts_anything(self) -> None:
        """With verify=False no filesystem checks are made."""
        session = LocationSession(PurePosixPath("/nowhere/deep"), verify=False)

        session.change_to(PurePosixPath("/nowhere"))

        assert session.location == PurePosixPath("/nowhere")

    def test_change_to_rejects_relative_pure_path(self) -> None:
        """change_to keeps the location when given a relative pure path."""
        session = LocationSession(PurePosixPath("/x/y"), verify=False)

        with pytest.raises(ValueError, match="must be absolute"):
            session.change_to(PurePosixPath("y"))

        assert session.location == PurePosixPath("/x/y")
