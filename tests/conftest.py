"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temp dir so user settings never leak in."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Create tree/a/b/c with a few files and return the tree root.

    Layout:
        tree/a/notes.txt
        tree/a/.hidden
        tree/a/b/c/
        tree/a/b/data.bin (16 bytes)
    """
    root = tmp_path / "tree"
    deepest = root / "a" / "b" / "c"
    deepest.mkdir(parents=True)
    (root / "a" / "notes.txt").write_text("hello")
    (root / "a" / ".hidden").write_text("secret")
    (root / "a" / "b" / "data.bin").write_bytes(b"\x00" * 16)
    return root
