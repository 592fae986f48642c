"""Shared fixtures: a small wiki on disk and stand-ins for editor dialogs."""

from pathlib import Path
from unittest.mock import patch

import pytest

from plainwiki.config import Settings


class FakePrompt:
    """Answers dialogs with canned values and records what was asked."""

    def __init__(self, directory: Path | None = None, confirm: bool = True):
        self.directory = directory
        self.confirm = confirm
        self.messages: list[str] = []
        self.overwrite_requests: list[list[Path]] = []

    def choose_directory(self, message: str) -> Path | None:
        self.messages.append(message)
        return self.directory

    def confirm_overwrite(self, paths: list[Path]) -> bool:
        self.overwrite_requests.append(paths)
        return self.confirm


class FakeOpener:
    def __init__(self):
        self.files: list[Path] = []
        self.directories: list[Path] = []
        self.refreshes = 0

    def open_file(self, path: Path) -> None:
        self.files.append(path)

    def open_directory(self, path: Path) -> None:
        self.directories.append(path)

    def refresh(self) -> None:
        self.refreshes += 1


def _write_page(root: Path, name: str, content: str = "", ext: str = ".txt") -> Path:
    path = root / f"{name}{ext}"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def write_page():
    return _write_page


@pytest.fixture
def settings():
    with patch.dict("os.environ", {}, clear=True):
        return Settings(_env_file=None)


@pytest.fixture
def wiki(tmp_path):
    """A wiki with a root index page, a sibling and a nested page."""
    root = tmp_path / "wiki"
    _write_page(root, "IndexPage", "See [[notes]] and SubPage.\n")
    _write_page(root, "Notes", "Back to IndexPage.\n")
    _write_page(root, "sub/Deep", "Up: [[/IndexPage]] and [[Sibling]]\n")
    return root


@pytest.fixture
def prompt():
    return FakePrompt()


@pytest.fixture
def make_prompt():
    return FakePrompt


@pytest.fixture
def opener():
    return FakeOpener()
