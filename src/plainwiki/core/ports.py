"""Capabilities the wiki needs from its host editor."""

from pathlib import Path
from typing import Protocol


class Prompt(Protocol):
    """Interactive questions put to the user."""

    def choose_directory(self, message: str) -> Path | None:
        """Return the chosen directory, or None if the dialog was cancelled."""
        ...

    def confirm_overwrite(self, paths: list[Path]) -> bool:
        """Return True if the listed existing files may be replaced."""
        ...


class Opener(Protocol):
    """Shows files to the user."""

    def open_file(self, path: Path) -> None: ...

    def open_directory(self, path: Path) -> None: ...

    def refresh(self) -> None:
        """Let the editor pick up newly created files."""
        ...
