"""Page index: every wiki page under a root directory."""

import logging
from collections.abc import Iterator
from pathlib import Path

from plainwiki.errors import WikiDirectoryError

logger = logging.getLogger(__name__)


def _walk(path: Path, ext: str) -> Iterator[str]:
    for entry in sorted(path.iterdir(), key=lambda p: p.name):
        if entry.name.startswith("."):
            continue
        if entry.is_dir():
            for name in _walk(entry, ext):
                yield f"{entry.name}/{name}"
        elif entry.suffix == ext:
            yield entry.name[: -len(ext)]


def build_page_index(root: Path, ext: str = ".txt") -> list[str]:
    """List page names under ``root``.

    Sub-directories contribute ``dir/name`` compound names, files with
    ``ext`` contribute their stem, hidden entries are skipped at every
    level. The result is sorted case-insensitively.

    Raises:
        WikiDirectoryError: if ``root`` cannot be listed.
    """
    try:
        names = list(_walk(Path(root), ext))
    except OSError as e:
        raise WikiDirectoryError(f"Cannot read wiki directory {root}: {e.strerror}") from e

    names.sort(key=str.lower)
    logger.info("Indexed %d pages under %s", len(names), root)
    return names


def linked_page_list(pages: list[str]) -> str:
    """Return a bulleted list of delimited links, one per page."""
    return "\n".join(f"* [[{page}]]" for page in pages)
