"""File storage for plain-text wiki pages."""

import logging
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from plainwiki.core.models import Page, PageMetadata

logger = logging.getLogger(__name__)


class FileStorage:
    """Pages are plain files under ``base_path``.

    File naming: ``dir/PageName<ext>``; slashes in a page name are
    sub-directories. Pages may open with a YAML frontmatter block.
    """

    FRONTMATTER_PATTERN = re.compile(
        r"^---\s*\n(.*?)\n---\s*\n",
        re.DOTALL,
    )

    def __init__(self, base_path: Path, ext: str = ".txt"):
        self.base_path = Path(base_path)
        self.ext = ext

    def get_path(self, name: str) -> Path:
        """Get full path for a page."""
        return self.base_path / f"{name}{self.ext}"

    def _parse_frontmatter(self, content: str) -> tuple[PageMetadata, str]:
        """Parse YAML frontmatter from content.

        Returns (metadata, content_without_frontmatter).
        """
        match = self.FRONTMATTER_PATTERN.match(content)
        if match:
            try:
                frontmatter = yaml.safe_load(match.group(1)) or {}
                metadata = PageMetadata(**frontmatter)
                return metadata, content[match.end() :]
            except (yaml.YAMLError, TypeError, ValidationError):
                logger.debug("Ignoring unreadable frontmatter")
        return PageMetadata(), content

    def page_exists(self, name: str) -> bool:
        return self.get_path(name).is_file()

    def read_page(self, name: str) -> Page:
        """Read a page, splitting off its frontmatter."""
        content = self.get_path(name).read_text(encoding="utf-8")
        metadata, body = self._parse_frontmatter(content)
        return Page(name=name, content=body, metadata=metadata, exists=True)

    def touch_page(self, name: str) -> Path:
        """Create an empty page file, including parent directories."""
        path = self.get_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        logger.info("Created page %s", path)
        return path
