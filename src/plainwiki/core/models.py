"""Data models for plainwiki."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class PageMetadata(BaseModel):
    """Metadata extracted from page frontmatter."""

    title: str | None = None
    tags: list[str] = Field(default_factory=list)


class Page(BaseModel):
    """Represents a wiki page."""

    name: str
    content: str
    metadata: PageMetadata = Field(default_factory=PageMetadata)
    exists: bool = True

    @property
    def title(self) -> str:
        """Return title from metadata or fall back to the page name."""
        return self.metadata.title or self.name


class Resolution(BaseModel):
    """Outcome of looking a page name up in the index.

    ``exists`` is False when nothing matched; ``name`` is then the
    normalised name as typed, i.e. the page that would be created.
    """

    name: str
    exists: bool


class LinkKind(str, Enum):
    ANCHOR = "anchor"
    URL = "url"
    DELIMITED = "delimited"
    BARE_WORD = "bare_word"


class LinkSpan(BaseModel):
    """A linkable stretch of page text found by the scanner."""

    kind: LinkKind
    raw: str
    start: int
    end: int
    name: str | None = None
    url: str | None = None
    trailing: str = ""


class LinkContext(BaseModel):
    """Editor state needed to follow the link under the cursor."""

    line: str = ""
    index: int = 0
    word: str = ""
    wiki_dir: Path | None = None
    project_dir: Path | None = None
