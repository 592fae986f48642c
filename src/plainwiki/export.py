"""Export a wiki directory to cross-linked HTML."""

import logging
import shutil
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from plainwiki.core.converter import Converter
from plainwiki.core.scanner import html_links
from plainwiki.core.storage import FileStorage

logger = logging.getLogger(__name__)

HEADER_TEMPLATE = "wiki-header.html"
FOOTER_TEMPLATE = "wiki-footer.html"
STYLESHEET = "wiki-styles.css"


def template_path(wiki_dir: Path, templates_dir: Path, filename: str) -> Path:
    """Prefer a copy of ``filename`` in the wiki root over the bundled one."""
    local = Path(wiki_dir) / filename
    return local if local.is_file() else Path(templates_dir) / filename


def obstructing_files(
    pages: Sequence[str], export_dir: Path, export_ext: str = ".html"
) -> list[Path]:
    """Existing files an export to ``export_dir`` would replace."""
    export_dir = Path(export_dir)
    targets = [export_dir / f"{page}{export_ext}" for page in pages]
    targets.append(export_dir / STYLESHEET)
    return [path for path in targets if path.is_file()]


class WikiExporter:
    """Writes one HTML file per page plus the stylesheet.

    Pages are processed in index order. Any read, convert or write error
    propagates and stops the export; files already written stay behind.
    """

    def __init__(
        self,
        wiki_dir: Path,
        pages: Sequence[str],
        converter: Converter,
        templates_dir: Path,
        page_ext: str = ".txt",
        export_ext: str = ".html",
        author: str | None = None,
        index_page: str = "IndexPage",
    ):
        self.wiki_dir = Path(wiki_dir)
        self.pages = pages
        self.converter = converter
        self.templates_dir = Path(templates_dir)
        self.export_ext = export_ext
        self.author = author
        self.index_page = index_page
        self.storage = FileStorage(self.wiki_dir, page_ext)
        self.env = Environment(
            loader=FileSystemLoader([str(self.wiki_dir), str(self.templates_dir)]),
            autoescape=select_autoescape(["html"]),
            keep_trailing_newline=True,
        )

    def render_page(self, name: str, export_dir: Path, generated: datetime) -> str:
        page = self.storage.read_page(name)
        linked = html_links(
            page.content,
            self.pages,
            source_file=self.storage.get_path(name),
            wiki_root=self.wiki_dir,
            export_root=export_dir,
            export_ext=self.export_ext,
        )
        header = self.env.get_template(HEADER_TEMPLATE).render(
            page=name,
            title=page.title,
            tags=page.metadata.tags,
            export_dir=export_dir.as_posix(),
            index_page=self.index_page,
        )
        footer = self.env.get_template(FOOTER_TEMPLATE).render(
            export_dir=export_dir.as_posix(),
            generated=generated,
            author=self.author,
            index_page=self.index_page,
        )
        parts = [header, self.converter(linked), footer]
        return "\n".join(part.rstrip("\n") for part in parts) + "\n"

    def export(self, export_dir: Path) -> list[Path]:
        """Export every page under ``export_dir`` and return the written files."""
        export_dir = Path(export_dir)
        generated = datetime.now(timezone.utc)
        written = []

        for name in self.pages:
            target = export_dir / f"{name}{self.export_ext}"
            html = self.render_page(name, export_dir, generated)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(html, encoding="utf-8")
            logger.debug("Exported %s -> %s", name, target)
            written.append(target)

        stylesheet = export_dir / STYLESHEET
        source = template_path(self.wiki_dir, self.templates_dir, STYLESHEET)
        shutil.copyfile(source, stylesheet)
        written.append(stylesheet)

        logger.info("Exported %d pages to %s", len(self.pages), export_dir)
        return written
