"""A wiki session: navigation, page creation and export for one wiki root."""

import logging
import os
import shutil
from pathlib import Path

from plainwiki.config import Settings, settings as default_settings
from plainwiki.core.converter import get_converter
from plainwiki.core.index import build_page_index, linked_page_list
from plainwiki.core.models import LinkContext, Resolution
from plainwiki.core.ports import Opener, Prompt
from plainwiki.core.resolver import (
    is_absolute_link,
    normalize_page_name,
    resolve_page_name,
)
from plainwiki.core.scanner import page_name_at
from plainwiki.core.storage import FileStorage
from plainwiki.errors import (
    CancelledError,
    ExportCancelledError,
    MissingDirectoryError,
    WikiError,
    WikiExistsError,
)
from plainwiki.export import WikiExporter, obstructing_files

logger = logging.getLogger(__name__)

INDEX_TEMPLATE = "IndexPage.txt"


class WikiSession:
    """Commands run against a single wiki directory.

    The page index is built on first use and kept until
    :meth:`refresh_index` is called; pages created through the session
    refresh it automatically.
    """

    def __init__(
        self,
        wiki_dir: Path | None,
        prompt: Prompt,
        opener: Opener,
        settings: Settings = default_settings,
        project_dir: Path | None = None,
    ):
        if not wiki_dir:
            raise MissingDirectoryError()
        self.dir = Path(wiki_dir)
        self.project_dir = project_dir or settings.project_dir
        self.prompt = prompt
        self.opener = opener
        self.settings = settings
        self.storage = FileStorage(self.dir, settings.page_ext)
        self._pages: list[str] | None = None

    @classmethod
    def from_context(
        cls,
        context: LinkContext,
        prompt: Prompt,
        opener: Opener,
        settings: Settings = default_settings,
    ) -> "WikiSession":
        return cls(
            context.wiki_dir,
            prompt,
            opener,
            settings=settings,
            project_dir=context.project_dir,
        )

    @property
    def pages(self) -> list[str]:
        if self._pages is None:
            self._pages = build_page_index(self.dir, self.settings.page_ext)
        return self._pages

    def refresh_index(self) -> None:
        self._pages = None

    def resolve(self, name: str) -> Resolution:
        return resolve_page_name(self.pages, name)

    def go_to(self, name: str) -> Path:
        """Open page ``name``, creating it first if it does not exist.

        Names starting with ``/`` are looked up from the project root.
        """
        if not normalize_page_name(name).strip():
            raise WikiError(f"Not a page name: {name!r}")

        storage = self.storage
        pages = self.pages
        if is_absolute_link(name) and self.project_dir:
            storage = FileStorage(Path(self.project_dir), self.settings.page_ext)
            pages = build_page_index(storage.base_path, self.settings.page_ext)

        resolution = resolve_page_name(pages, name)
        if resolution.exists:
            path = storage.get_path(resolution.name)
        else:
            path = storage.touch_page(resolution.name)
            self.refresh_index()
            self.opener.refresh()

        self.opener.open_file(path)
        return path

    def follow_link(self, context: LinkContext) -> Path:
        """Go to the page named by the link or word under the cursor."""
        name = page_name_at(context.line, context.index, context.word)
        if not name.strip():
            raise WikiError("No page name under the cursor")
        return self.go_to(name)

    def go_to_index_page(self) -> Path:
        return self.go_to(self.settings.index_page)

    def linked_page_list(self) -> str:
        return linked_page_list(self.pages)

    def ask_for_export_dir(self) -> Path:
        """Ask for an export directory and clear it for writing.

        Raises:
            CancelledError: if no directory was chosen.
            ExportCancelledError: if the user declined to replace files.
        """
        export_dir = self.prompt.choose_directory("Choose a directory for wiki export")
        if not export_dir:
            raise CancelledError()
        export_dir = Path(export_dir).resolve()
        self.check_obstructions(export_dir)
        return export_dir

    def check_obstructions(self, export_dir: Path) -> None:
        obstructing = obstructing_files(self.pages, export_dir, self.settings.export_ext)
        if obstructing and not self.prompt.confirm_overwrite(obstructing):
            raise ExportCancelledError()

    def export_as_html(self, export_dir: Path | None = None) -> list[Path]:
        """Export the wiki as HTML and open the exported index page."""
        if export_dir is None:
            export_dir = self.ask_for_export_dir()
        else:
            export_dir = Path(export_dir).resolve()
            self.check_obstructions(export_dir)

        exporter = WikiExporter(
            self.dir,
            self.pages,
            converter=get_converter(self.settings.export_format),
            templates_dir=self.settings.templates_dir,
            page_ext=self.settings.page_ext,
            export_ext=self.settings.export_ext,
            author=self.settings.author or os.environ.get("USER"),
            index_page=self.settings.index_page,
        )
        written = exporter.export(export_dir)
        index_page = f"{self.settings.index_page}{self.settings.export_ext}"
        self.opener.open_file(export_dir / index_page)
        return written

    @classmethod
    def create_new_wiki(
        cls,
        prompt: Prompt,
        opener: Opener,
        directory: Path | None = None,
        settings: Settings = default_settings,
    ) -> "WikiSession":
        """Start a wiki in ``directory`` seeded with the template index page.

        Raises:
            CancelledError: if no directory was given or chosen.
            WikiExistsError: if the directory already has an index page.
        """
        if directory is None:
            directory = prompt.choose_directory(
                "Choose a directory for your new wiki "
                f"({settings.index_page}{settings.page_ext} will be created automatically)"
            )
            if not directory:
                raise CancelledError()

        wiki = cls(directory, prompt, opener, settings=settings)
        index_file = wiki.storage.get_path(settings.index_page)
        if wiki.storage.page_exists(settings.index_page):
            raise WikiExistsError(f"{index_file.name} already exists here")

        wiki.dir.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(settings.templates_dir / INDEX_TEMPLATE, index_file)
        logger.info("Created new wiki in %s", wiki.dir)

        opener.open_directory(wiki.dir)
        wiki.go_to_index_page()
        return wiki
