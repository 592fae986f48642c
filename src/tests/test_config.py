"""Unit tests for application configuration."""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from plainwiki.config import TEMPLATES_DIR, Settings


class TestSettings:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.wiki_dir is None
            assert s.project_dir is None
            assert s.page_ext == ".txt"
            assert s.export_ext == ".html"
            assert s.export_format == "markdown"
            assert s.templates_dir == TEMPLATES_DIR
            assert s.index_page == "IndexPage"
            assert s.debug is False

    def test_from_env(self):
        env = {
            "PLAINWIKI_WIKI_DIR": "/tmp/wiki",
            "PLAINWIKI_PROJECT_DIR": "/tmp",
            "PLAINWIKI_EXPORT_FORMAT": "textile",
            "PLAINWIKI_AUTHOR": "alice",
            "PLAINWIKI_DEBUG": "true",
        }
        with patch.dict("os.environ", env, clear=True):
            s = Settings(_env_file=None)
            assert s.wiki_dir == Path("/tmp/wiki")
            assert s.project_dir == Path("/tmp")
            assert s.export_format == "textile"
            assert s.author == "alice"
            assert s.debug is True

    def test_extensions_get_dot(self):
        env = {"PLAINWIKI_PAGE_EXT": "md", "PLAINWIKI_EXPORT_EXT": ".htm"}
        with patch.dict("os.environ", env, clear=True):
            s = Settings(_env_file=None)
            assert s.page_ext == ".md"
            assert s.export_ext == ".htm"

    def test_unknown_export_format(self):
        with patch.dict("os.environ", {"PLAINWIKI_EXPORT_FORMAT": "rst"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_bundled_templates_present(self):
        names = ("wiki-header.html", "wiki-footer.html", "wiki-styles.css", "IndexPage.txt")
        for name in names:
            assert (TEMPLATES_DIR / name).is_file()
