"""Text-to-HTML converters for wiki export."""

from collections.abc import Callable

import textile
from markdown import Markdown

from plainwiki.errors import UnknownFormatError

Converter = Callable[[str], str]


def create_parser() -> Markdown:
    """Create a Markdown parser for exported pages.

    Link anchors are already in the text by the time it gets here, so no
    wiki-link extension is needed; raw HTML passes through.
    """
    return Markdown(
        extensions=[
            "extra",  # Includes: abbreviations, attr_list, def_list, fenced_code, footnotes, md_in_html, tables
            "sane_lists",
            "smarty",  # Smart quotes and dashes
            "toc",
            "pymdownx.tasklist",
        ]
    )


def markdown_to_html(content: str) -> str:
    return create_parser().convert(content)


def textile_to_html(content: str) -> str:
    return textile.textile(content)


CONVERTERS: dict[str, Converter] = {
    "markdown": markdown_to_html,
    "textile": textile_to_html,
}


def get_converter(name: str) -> Converter:
    """Return the converter registered under ``name``.

    Raises:
        UnknownFormatError: for anything but "markdown" and "textile".
    """
    try:
        return CONVERTERS[name]
    except KeyError:
        raise UnknownFormatError(f"Unknown export format: {name}") from None
