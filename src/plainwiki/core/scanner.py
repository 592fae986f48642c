"""Link scanning and rewriting for plain-text wiki pages."""

import re
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path
from urllib.parse import quote

from plainwiki.core.models import LinkKind, LinkSpan
from plainwiki.core.paths import export_link
from plainwiki.core.resolver import is_absolute_link, resolve_page_name

# Alternatives are tried in order at each position: existing anchors are
# left alone, then bare URLs, then [[Delimited Links]], then WikiWords.
LINK_PATTERN = re.compile(
    r"""
    (?P<anchor><a\ .+?</a>)
    | (?P<url>https?://\S+)(?P<trailing>\s|$)
    | \[\[(?P<delimited>.+?)\]\]
    | \b(?P<word>[A-Z][a-z]+(?:[A-Z][a-z]*)+)\b
    """,
    re.VERBOSE | re.MULTILINE,
)

DELIMITED_PATTERN = re.compile(r"\[\[(.+?)\]\]")

# Characters URI-escaping leaves alone; '%' and '#' are kept so already
# escaped URLs and fragments survive.
URL_SAFE = "/?:@&=+$,;[]!~*'()#%"


def _strip_brackets(name: str) -> str:
    return name.replace("[", "").replace("]", "")


def _to_span(m: re.Match) -> LinkSpan:
    span = {"raw": m.group(0), "start": m.start(), "end": m.end()}
    if m.group("anchor"):
        return LinkSpan(kind=LinkKind.ANCHOR, **span)
    if m.group("url"):
        return LinkSpan(
            kind=LinkKind.URL, url=m.group("url"), trailing=m.group("trailing"), **span
        )
    if m.group("delimited"):
        name = _strip_brackets(m.group("delimited"))
        return LinkSpan(kind=LinkKind.DELIMITED, name=name, **span)
    return LinkSpan(kind=LinkKind.BARE_WORD, name=m.group("word"), **span)


def scan_links(text: str) -> Iterator[LinkSpan]:
    """Yield every link span in ``text`` from left to right."""
    for m in LINK_PATTERN.finditer(text):
        yield _to_span(m)


def rewrite_links(text: str, render: Callable[[LinkSpan], str]) -> str:
    """Replace each link span with ``render(span)``; other text is kept."""
    return LINK_PATTERN.sub(lambda m: render(_to_span(m)), text)


def url_anchor(url: str, trailing: str = "") -> str:
    """Wrap a bare URL in an anchor, percent-escaping unsafe characters.

    Reserved characters, ``%`` and ``#`` are not escaped: ``a#b`` stays
    ``a#b`` rather than ``a%23b``, and already escaped URLs come through
    unchanged.
    """
    escaped = quote(url, safe=URL_SAFE)
    return f'<a href="{escaped}">{escaped}</a>{trailing}'


def canonical_name(pages: Sequence[str], name: str) -> str:
    """Return the on-disk casing of ``name`` if it exists.

    Missing pages keep the typed casing but are normalised, so
    ``//Foo/`` becomes ``/Foo``.
    """
    resolution = resolve_page_name(pages, name)
    if is_absolute_link(name):
        return f"/{resolution.name}"
    return resolution.name


def html_links(
    text: str,
    pages: Sequence[str],
    source_file: Path,
    wiki_root: Path,
    export_root: Path,
    export_ext: str = ".html",
) -> str:
    """Turn every link in a page's text into an HTML anchor for export."""

    def render(span: LinkSpan) -> str:
        if span.kind is LinkKind.ANCHOR:
            return span.raw
        if span.kind is LinkKind.URL:
            return url_anchor(span.url, span.trailing)

        name = canonical_name(pages, span.name)
        href = export_link(name, source_file, wiki_root, export_root)
        return f'<a href="{href}{export_ext}">{name}</a>'

    return rewrite_links(text, render)


def page_name_at(line: str, index: int, word: str = "") -> str:
    """Return the page name under the cursor.

    Inside a ``[[...]]`` span that is the link text, elsewhere it is the
    word under the cursor.
    """
    for m in DELIMITED_PATTERN.finditer(line):
        if m.start() < index < m.end():
            return _strip_brackets(m.group(1))
    return word
