"""Page name resolution against an index snapshot."""

import logging
from collections.abc import Iterable

from plainwiki.core.models import Resolution

logger = logging.getLogger(__name__)


def is_absolute_link(name: str) -> bool:
    """Root-relative names start with a slash."""
    return name.startswith("/")


def normalize_page_name(name: str) -> str:
    """Drop empty path segments: ``"a//b/"`` becomes ``"a/b"``."""
    return "/".join(part for part in name.split("/") if part)


def resolve_page_name(pages: Iterable[str], name: str) -> Resolution:
    """Find the on-disk page a typed name refers to.

    Matching ignores case. An exact-case match wins, otherwise the first
    case-insensitive match in index order is used. When nothing matches the
    result carries the normalised name with ``exists=False``.
    """
    wanted = normalize_page_name(name)
    folded = wanted.lower()
    first = None
    for page in pages:
        if page.lower() != folded:
            continue
        if page == wanted:
            return Resolution(name=page, exists=True)
        if first is None:
            first = page

    if first is not None:
        logger.debug("Resolved %r to %r", name, first)
        return Resolution(name=first, exists=True)
    return Resolution(name=wanted, exists=False)
