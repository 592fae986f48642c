"""Where a link points inside the export tree."""

from pathlib import Path

from plainwiki.core.resolver import is_absolute_link


def link_target(page_name: str, source_file: Path, wiki_root: Path) -> str:
    """Return the export-root-relative location of ``page_name``.

    Absolute names are kept as they are. Relative names are placed in the
    directory of the linking page, so ``Bar`` linked from ``a/b/Source``
    becomes ``/a/b/Bar``.
    """
    if is_absolute_link(page_name):
        return page_name

    source_dir = Path(source_file).parent.relative_to(wiki_root).as_posix()
    if source_dir == ".":
        return f"/{page_name}"
    return f"/{source_dir}/{page_name}"


def export_link(
    page_name: str,
    source_file: Path,
    wiki_root: Path,
    export_root: Path,
) -> str:
    """Return the export path of ``page_name`` as linked from ``source_file``."""
    root = Path(export_root).as_posix().rstrip("/")
    return root + link_target(page_name, source_file, wiki_root)
