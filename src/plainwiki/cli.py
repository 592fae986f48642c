"""Command line entry point for editor integration.

Paths to open are printed on stdout, one per line; messages and logs go to
stderr. The exit status follows :mod:`plainwiki.errors`.
"""

import argparse
import logging
import sys
from pathlib import Path

from plainwiki.config import Settings, settings as default_settings
from plainwiki.core.models import LinkContext
from plainwiki.errors import WikiError
from plainwiki.session import WikiSession

logger = logging.getLogger(__name__)


class ConsolePrompt:
    """Asks questions on the terminal."""

    def __init__(self, assume_yes: bool = False):
        self.assume_yes = assume_yes

    def _ask(self, question: str) -> str:
        try:
            return input(question).strip()
        except EOFError:
            return ""

    def choose_directory(self, message: str) -> Path | None:
        answer = self._ask(f"{message}: ")
        return Path(answer).expanduser() if answer else None

    def confirm_overwrite(self, paths: list[Path]) -> bool:
        if self.assume_yes:
            return True
        print("Export will replace files:", file=sys.stderr)
        for path in paths:
            print(f"  {path}", file=sys.stderr)
        return self._ask("Replace all? [y/N] ").lower() in ("y", "yes")


class ConsoleOpener:
    """Reports files to open on stdout for the calling editor."""

    def open_file(self, path: Path) -> None:
        print(path)

    def open_directory(self, path: Path) -> None:
        print(path)

    def refresh(self) -> None:
        logger.debug("Refresh requested")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="plainwiki", description="Plain-text wiki tools")
    parser.add_argument("--wiki-dir", type=Path, help="Wiki root directory")
    parser.add_argument("--project-dir", type=Path, help="Root for /absolute page names")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    sub = parser.add_subparsers(dest="command", required=True)

    goto = sub.add_parser("goto", help="Open (or create) a page by name")
    goto.add_argument("name")

    follow = sub.add_parser("follow", help="Follow the link under the cursor")
    follow.add_argument("--line", default="", help="Current line")
    follow.add_argument("--index", type=int, default=0, help="Cursor column")
    follow.add_argument("--word", default="", help="Word under the cursor")

    sub.add_parser("index", help="Open the index page")
    sub.add_parser("list", help="Print a linked list of all pages")

    export = sub.add_parser("export", help="Export the wiki as HTML")
    export.add_argument("export_dir", nargs="?", type=Path)
    export.add_argument(
        "-y", "--yes", action="store_true", help="Replace files without asking"
    )

    new = sub.add_parser("new", help="Create a new wiki")
    new.add_argument("directory", nargs="?", type=Path)
    return parser


def run(args: argparse.Namespace, settings: Settings) -> None:
    prompt = ConsolePrompt(assume_yes=getattr(args, "yes", False))
    opener = ConsoleOpener()
    wiki_dir = args.wiki_dir or settings.wiki_dir
    project_dir = args.project_dir or settings.project_dir

    if args.command == "new":
        WikiSession.create_new_wiki(prompt, opener, args.directory, settings=settings)
        return

    if args.command == "follow":
        context = LinkContext(
            line=args.line,
            index=args.index,
            word=args.word,
            wiki_dir=wiki_dir,
            project_dir=project_dir,
        )
        WikiSession.from_context(context, prompt, opener, settings).follow_link(context)
        return

    wiki = WikiSession(wiki_dir, prompt, opener, settings=settings, project_dir=project_dir)
    if args.command == "goto":
        wiki.go_to(args.name)
    elif args.command == "index":
        wiki.go_to_index_page()
    elif args.command == "list":
        print(wiki.linked_page_list())
    elif args.command == "export":
        wiki.export_as_html(args.export_dir)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = default_settings
    if args.debug:
        settings = settings.model_copy(update={"debug": True})

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        run(args, settings)
    except WikiError as e:
        logger.debug("Command failed: %s", e.message)
        if e.message:
            print(e.message, file=sys.stderr)
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
