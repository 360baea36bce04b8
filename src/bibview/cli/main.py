from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console

from bibview import __version__
from bibview.cli.commands import browse_cmd, list_cmd, show_cmd
from bibview.cli.context import CLIContext
from bibview.core.config import load_paths
from bibview.core.errors import BibviewError
from bibview.core.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bibview",
        description="Browse, search and yank BibTeX entries",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--home",
        type=Path,
        default=None,
        help="Directory for bibview settings and logs (default: $BIBVIEW_HOME or ~/.config/bibview)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)

    subparsers = parser.add_subparsers(dest="command", required=True)
    browse_cmd.register(subparsers)
    list_cmd.register(subparsers)
    show_cmd.register(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    console = Console()

    paths = load_paths(args.home)
    ctx = CLIContext(paths=paths, console=console, verbosity=args.verbose)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 2

    try:
        return handler(args, ctx)
    except BibviewError as exc:
        logger.error(str(exc))
        return 1
