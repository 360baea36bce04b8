from __future__ import annotations

import argparse

from bibview.application.session import BrowserSession
from bibview.cli.commands._common import add_bib_path_argument, open_library
from bibview.cli.context import CLIContext
from bibview.core.logging import configure_logging
from bibview.infrastructure.clipboard import SystemClipboard
from bibview.ui.app import BrowserApp


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("browse", help="Open the interactive bibliography browser")
    add_bib_path_argument(parser)
    parser.set_defaults(handler=run_browse)


def run_browse(args: argparse.Namespace, ctx: CLIContext) -> int:
    library = open_library(args, ctx)

    # The browser owns the terminal; keep log output out of it.
    configure_logging(ctx.verbosity, log_path=ctx.paths.log_path)

    session = BrowserSession(library.references, clipboard=SystemClipboard())
    BrowserApp(session, title=library.path.name).run()
    return 0
