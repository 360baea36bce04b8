from __future__ import annotations

import argparse

from bibview.cli.commands._common import add_bib_path_argument, open_library
from bibview.cli.context import CLIContext
from bibview.core.errors import BibliographyError


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("show", help="Print one reference as BibTeX")
    parser.add_argument("key", help="Citation key of the reference")
    add_bib_path_argument(parser)
    parser.set_defaults(handler=run_show)


def run_show(args: argparse.Namespace, ctx: CLIContext) -> int:
    library = open_library(args, ctx)

    reference = library.find(args.key)
    if reference is None:
        raise BibliographyError(f"No reference with key {args.key!r} in {library.path}")

    ctx.console.print(reference.to_bibtex(), end="", markup=False, highlight=False, soft_wrap=True)
    return 0
