from __future__ import annotations

import argparse

from rich.table import Table

from bibview.application.search import filter_references
from bibview.application.session import DEFAULT_COLUMNS
from bibview.cli.commands._common import add_bib_path_argument, open_library
from bibview.cli.context import CLIContext


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("list", help="Print references as a table")
    add_bib_path_argument(parser)
    parser.add_argument("--search", default=None, help="Only show references containing this text")
    parser.add_argument("--limit", type=int, default=None)
    parser.set_defaults(handler=run_list)


def run_list(args: argparse.Namespace, ctx: CLIContext) -> int:
    library = open_library(args, ctx)

    references = sorted(library.references)
    if args.search:
        references = filter_references(references, args.search)
    if args.limit is not None:
        references = references[: args.limit]

    table = Table(title=f"References ({len(references)})")
    for column in DEFAULT_COLUMNS:
        table.add_column(column.label, overflow="fold")
    for reference in references:
        table.add_row(*reference.as_row(list(DEFAULT_COLUMNS)))

    ctx.console.print(table)
    return 0
