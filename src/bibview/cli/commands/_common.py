from __future__ import annotations

import argparse
from pathlib import Path

from bibview.application.services.library_service import Library, LibraryService
from bibview.cli.context import CLIContext
from bibview.infrastructure.settings_store import SettingsStore


def add_bib_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "bib_path",
        nargs="?",
        type=Path,
        default=None,
        help="Path to .bib file (default: the last bibliography opened)",
    )


def open_library(args: argparse.Namespace, ctx: CLIContext) -> Library:
    service = LibraryService(SettingsStore(ctx.paths.settings_path))
    return service.open(args.bib_path)
