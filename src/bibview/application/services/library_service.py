from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from bibview.core.errors import BibliographyError, ConfigurationError
from bibview.domain.models.reference import Reference
from bibview.infrastructure.importers.bibtex_importer import parse_bibtex
from bibview.infrastructure.settings_store import SettingsStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Library:
    path: Path
    references: list[Reference]

    def find(self, key: str) -> Reference | None:
        return next((ref for ref in self.references if ref.key == key), None)


class LibraryService:
    def __init__(self, settings_store: SettingsStore) -> None:
        self.settings_store = settings_store

    def resolve_path(self, bib_path: Path | None) -> Path:
        if bib_path is not None:
            return bib_path.expanduser().resolve()

        remembered = self.settings_store.last_bibliography()
        if remembered is None:
            raise ConfigurationError(
                "No bibliography given and no previously opened file is recorded. "
                "Pass the path to a .bib file."
            )
        logger.info("Reopening last bibliography %s", remembered)
        return remembered

    def open(self, bib_path: Path | None = None) -> Library:
        path = self.resolve_path(bib_path)
        if not path.exists() or not path.is_file():
            raise BibliographyError(f"BibTeX file not found: {path}")

        try:
            raw = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise BibliographyError(f"Failed to read {path}: {exc}") from exc

        references = parse_bibtex(raw)
        logger.info("Loaded %d references from %s", len(references), path)

        try:
            self.settings_store.remember_bibliography(path)
        except OSError as exc:
            logger.warning("Could not record last bibliography: %s", exc)
        return Library(path=path, references=references)
