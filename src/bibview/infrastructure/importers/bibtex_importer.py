"""Line-oriented BibTeX reader.

Each physical line is classified by its first non-blank character: ``@``
opens an entry, ``}`` closes it, anything else is a ``name = value`` field.
Values spanning several lines are not supported.
"""

from __future__ import annotations

import logging

from bibview.core.errors import ParseError
from bibview.domain.models.fields import FieldType, ReferenceType
from bibview.domain.models.reference import Reference

logger = logging.getLogger(__name__)


def parse_bibtex(text: str) -> list[Reference]:
    references: list[Reference] = []
    fields: dict[FieldType, str] = {}
    key = ""
    entry_type: ReferenceType | None = None
    entry_open = False

    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith("@"):
            raw_type, key = _parse_header(stripped)
            try:
                entry_type = ReferenceType.parse(raw_type)
            except ParseError as exc:
                raise ParseError(f"Line {lineno}: {exc}") from exc
            fields = {}
            entry_open = True
        elif stripped.startswith("}"):
            if entry_type is None:
                raise ParseError(f"Line {lineno}: closing brace without an entry header")
            references.append(Reference(key=key, entry_type=entry_type, fields=fields))
            fields = {}
            entry_open = False
        else:
            _parse_field_line(stripped, fields)

    if entry_open:
        logger.warning("Dropping unterminated entry %r at end of input", key)

    logger.debug("Parsed %d BibTeX entries", len(references))
    return references


def _parse_header(line: str) -> tuple[str, str]:
    raw_type, _, rest = line[1:].partition("{")
    key, _, _ = rest.partition(",")
    return raw_type.strip(), key.strip()


def _parse_field_line(line: str, fields: dict[FieldType, str]) -> None:
    name, sep, raw_value = line.partition("=")
    if not sep:
        return

    field_type = FieldType.parse(name)
    if field_type is None or field_type.is_reserved:
        logger.debug("Skipping field %r", name.strip())
        return

    fields[field_type] = _clean_value(raw_value)


def _clean_value(raw_value: str) -> str:
    value = raw_value.strip().removeprefix("{")
    value = value.removesuffix(",").removesuffix("}")
    return value.strip()
