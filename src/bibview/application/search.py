from __future__ import annotations

from bibview.domain.models.reference import Reference

SEARCH_SENTINEL = "/"


def search_term(buffer: str) -> str:
    return buffer.removeprefix(SEARCH_SENTINEL)


def matches(reference: Reference, term: str) -> bool:
    # Field values include the title.
    needle = term.lower()
    return any(needle in value.lower() for value in reference.searchable_values())


def filter_references(references: list[Reference], term: str) -> list[Reference]:
    """Plain, unanchored, case-insensitive substring filter."""
    return [reference for reference in references if matches(reference, term)]
