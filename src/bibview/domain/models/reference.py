from __future__ import annotations

from dataclasses import dataclass, field

from bibview.domain.models.authors import AuthorName, format_authors, parse_authors
from bibview.domain.models.fields import FieldType, ReferenceType

BIBTEX_INDENT = "    "


@dataclass(frozen=True, slots=True)
class Reference:
    key: str
    entry_type: ReferenceType
    fields: dict[FieldType, str] = field(default_factory=dict)

    def get(self, field_type: FieldType) -> str | None:
        if field_type is FieldType.KEY:
            return self.key
        if field_type is FieldType.TYPE:
            return self.entry_type.value
        return self.fields.get(field_type)

    @property
    def author(self) -> str | None:
        return self.fields.get(FieldType.AUTHOR)

    @property
    def title(self) -> str | None:
        return self.fields.get(FieldType.TITLE)

    @property
    def year(self) -> str | None:
        return self.fields.get(FieldType.YEAR)

    @property
    def authors(self) -> list[AuthorName]:
        if self.author is None:
            return []
        return parse_authors(self.author)

    @property
    def formatted_author(self) -> str | None:
        if self.author is None:
            return None
        return format_authors(self.author)

    def display_value(self, field_type: FieldType) -> str | None:
        if field_type is FieldType.AUTHOR:
            return self.formatted_author
        return self.get(field_type)

    def as_row(self, columns: list[FieldType]) -> list[str]:
        return [self.display_value(column) or "" for column in columns]

    def searchable_values(self) -> list[str]:
        return [self.key, self.entry_type.value, *self.fields.values()]

    def to_bibtex(self) -> str:
        lines = [f"@{self.entry_type}{{{self.key},"]
        for field_type, value in self.fields.items():
            lines.append(f"{BIBTEX_INDENT}{field_type} = {{{value}}},")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def sort_key(self) -> tuple[bool, str]:
        # Entries without an author sort first.
        return (self.author is not None, self.author or "")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Reference):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash((self.key, self.entry_type, frozenset(self.fields.items())))
