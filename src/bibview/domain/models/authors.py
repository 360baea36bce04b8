"""Author-name normalization.

BibTeX author fields join several people with a literal ``" and "``. Each
person is either written ``Last, First`` or in natural order. Natural order is
split with a small heuristic; names that do not fit it (particles, compound
surnames) are kept whole rather than guessed at.
"""

from __future__ import annotations

from dataclasses import dataclass

AUTHOR_SEPARATOR = " and "
DISPLAY_SEPARATOR = "; "


@dataclass(frozen=True, slots=True)
class PersonName:
    first_name: str
    last_name: str

    def display(self) -> str:
        return f"{self.last_name}, {self.first_name[:1]}"


@dataclass(frozen=True, slots=True)
class FullName:
    name: str

    def display(self) -> str:
        return self.name


AuthorName = PersonName | FullName


def is_initials(token: str) -> bool:
    """Return True for tokens such as ``AB``, ``M.A.`` or ``d.a.b.s.``."""
    if not token:
        return False
    if all(ch.isalpha() and ch.isupper() for ch in token):
        return True
    if len(token) % 2 != 0:
        return False
    return all(
        token[i].isalpha() and token[i + 1] == "."
        for i in range(0, len(token), 2)
    )


def parse_author(raw: str) -> AuthorName:
    name = raw.strip()
    parts = name.split(",")

    if len(parts) == 2:
        return PersonName(first_name=parts[1].strip(), last_name=parts[0].strip())
    if len(parts) > 2:
        return FullName(name)

    tokens = name.split()
    if len(tokens) > 2 and is_initials(tokens[1]):
        return PersonName(first_name=" ".join(tokens[:-1]), last_name=tokens[-1])
    if len(tokens) == 2:
        return PersonName(first_name=tokens[0], last_name=tokens[1])
    return FullName(name)


def parse_authors(raw: str) -> list[AuthorName]:
    return [parse_author(part) for part in raw.split(AUTHOR_SEPARATOR) if part.strip()]


def format_authors(raw: str) -> str:
    return DISPLAY_SEPARATOR.join(author.display() for author in parse_authors(raw))
