from __future__ import annotations

from enum import Enum

from bibview.core.errors import ParseError


class FieldType(str, Enum):
    ABSTRACT = "abstract"
    ADDRESS = "address"
    ANNOTE = "annote"
    ARCHIVE_PREFIX = "archiveprefix"
    AUTHOR = "author"
    BOOKTITLE = "booktitle"
    CHAPTER = "chapter"
    CROSSREF = "crossref"
    DOI = "doi"
    EDITION = "edition"
    EDITOR = "editor"
    EPRINT = "eprint"
    FILE = "file"
    HOWPUBLISHED = "howpublished"
    INSTITUTION = "institution"
    ISBN = "isbn"
    ISSN = "issn"
    JOURNAL = "journal"
    KEY = "key"
    KEYWORDS = "keywords"
    LANGUAGE = "language"
    MONTH = "month"
    NOTE = "note"
    NUMBER = "number"
    ORGANIZATION = "organization"
    PAGES = "pages"
    PRIMARY_CLASS = "primaryclass"
    PUBLISHER = "publisher"
    SCHOOL = "school"
    SERIES = "series"
    TITLE = "title"
    TYPE = "type"
    URL = "url"
    URLDATE = "urldate"
    VOLUME = "volume"
    YEAR = "year"

    def __str__(self) -> str:
        return self.value

    @property
    def is_reserved(self) -> bool:
        """Key and type name the entry itself, not one of its fields."""
        return self in (FieldType.KEY, FieldType.TYPE)

    @property
    def label(self) -> str:
        return _FIELD_LABELS.get(self, self.value.capitalize())

    @classmethod
    def parse(cls, name: str) -> FieldType | None:
        return _FIELD_ALIASES.get(name.strip().lower())


class ReferenceType(str, Enum):
    ARTICLE = "article"
    BOOK = "book"
    BOOKLET = "booklet"
    CONFERENCE = "conference"
    INBOOK = "inbook"
    INCOLLECTION = "incollection"
    INPROCEEDINGS = "inproceedings"
    MANUAL = "manual"
    MASTERSTHESIS = "mastersthesis"
    MISC = "misc"
    PHDTHESIS = "phdthesis"
    PROCEEDINGS = "proceedings"
    TECHREPORT = "techreport"
    UNPUBLISHED = "unpublished"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> ReferenceType:
        entry_type = _TYPE_ALIASES.get(name.strip().lower())
        if entry_type is None:
            raise ParseError(f"Unrecognized entry type: {name.strip()!r}")
        return entry_type


_FIELD_ALIASES: dict[str, FieldType] = {member.value: member for member in FieldType}
_FIELD_ALIASES.update(
    {
        "issue": FieldType.NUMBER,
        "journaltitle": FieldType.JOURNAL,
        "location": FieldType.ADDRESS,
    }
)

_TYPE_ALIASES: dict[str, ReferenceType] = {member.value: member for member in ReferenceType}
_TYPE_ALIASES["report"] = ReferenceType.TECHREPORT

_FIELD_LABELS: dict[FieldType, str] = {
    FieldType.AUTHOR: "Authors",
    FieldType.ARCHIVE_PREFIX: "Archive Prefix",
    FieldType.DOI: "DOI",
    FieldType.HOWPUBLISHED: "How Published",
    FieldType.ISBN: "ISBN",
    FieldType.ISSN: "ISSN",
    FieldType.PRIMARY_CLASS: "Primary Class",
    FieldType.URL: "URL",
    FieldType.URLDATE: "URL Date",
}
