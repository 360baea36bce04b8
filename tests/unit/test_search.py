from bibview.application.search import filter_references, search_term
from bibview.domain.models.fields import FieldType, ReferenceType
from bibview.domain.models.reference import Reference


def _catalog() -> list[Reference]:
    return [
        Reference(
            key="smith2021",
            entry_type=ReferenceType.ARTICLE,
            fields={FieldType.TITLE: "The Rust Programming Language"},
        ),
        Reference(
            key="doe2022",
            entry_type=ReferenceType.BOOK,
            fields={FieldType.TITLE: "Gardening", FieldType.JOURNAL: "TRUSTED Sources"},
        ),
        Reference(
            key="roe2020",
            entry_type=ReferenceType.MISC,
            fields={FieldType.TITLE: "Python"},
        ),
    ]


def test_search_term_strips_sentinel() -> None:
    assert search_term("/rust") == "rust"
    assert search_term("/") == ""


def test_filter_matches_title_or_any_field_case_insensitively() -> None:
    result = filter_references(_catalog(), "rust")

    assert [ref.key for ref in result] == ["smith2021", "doe2022"]


def test_filter_matches_key_and_entry_type() -> None:
    assert [ref.key for ref in filter_references(_catalog(), "ROE2")] == ["roe2020"]
    assert [ref.key for ref in filter_references(_catalog(), "misc")] == ["roe2020"]


def test_empty_term_returns_everything() -> None:
    catalog = _catalog()

    assert filter_references(catalog, "") == catalog


def test_title_matches_through_field_values() -> None:
    catalog = _catalog()

    result = filter_references(catalog, "language")

    assert [ref.key for ref in result] == ["smith2021"]
