from pathlib import Path

import pytest

from bibview.cli.main import main

BIB = """
@article{zz2020,
  author = {Zimmer, Zoe},
  title = {Rust Everywhere},
  year = {2020},
}
@book{aa1999,
  author = {Aaron Adams},
  title = {Gardens},
  year = {1999},
}
"""


def _write_bib(tmp_path: Path) -> Path:
    bib_path = tmp_path / "refs.bib"
    bib_path.write_text(BIB, encoding="utf-8")
    return bib_path


def test_list_prints_table(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bib_path = _write_bib(tmp_path)

    code = main(["--home", str(tmp_path / "home"), "list", str(bib_path)])

    out = capsys.readouterr().out
    assert code == 0
    assert "zz2020" in out
    assert "aa1999" in out
    assert "References (2)" in out


def test_list_search_filters(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bib_path = _write_bib(tmp_path)

    code = main(["--home", str(tmp_path / "home"), "list", str(bib_path), "--search", "rust"])

    out = capsys.readouterr().out
    assert code == 0
    assert "zz2020" in out
    assert "aa1999" not in out


def test_show_prints_bibtex_and_reuses_last_path(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    bib_path = _write_bib(tmp_path)
    home = str(tmp_path / "home")
    main(["--home", home, "list", str(bib_path)])
    capsys.readouterr()

    code = main(["--home", home, "show", "aa1999"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("@book{aa1999,\n")
    assert "    title = {Gardens},\n" in out


def test_show_unknown_key_fails(tmp_path: Path) -> None:
    bib_path = _write_bib(tmp_path)

    assert main(["--home", str(tmp_path / "home"), "show", "nope", str(bib_path)]) == 1


def test_missing_bibliography_fails(tmp_path: Path) -> None:
    assert main(["--home", str(tmp_path / "home"), "list"]) == 1
