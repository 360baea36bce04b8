from pathlib import Path

import pytest

from bibview.core.config import load_paths


def test_explicit_home_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BIBVIEW_HOME", str(tmp_path / "env"))

    paths = load_paths(tmp_path / "explicit")

    assert paths.config_dir == (tmp_path / "explicit").resolve()
    assert paths.settings_path == paths.config_dir / "settings.json"
    assert paths.log_path == paths.config_dir / "bibview.log"


def test_env_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BIBVIEW_HOME", str(tmp_path / "env"))

    assert load_paths().config_dir == (tmp_path / "env").resolve()


def test_xdg_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BIBVIEW_HOME", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    assert load_paths().config_dir == (tmp_path / "xdg" / "bibview").resolve()
