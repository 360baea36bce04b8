import json
from pathlib import Path

from bibview.infrastructure.settings_store import SettingsStore


def test_missing_settings_are_empty(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "settings.json")

    assert store.load() == {}
    assert store.last_bibliography() is None


def test_remember_bibliography_persists_json(tmp_path: Path) -> None:
    settings_path = tmp_path / "nested" / "settings.json"
    store = SettingsStore(settings_path)

    store.remember_bibliography(Path("/data/refs.bib"))

    payload = json.loads(settings_path.read_text(encoding="utf-8"))
    assert payload == {"last_bibliography": "/data/refs.bib"}
    assert SettingsStore(settings_path).last_bibliography() == Path("/data/refs.bib")


def test_corrupt_settings_are_ignored(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text("{not json", encoding="utf-8")

    store = SettingsStore(settings_path)

    assert store.load() == {}
    store.remember_bibliography(Path("/x.bib"))
    assert store.last_bibliography() == Path("/x.bib")
