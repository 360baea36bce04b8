from __future__ import annotations

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

LAST_BIBLIOGRAPHY_KEY = "last_bibliography"


class SettingsStore:
    def __init__(self, settings_path: Path) -> None:
        self.settings_path = settings_path

    def load(self) -> dict[str, str]:
        if not self.settings_path.exists():
            return {}
        try:
            payload = json.loads(self.settings_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", self.settings_path, exc)
            return {}
        if not isinstance(payload, dict):
            logger.warning("Ignoring malformed settings file %s", self.settings_path)
            return {}
        return {str(k): str(v) for k, v in payload.items()}

    def save(self, settings: dict[str, str]) -> None:
        self.settings_path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.settings_path.parent / f".{self.settings_path.name}.tmp"
        temp_path.write_text(json.dumps(settings, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(temp_path, self.settings_path)

    def last_bibliography(self) -> Path | None:
        raw = self.load().get(LAST_BIBLIOGRAPHY_KEY)
        return Path(raw) if raw else None

    def remember_bibliography(self, path: Path) -> None:
        settings = self.load()
        settings[LAST_BIBLIOGRAPHY_KEY] = str(path)
        self.save(settings)
