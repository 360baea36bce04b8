from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppPaths:
    config_dir: Path
    settings_path: Path
    log_path: Path


DEFAULT_APP_DIRNAME = "bibview"


def load_paths(home: Path | None = None) -> AppPaths:
    if home is not None:
        config_dir = home.expanduser().resolve()
    else:
        bibview_home_raw = os.getenv("BIBVIEW_HOME")
        if bibview_home_raw:
            config_dir = Path(bibview_home_raw).expanduser().resolve()
        else:
            xdg_raw = os.getenv("XDG_CONFIG_HOME")
            base = Path(xdg_raw).expanduser() if xdg_raw else Path.home() / ".config"
            config_dir = (base / DEFAULT_APP_DIRNAME).resolve()

    return AppPaths(
        config_dir=config_dir,
        settings_path=config_dir / "settings.json",
        log_path=config_dir / "bibview.log",
    )
