from __future__ import annotations

import os
from pathlib import Path

from platformdirs import PlatformDirs

APP_NAME = "bardo"
RUNTIME_DIR_ENV = "BARDO_RUNTIME_DIR"


def _dirs() -> PlatformDirs:
    return PlatformDirs(appname=APP_NAME, appauthor=False)


def default_runtime_dir() -> Path:
    override = os.environ.get(RUNTIME_DIR_ENV)
    if override:
        return Path(override).expanduser().resolve()
    return Path(_dirs().user_data_path)
