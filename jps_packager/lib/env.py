from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_CONFIG_DIR = Path.home() / ".config" / "jps-packager"


@dataclass(frozen=True)
class Paths:
    pkgbuild: str = "/usr/bin/pkgbuild"
    preferences_default: str = str(_CONFIG_DIR / "preferences.json")
    log_default: str = str(_CONFIG_DIR / "jps-packager.log")


PATHS = Paths()
