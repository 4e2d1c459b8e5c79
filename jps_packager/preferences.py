from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from .package_config import PREFERENCE_FIELDS, PackageConfig

logger = logging.getLogger(__name__)

LOGS_KEY = "logs"


def _detect_format(path: Path) -> str:
    ext = path.suffix.lower().lstrip(".")
    if ext in {"yaml", "yml"}:
        return "yaml"
    # Default to JSON for unknown extensions.
    return "json"


def load_preferences(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}

    text = p.read_text(encoding="utf-8")
    if _detect_format(p) == "yaml":
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed preferences file {p}: {e}") from e
    else:
        data = json.loads(text) if text.strip() else {}

    if not isinstance(data, dict):
        raise ValueError(f"Preferences file must be an object/dict, got {type(data)}")

    logger.debug("Loaded preferences from %s", p)
    return data


def save_preferences(path: str, prefs: Dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if _detect_format(p) == "yaml":
        p.write_text(yaml.safe_dump(prefs, sort_keys=False, allow_unicode=True), encoding="utf-8")
    else:
        p.write_text(json.dumps(prefs, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.debug("Saved preferences to %s", p)


def ensure_defaults(prefs: Dict[str, Any]) -> Dict[str, Any]:
    """Fill required keys with defaults (without overriding user values)."""

    defaults = PackageConfig()
    for key, attr in PREFERENCE_FIELDS.items():
        prefs.setdefault(key, getattr(defaults, attr))
    prefs.setdefault(LOGS_KEY, "")
    return prefs
