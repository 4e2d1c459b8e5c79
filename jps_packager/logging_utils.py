from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from .lib.env import PATHS

DEFAULT_LOG_PATH = PATHS.log_default
FALLBACK_LOG_NAME = "jps-packager.log"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


def _open_log_file(log_path: str) -> Tuple[logging.FileHandler, str]:
    try:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path, encoding="utf-8"), log_path
    except OSError:
        # e.g. ~/.config is read-only inside a sandboxed app bundle.
        fallback = str(Path.cwd() / FALLBACK_LOG_NAME)
        return logging.FileHandler(fallback, encoding="utf-8"), fallback


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = False,
) -> str:
    """Set up the diagnostic log for jps-packager.

    This log is for debugging the tool itself: commands run, staging dirs,
    preference loads. What users read after a build is the LogSink text
    kept in the preferences file, which is separate.

    Console output is off unless asked for (``--verbose``) so the CLI only
    prints the build result. Safe to call more than once.

    Returns the file path actually written to.
    """

    root = logging.getLogger()
    root.setLevel(level)

    if getattr(root, "_jps_configured", False):
        return getattr(root, "_jps_log_path", log_path)

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)
    file_handler, chosen_path = _open_log_file(log_path)
    handlers: list[logging.Handler] = [file_handler]
    if also_console:
        handlers.append(logging.StreamHandler())

    for h in handlers:
        h.setFormatter(fmt)
        root.addHandler(h)

    setattr(root, "_jps_configured", True)
    setattr(root, "_jps_log_path", chosen_path)

    logging.getLogger(__name__).info("Diagnostic log at %s (requested %s)", chosen_path, log_path)
    return chosen_path
