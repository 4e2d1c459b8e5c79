from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

POSTINSTALL_NAME = "postinstall"
SCRIPT_MODE = 0o755


@dataclass(frozen=True)
class StagedScripts:
    """A per-build temp tree: ``<tmp>/<unique>/scripts/postinstall``."""

    root: Path

    @property
    def scripts_dir(self) -> Path:
        return self.root / "scripts"

    @property
    def postinstall(self) -> Path:
        return self.scripts_dir / POSTINSTALL_NAME


def stage_postinstall(contents: str, *, tmp_root: str | None = None) -> StagedScripts:
    """Write ``contents`` as an executable postinstall script in a fresh temp dir.

    Every call gets its own directory, so concurrent builds never share one.
    On failure the partially created directory is discarded and the OSError
    is re-raised.
    """

    staged = StagedScripts(root=Path(tempfile.mkdtemp(prefix="jps-packager-", dir=tmp_root)))
    try:
        staged.scripts_dir.mkdir(parents=True, exist_ok=True)
        staged.postinstall.write_text(contents, encoding="utf-8")
        os.chmod(staged.postinstall, SCRIPT_MODE)
    except OSError:
        discard_staging(staged.root)
        raise

    logger.info("Staged postinstall script at %s", staged.postinstall)
    return staged


def discard_staging(path: str | os.PathLike[str]) -> bool:
    """Remove a staging directory. Best-effort: never raises.

    Returns True when the directory is gone afterwards.
    """

    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return True
    except OSError as e:
        logger.debug("Could not remove staging dir %s: %s", path, e)
        return False
    return True
