from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .errors import MissingInputError, PackagerError, ProcessExecutionFailure, ProcessLaunchError
from .lib.command import CmdResult, run_cmd
from .lib.env import PATHS
from .lib.scripts import StagedScripts, discard_staging, stage_postinstall
from .log_sink import LogSink
from .package_config import PackageConfig

logger = logging.getLogger(__name__)

Runner = Callable[[Sequence[str]], CmdResult]


@dataclass(frozen=True)
class InvocationResult:
    success: bool
    message: str


def build_arguments(config: PackageConfig, scripts_dir: Optional[str] = None) -> List[str]:
    """pkgbuild arguments in their fixed order; the package path is always last."""

    args = [
        "--root",
        config.source_path,
        "--identifier",
        config.package_identifier,
        "--version",
        config.package_version,
        "--install-location",
        config.install_location,
    ]
    if scripts_dir is not None:
        args += ["--scripts", scripts_dir]
    return args + [config.output_file_path]


class Packager:
    """Runs pkgbuild for a PackageConfig.

    ``build`` blocks until pkgbuild exits; there is no timeout and no
    cancellation. Interactive callers should go through ``BuildWorker``.
    """

    def __init__(
        self,
        log: LogSink,
        *,
        executable: str = PATHS.pkgbuild,
        runner: Runner = run_cmd,
        tmp_root: Optional[str] = None,
    ) -> None:
        self.log = log
        self.executable = executable
        self.runner = runner
        self.tmp_root = tmp_root

    def build(self, config: PackageConfig) -> InvocationResult:
        try:
            message = self._build(config)
        except PackagerError as e:
            logger.warning("Build failed: %s", e.log_entry)
            self.log.append(e.log_entry)
            return InvocationResult(success=False, message=e.user_message)

        self.log.append(message)
        return InvocationResult(success=True, message=message)

    def _build(self, config: PackageConfig) -> str:
        if not config.source_path or not config.output_path:
            raise MissingInputError()

        staged: Optional[StagedScripts] = None
        try:
            if config.use_postinstall_script:
                try:
                    staged = stage_postinstall(config.postinstall_script, tmp_root=self.tmp_root)
                except OSError as e:
                    raise ProcessLaunchError(f"Error staging postinstall script: {e}") from e

            argv = [self.executable] + build_arguments(
                config, str(staged.scripts_dir) if staged else None
            )
            try:
                res = self.runner(argv)
            except OSError as e:
                raise ProcessLaunchError(f"Error running pkgbuild: {e}") from e

            if res.output:
                self.log.append(res.output)

            if res.returncode != 0:
                raise ProcessExecutionFailure(
                    f"pkgbuild exited with status {res.returncode}. "
                    f"{ProcessExecutionFailure.user_message}",
                    res.returncode,
                )
            return f"Package built successfully at {config.output_file_path}"
        finally:
            if staged is not None and not discard_staging(staged.root):
                logger.debug("Leaving staging dir %s behind", staged.root)
