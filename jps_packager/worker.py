from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from .package_config import PackageConfig
from .packager import InvocationResult, Packager

logger = logging.getLogger(__name__)


class BuildWorker:
    """Runs ``Packager.build`` off the caller's thread.

    The result comes back through the returned future and, when given, the
    ``on_complete`` callback (called on the worker thread).
    """

    def __init__(self, packager: Packager, *, max_workers: int = 1) -> None:
        self.packager = packager
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="jps-build")

    def submit(
        self,
        config: PackageConfig,
        on_complete: Optional[Callable[[InvocationResult], None]] = None,
    ) -> "Future[InvocationResult]":
        def _run() -> InvocationResult:
            result = self.packager.build(config)
            if on_complete is not None:
                on_complete(result)
            return result

        logger.debug("Queueing build for %s", config.output_file_path)
        return self._executor.submit(_run)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "BuildWorker":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown(wait=True)
