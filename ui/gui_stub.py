"""GUI wrapper stub.

A real GUI (SwiftUI/Qt/Tk) should:
- Bind its form fields to the stored preferences (PackageConfig.from_preferences)
- Keep the postinstall script text in memory only
- Check folder_size() against the 1 GB gate and ask before building
- Dispatch the build through BuildWorker so the window stays responsive
- Show InvocationResult.message in an alert and LogSink.text in a logs view

This module exists to document the integration boundary.
"""

from __future__ import annotations

from concurrent.futures import Future
from typing import Callable

from jps_packager.package_config import PackageConfig
from jps_packager.packager import InvocationResult
from jps_packager.worker import BuildWorker


def run_from_gui(
    worker: BuildWorker,
    config: PackageConfig,
    on_complete: Callable[[InvocationResult], None],
) -> "Future[InvocationResult]":
    return worker.submit(config, on_complete=on_complete)
