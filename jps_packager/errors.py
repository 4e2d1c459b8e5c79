from __future__ import annotations


class PackagerError(Exception):
    """A build attempt that ended without a package.

    ``user_message`` is the only text shown to the user; ``log_entry`` is what
    goes into the build log and may carry the details.
    """

    user_message = "Package build failed. Check the logs for more information."

    def __init__(self, log_entry: str) -> None:
        super().__init__(log_entry)
        self.log_entry = log_entry


class MissingInputError(PackagerError):
    user_message = "Please select both source and output folders."

    def __init__(self) -> None:
        super().__init__(f"Error: {self.user_message}")


class ProcessLaunchError(PackagerError):
    user_message = "Failed to run pkgbuild. Check the logs for more information."


class ProcessExecutionFailure(PackagerError):
    def __init__(self, log_entry: str, returncode: int) -> None:
        super().__init__(log_entry)
        self.returncode = returncode
