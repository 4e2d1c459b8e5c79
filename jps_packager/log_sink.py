from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, List

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogSink:
    """Append-only build log shown to the user.

    The sink only grows; retention is the owner's call (see ``clear``).
    Appends are serialized so concurrent builds can share one sink.
    """

    def __init__(self, initial: str = "", *, clock: Callable[[], datetime] = datetime.now) -> None:
        self._chunks: List[str] = [initial] if initial else []
        self._lock = threading.Lock()
        self._clock = clock

    def timestamp(self) -> str:
        return self._clock().strftime(TIMESTAMP_FORMAT)

    def append(self, message: str) -> str:
        entry = f"[{self.timestamp()}] {message}\n"
        with self._lock:
            self._chunks.append(entry)
        logger.info("%s", message.rstrip())
        return entry

    @property
    def text(self) -> str:
        with self._lock:
            return "".join(self._chunks)

    def clear(self) -> None:
        with self._lock:
            self._chunks.clear()
