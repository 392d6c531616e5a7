"""
Sync Status Module

Tracks the UI state of one sync: idle -> processing -> success | error.
Success falls back to idle after SUCCESS_RESET_SECONDS; error stays until
the next attempt starts.
"""

import time
from typing import Callable, Optional

from .settings import SUCCESS_RESET_SECONDS


IDLE = "idle"
PROCESSING = "processing"
SUCCESS = "success"
ERROR = "error"


class SyncStatus:
    """Small state machine driving the status banner."""

    def __init__(self, reset_after: float = SUCCESS_RESET_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        self.reset_after = reset_after
        self.clock = clock
        self._state = IDLE
        self._succeeded_at: Optional[float] = None
        self.error_message = ""

    @property
    def state(self) -> str:
        if self._state == SUCCESS and self.clock() - self._succeeded_at >= self.reset_after:
            self._state = IDLE
            self._succeeded_at = None
        return self._state

    @property
    def is_processing(self) -> bool:
        return self.state == PROCESSING

    def start(self) -> None:
        if self._state == PROCESSING:
            raise RuntimeError("A sync is already in progress")
        self._state = PROCESSING
        self._succeeded_at = None
        self.error_message = ""

    def succeed(self) -> None:
        self._require_processing()
        self._state = SUCCESS
        self._succeeded_at = self.clock()

    def fail(self, message: str) -> None:
        # Missing uploads fail straight from idle, without a processing phase
        self._state = ERROR
        self._succeeded_at = None
        self.error_message = message

    def seconds_until_reset(self) -> Optional[float]:
        if self.state != SUCCESS:
            return None
        return max(0.0, self.reset_after - (self.clock() - self._succeeded_at))

    def _require_processing(self) -> None:
        if self._state != PROCESSING:
            raise RuntimeError(f"Cannot finish a sync from state {self._state!r}")
