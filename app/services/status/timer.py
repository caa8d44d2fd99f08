import time
from typing import Protocol

from .errors import ClockError


class Timer(Protocol):
    def seconds_since_epoch(self) -> int: ...


class SystemTimer:
    """Системные часы."""

    def seconds_since_epoch(self) -> int:
        try:
            now = time.time()
        except OSError as e:
            raise ClockError(f"system clock unavailable: {e}") from e
        if now < 0:
            raise ClockError("system time is before the Unix epoch")
        return int(now)

