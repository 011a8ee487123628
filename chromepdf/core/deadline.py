import time
from typing import Optional

from .errors import ConversionTimeoutError


class Deadline:
    """
    Single cutoff shared by every browser interaction of one conversion.

    Not reset between calls: once it elapses, every subsequent
    `check()` raises ConversionTimeoutError.
    """

    def __init__(self, timeout: float, clock=time.monotonic):
        self.timeout = float(timeout)
        self._clock = clock
        self.expires_at = clock() + self.timeout

    def remaining(self) -> float:
        return max(0.0, self.expires_at - self._clock())

    def remaining_ms(self) -> float:
        return self.remaining() * 1000

    @property
    def expired(self) -> bool:
        return self._clock() >= self.expires_at

    def check(self, action: Optional[str] = None):
        if self.expired:
            what = f" while {action}" if action else ""
            raise ConversionTimeoutError(
                f"Conversion timed out after {self.timeout:g}s{what}"
            )
