import time
from typing import Callable, Optional


class FrameGate:
    """Single-flight admission for bursty input such as mouse wheel events.

    The first request in a frame is admitted; everything else arriving before
    ``frame_interval`` seconds have passed since that request is dropped, so a
    wheel gesture turns into at most one undo/redo per frame.
    """

    def __init__(self, frame_interval: float = 1 / 60, clock: Callable[[], float] = time.monotonic):
        self.frame_interval = frame_interval
        self.clock = clock
        self._last_admitted: Optional[float] = None

    def admit(self) -> bool:
        now = self.clock()
        if self._last_admitted is not None and now - self._last_admitted < self.frame_interval:
            return False
        self._last_admitted = now
        return True

    def reset(self):
        self._last_admitted = None
