"""A blocking FIFO of frame indices shared between a writer and a reader."""

from __future__ import annotations

import threading
from collections import deque
from typing import TextIO


class FrameIndexCache:
    """Thread-safe queue of frame indices; ``read`` blocks until one is available."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self._queue: deque[int] = deque()
        self._signal = threading.Condition()

    def read(self) -> int:
        """Remove and return the oldest index, waiting for one if the cache is empty."""
        with self._signal:
            self._signal.wait_for(lambda: bool(self._queue))
            frame_index = self._queue.popleft()
            self._signal.notify_all()
            print(f"after read: i,qsize, {frame_index},{len(self._queue)}", file=self._out, flush=True)
            return frame_index

    def write(self, frame_index: int) -> None:
        """Append an index and wake any waiting reader."""
        with self._signal:
            self._queue.append(frame_index)
            self._signal.notify_all()
            print(f"after write: i,qsize, {frame_index},{len(self._queue)}", file=self._out, flush=True)

    def __len__(self) -> int:
        with self._signal:
            return len(self._queue)