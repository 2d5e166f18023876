"""A simulated hardware decoder with a callback-style API, and a future-based bridge to it."""

from __future__ import annotations

import operator
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(eq=False)
class HwFrame:
    """A decoded frame: its sequence index and some frame data."""

    index: int
    data: list[int] = field(default_factory=list)


def make_index(index: int) -> int:
    """Frame factory that produces the bare frame index as a plain int."""
    return operator.index(index)


def make_frame(index: int) -> HwFrame:
    """Frame factory that produces an HwFrame with four bytes of contrived data."""
    offset = index * 4
    return HwFrame(index, [(offset + step) & 0xFF for step in range(4)])


class HwDecoder:
    """Decoder that produces frames one by one on its own worker thread.

    Each call to ``decode_next_frame`` schedules one frame; when it is ready the
    supplied callback is invoked with it on the worker thread.
    """

    def __init__(
        self,
        frame_factory: Callable[[int], Any] = make_index,
        delay: float = 0.0,
    ) -> None:
        self._factory = frame_factory
        self._delay = delay
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="hw-decoder")
        self._lock = threading.Lock()
        self._closed = False
        self._index = 0

    def decode_next_frame(self, callback: Callable[[Any], None]) -> Future:
        """Schedule decoding of the next frame; ``callback`` receives it.

        Returns the future of the decoding task, which fails if the frame
        factory or the callback raised.
        """
        with self._lock:
            if self._closed:
                raise RuntimeError("decoder is closed")
            return self._executor.submit(self._produce, callback)

    def _produce(self, callback: Callable[[Any], None]) -> None:
        if self._delay > 0:
            time.sleep(self._delay)
        index = self._index
        self._index += 1
        frame = self._factory(index)
        callback(frame)

    def close(self) -> None:
        """Refuse new work and wait until every scheduled frame has been delivered."""
        with self._lock:
            self._closed = True
        self._executor.shutdown(wait=True)

    def __enter__(self) -> HwDecoder:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def decode_frame(decoder: HwDecoder) -> Future:
    """Request one frame from ``decoder`` and return a future that resolves to it."""
    result: Future = Future()
    result.set_running_or_notify_cancel()
    task = decoder.decode_next_frame(result.set_result)

    def _forward_error(done: Future) -> None:
        error = done.exception()
        if error is not None and not result.done():
            result.set_exception(error)

    task.add_done_callback(_forward_error)
    return result