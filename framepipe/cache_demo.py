"""Decode frame indices on an I/O pool, cache them, and process them on the main thread."""

from __future__ import annotations

import argparse
import threading
from collections import deque
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from functools import partial
from typing import Any, Callable, TextIO

from framepipe.cache import FrameIndexCache
from framepipe.decoder import HwDecoder, decode_frame

LIMIT = 100000


class _RunLoop:
    """Work queue driven by the thread that calls ``run``."""

    def __init__(self, stop: threading.Event) -> None:
        self._stop = stop
        self._tasks: deque[tuple[Callable[[], Any], Future]] = deque()
        self._cond = threading.Condition()
        self._finishing = False

    def schedule(self, fn: Callable[[], Any]) -> Future:
        future: Future = Future()
        with self._cond:
            if self._finishing:
                future.cancel()
                return future
            self._tasks.append((fn, future))
            self._cond.notify_all()
        return future

    def finish(self) -> None:
        with self._cond:
            self._finishing = True
            self._cond.notify_all()

    def run(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: bool(self._tasks) or self._finishing)
                if not self._tasks:
                    return
                fn, future = self._tasks.popleft()
            if self._stop.is_set():
                future.cancel()
                continue
            if not future.set_running_or_notify_cancel():
                continue
            try:
                future.set_result(fn())
            except BaseException as error:  # handed back to the waiting thread
                future.set_exception(error)


def run(limit: int = LIMIT, out: TextIO | None = None) -> list[int]:
    """Run the pipeline for ``limit`` frames; return the indices processed on this thread."""
    if limit < 1:
        raise ValueError("limit must be at least 1")

    stop = threading.Event()
    loop = _RunLoop(stop)
    cache = FrameIndexCache(out)
    processed: list[int] = []

    def process(frame_index: int) -> bool:
        print(f"process frame index: {frame_index}", file=out, flush=True)
        processed.append(frame_index)
        return frame_index == limit - 1

    def writer(decoder: HwDecoder) -> None:
        try:
            for _ in range(limit):
                cache.write(decode_frame(decoder).result())
        finally:
            loop.finish()
            stop.set()

    def reader() -> None:
        while True:
            frame_index = cache.read()
            try:
                last = loop.schedule(partial(process, frame_index)).result()
            except CancelledError:
                return
            if last:
                return

    with HwDecoder() as decoder, ThreadPoolExecutor(max_workers=2) as io_pool:
        writing = io_pool.submit(writer, decoder)
        reading = io_pool.submit(reader)
        loop.run()
        writing.result()
        reading.result()
    return processed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Decode, cache and process frame indices.")
    parser.add_argument("--limit", type=int, default=LIMIT, help="number of frames to decode")
    args = parser.parse_args(argv)
    try:
        run(args.limit)
    except ValueError as error:
        parser.error(str(error))
    return 0