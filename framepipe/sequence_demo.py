"""Read frames from the decoder as an on-demand sequence until stopped."""

from __future__ import annotations

import argparse
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO

from framepipe.decoder import HwDecoder, HwFrame, decode_frame, make_frame
from framepipe.ondemand import OnDemandRange, ondemand_sequence

FRAME_DELAY = 0.005
STOP_AFTER = 0.1


def make_frame_sequence(decoder: HwDecoder, stop_event: threading.Event) -> OnDemandRange:
    """A sequence that fetches frames from ``decoder`` until ``stop_event`` is set."""
    return ondemand_sequence(lambda: decode_frame(decoder), stop_event.is_set)


def process_frame(frame: HwFrame, out: TextIO | None = None) -> int:
    """Report one frame and return its index, the amount it adds to the total."""
    print(f"frame_reader: [{frame.index}]: {frame.data[0]}", file=out, flush=True)
    return frame.index


def run(stop_after: float = STOP_AFTER, out: TextIO | None = None) -> int:
    """Read frames until a stop is requested after ``stop_after`` seconds; return the total."""
    stop = threading.Event()
    total = 0

    with HwDecoder(make_frame, FRAME_DELAY) as decoder:
        frames = make_frame_sequence(decoder, stop)

        def reader() -> None:
            nonlocal total
            for frame in frames:
                total += process_frame(frame, out)
            if stop.is_set():
                print("frame_reader stopped.", file=out, flush=True)
            print("frame_reader successfully completed.", file=out, flush=True)

        timer = threading.Timer(stop_after, stop.set)
        timer.daemon = True
        with ThreadPoolExecutor(max_workers=1) as read_context:
            reading = read_context.submit(reader)
            timer.start()
            try:
                reading.result()
            finally:
                stop.set()
                timer.cancel()

    print(f"Total: {total}", file=out, flush=True)
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Read decoded frames until stopped.")
    parser.add_argument(
        "--stop-after", type=float, default=STOP_AFTER, help="seconds before the stop request"
    )
    args = parser.parse_args(argv)
    run(args.stop_after)
    return 0