# framepipe

Small building blocks for turning a callback-driven frame producer into
something ordinary Python code can consume: a future, a thread-safe queue,
or a plain iterator.

## What is in it

- `framepipe.decoder`
  - `HwDecoder(frame_factory=make_index, delay=0.0)` is a simulated decoder.
    Each call to `decode_next_frame(callback)` schedules one frame on the
    decoder's single worker thread. After `delay` seconds, the decoder builds
    the frame with `frame_factory(index)` and passes it to `callback`. Indices
    count up from 0. The method returns the `concurrent.futures.Future` of
    that task. `close()` refuses new work and waits for every scheduled frame.
    After `close()`, `decode_next_frame` raises `RuntimeError`. The decoder is
    also a context manager that closes on exit.
  - `decode_frame(decoder)` requests one frame and returns a `Future` that
    resolves to it. If the factory or the delivery fails, the future carries
    that exception.
  - `HwFrame` is a dataclass with an `index` and a `data` list.
  - Two frame factories are provided. `make_index` yields the bare integer
    index. `make_frame` yields an `HwFrame` whose data is four consecutive
    byte values starting at `index * 4`, each taken modulo 256.
- `framepipe.cache`
  - `FrameIndexCache(out=None)` is a thread-safe FIFO of frame indices.
  - `write(i)` appends an index and wakes any waiting reader.
  - `read()` blocks until an index is available, then removes and returns the
    oldest one.
  - `len(cache)` gives the current queue size.
  - Each `read` and `write` prints a line with the index and the queue size
    to `out`, or to standard output if `out` is `None`.
- `framepipe.ondemand`
  - `OnDemandRange(item_provider, until_provider)` and
    `ondemand_sequence(item_provider, until_provider)` give an iterable that
    fetches one item per step.
  - Either provider may return a plain value or a `Future`.
  - The until predicate is asked before each fetch and again before the
    fetched item is yielded. Iteration ends as soon as it is true.
  - Every `iter()` starts a fresh pass.
- `framepipe.cache_demo`
  - `run(limit=100000, out=None)` decodes `limit` frame indices on one
    pool thread and writes them into a `FrameIndexCache`.
  - A second pool thread reads them back. It hands each index to a loop on
    the calling thread, which prints `process frame index: N`.
  - Processing ends when the last index arrives.
  - `run` returns the list of processed indices. A `limit` below 1 raises
    `ValueError`.
- `framepipe.sequence_demo`
  - `make_frame_sequence(decoder, stop_event)` is an on-demand sequence of
    decoded frames that ends once `stop_event` is set.
  - `process_frame(frame, out=None)` prints `frame_reader: [index]: data[0]`
    and returns the frame's index.
  - `run(stop_after=0.1, out=None)` reads frames with a 5 ms decode delay.
    A stop is requested after `stop_after` seconds.
  - At the end it prints `frame_reader stopped.`, then
    `frame_reader successfully completed.` and `Total: N`, and returns the
    sum of the processed frame indices.

## Installing

```
pip install .
```

Python 3.10 or later is required. There are no runtime dependencies.

## Using the library

```python
from framepipe.decoder import HwDecoder, decode_frame, make_frame

with HwDecoder(make_frame, 0.0) as decoder:
    frame = decode_frame(decoder).result()
    print(frame.index, frame.data)   # 0 [0, 1, 2, 3]
```

Iterating over frames on demand until an event is set:

```python
import threading
from framepipe.decoder import HwDecoder, make_frame
from framepipe.sequence_demo import make_frame_sequence

stop = threading.Event()
with HwDecoder(make_frame, 0.0) as decoder:
    for frame in make_frame_sequence(decoder, stop):
        if frame.index == 9:
            stop.set()
```

## Command-line demos

```
framepipe-cache-demo [--limit N]
framepipe-sequence-demo [--stop-after SECONDS]
```

`framepipe-cache-demo` runs `framepipe.cache_demo.run`. `--limit` defaults
to 100000. A limit below 1 is reported as a usage error.

`framepipe-sequence-demo` runs `framepipe.sequence_demo.run`. `--stop-after`
defaults to 0.1 seconds.

## What it does not do

The decoder is a simulation: it fabricates frame indices and data and talks
to no real device or media file.

## Running the tests

```
pip install .[test]
pytest
```