import io
import re

import pytest

from framepipe.cache_demo import main, run


def _indices(text, prefix):
    pattern = re.compile(rf"^{re.escape(prefix)}(\d+)", re.MULTILINE)
    return [int(match) for match in pattern.findall(text)]


def test_every_frame_is_written_once_in_order():
    out = io.StringIO()
    run(50, out)
    assert _indices(out.getvalue(), "after write: i,qsize, ") == list(range(50))


def test_processed_frames_are_an_ordered_prefix():
    out = io.StringIO()
    processed = run(40, out)
    assert processed == list(range(len(processed)))
    assert len(processed) <= 40
    assert _indices(out.getvalue(), "process frame index: ") == processed


def test_reads_cover_processed_frames():
    out = io.StringIO()
    processed = run(30, out)
    reads = _indices(out.getvalue(), "after read: i,qsize, ")
    assert reads == list(range(len(reads)))
    assert len(processed) <= len(reads) <= 30


@pytest.mark.parametrize("limit", [0, -3])
def test_rejects_non_positive_limit(limit):
    with pytest.raises(ValueError):
        run(limit, io.StringIO())


def test_main_runs_and_reports(capsys):
    assert main(["--limit", "5"]) == 0
    captured = capsys.readouterr().out
    assert _indices(captured, "after write: i,qsize, ") == list(range(5))