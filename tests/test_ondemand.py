from concurrent.futures import Future

import pytest

from framepipe.ondemand import OnDemandRange, ondemand_sequence


def _done(value):
    future = Future()
    future.set_result(value)
    return future


def test_stops_before_fetching_once_consumer_signals():
    fetched = []
    stop = []

    def provider():
        fetched.append(len(fetched))
        return fetched[-1]

    seq = OnDemandRange(provider, lambda: bool(stop))
    received = []
    for item in seq:
        received.append(item)
        if len(received) == 2:
            stop.append(True)
    assert received == [0, 1]
    assert fetched == [0, 1]


def test_until_true_at_start_yields_nothing():
    calls = []
    seq = OnDemandRange(lambda: calls.append(1), lambda: True)
    assert list(seq) == []
    assert calls == []


def test_item_fetched_then_dropped_when_until_turns_true():
    answers = iter([False, False, False, True])
    fetched = []

    def provider():
        fetched.append(len(fetched))
        return fetched[-1]

    seq = OnDemandRange(provider, lambda: next(answers))
    assert list(seq) == [0]
    assert fetched == [0, 1]


def test_accepts_futures():
    counter = iter(range(100))
    seq = ondemand_sequence(lambda: _done(next(counter)), lambda: _done(False))
    it = iter(seq)
    assert [next(it) for _ in range(4)] == [0, 1, 2, 3]


def test_each_iteration_is_a_fresh_pass():
    counter = iter(range(100))
    limit = {"n": 0}

    def until():
        limit["n"] += 1
        return limit["n"] % 3 == 0

    seq = OnDemandRange(lambda: next(counter), until)
    first = list(seq)
    second = list(seq)
    assert first == [0]
    assert second == [1]


def test_provider_error_propagates():
    calls = []

    def provider():
        calls.append(1)
        if len(calls) > 2:
            raise KeyError("missing")
        return len(calls) - 1

    seq = ondemand_sequence(provider, lambda: False)
    received = []
    with pytest.raises(KeyError, match="missing") as excinfo:
        for item in seq:
            received.append(item)
    assert received == [0, 1]
    assert excinfo.value.args == ("missing",)
    assert len(calls) == 3


def test_failed_future_propagates():
    def provider():
        future = Future()
        future.set_exception(ValueError("decode failed"))
        return future

    with pytest.raises(ValueError, match="decode failed"):
        next(iter(OnDemandRange(provider, lambda: False)))