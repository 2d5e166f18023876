"""An input sequence that pulls items on demand from provider callables."""

from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Callable, Iterator


def _resolve(value: Any) -> Any:
    if isinstance(value, Future):
        return value.result()
    return value


class OnDemandRange:
    """Iterable that fetches an item only when the previous one has been consumed.

    ``item_provider`` is called for each item; ``until_provider`` decides when
    the sequence ends. Either may return a plain value or a future of one.
    Each iteration starts a fresh pass.
    """

    def __init__(
        self,
        item_provider: Callable[[], Any],
        until_provider: Callable[[], Any],
    ) -> None:
        self._item_provider = item_provider
        self._until_provider = until_provider

    def _until(self) -> bool:
        return bool(_resolve(self._until_provider()))

    def __iter__(self) -> Iterator[Any]:
        while True:
            if self._until():
                return
            item = _resolve(self._item_provider())
            if self._until():
                return
            yield item


def ondemand_sequence(
    item_provider: Callable[[], Any],
    until_provider: Callable[[], Any],
) -> OnDemandRange:
    """Build an on-demand sequence from an item provider and an until predicate."""
    return OnDemandRange(item_provider, until_provider)