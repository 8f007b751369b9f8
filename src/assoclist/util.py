from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def partition(coll: Sequence[T], n: int) -> Iterable[tuple[T, ...]]:
    """Partition `coll` into groups of size `n`.

    The final group may hold fewer than `n` elements."""
    assert n > 0
    start = 0
    stop = n
    while stop <= len(coll):
        yield tuple(e for e in coll[start:stop])
        start += n
        stop += n
    if start < len(coll) < stop:
        stop = len(coll)
        yield tuple(e for e in coll[start:stop])


def pairwise_kvs(kvs: Sequence[T]) -> Iterable[tuple[T, T]]:
    """Yield `(key, value)` tuples from a flat sequence of alternating keys and
    values, as passed to the various `assoc` methods."""
    if len(kvs) % 2 != 0:
        raise ValueError(f"assoc expects an even number of arguments; got {len(kvs)}")
    for k, v in partition(kvs, 2):
        yield k, v
