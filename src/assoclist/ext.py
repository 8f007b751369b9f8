"""Associative operations over plain sequences of ``(key, value)`` pairs.

Every function here takes the caller's sequence as its first argument and reads
or mutates it in place. Any mutable sequence supporting iteration, indexing, item
assignment, item deletion and ``append`` may be used: ``list``,
``collections.deque`` and ``collections.UserList`` all qualify.

Lookups are a linear scan from the start of the sequence and resolve to the
first pair whose key matches. Keys are matched with the ``key_eq`` predicate,
:py:func:`assoclist.equality.lenient` unless another is given. Keys are never
required to be hashable or orderable, and uniqueness of keys is never enforced
beyond what :py:func:`insert` and :py:func:`entry` provide.

Absent keys are reported with ``None`` (or a caller supplied default) rather
than an exception::

    >>> pairs = [("a", 1), ("b", 2)]
    >>> entry(pairs, "c").or_insert(3)
    3
    >>> get(pairs, "c")
    3
    >>> entry(pairs, "c").or_insert(4)
    3
    >>> pairs
    [('a', 1), ('b', 2), ('c', 3)]
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Optional, TypeVar

from assoclist.entry import Entry, OccupiedEntry, PairSeq, VacantEntry, ValueRef
from assoclist.equality import KeyEq, lenient
from assoclist.logconfig import TRACE

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


def find_index(
    seq: "Iterable[tuple[K, V]]", key: K, key_eq: KeyEq = lenient
) -> Optional[int]:
    """Return the index of the first pair in `seq` whose key matches `key`, or
    None if no pair matches."""
    for i, (k, _) in enumerate(seq):
        if key_eq(k, key):
            return i
    return None


def get(
    seq: "PairSeq[K, V]",
    key: K,
    default: Optional[V] = None,
    key_eq: KeyEq = lenient,
) -> Optional[V]:
    """Return the value of the first pair in `seq` whose key matches `key`, or
    `default` if no pair matches."""
    for k, v in seq:
        if key_eq(k, key):
            return v
    return default


def get_mut(
    seq: "PairSeq[K, V]", key: K, key_eq: KeyEq = lenient
) -> "Optional[ValueRef[K, V]]":
    """Return a :py:class:`assoclist.entry.ValueRef` to the value of the first pair
    in `seq` whose key matches `key`, or None if no pair matches.

    The reference allows replacing the value in place without changing the key or
    the position of the pair."""
    index = find_index(seq, key, key_eq=key_eq)
    if index is None:
        return None
    return ValueRef(seq, index)


def contains(seq: "PairSeq[K, V]", key: K, key_eq: KeyEq = lenient) -> bool:
    """Return True if any pair in `seq` has a key matching `key`."""
    return find_index(seq, key, key_eq=key_eq) is not None


def entry(seq: "PairSeq[K, V]", key: K, key_eq: KeyEq = lenient) -> "Entry[K, V]":
    """Return the :py:class:`assoclist.entry.Entry` for `key` in `seq`.

    The entry is occupied if some pair matches `key` (the first such pair is the
    one the entry refers to) and vacant otherwise. Only a single scan of `seq` is
    made; every operation on the returned entry is constant time."""
    index = find_index(seq, key, key_eq=key_eq)
    if index is None:
        return VacantEntry(seq, key)
    return OccupiedEntry(seq, key, index)


def insert(
    seq: "PairSeq[K, V]", key: K, value: V, key_eq: KeyEq = lenient
) -> Optional[V]:
    """Set the value for `key` in `seq`.

    If a pair matches `key`, the value of the first such pair is replaced in place
    and the previous value is returned. Otherwise `(key, value)` is appended to the
    end of `seq` and None is returned."""
    e = entry(seq, key, key_eq=key_eq)
    if isinstance(e, OccupiedEntry):
        return e.insert(value)
    e.insert(value)
    return None


def remove_entry(
    seq: "PairSeq[K, V]", key: K, key_eq: KeyEq = lenient
) -> Optional[tuple[K, V]]:
    """Remove the first pair in `seq` whose key matches `key` and return it, or
    return None if no pair matches.

    Removal is stable: the remaining pairs keep their relative order."""
    e = entry(seq, key, key_eq=key_eq)
    if isinstance(e, OccupiedEntry):
        return e.remove_entry()
    logger.log(TRACE, "No pair to remove")
    return None


def remove(
    seq: "PairSeq[K, V]",
    key: K,
    default: Optional[V] = None,
    key_eq: KeyEq = lenient,
) -> Optional[V]:
    """Remove the first pair in `seq` whose key matches `key` and return its
    value, or return `default` if no pair matches."""
    removed = remove_entry(seq, key, key_eq=key_eq)
    if removed is None:
        return default
    _, v = removed
    return v


def keys(seq: "Iterable[tuple[K, V]]") -> Iterator[K]:
    """Iterate over the keys of `seq` in sequence order, duplicates included."""
    for k, _ in seq:
        yield k


def values(seq: "Iterable[tuple[K, V]]") -> Iterator[V]:
    """Iterate over the values of `seq` in sequence order."""
    for _, v in seq:
        yield v
