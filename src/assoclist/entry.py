import logging
from abc import ABC, abstractmethod
from collections.abc import MutableSequence
from typing import Callable, Generic, TypeVar

import attr
from typing_extensions import Concatenate, ParamSpec

from assoclist.interfaces import IDeref
from assoclist.logconfig import TRACE

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")
P = ParamSpec("P")

PairSeq = MutableSequence[tuple[K, V]]


@attr.frozen(eq=False)
class ValueRef(IDeref[V], Generic[K, V]):
    """A reference to the value of a single pair in a sequence of pairs.

    Pairs are immutable tuples, so the referenced value is replaced by writing a
    new pair holding the original key object back to the same index. The key and
    position of the pair never change.

    A ValueRef names its pair by index. Removing or inserting pairs ahead of it
    by any other means leaves it pointing at whatever now occupies that index.

    Handles compare and hash by identity, never by the contents of the sequence
    they point into."""

    seq: "PairSeq[K, V]"
    index: int

    @property
    def key(self) -> K:
        k, _ = self.seq[self.index]
        return k

    def deref(self) -> V:
        _, v = self.seq[self.index]
        return v

    def reset(self, v: V) -> V:
        """Replace the referenced value with `v`, returning `v`."""
        k, _ = self.seq[self.index]
        self.seq[self.index] = (k, v)
        logger.log(TRACE, f"Replaced value at index {self.index}")
        return v

    def swap(
        self, f: Callable[Concatenate[V, P], V], *args: P.args, **kwargs: P.kwargs
    ) -> V:
        """Replace the referenced value with the return value of
        `f(old, *args, **kwargs)`, returning the new value."""
        return self.reset(f(self.deref(), *args, **kwargs))


class Entry(Generic[K, V], ABC):
    """A view into the slot for a single key of a sequence of pairs. The slot may
    be vacant (:py:class:`VacantEntry`) or occupied (:py:class:`OccupiedEntry`).

    Entries are produced by :py:func:`assoclist.ext.entry` and are meant to be
    consumed right away; mutating the sequence other than through the entry
    leaves the entry stale."""

    __slots__ = ()

    key: K

    @abstractmethod
    def or_insert(self, default: V) -> V:
        """Ensure a value is in the entry by appending `default` if it is vacant,
        then return the value in the entry.

        `default` is ignored for occupied entries."""
        raise NotImplementedError()

    @abstractmethod
    def or_insert_with_key(self, default_fn: Callable[[K], V]) -> V:
        """Ensure a value is in the entry by appending the result of
        `default_fn(key)` if it is vacant, then return the value in the entry."""
        raise NotImplementedError()

    def or_insert_with(self, default_fn: Callable[[], V]) -> V:
        """Ensure a value is in the entry by appending the result of `default_fn()`
        if it is vacant, then return the value in the entry.

        `default_fn` is never called for occupied entries."""
        return self.or_insert_with_key(lambda _: default_fn())

    @abstractmethod
    def and_modify(
        self, f: Callable[Concatenate[V, P], V], *args: P.args, **kwargs: P.kwargs
    ) -> "Entry[K, V]":
        """Replace the value of an occupied entry with `f(old, *args, **kwargs)`
        before any potential insert. Vacant entries are returned unchanged."""
        raise NotImplementedError()


@attr.frozen(eq=False)
class VacantEntry(Entry[K, V]):
    seq: "PairSeq[K, V]"
    key: K

    def insert(self, v: V) -> V:
        """Append the pair `(key, v)` to the sequence and return `v`."""
        self.seq.append((self.key, v))
        logger.log(TRACE, f"Appended new pair at index {len(self.seq) - 1}")
        return v

    def or_insert(self, default: V) -> V:
        return self.insert(default)

    def or_insert_with_key(self, default_fn: Callable[[K], V]) -> V:
        return self.insert(default_fn(self.key))

    def and_modify(self, f, *args, **kwargs) -> "VacantEntry[K, V]":
        return self


@attr.frozen(eq=False)
class OccupiedEntry(Entry[K, V]):
    seq: "PairSeq[K, V]"
    key: K
    index: int

    def get(self) -> V:
        _, v = self.seq[self.index]
        return v

    def as_ref(self) -> ValueRef[K, V]:
        """Return a reference to the value of the occupied pair."""
        return ValueRef(self.seq, self.index)

    def insert(self, v: V) -> V:
        """Set the value of the entry and return the previous value."""
        old = self.get()
        self.as_ref().reset(v)
        return old

    def remove_entry(self) -> tuple[K, V]:
        """Remove the occupied pair from the sequence and return it.

        Pairs after the removed pair shift down by one, keeping their order."""
        k, v = self.seq[self.index]
        del self.seq[self.index]
        logger.log(TRACE, f"Removed pair at index {self.index}")
        return k, v

    def remove(self) -> V:
        """Remove the occupied pair from the sequence and return its value."""
        _, v = self.remove_entry()
        return v

    def or_insert(self, default: V) -> V:
        return self.get()

    def or_insert_with_key(self, default_fn: Callable[[K], V]) -> V:
        return self.get()

    def and_modify(self, f, *args, **kwargs) -> "OccupiedEntry[K, V]":
        self.as_ref().swap(f, *args, **kwargs)
        return self
