from collections.abc import Iterable, Iterator, Mapping
from typing import Optional, TypeVar, Union, cast

from pyrsistent import PVector, pvector

from assoclist import ext
from assoclist.alist import to_pair
from assoclist.entry import Entry
from assoclist.equality import KeyEq, lenient
from assoclist.interfaces import (
    IEvolveableCollection,
    IPersistentAssociative,
    ITransientAssociative,
)
from assoclist.util import pairwise_kvs

K = TypeVar("K")
V = TypeVar("V")


class TransientAssocList(ITransientAssociative[K, V]):
    """Mutable counterpart of :py:class:`PersistentAssocList` for batched edits.

    Do not instantiate directly; use :py:meth:`PersistentAssocList.to_transient`."""

    __slots__ = ("_inner", "_key_eq")

    def __init__(self, pairs: list[tuple[K, V]], key_eq: KeyEq = lenient) -> None:
        self._inner = pairs
        self._key_eq = key_eq

    def __bool__(self):
        return True

    def __call__(self, key, default=None):
        return self.val_at(key, default)

    def __contains__(self, item):
        return self.contains_transient(item)

    def __eq__(self, other):
        return self is other

    __hash__ = object.__hash__

    def __len__(self):
        return len(self._inner)

    def assoc_transient(self, *kvs) -> "TransientAssocList[K, V]":
        for k, v in pairwise_kvs(kvs):
            ext.insert(self._inner, k, v, key_eq=self._key_eq)
        return self

    def cons_transient(
        self, *elems: Union[Mapping[K, V], tuple[K, V], None]
    ) -> "TransientAssocList[K, V]":
        for k, v in _pairs_of(elems):
            ext.insert(self._inner, k, v, key_eq=self._key_eq)
        return self

    def contains_transient(self, k: K) -> bool:
        return ext.contains(self._inner, k, key_eq=self._key_eq)

    def dissoc_transient(self, *ks: K) -> "TransientAssocList[K, V]":
        for k in ks:
            ext.remove_entry(self._inner, k, key_eq=self._key_eq)
        return self

    def entry_transient(self, k: K) -> "Entry[K, V]":
        return ext.entry(self._inner, k, key_eq=self._key_eq)

    def val_at(self, k, default=None):
        return ext.get(self._inner, k, default, key_eq=self._key_eq)

    def to_persistent(self) -> "PersistentAssocList[K, V]":
        return PersistentAssocList(pvector(self._inner), key_eq=self._key_eq)


def _pairs_of(
    elems: Iterable[Union[Mapping[K, V], tuple[K, V], None]],
) -> Iterator[tuple[K, V]]:
    for elem in elems:
        if isinstance(elem, Mapping):
            yield from elem.items()
        elif elem is None:
            continue
        else:
            yield to_pair(elem)


class PersistentAssocList(
    IPersistentAssociative[K, V],
    IEvolveableCollection[TransientAssocList],
):
    """Immutable association list. Delegates internally to a pyrsistent.PVector of
    pairs. Do not instantiate directly. Instead use the al() and alist() factory
    functions below.

    As with :py:class:`assoclist.alist.AssocList`, keys need only support
    equality and lookups resolve to the first matching pair."""

    __slots__ = ("_inner", "_key_eq")

    def __init__(
        self, wrapped: "PVector[tuple[K, V]]", key_eq: KeyEq = lenient
    ) -> None:
        self._inner = wrapped
        self._key_eq = key_eq

    def __bool__(self):
        return True

    def __call__(self, key, default=None):
        return self.val_at(key, default)

    def __contains__(self, item):
        return self.contains(item)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, PersistentAssocList):
            return NotImplemented
        return self._inner == other._inner

    def __hash__(self):
        return hash(self._inner)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        yield from self._inner

    def __len__(self):
        return len(self._inner)

    def __repr__(self):
        return f"PersistentAssocList({list(self._inner)!r})"

    @property
    def key_eq(self) -> KeyEq:
        return self._key_eq

    def _set(self, inner: PVector, k: K, v: V) -> PVector:
        index = ext.find_index(inner, k, key_eq=self._key_eq)
        if index is None:
            return inner.append((k, v))
        stored_key, _ = inner[index]
        return inner.set(index, (stored_key, v))

    def assoc(self, *kvs) -> "PersistentAssocList[K, V]":
        inner = self._inner
        for k, v in pairwise_kvs(kvs):
            inner = self._set(inner, k, v)
        return PersistentAssocList(inner, key_eq=self._key_eq)

    def cons(  # type: ignore[override]
        self, *elems: Union[Mapping[K, V], tuple[K, V], None]
    ) -> "PersistentAssocList[K, V]":
        inner = self._inner
        for k, v in _pairs_of(elems):
            inner = self._set(inner, k, v)
        return PersistentAssocList(inner, key_eq=self._key_eq)

    def contains(self, k: K) -> bool:
        return ext.contains(self._inner, k, key_eq=self._key_eq)

    def dissoc(self, *ks: K) -> "PersistentAssocList[K, V]":
        inner = self._inner
        for k in ks:
            index = ext.find_index(inner, k, key_eq=self._key_eq)
            if index is not None:
                inner = inner.delete(index)
        return PersistentAssocList(inner, key_eq=self._key_eq)

    def empty(self) -> "PersistentAssocList[K, V]":
        return PersistentAssocList(pvector(), key_eq=self._key_eq)

    def entry(self, k: K) -> Optional[tuple[K, V]]:
        index = ext.find_index(self._inner, k, key_eq=self._key_eq)
        if index is None:
            return None
        return self._inner[index]

    def val_at(self, k: K, default: Optional[V] = None) -> Optional[V]:
        return ext.get(self._inner, k, default, key_eq=self._key_eq)

    def keys(self) -> Iterator[K]:
        return ext.keys(self._inner)

    def values(self) -> Iterator[V]:
        return ext.values(self._inner)

    def to_transient(self) -> TransientAssocList[K, V]:
        return TransientAssocList(list(self._inner), key_eq=self._key_eq)


EMPTY: PersistentAssocList = PersistentAssocList(pvector())


def alist(
    members: Union[Mapping[K, V], Iterable[tuple[K, V]]], key_eq: KeyEq = lenient
) -> PersistentAssocList[K, V]:
    """Creates a new persistent association list from a Mapping or an iterable of
    pairs. Pairs are taken as given, in order and duplicates included."""
    if isinstance(members, Mapping):
        pairs = members.items()
    else:
        pairs = (to_pair(member) for member in members)
    return PersistentAssocList(
        pvector(cast("Iterable[tuple[K, V]]", pairs)), key_eq=key_eq
    )


def al(*kvs, key_eq: KeyEq = lenient) -> PersistentAssocList:
    """Creates a new persistent association list from a flat list of alternating
    keys and values. Repeated keys update the first occurrence."""
    return alist((), key_eq=key_eq).assoc(*kvs)
