from collections.abc import Iterable, Iterator, Mapping, MutableMapping, Sequence
from typing import Any, Optional, TypeVar, Union, cast

from assoclist import ext
from assoclist.entry import Entry, PairSeq, ValueRef
from assoclist.equality import KeyEq, lenient, strict
from assoclist.exception import InvalidPairError
from assoclist.interfaces import IAssocSequence
from assoclist.util import pairwise_kvs

K = TypeVar("K")
V = TypeVar("V")

_MISSING = object()


def to_pair(member: Any) -> tuple[Any, Any]:
    """Unpack `member` into a `(key, value)` tuple, raising InvalidPairError if it
    does not hold exactly two elements."""
    try:
        k, v = member
    except (TypeError, ValueError) as e:
        raise InvalidPairError("Cannot make a key/value pair from value", member) from e
    return k, v


def _as_pair(member: Any) -> Any:
    """Return `member` as a `(key, value)` tuple if it can be unpacked into one,
    or unchanged otherwise."""
    try:
        k, v = member
    except (TypeError, ValueError):
        return member
    return k, v


class AssocList(IAssocSequence[K, V], MutableMapping[K, V]):
    """A mutable mapping view over a sequence of `(key, value)` pairs.

    The wrapped sequence is not copied; every operation reads and mutates the
    caller's sequence in place through :py:mod:`assoclist.ext`. Keys are matched
    with `key_eq`, resolving to the first matching pair.

    Unlike a dict, keys are not required to be unique. `len` counts pairs and
    iteration yields every key in sequence order, duplicates included. Use
    :py:meth:`pairs` to see the underlying sequence."""

    __slots__ = ("_inner", "_key_eq")

    def __init__(
        self, pairs: "Optional[PairSeq[K, V]]" = None, key_eq: KeyEq = lenient
    ) -> None:
        self._inner: "PairSeq[K, V]" = [] if pairs is None else pairs
        self._key_eq = key_eq

    @classmethod
    def from_coll(
        cls,
        members: Union[Mapping[K, V], Iterable[tuple[K, V]]],
        key_eq: Optional[KeyEq] = None,
    ) -> "AssocList[K, V]":
        """Create a new association list holding the pairs of `members`.

        Pairs are taken as given, in order and duplicates included. Members which
        cannot be unpacked into a key and value raise InvalidPairError."""
        if isinstance(members, Mapping):
            pairs = list(members.items())
        else:
            pairs = [to_pair(member) for member in members]
        if key_eq is None:
            return cls(pairs)
        return cls(pairs, key_eq=key_eq)

    def __contains__(self, item):
        return ext.contains(self._inner, item, key_eq=self._key_eq)

    def __delitem__(self, key: K) -> None:
        if ext.remove_entry(self._inner, key, key_eq=self._key_eq) is None:
            raise KeyError(key)

    def __eq__(self, other):
        if self is other:
            return True
        if isinstance(other, AssocList):
            other_pairs = other.pairs
        elif isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            other_pairs = other
        else:
            return NotImplemented
        if len(self) != len(other_pairs):
            return False
        return all(
            _as_pair(p1) == _as_pair(p2)
            for p1, p2 in zip(self._inner, other_pairs)
        )

    def __getitem__(self, key: K) -> V:
        v = ext.get(self._inner, key, cast("V", _MISSING), key_eq=self._key_eq)
        if v is _MISSING:
            raise KeyError(key)
        return v

    def __iter__(self) -> Iterator[K]:
        return ext.keys(self._inner)

    def __len__(self):
        return len(self._inner)

    def __repr__(self):
        return f"{type(self).__name__}({list(self._inner)!r})"

    def __setitem__(self, key: K, value: V) -> None:
        ext.insert(self._inner, key, value, key_eq=self._key_eq)

    @property
    def key_eq(self) -> KeyEq:
        return self._key_eq

    @property
    def pairs(self) -> "PairSeq[K, V]":
        """The underlying sequence of pairs."""
        return self._inner

    def assoc(self, *kvs) -> "AssocList[K, V]":
        """Set each key in the flat argument list `kvs` to the value following it,
        returning this association list."""
        for k, v in pairwise_kvs(kvs):
            ext.insert(self._inner, k, v, key_eq=self._key_eq)
        return self

    def contains(self, k: K) -> bool:
        return ext.contains(self._inner, k, key_eq=self._key_eq)

    def entry(self, k: K) -> "Entry[K, V]":
        return ext.entry(self._inner, k, key_eq=self._key_eq)

    def get(self, k: K, default: Optional[V] = None) -> Optional[V]:
        return ext.get(self._inner, k, default, key_eq=self._key_eq)

    val_at = get

    def get_mut(self, k: K) -> "Optional[ValueRef[K, V]]":
        return ext.get_mut(self._inner, k, key_eq=self._key_eq)

    def insert(self, k: K, v: V) -> Optional[V]:
        return ext.insert(self._inner, k, v, key_eq=self._key_eq)

    def remove(self, k: K, default: Optional[V] = None) -> Optional[V]:
        return ext.remove(self._inner, k, default, key_eq=self._key_eq)

    def remove_entry(self, k: K) -> Optional[tuple[K, V]]:
        return ext.remove_entry(self._inner, k, key_eq=self._key_eq)

    def items(self) -> Iterator[tuple[K, V]]:  # type: ignore[override]
        for k, v in self._inner:
            yield k, v

    def values(self) -> Iterator[V]:  # type: ignore[override]
        return ext.values(self._inner)

    def pop(self, key: K, default: Any = _MISSING) -> V:
        removed = ext.remove_entry(self._inner, key, key_eq=self._key_eq)
        if removed is None:
            if default is _MISSING:
                raise KeyError(key)
            return default
        _, v = removed
        return v

    def popitem(self) -> tuple[K, V]:
        """Remove and return the last pair of the association list."""
        if len(self._inner) == 0:
            raise KeyError("popitem(): association list is empty")
        k, v = self._inner.pop()
        return k, v

    def setdefault(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self.entry(key).or_insert(default)

    def clear(self) -> None:
        self._inner.clear()


class StrictAssocList(AssocList[K, V]):
    """An :py:class:`AssocList` whose keys are matched with
    :py:func:`assoclist.equality.strict` by default."""

    __slots__ = ()

    def __init__(
        self, pairs: "Optional[PairSeq[K, V]]" = None, key_eq: KeyEq = strict
    ) -> None:
        super().__init__(pairs, key_eq=key_eq)
