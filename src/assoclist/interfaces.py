from abc import ABC, abstractmethod
from collections.abc import Iterable, Sized
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from typing_extensions import Self

if TYPE_CHECKING:
    from assoclist.entry import Entry, ValueRef

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


class IDeref(Generic[T], ABC):
    """``IDeref`` types are reference containers which return their contained value
    via :py:meth:`deref`.

    .. seealso::

       :py:class:`assoclist.entry.ValueRef`"""

    __slots__ = ()

    @abstractmethod
    def deref(self) -> T:
        raise NotImplementedError()


class ILookup(Generic[K, V], ABC):
    """``ILookup`` types allow accessing contained values by a key."""

    __slots__ = ()

    @abstractmethod
    def val_at(self, k: K, default: Optional[V] = None) -> Optional[V]:
        raise NotImplementedError()


class IAssocSequence(ILookup[K, V], Sized):
    """``IAssocSequence`` types expose associative operations over a mutable,
    ordered sequence of key/value pairs.

    Every lookup resolves to the first pair whose key matches. Absent keys are
    reported with ``None`` (or a caller supplied default), never by raising.

    .. seealso::

       :py:mod:`assoclist.ext`"""

    __slots__ = ()

    @abstractmethod
    def contains(self, k: K) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def entry(self, k: K) -> "Entry[K, V]":
        raise NotImplementedError()

    @abstractmethod
    def get_mut(self, k: K) -> "Optional[ValueRef[K, V]]":
        raise NotImplementedError()

    @abstractmethod
    def insert(self, k: K, v: V) -> Optional[V]:
        raise NotImplementedError()

    @abstractmethod
    def remove(self, k: K, default: Optional[V] = None) -> Optional[V]:
        raise NotImplementedError()

    @abstractmethod
    def remove_entry(self, k: K) -> Optional[tuple[K, V]]:
        raise NotImplementedError()


class IPersistentAssociative(ILookup[K, V], Iterable[tuple[K, V]], Sized):
    """``IPersistentAssociative`` types support a persistent data structure variant
    of associative operations. Every modifying operation returns a new collection
    and leaves the receiver untouched.

    .. seealso::

       :py:class:`ITransientAssociative`"""

    __slots__ = ()

    @abstractmethod
    def assoc(self, *kvs) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def cons(self, *elems) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def contains(self, k: K) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def dissoc(self, *ks: K) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def empty(self) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def entry(self, k: K) -> Optional[tuple[K, V]]:
        raise NotImplementedError()


T_tcoll_co = TypeVar("T_tcoll_co", bound="ITransientAssociative", covariant=True)


class IEvolveableCollection(Generic[T_tcoll_co]):
    """``IEvolveableCollection`` types support creating transient variants of
    persistent data structures which can be modified efficiently and then returned
    back into persistent data structures once modification is complete."""

    @abstractmethod
    def to_transient(self) -> T_tcoll_co:
        raise NotImplementedError()


class ITransientAssociative(ILookup[K, V], Sized):
    """``ITransientAssociative`` types are the transient counterpart of
    :py:class:`IPersistentAssociative` types."""

    __slots__ = ()

    @abstractmethod
    def assoc_transient(self, *kvs) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def contains_transient(self, k: K) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def dissoc_transient(self, *ks: K) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def entry_transient(self, k: K) -> "Entry[K, V]":
        raise NotImplementedError()

    @abstractmethod
    def to_persistent(self) -> IPersistentAssociative[K, V]:
        raise NotImplementedError()
