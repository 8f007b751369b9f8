"""Key equality predicates.

Association lists only require that keys can be compared for equality. The
predicate used to match a lookup key against stored keys is selectable per
call (or per :py:class:`assoclist.alist.AssocList`) and defaults to
:py:func:`lenient`."""

from typing import Any, Callable

KeyEq = Callable[[Any, Any], bool]


def lenient(stored: Any, key: Any) -> bool:
    """Match keys using ``==`` alone.

    Keys which are not equal to themselves, such as ``float("nan")``, can never
    be found again once stored."""
    return bool(stored == key)


def strict(stored: Any, key: Any) -> bool:
    """Match keys by identity first, then by ``==``.

    This mirrors how builtin containers such as ``list.index`` locate members, so
    a stored ``nan`` is found again when looked up with the very same object."""
    return stored is key or bool(stored == key)
