from assoclist.alist import AssocList, StrictAssocList
from assoclist.entry import Entry, OccupiedEntry, VacantEntry, ValueRef
from assoclist.equality import lenient, strict
from assoclist.exception import AssocListException, InvalidPairError
from assoclist.ext import (
    contains,
    entry,
    get,
    get_mut,
    insert,
    keys,
    remove,
    remove_entry,
    values,
)
from assoclist.main import init
from assoclist.persistent import PersistentAssocList, TransientAssocList, al, alist

__all__ = [
    "AssocList",
    "AssocListException",
    "Entry",
    "InvalidPairError",
    "OccupiedEntry",
    "PersistentAssocList",
    "StrictAssocList",
    "TransientAssocList",
    "VacantEntry",
    "ValueRef",
    "al",
    "alist",
    "contains",
    "entry",
    "get",
    "get_mut",
    "init",
    "insert",
    "keys",
    "lenient",
    "remove",
    "remove_entry",
    "strict",
    "values",
]
