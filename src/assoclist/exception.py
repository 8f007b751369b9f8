from typing import Any

import attr


class AssocListException(Exception):
    pass


@attr.define(repr=False, str=False)
class InvalidPairError(AssocListException, ValueError):
    """Raised when a value handed to an association list constructor cannot be
    unpacked into a single key and value."""

    message: str
    value: Any = None

    def __repr__(self):
        return f"assoclist.exception.InvalidPairError({self.message!r}, {self.value!r})"

    def __str__(self):
        return f"{self.message}: {self.value!r}"
