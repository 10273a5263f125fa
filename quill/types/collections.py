"""Sequence and map values.

List and Vector are plain Python lists told apart by type only; HashMap is a
dict keyed by str or Keyword. All three carry optional metadata, which never
takes part in equality.
"""

from __future__ import annotations

from typing import Iterable

from quill import LispValue
from quill.errors import InvalidHashMap
from quill.types.nil import Nil, NilType
from quill.types.symbol import Keyword


class List(list):
    __slots__ = ("meta",)

    def __init__(self, items: Iterable[LispValue] = (), meta: LispValue = Nil):
        super().__init__(items)
        self.meta = meta

    def with_meta(self, meta: LispValue) -> List:
        return List(self, meta)

    def __repr__(self):
        return f"List({list.__repr__(self)})"


class Vector(list):
    __slots__ = ("meta",)

    def __init__(self, items: Iterable[LispValue] = (), meta: LispValue = Nil):
        super().__init__(items)
        self.meta = meta

    def with_meta(self, meta: LispValue) -> Vector:
        return Vector(self, meta)

    def __repr__(self):
        return f"Vector({list.__repr__(self)})"


class HashMap(dict):
    __slots__ = ("meta",)

    def __init__(self, items=(), meta: LispValue = Nil):
        super().__init__(items)
        self.meta = meta

    def with_meta(self, meta: LispValue) -> HashMap:
        return HashMap(self, meta)

    def __repr__(self):
        return f"HashMap({dict.__repr__(self)})"


def is_sequential(value: LispValue) -> bool:
    return isinstance(value, (List, Vector))


def is_map_key(value: LispValue) -> bool:
    return isinstance(value, (str, Keyword))


def build_hash_map(forms: list[LispValue], base: HashMap | None = None) -> HashMap:
    """Build a HashMap from alternating key/value forms, optionally on top of `base`.

    Raises InvalidHashMap for an odd number of forms or a key that is
    neither a string nor a keyword.
    """
    if len(forms) % 2 != 0:
        raise InvalidHashMap("Invalid hash map. Odd number of keys and values")
    result = HashMap(base or ())
    for key, value in zip(forms[::2], forms[1::2]):
        if not is_map_key(key):
            raise InvalidHashMap(
                f"Invalid hash map. Keys must be a string or a keyword. Got {type_name(key)}"
            )
        result[key] = value
    return result


def type_name(value: LispValue) -> str:
    """Lisp-level name of a value's variant, used in error messages and type-of."""
    # Local imports keep this module free of function/atom dependencies
    from quill.types.atom import Atom
    from quill.types.closure import Closure
    from quill.types.native import NativeFunction
    from quill.types.symbol import Symbol

    match value:
        case NilType():
            return "nil"
        case bool():
            return "boolean"
        case int():
            return "number"
        case str():
            return "string"
        case Symbol():
            return "symbol"
        case Keyword():
            return "keyword"
        case List():
            return "list"
        case Vector():
            return "vector"
        case HashMap():
            return "hash-map"
        case Closure() if value.is_macro:
            return "macro"
        case Closure() | NativeFunction():
            return "function"
        case Atom():
            return "atom"
    return type(value).__name__
