from __future__ import annotations

from quill import LispValue
from quill.types.atom import Atom
from quill.types.closure import Closure
from quill.types.collections import HashMap, is_sequential
from quill.types.native import NativeFunction
from quill.types.nil import Nil


def is_truthy(value: LispValue) -> bool:
    """Only Nil and false are falsy; 0, "" and empty collections are truthy."""
    return not (value is Nil or value is False)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality for Lisp values.

    Lists and vectors compare element-wise across tags, maps compare by
    their entries, functions and atoms by identity, everything else by tag
    and payload.
    """
    if a is b:
        return True
    if is_sequential(a) and is_sequential(b):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, HashMap) and isinstance(b, HashMap):
        if a.keys() != b.keys():
            return False
        return all(is_equal(v, b[k]) for k, v in a.items())
    if isinstance(a, (Closure, NativeFunction, Atom)):
        return False
    # bool is a subclass of int: 1 and true must not compare equal
    if type(a) != type(b):
        return False
    return a == b
