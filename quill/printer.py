"""Render Quill values as text.

Readable mode produces text the reader can parse back (strings are quoted
and escaped); display mode writes string contents raw.
"""

from __future__ import annotations

from quill import LispValue
from quill.types.atom import Atom
from quill.types.closure import Closure
from quill.types.collections import HashMap, List, Vector
from quill.types.native import NativeFunction
from quill.types.nil import NilType
from quill.types.symbol import Keyword, Symbol


def escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def pr_str(value: LispValue, readable: bool = True) -> str:
    match value:
        case NilType():
            return "nil"
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case str():
            return f'"{escape(value)}"' if readable else value
        case Symbol() | Keyword():
            return str(value)
        case List():
            return f"({pr_join(value, readable)})"
        case Vector():
            return f"[{pr_join(value, readable)}]"
        case HashMap():
            entries = (f"{pr_str(k, readable)} {pr_str(v, readable)}" for k, v in value.items())
            return "{" + " ".join(entries) + "}"
        case Closure():
            return "#<macro>" if value.is_macro else "#<function>"
        case NativeFunction():
            return f"#<native {value.name}>"
        case Atom():
            return f"(atom {pr_str(value.value, readable)})"
    return repr(value)


def pr_join(items, readable: bool, sep: str = " ") -> str:
    """Render each item and join them, as pr-str/str/prn/println do."""
    return sep.join(pr_str(item, readable) for item in items)
