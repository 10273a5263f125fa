"""Prefix reader macros.

Each prefix token rewrites into a List headed by a symbol that wraps the
next form(s) read from the stream.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quill import SExpression
from quill.types.collections import List
from quill.types.symbol import Symbol

if TYPE_CHECKING:
    from quill.reader.parser import TokenStream


QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
    "@": Symbol("deref"),
}

WITH_META = Symbol("with-meta")


def is_reader_macro(token: str) -> bool:
    return token in QUOTE_FORMS or token == "^"


def dispatch(token: str, stream: TokenStream) -> SExpression:
    """Expand the reader macro `token`; the token itself is already consumed."""
    if token == "^":
        # ^meta target => (with-meta target meta)
        meta = stream.parse_expr()
        target = stream.parse_expr()
        return List([WITH_META, target, meta])
    return List([QUOTE_FORMS[token], stream.parse_expr()])
