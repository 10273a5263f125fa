"""
  Quill Reader, Lexer and Parser

- A single regular scan produces the tokens; whitespace, commas and
  comments are dropped.
- The parser emits Quill values directly:

    - nil -> Nil
    - true / false -> bool
    - numbers -> int
    - strings -> str
    - :name -> Keyword
    - symbols -> Symbol
    - ( ... ) -> List
    - [ ... ] -> Vector
    - { ... } -> HashMap
    - quote forms -> List([Symbol("quote"), expr]), etc.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from quill import SExpression
from quill.errors import UnexpectedEof, UnexpectedToken
from quill.types.collections import List, Vector, build_hash_map
from quill.types.nil import Nil
from quill.types.symbol import Keyword, Symbol
from quill.reader import reader_macros

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<splice>~@)"  # splice-unquote
    r"|(?P<special>[\[\]{}()'`~^@])"  # single-character delimiters
    r'|(?P<string>"(?:\\.|[^\\"])*"?)'  # strings, possibly unterminated
    r"|(?P<comment>;[^\n]*)"  # comment to end of line
    r"|(?P<atom>[^\s\[\]{}('\"`,;)]+)"  # numbers, symbols, keywords
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"-?[0-9]+")
STRING_RE = re.compile(r'"(?:\\.|[^\\"])*"', re.DOTALL)

ESCAPES: dict[str, str] = {
    "n": "\n",
    '"': '"',
    "\\": "\\",
}

# Closing delimiter for each opening one, and the collection it builds
SEQUENCES = {
    "(": (")", List),
    "[": ("]", Vector),
    "{": ("}", build_hash_map),
}
CLOSERS = {closer for closer, _ in SEQUENCES.values()}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    for match in TOKEN_RE.finditer(source):
        kind = match.lastgroup
        if kind is None or kind == "comment":
            continue
        yield kind, match.group(kind)


def unescape(token: str) -> str:
    """Decode a double-quoted string token; raises UnexpectedEof if unterminated."""
    if not STRING_RE.fullmatch(token):
        raise UnexpectedEof('"', 'Unexpected EOF while reading string, expected \'"\'')
    return re.sub(r"\\(.)", lambda m: ESCAPES.get(m.group(1), m.group(1)), token[1:-1], flags=re.DOTALL)


def read_atom(token: str) -> SExpression:
    if NUMBER_RE.fullmatch(token):
        return int(token)
    if token.startswith('"'):
        return unescape(token)
    if token.startswith(":"):
        return Keyword(token[1:])
    if token == "true":
        return True
    if token == "false":
        return False
    if token == "nil":
        return Nil
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise UnexpectedEof("a form", "Unexpected EOF while reading a form")

        if tok_type in ("special", "splice"):
            if reader_macros.is_reader_macro(tok_val):
                return reader_macros.dispatch(tok_val, self)
            if tok_val in SEQUENCES:
                return self.parse_sequence(tok_val)
            raise UnexpectedToken(tok_val, f"Unexpected token '{tok_val}' while reading a form")

        return read_atom(tok_val)

    def parse_sequence(self, opener: str) -> SExpression:
        closer, build = SEQUENCES[opener]
        items = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise UnexpectedEof(
                    closer, f"Unexpected EOF while reading sequence, expected '{closer}'"
                )
            if tok_type == "special" and tok_val in CLOSERS:
                self.advance()
                if tok_val != closer:
                    raise UnexpectedToken(
                        tok_val, f"Unexpected token '{tok_val}', expected '{closer}'"
                    )
                return build(items)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def read_str(source: str) -> SExpression:
    """Read exactly one form from `source`; trailing text is ignored."""
    tokens = list(lex(source))
    logger.debug("tokens: %s", tokens)
    return TokenStream(iter(tokens)).parse_expr()


def read_all(source: str) -> Iterator[SExpression]:
    """Read every top-level form in `source`, in order."""
    return TokenStream(lex(source)).parse_all()
