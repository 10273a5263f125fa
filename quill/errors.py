"""Error taxonomy for Quill.

Every failure inside the reader, the evaluator or the native library is
raised as a subclass of QuillError. Only QuillError subclasses are visible
to Lisp code through try*/catch*.
"""

from __future__ import annotations

from typing import Any


class QuillError(Exception):
    """ Base class for all Quill errors"""

    @property
    def message(self) -> str:
        return str(self)


class QuillReaderError(QuillError):
    """ Raised when text cannot be read into a form"""


class UnexpectedToken(QuillReaderError):
    """ Raised when a delimiter appears where a value or closer was expected"""

    def __init__(self, token: str, message: str | None = None):
        super().__init__(message or f"Unexpected token '{token}'")
        self.token = token


class UnexpectedEof(QuillReaderError):
    """ Raised when input ends in the middle of a form or string"""

    def __init__(self, expected: str, message: str | None = None):
        super().__init__(message or f"Unexpected EOF, expected {expected}")
        self.expected = expected


class InvalidHashMap(QuillError):
    """ Raised for an odd number of map forms or a key that is not a string/keyword"""


class SymbolNotFound(QuillError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, name: str):
        super().__init__(f"'{name}' not found")
        self.name = name


class QuillTypeError(QuillError):
    """ Raised when an operation is applied to a value of the wrong shape"""


class QuillException(QuillError):
    """A value thrown by Lisp code with (throw value)."""

    def __init__(self, value: Any):
        # Lazy import: the printer depends on the types package
        from quill.printer import pr_str
        super().__init__(f"Exception: {pr_str(value, True)}")
        self.value = value
