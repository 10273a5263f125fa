from __future__ import annotations

from typing import Callable

from quill import LispValue
from quill.types.nil import Nil

NativeCallable = Callable[..., LispValue]


class NativeFunction:
    """A builtin implemented in Python, called as fn(env, args)."""

    __slots__ = ("fn", "name", "meta")

    def __init__(self, fn: NativeCallable, name: str | None = None, meta: LispValue = Nil):
        self.fn = fn
        self.name = name or getattr(fn, "__name__", "native")
        self.meta = meta

    def __call__(self, env, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def with_meta(self, meta: LispValue) -> NativeFunction:
        return NativeFunction(self.fn, self.name, meta)

    def __repr__(self):
        return f"<native {self.name}>"


def define_natives(env, table: dict[str, NativeCallable]) -> None:
    """Wrap each Python callable as a NativeFunction and bind it by name in `env`."""
    # Local import: environment imports this package's symbol/nil modules only
    from quill.types.symbol import Symbol
    env.update({Symbol(name): NativeFunction(fn, name) for name, fn in table.items()})
