"""Runtime environment for Quill.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Scopes are shared by reference: every
closure and child scope created from a scope keeps it alive, and the `outer`
link is never reassigned after construction, so chains cannot form cycles.
"""

from __future__ import annotations

from typing import Optional, Sequence

from quill import LispValue
from quill.errors import QuillTypeError, SymbolNotFound
from quill.types.nil import Nil
from quill.types.symbol import Symbol

# Marks that the next formal parameter collects all remaining arguments
VARIADIC_MARKER = Symbol("&")


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        binds: Sequence[Symbol] | None = None,
        exprs: Sequence[LispValue] | None = None,
    ):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        if binds is not None:
            self._bind(binds, exprs or ())

    def _bind(self, binds: Sequence[Symbol], exprs: Sequence[LispValue]) -> None:
        """Bind formals positionally.

        `&` makes the following name collect the remaining arguments as a
        List; formals without a matching argument are bound to Nil.
        """
        # Local import: collections imports errors/nil/symbol only
        from quill.types.collections import List

        for i, name in enumerate(binds):
            if name == VARIADIC_MARKER:
                if i + 1 >= len(binds):
                    raise QuillTypeError("'&' must be followed by a parameter name")
                self.vars[binds[i + 1]] = List(exprs[i:])
                return
            self.vars[name] = exprs[i] if i < len(exprs) else Nil

    def set(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` in this scope only and return `value`."""
        if not isinstance(name, Symbol):
            raise QuillTypeError(f"Cannot bind {name!r}, expected a symbol")
        self.vars[name] = value
        return value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> LispValue | None:
        """Return the nearest binding of `name`, or None when it is unbound."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def lookup(self, name: Symbol) -> LispValue:
        """Look up `name`; raises SymbolNotFound when no scope binds it."""
        env = self.find(name)
        if env is None:
            raise SymbolNotFound(str(name))
        return env.vars[name]

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def __repr__(self) -> str:
        return f"<Environment vars={len(self.vars)} depth={self._depth()}>"

    def _depth(self) -> int:
        depth, env = 0, self.outer
        while env is not None:
            depth, env = depth + 1, env.outer
        return depth
