"""User-defined function (and macro) representation for Quill."""

from __future__ import annotations

from quill import SExpression, LispValue
from quill.types.environment import Environment, VARIADIC_MARKER
from quill.types.nil import Nil
from quill.types.symbol import Symbol


class Closure:
    """A first-class function with formal parameters, body, and captured env.

    The captured environment is shared, never copied: several closures may
    hold the same scope.
    """

    __slots__ = ("params", "rest", "body", "env", "is_macro", "meta")

    def __init__(
        self,
        params: list[Symbol],
        body: SExpression,
        env: Environment,
        rest: Symbol | None = None,
        is_macro: bool = False,
        meta: LispValue = Nil,
    ):
        self.params: list[Symbol] = params
        self.rest: Symbol | None = rest
        self.body: SExpression = body
        self.env: Environment = env
        self.is_macro: bool = is_macro
        self.meta: LispValue = meta

    @property
    def formals(self) -> list[Symbol]:
        """The parameter list as written, including `& rest`."""
        if self.rest is None:
            return list(self.params)
        return [*self.params, VARIADIC_MARKER, self.rest]

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Return a new scope under the captured env with `args` bound to the formals."""
        return Environment(self.env, self.formals, args)

    def as_macro(self) -> Closure:
        return Closure(self.params, self.body, self.env, self.rest, True, self.meta)

    def with_meta(self, meta: LispValue) -> Closure:
        return Closure(self.params, self.body, self.env, self.rest, self.is_macro, meta)
