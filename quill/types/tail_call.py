from __future__ import annotations

from quill import SExpression
from quill.types.environment import Environment


class TailCall:
    """Next (ast, env) state for the evaluator loop.

    Special forms and closure application return this instead of recursing
    when the remaining work is in tail position.
    """

    __slots__ = ("ast", "env")

    def __init__(self, ast: SExpression, env: Environment):
        self.ast = ast
        self.env = env
