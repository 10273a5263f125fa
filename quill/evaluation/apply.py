"""Application engine for Quill.

Closures are not entered here: applying one binds its arguments in a fresh
scope under the captured environment and hands the body back as a TailCall
for the evaluator loop (or for invoke, when called from Python). Natives run
to completion immediately.
"""

from __future__ import annotations

from quill import LispValue
from quill.errors import QuillTypeError
from quill.types.closure import Closure
from quill.types.environment import Environment
from quill.types.native import NativeFunction
from quill.types.tail_call import TailCall


def apply(fn: LispValue, args: list[LispValue], env: Environment) -> LispValue | TailCall:
    """Apply a Closure or NativeFunction to already-evaluated `args`.

    `env` is the caller's environment; natives receive it, closures ignore
    it in favour of their captured scope.
    """
    if isinstance(fn, Closure):
        return TailCall(fn.body, fn.extend_env(args))
    if isinstance(fn, NativeFunction):
        return fn(env, args)
    from quill.printer import pr_str
    raise QuillTypeError(f"Cannot call non-function {pr_str(fn)}")
