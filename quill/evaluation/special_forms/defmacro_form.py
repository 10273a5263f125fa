"""Special form: defmacro!.

Evaluates a function form and binds a macro-flagged copy of it, so the
original function value stays an ordinary function.
"""

from __future__ import annotations

from quill import EvaluatorFn, SExpression, LispValue
from quill.errors import QuillTypeError
from quill.evaluation.special_forms.define_form import define_value
from quill.types.closure import Closure
from quill.types.environment import Environment


def defmacro_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(defmacro! name fn-form): bind the macro in the current scope."""
    name, fn = define_value(tail, env, evaluate_fn, "defmacro!")
    if not isinstance(fn, Closure):
        raise QuillTypeError("defmacro! expects a function value")
    return env.set(name, fn.as_macro())
