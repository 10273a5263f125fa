"""Special form exposing the macro expander to Lisp code.

(macroexpand form): expand head-position macros of the unevaluated form to a
fixed point and return the expansion without evaluating it.
"""

from quill import SExpression, EvaluatorFn
from quill.errors import QuillTypeError
from quill.evaluation.macro_expansion import macroexpand
from quill.types.environment import Environment


def macroexpand_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> SExpression:
    if len(tail) != 1:
        raise QuillTypeError("macroexpand expects exactly 1 argument")
    return macroexpand(tail[0], env, evaluate_fn)
