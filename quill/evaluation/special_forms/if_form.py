from quill import EvaluatorFn
from quill import SExpression, LispValue
from quill.errors import QuillTypeError
from quill.types.environment import Environment
from quill.types.equality import is_truthy
from quill.types.nil import Nil
from quill.types.tail_call import TailCall


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if len(tail) < 2:
        raise QuillTypeError("if requires a condition and a then-branch")

    cond = evaluate_fn(tail[0], env)
    # Only nil and false are falsy
    if is_truthy(cond):
        return TailCall(tail[1], env)
    if len(tail) > 2:
        return TailCall(tail[2], env)
    return Nil
