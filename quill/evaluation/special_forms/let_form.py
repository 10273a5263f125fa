from quill import EvaluatorFn
from quill import SExpression
from quill.errors import QuillTypeError
from quill.evaluation.special_forms.progn_form import implicit_do
from quill.types.collections import is_sequential
from quill.types.environment import Environment
from quill.types.symbol import Symbol
from quill.types.tail_call import TailCall


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """
    (let* (name1 expr1 name2 expr2 ...) body...)
    Each expression is evaluated in the new scope, so later bindings see
    earlier ones. The body continues in tail position.
    """
    if not tail or not is_sequential(tail[0]):
        raise QuillTypeError("Expected bindings to be a list or vector in let*")
    bindings = tail[0]
    if len(bindings) % 2 != 0:
        raise QuillTypeError("Binding list in let* has mismatched keys and values")
    if len(tail) < 2:
        raise QuillTypeError("Expected body in let*")

    let_env = Environment(outer=env)
    for name, expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise QuillTypeError(f"Expected let* binding key to be a symbol, got {name!r}")
        let_env.set(name, evaluate_fn(expr, let_env))

    return TailCall(implicit_do(tail[1:]), let_env)
