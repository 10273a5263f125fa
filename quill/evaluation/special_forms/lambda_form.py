from quill import EvaluatorFn
from quill import SExpression, LispValue
from quill.errors import QuillTypeError
from quill.evaluation.special_forms.progn_form import implicit_do
from quill.types.closure import Closure
from quill.types.collections import is_sequential
from quill.types.environment import Environment, VARIADIC_MARKER
from quill.types.symbol import Symbol


def parse_params(params: SExpression) -> tuple[list[Symbol], Symbol | None]:
    """Split a parameter form into positional names and the optional `& rest` name."""
    if not is_sequential(params):
        raise QuillTypeError("fn* parameters must be a list or vector")
    names = list(params)
    for name in names:
        if not isinstance(name, Symbol):
            raise QuillTypeError(f"fn* parameter must be a symbol, got {name!r}")
    if VARIADIC_MARKER not in names:
        return names, None
    idx = names.index(VARIADIC_MARKER)
    if len(names) != idx + 2:
        raise QuillTypeError("'&' must be followed by exactly one parameter name")
    return names[:idx], names[idx + 1]


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn* (params) body...) allows zero or more body forms.
    # When there are multiple forms, the body is an implicit do.
    # When there are no body forms, the result of invoking the function is nil.
    if not tail:
        raise QuillTypeError("fn* requires a parameter list")

    params, rest = parse_params(tail[0])
    return Closure(params, implicit_do(tail[1:]), env, rest)
