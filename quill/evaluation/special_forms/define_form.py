from quill import EvaluatorFn
from quill import SExpression, LispValue
from quill.errors import QuillTypeError
from quill.types.environment import Environment
from quill.types.symbol import Symbol


def define_value(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, form: str):
    """Validate (form name value) and return (name, evaluated value)."""
    if not tail or not isinstance(tail[0], Symbol):
        raise QuillTypeError(f"Expected symbol key in {form}")
    if len(tail) < 2:
        raise QuillTypeError(f"Expected value in {form}")
    return tail[0], evaluate_fn(tail[1], env)


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name value)
    Binds in the current scope only and returns the value.
    """
    name, value = define_value(tail, env, evaluate_fn, "def!")
    return env.set(name, value)
