# Structured error handling
# Usage:
#   (try* (throw "boom") (catch* e e))      ; => "boom"
#   (try* (undefined-fn) (catch* e e))      ; => "'undefined-fn' not found"
#
# A thrown value is bound as-is; any other Quill error is bound as a string
# holding its message.

from quill import EvaluatorFn
from quill import SExpression, LispValue
from quill.errors import QuillError, QuillException, QuillTypeError
from quill.types.collections import List
from quill.types.environment import Environment
from quill.types.symbol import Symbol
from quill.types.tail_call import TailCall

CATCH = Symbol("catch*")


def error_payload(error: QuillError) -> LispValue:
    """The value a catch* clause binds for `error`."""
    if isinstance(error, QuillException):
        return error.value
    return error.message


def _parse_catch(clause: SExpression) -> tuple[Symbol, SExpression]:
    if (
        not isinstance(clause, List)
        or len(clause) != 3
        or clause[0] != CATCH
        or not isinstance(clause[1], Symbol)
    ):
        raise QuillTypeError("try* expects a (catch* symbol handler) clause")
    return clause[1], clause[2]


def try_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    """(try* body (catch* name handler))"""
    if not tail:
        raise QuillTypeError("try* requires a body form")
    if len(tail) < 2:
        # No handler: errors propagate unchanged
        return TailCall(tail[0], env)

    name, handler = _parse_catch(tail[1])
    try:
        return evaluate_fn(tail[0], env)
    except QuillError as ex:
        catch_env = Environment(env, [name], [error_payload(ex)])
        return TailCall(handler, catch_env)
