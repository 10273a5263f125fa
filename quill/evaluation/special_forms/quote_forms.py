from quill import SExpression, LispValue, EvaluatorFn
from quill.errors import QuillTypeError
from quill.types.collections import HashMap, List, Vector
from quill.types.environment import Environment
from quill.types.symbol import Symbol
from quill.types.tail_call import TailCall

QUOTE = Symbol("quote")
UNQUOTE = Symbol("unquote")
SPLICE_UNQUOTE = Symbol("splice-unquote")
CONS = Symbol("cons")
CONCAT = Symbol("concat")
VEC = Symbol("vec")


def _is_headed_by(form: SExpression, head: Symbol) -> bool:
    return isinstance(form, List) and len(form) > 0 and form[0] == head


def _second(form: List, name: str) -> SExpression:
    if len(form) < 2:
        raise QuillTypeError(f"{name} expects exactly 1 argument")
    return form[1]


def quasiquote_expand(ast: SExpression) -> SExpression:
    """Rewrite a quasiquoted template into cons/concat/vec calls.

    This is a structural rewrite; nothing is evaluated here.
    """
    if _is_headed_by(ast, UNQUOTE):
        return _second(ast, "unquote")

    if isinstance(ast, (List, Vector)):
        result: SExpression = List()
        for elt in reversed(ast):
            if _is_headed_by(elt, SPLICE_UNQUOTE):
                result = List([CONCAT, _second(elt, "splice-unquote"), result])
            else:
                result = List([CONS, quasiquote_expand(elt), result])
        if isinstance(ast, Vector):
            result = List([VEC, result])
        return result

    if isinstance(ast, (Symbol, HashMap)):
        return List([QUOTE, ast])

    return ast


def _single_argument(tail: list[SExpression], name: str) -> SExpression:
    if len(tail) != 1:
        raise QuillTypeError(f"{name} expects exactly 1 argument")
    return tail[0]


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    return _single_argument(tail, "quote")


def quasiquote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> TailCall:
    # Evaluate the expansion in tail position
    return TailCall(quasiquote_expand(_single_argument(tail, "quasiquote")), env)


def quasiquoteexpand_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> SExpression:
    return quasiquote_expand(_single_argument(tail, "quasiquoteexpand"))
