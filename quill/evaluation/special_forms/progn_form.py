from quill import EvaluatorFn
from quill import SExpression, LispValue
from quill.types.collections import List
from quill.types.environment import Environment
from quill.types.nil import Nil
from quill.types.symbol import Symbol
from quill.types.tail_call import TailCall

DO = Symbol("do")


def implicit_do(forms: list[SExpression]) -> SExpression:
    """Collapse a body of zero or more forms into a single form."""
    if not forms:
        return Nil
    if len(forms) == 1:
        return forms[0]
    return List([DO, *forms])


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    """(do form...): evaluate for effect, continue with the last form."""
    if not tail:
        return Nil
    for form in tail[:-1]:
        evaluate_fn(form, env)
    return TailCall(tail[-1], env)
