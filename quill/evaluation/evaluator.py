"""Core evaluator and trampoline for the Quill interpreter.

Implements macro expansion, special-form dispatch, and tail-call aware
application. The loop keeps the current (ast, env) pair; special forms and
closure application that end in tail position return a TailCall, and the
loop continues with it instead of recursing, so tail-recursive Lisp code
runs in constant Python stack.
"""

from __future__ import annotations

from quill import SExpression, LispValue
from quill.evaluation.apply import apply
from quill.evaluation.macro_expansion import macroexpand
from quill.evaluation.special_forms import SPECIAL_FORMS
from quill.types.collections import HashMap, List, Vector
from quill.types.environment import Environment
from quill.types.symbol import Symbol
from quill.types.tail_call import TailCall


def evaluate(ast: SExpression, env: Environment) -> LispValue:
    """Evaluate `ast` in `env` and return its value."""
    while True:
        if not isinstance(ast, List):
            return eval_ast(ast, env)

        ast = macroexpand(ast, env, evaluate)
        if not isinstance(ast, List):
            return eval_ast(ast, env)

        if not ast:
            return ast

        head = ast[0]
        if isinstance(head, Symbol) and head in SPECIAL_FORMS:
            result = SPECIAL_FORMS[head](ast[1:], env, evaluate)
        else:
            fn, *args = [evaluate(form, env) for form in ast]
            result = apply(fn, args, env)

        if isinstance(result, TailCall):
            ast, env = result.ast, result.env
            continue
        return result


def eval_ast(ast: SExpression, env: Environment) -> LispValue:
    """Evaluate a form that is not a list application."""
    match ast:
        case Symbol():
            return env.lookup(ast)
        case Vector():
            return Vector(evaluate(form, env) for form in ast)
        case HashMap():
            return HashMap((key, evaluate(form, env)) for key, form in ast.items())
    # --- Atoms return as-is ---
    return ast


def invoke(fn: LispValue, args: list[LispValue], env: Environment) -> LispValue:
    """Call `fn` with `args` from Python and return the finished value.

    This is the re-entrant entry point used by higher-order natives (apply,
    map, swap!) to call back into user closures.
    """
    result = apply(fn, list(args), env)
    if isinstance(result, TailCall):
        return evaluate(result.ast, result.env)
    return result

