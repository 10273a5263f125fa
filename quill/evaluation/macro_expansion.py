"""Head-position macro expansion.

A list is a macro call when its head is a Symbol bound, in the current
environment, to a Closure flagged as a macro. Expansion calls the macro with
the unevaluated argument forms and repeats until the head is no longer a
macro call.
"""

from __future__ import annotations

import logging

from quill import SExpression, EvaluatorFn
from quill.types.closure import Closure
from quill.types.collections import List
from quill.types.environment import Environment
from quill.types.symbol import Symbol

logger = logging.getLogger(__name__)


def macro_for(form: SExpression, env: Environment) -> Closure | None:
    """Return the macro that `form` calls, or None if it is not a macro call."""
    if not isinstance(form, List) or not form:
        return None
    head = form[0]
    if not isinstance(head, Symbol):
        return None
    value = env.get(head)
    if isinstance(value, Closure) and value.is_macro:
        return value
    return None


def expand_1(form: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Expand only the head-position macro if present."""
    macro = macro_for(form, env)
    if macro is None:
        return form
    logger.debug("expanding macro %s", form[0])
    return evaluate_fn(macro.body, macro.extend_env(list(form[1:])))


def macroexpand(form: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Expand head-position macros to a fixed point."""
    while macro_for(form, env) is not None:
        form = expand_1(form, env, evaluate_fn)
    return form
