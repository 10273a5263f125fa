# Core type aliases for Quill's data model.
# Code and data share one representation: the reader produces the same
# values the evaluator consumes and returns.
#
# Naming guidance:
# - SExpression: Use in reader/macro code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (often used interchangeably in this codebase)
SExpression = LispValue

# Evaluator function type: passed into special forms to avoid import cycles
EvaluatorFn = Callable[..., LispValue]
