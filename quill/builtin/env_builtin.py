"""Built-in functions for the Quill runtime environment.

This module defines core arithmetic, comparison, sequence processing,
predicates, and application helpers exposed to Lisp code. Every builtin is
called as fn(env, args) with already-evaluated arguments.
"""
from __future__ import annotations

import operator
from functools import reduce
from typing import Callable

from quill import LispValue
from quill.errors import QuillException, QuillTypeError
from quill.evaluation.evaluator import evaluate, invoke
from quill.printer import pr_str
from quill.types.closure import Closure
from quill.types.collections import List, Vector, is_sequential, type_name
from quill.types.environment import Environment
from quill.types.equality import is_equal
from quill.types.native import NativeFunction, define_natives
from quill.types.nil import Nil
from quill.types.symbol import Keyword, Symbol


# -------------------------------
# Argument helpers
# -------------------------------
def expect_args(name: str, args: list[LispValue], count: int) -> list[LispValue]:
    if len(args) != count:
        plural = "argument" if count == 1 else "arguments"
        raise QuillTypeError(f"{name} requires exactly {count} {plural}, got {len(args)}")
    return args


def is_number(value: LispValue) -> bool:
    # bool is a subclass of int and is not a number here
    return isinstance(value, int) and not isinstance(value, bool)


def expect_numbers(name: str, args: list[LispValue]) -> list[int]:
    if not args:
        raise QuillTypeError(f"{name} requires at least 1 argument")
    for a in args:
        if not is_number(a):
            raise QuillTypeError(f"All arguments to {name} must be numbers, got {pr_str(a)}")
    return args


def seq_items(name: str, value: LispValue) -> list[LispValue]:
    """Elements of a list or vector; nil reads as the empty sequence."""
    if value is Nil:
        return []
    if not is_sequential(value):
        raise QuillTypeError(f"{name} expects a list or vector, got {type_name(value)}")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def _arith(name: str, op: Callable[[int, int], int]):
    def builtin(env: Environment, args: list[LispValue]) -> int:
        return reduce(op, expect_numbers(name, args))
    builtin.__name__ = name
    return builtin


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero; dividing by zero throws."""
    if b == 0:
        raise QuillException("division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


add = _arith("+", operator.add)
sub = _arith("-", operator.sub)
mul = _arith("*", operator.mul)
div = _arith("/", truncating_div)


def _compare(name: str, op: Callable[[int, int], bool]):
    def builtin(env: Environment, args: list[LispValue]) -> bool:
        nums = expect_numbers(name, args)
        return all(op(a, b) for a, b in zip(nums, nums[1:]))
    builtin.__name__ = name
    return builtin


lt = _compare("<", operator.lt)
lte = _compare("<=", operator.le)
gt = _compare(">", operator.gt)
gte = _compare(">=", operator.ge)


def equals(env: Environment, args: list[LispValue]) -> bool:
    """Return true if all arguments are equal (or zero/one arg), else false."""
    return all(is_equal(a, b) for a, b in zip(args, args[1:]))


# -------------------------------
# Predicates and constructors
# -------------------------------
def _predicate(name: str, test: Callable[[LispValue], bool]):
    def builtin(env: Environment, args: list[LispValue]) -> bool:
        (value,) = expect_args(name, args, 1)
        return test(value)
    builtin.__name__ = name
    return builtin


def is_function(value: LispValue) -> bool:
    return isinstance(value, NativeFunction) or (isinstance(value, Closure) and not value.is_macro)


def symbol(env: Environment, args: list[LispValue]) -> Symbol:
    (name,) = expect_args("symbol", args, 1)
    if not isinstance(name, str):
        raise QuillTypeError("symbol expects a string")
    return Symbol(name)


def keyword(env: Environment, args: list[LispValue]) -> Keyword:
    (name,) = expect_args("keyword", args, 1)
    if isinstance(name, Keyword):
        return name
    if not isinstance(name, str):
        raise QuillTypeError("keyword expects a string or keyword")
    return Keyword(name)


def type_of(env: Environment, args: list[LispValue]) -> str:
    (value,) = expect_args("type-of", args, 1)
    return type_name(value)


# -------------------------------
# Sequences
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> List:
    return List(args)


def vector(env: Environment, args: list[LispValue]) -> Vector:
    return Vector(args)


def is_empty(env: Environment, args: list[LispValue]) -> bool:
    (xs,) = expect_args("empty?", args, 1)
    return len(seq_items("empty?", xs)) == 0


def count(env: Environment, args: list[LispValue]) -> int:
    (xs,) = expect_args("count", args, 1)
    return len(seq_items("count", xs))


def cons(env: Environment, args: list[LispValue]) -> List:
    """(cons x seq): a new list with x in front of the elements of seq."""
    head, tail = expect_args("cons", args, 2)
    return List([head, *seq_items("cons", tail)])


def concat(env: Environment, args: list[LispValue]) -> List:
    """Concatenate lists and vectors into a new list; nil counts as empty."""
    result = List()
    for xs in args:
        result.extend(seq_items("concat", xs))
    return result


def vec(env: Environment, args: list[LispValue]) -> Vector:
    (xs,) = expect_args("vec", args, 1)
    if isinstance(xs, Vector):
        return xs
    return Vector(seq_items("vec", xs))


def nth(env: Environment, args: list[LispValue]) -> LispValue:
    xs, index = expect_args("nth", args, 2)
    items = seq_items("nth", xs)
    if not is_number(index):
        raise QuillTypeError("nth expects a numeric index")
    if not 0 <= index < len(items):
        raise QuillException("index out of range")
    return items[index]


def first(env: Environment, args: list[LispValue]) -> LispValue:
    (xs,) = expect_args("first", args, 1)
    items = seq_items("first", xs)
    return items[0] if items else Nil


def rest(env: Environment, args: list[LispValue]) -> List:
    (xs,) = expect_args("rest", args, 1)
    return List(seq_items("rest", xs)[1:])


def conj(env: Environment, args: list[LispValue]) -> LispValue:
    """(conj coll x...): prepend to a list (in reverse order) or append to a vector."""
    if not args:
        raise QuillTypeError("conj requires a collection")
    coll, *xs = args
    if isinstance(coll, Vector):
        return Vector([*coll, *xs])
    return List([*reversed(xs), *seq_items("conj", coll)])


def seq(env: Environment, args: list[LispValue]) -> LispValue:
    """(seq x): a list view of x, or nil when x is empty."""
    (xs,) = expect_args("seq", args, 1)
    if isinstance(xs, str):
        return List(xs) if xs else Nil
    items = seq_items("seq", xs)
    if not items:
        return Nil
    return xs if isinstance(xs, List) else List(items)


# -------------------------------
# Function application
# -------------------------------
def apply(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply f a b... xs): call f with a, b, ... followed by the elements of xs."""
    if len(args) < 2:
        raise QuillTypeError("apply requires a function and a list of arguments")
    fn, *leading, xs = args
    return invoke(fn, [*leading, *seq_items("apply", xs)], env)


def map_builtin(env: Environment, args: list[LispValue]) -> List:
    fn, xs = expect_args("map", args, 2)
    return List(invoke(fn, [x], env) for x in seq_items("map", xs))


def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(eval form): evaluate form in the root environment."""
    (form,) = expect_args("eval", args, 1)
    return evaluate(form, env.root())


def throw(env: Environment, args: list[LispValue]) -> LispValue:
    (value,) = expect_args("throw", args, 1)
    raise QuillException(value)


# -------------------------------
# Metadata
# -------------------------------
def meta(env: Environment, args: list[LispValue]) -> LispValue:
    (value,) = expect_args("meta", args, 1)
    return getattr(value, "meta", Nil)


def with_meta(env: Environment, args: list[LispValue]) -> LispValue:
    value, data = expect_args("with-meta", args, 2)
    if not hasattr(value, "with_meta"):
        raise QuillTypeError(f"with-meta is not supported on {type_name(value)}")
    return value.with_meta(data)


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    define_natives(
        env,
        {
            "+": add,
            "-": sub,
            "*": mul,
            "/": div,
            "=": equals,
            "<": lt,
            "<=": lte,
            ">": gt,
            ">=": gte,
            "nil?": _predicate("nil?", lambda x: x is Nil),
            "true?": _predicate("true?", lambda x: x is True),
            "false?": _predicate("false?", lambda x: x is False),
            "symbol?": _predicate("symbol?", lambda x: isinstance(x, Symbol)),
            "keyword?": _predicate("keyword?", lambda x: isinstance(x, Keyword)),
            "string?": _predicate("string?", lambda x: isinstance(x, str)),
            "number?": _predicate("number?", is_number),
            "fn?": _predicate("fn?", is_function),
            "macro?": _predicate("macro?", lambda x: isinstance(x, Closure) and x.is_macro),
            "list?": _predicate("list?", lambda x: isinstance(x, List)),
            "vector?": _predicate("vector?", lambda x: isinstance(x, Vector)),
            "sequential?": _predicate("sequential?", is_sequential),
            "symbol": symbol,
            "keyword": keyword,
            "type-of": type_of,
            "list": list_builtin,
            "vector": vector,
            "empty?": is_empty,
            "count": count,
            "cons": cons,
            "concat": concat,
            "vec": vec,
            "nth": nth,
            "first": first,
            "rest": rest,
            "conj": conj,
            "seq": seq,
            "apply": apply,
            "map": map_builtin,
            "eval": eval_builtin,
            "throw": throw,
            "meta": meta,
            "with-meta": with_meta,
        },
    )
    env.set(Symbol("*host-language*"), "python")
