"""Builtins for atoms, the only values that change in place."""
from __future__ import annotations

from quill import LispValue
from quill.errors import QuillTypeError
from quill.builtin.env_builtin import expect_args
from quill.evaluation.evaluator import invoke
from quill.types.atom import Atom
from quill.types.collections import type_name
from quill.types.environment import Environment
from quill.types.native import define_natives


def expect_atom(name: str, value: LispValue) -> Atom:
    if not isinstance(value, Atom):
        raise QuillTypeError(f"{name} expects an atom, got {type_name(value)}")
    return value


def atom(env: Environment, args: list[LispValue]) -> Atom:
    (value,) = expect_args("atom", args, 1)
    return Atom(value)


def is_atom(env: Environment, args: list[LispValue]) -> bool:
    (value,) = expect_args("atom?", args, 1)
    return isinstance(value, Atom)


def deref(env: Environment, args: list[LispValue]) -> LispValue:
    (ref,) = expect_args("deref", args, 1)
    return expect_atom("deref", ref).value


def reset(env: Environment, args: list[LispValue]) -> LispValue:
    ref, value = expect_args("reset!", args, 2)
    return expect_atom("reset!", ref).reset(value)


def swap(env: Environment, args: list[LispValue]) -> LispValue:
    """(swap! a f x...): store (f @a x...) in a and return it."""
    if len(args) < 2:
        raise QuillTypeError("swap! requires an atom and a function")
    ref, fn, *extra = args
    cell = expect_atom("swap!", ref)
    return cell.reset(invoke(fn, [cell.value, *extra], env))


def register(env: Environment) -> None:
    define_natives(
        env,
        {
            "atom": atom,
            "atom?": is_atom,
            "deref": deref,
            "reset!": reset,
            "swap!": swap,
        },
    )
