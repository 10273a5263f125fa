"""Hash-map builtins. Maps are never mutated; assoc/dissoc return new maps."""
from __future__ import annotations

from quill import LispValue
from quill.errors import QuillTypeError
from quill.builtin.env_builtin import expect_args
from quill.types.collections import HashMap, List, build_hash_map, is_map_key, type_name
from quill.types.environment import Environment
from quill.types.native import define_natives
from quill.types.nil import Nil


def expect_map(name: str, value: LispValue) -> HashMap:
    if not isinstance(value, HashMap):
        raise QuillTypeError(f"{name} expects a hash-map, got {type_name(value)}")
    return value


def expect_key(name: str, value: LispValue) -> LispValue:
    if not is_map_key(value):
        raise QuillTypeError(f"{name} keys must be strings or keywords, got {type_name(value)}")
    return value


def hash_map(env: Environment, args: list[LispValue]) -> HashMap:
    return build_hash_map(args)


def is_map(env: Environment, args: list[LispValue]) -> bool:
    (value,) = expect_args("map?", args, 1)
    return isinstance(value, HashMap)


def assoc(env: Environment, args: list[LispValue]) -> HashMap:
    if not args:
        raise QuillTypeError("assoc requires a hash-map")
    m, *kvs = args
    return build_hash_map(kvs, base=expect_map("assoc", m))


def dissoc(env: Environment, args: list[LispValue]) -> HashMap:
    if not args:
        raise QuillTypeError("dissoc requires a hash-map")
    m, *keys = args
    result = HashMap(expect_map("dissoc", m))
    for key in keys:
        result.pop(expect_key("dissoc", key), None)
    return result


def get(env: Environment, args: list[LispValue]) -> LispValue:
    """(get m key): the value under key, or nil when m is nil or lacks key."""
    m, key = expect_args("get", args, 2)
    if m is Nil:
        return Nil
    return expect_map("get", m).get(expect_key("get", key), Nil)


def contains(env: Environment, args: list[LispValue]) -> bool:
    m, key = expect_args("contains?", args, 2)
    return expect_key("contains?", key) in expect_map("contains?", m)


def keys(env: Environment, args: list[LispValue]) -> List:
    (m,) = expect_args("keys", args, 1)
    return List(expect_map("keys", m).keys())


def vals(env: Environment, args: list[LispValue]) -> List:
    (m,) = expect_args("vals", args, 1)
    return List(expect_map("vals", m).values())


def register(env: Environment) -> None:
    define_natives(
        env,
        {
            "hash-map": hash_map,
            "map?": is_map,
            "assoc": assoc,
            "dissoc": dissoc,
            "get": get,
            "contains?": contains,
            "keys": keys,
            "vals": vals,
        },
    )
