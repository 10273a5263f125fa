"""String, printing and I/O builtins."""
from __future__ import annotations

import logging
import time
from pathlib import Path

from quill import LispValue
from quill.errors import QuillException, QuillTypeError
from quill.builtin.env_builtin import expect_args
from quill.printer import pr_join
from quill.reader.parser import read_str
from quill.types.environment import Environment
from quill.types.native import define_natives
from quill.types.nil import Nil

logger = logging.getLogger(__name__)


def pr_str_builtin(env: Environment, args: list[LispValue]) -> str:
    return pr_join(args, True, " ")


def str_builtin(env: Environment, args: list[LispValue]) -> str:
    return pr_join(args, False, "")


def prn(env: Environment, args: list[LispValue]) -> LispValue:
    print(pr_join(args, True, " "))
    return Nil


def println(env: Environment, args: list[LispValue]) -> LispValue:
    print(pr_join(args, False, " "))
    return Nil


def read_string(env: Environment, args: list[LispValue]) -> LispValue:
    (text,) = expect_args("read-string", args, 1)
    if not isinstance(text, str):
        raise QuillTypeError("read-string expects a string")
    return read_str(text)


def slurp(env: Environment, args: list[LispValue]) -> str:
    """(slurp path): the whole file as a string; I/O failures are thrown as strings."""
    (path,) = expect_args("slurp", args, 1)
    if not isinstance(path, str):
        raise QuillTypeError("slurp expects a file name string")
    logger.debug("reading %s", path)
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as ex:
        raise QuillException(f"cannot read {path}: {ex.strerror or ex}") from ex
    except UnicodeDecodeError as ex:
        raise QuillException(f"cannot read {path}: not valid UTF-8 ({ex.reason})") from ex


def readline(env: Environment, args: list[LispValue]) -> LispValue:
    """(readline prompt): a line from stdin without its newline, or nil at EOF."""
    (prompt,) = expect_args("readline", args, 1)
    if not isinstance(prompt, str):
        raise QuillTypeError("readline expects a prompt string")
    try:
        return input(prompt)
    except EOFError:
        return Nil


def time_ms(env: Environment, args: list[LispValue]) -> int:
    expect_args("time-ms", args, 0)
    return time.time_ns() // 1_000_000


def register(env: Environment) -> None:
    define_natives(
        env,
        {
            "pr-str": pr_str_builtin,
            "str": str_builtin,
            "prn": prn,
            "println": println,
            "read-string": read_string,
            "slurp": slurp,
            "readline": readline,
            "time-ms": time_ms,
        },
    )
