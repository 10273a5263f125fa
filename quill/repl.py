"""Command-line driver: run a script, or read-eval-print at a prompt."""

from __future__ import annotations

import argparse
import logging
import readline
import sys
from typing import Sequence

from quill.config import get_history_file, get_log_level
from quill.errors import QuillError
from quill.interpreter import Interpreter
from quill.reader.parser import lex

logger = logging.getLogger(__name__)

PROMPT = "user> "


def format_error(ex: BaseException) -> str:
    if isinstance(ex, RecursionError):
        return "Error: maximum recursion depth exceeded"
    return f"Error: {ex}"


def _load_history() -> None:
    try:
        readline.read_history_file(get_history_file())
    except OSError:
        logger.debug("no readline history at %s", get_history_file())


def _save_history() -> None:
    try:
        readline.write_history_file(get_history_file())
    except OSError as ex:
        logger.warning("could not write history to %s: %s", get_history_file(), ex)


def run_repl(itp: Interpreter) -> None:
    _load_history()
    try:
        while True:
            try:
                line = input(PROMPT)
            except EOFError:
                print()
                break
            if next(lex(line), None) is None:
                continue
            try:
                print(itp.rep(line))
            except (QuillError, RecursionError) as ex:
                print(format_error(ex))
    finally:
        _save_history()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quill", description="Quill Lisp interpreter")
    parser.add_argument("file", nargs="?", help="script to run instead of starting the REPL")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="arguments bound to *ARGV*")
    parser.add_argument("--log-level", default=None, help="logging level (default: QUILL_LOG_LEVEL)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    logging.basicConfig(level=get_log_level(ns.log_level), format="%(levelname)s %(name)s: %(message)s")

    itp = Interpreter(argv=ns.args)
    if ns.file is None:
        run_repl(itp)
        return 0

    try:
        itp.load_file(ns.file)
    except (QuillError, RecursionError) as ex:
        print(format_error(ex), file=sys.stderr)
        return 1
    return 0
