from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Literal

from quill import LispValue
from quill.builtin import atom_builtin, env_builtin, hash_map_builtin, io_builtin
from quill.evaluation.evaluator import evaluate
from quill.modules.prelude_loader import load_prelude, wrap_source
from quill.printer import pr_str
from quill.reader.parser import read_all, read_str
from quill.types.collections import List
from quill.types.environment import Environment
from quill.types.nil import Nil
from quill.types.symbol import Symbol

logger = logging.getLogger(__name__)

LOAD_FILE = Symbol("load-file")


class Interpreter:
    """
    Orchestrates reading and evaluating Quill code.
    Owns the root Environment, which persists across calls.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        argv: Iterable[str] = (),
    ):
        self.env: Environment = Environment()
        for module in (env_builtin, hash_map_builtin, atom_builtin, io_builtin):
            module.register(self.env)
        self.env.set(Symbol("*ARGV*"), List(argv))

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate the text of a source file for its definitions."""
        evaluate(read_str(wrap_source(code)), self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the last value (nil if none)."""
        result: LispValue = Nil
        for expr in read_all(code):
            result = evaluate(expr, self.env)
        return result

    def rep(self, line: str) -> str:
        """Read one form, evaluate it, and print the result readably."""
        return pr_str(evaluate(read_str(line), self.env), True)

    def load_file(self, path: str | Path) -> LispValue:
        logger.debug("loading file %s", path)
        return evaluate(List([LOAD_FILE, str(path)]), self.env)
