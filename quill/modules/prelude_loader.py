from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from quill.config import get_prelude_root

logger = logging.getLogger(__name__)

PRELUDE_FILE = 'core.qll'


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def wrap_source(code: str) -> str:
    """Wrap a file's text as a single (do <forms...> nil) form."""
    # The newline keeps a trailing comment from swallowing the closing nil
    return f"(do {code}\nnil)"


def prelude_path() -> Path:
    return get_prelude_root() / PRELUDE_FILE


def load_prelude(itp: _HasEvalPrelude) -> None:
    path = prelude_path()
    if not path.is_file():
        raise FileNotFoundError(f"Cannot find prelude '{path}' (QUILL_PRELUDE_PATH)")
    logger.debug("loading prelude %s", path)
    itp.eval_prelude(path.read_text(encoding='utf-8'))
