from __future__ import annotations
import logging
import os
from pathlib import Path


# Resolve installation dir (quill package directory)
_QUILL_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _QUILL_DIR / 'prelude'
_DEFAULT_HISTORY_FILE = Path.home() / '.quill_history'
_DEFAULT_LOG_LEVEL = 'WARNING'


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def get_prelude_root() -> Path:
    # treat as a single directory; if a file path is set, return its parent
    p = path_from_env('QUILL_PRELUDE_PATH', _DEFAULT_PRELUDE_DIR)
    return p if p.is_dir() else p.parent


def get_history_file() -> Path:
    return path_from_env('QUILL_HISTORY_FILE', _DEFAULT_HISTORY_FILE)


def get_log_level(override: str | None = None) -> int:
    name = (override or os.environ.get('QUILL_LOG_LEVEL', _DEFAULT_LOG_LEVEL)).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING
