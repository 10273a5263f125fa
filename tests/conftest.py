import pytest

from quill.builtin import atom_builtin, env_builtin, hash_map_builtin, io_builtin
from quill.interpreter import Interpreter
from quill.types.environment import Environment

# Two kinds of fixtures:
# - `interp` is a full Interpreter with the prelude (not, load-file, cond).
# - `env` is a bare root Environment holding only the native library, for
#   tests that drive the reader and evaluator directly.


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def env():
    e = Environment()
    for module in (env_builtin, hash_map_builtin, atom_builtin, io_builtin):
        module.register(e)
    return e


@pytest.fixture(autouse=True)
def _isolated_history(tmp_path, monkeypatch):
    # Keep REPL tests from touching the user's readline history
    monkeypatch.setenv("QUILL_HISTORY_FILE", str(tmp_path / "history"))
