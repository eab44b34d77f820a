import sys

import pytest

from mal.builtin.env_builtin import register
from mal.interpreter import Interpreter
from mal.types.environment import Environment


@pytest.fixture
def env():
    """Fresh symbol table with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch):
    # Tests must not depend on the caller's shell configuration
    monkeypatch.delenv("MAL_PROMPT", raising=False)
    monkeypatch.delenv("MAL_HISTORY_LENGTH", raising=False)


@pytest.fixture
def int_digit_limit():
    """Pin the interpreter's int/str conversion limit to its default of 4300 digits."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no int/str conversion limit")
    old = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(old)
