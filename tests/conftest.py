import pytest

from simple_lisp.interpreter import Interpreter
from simple_lisp.types.environment import Environment
from simple_lisp.builtin.env_builtin import register


@pytest.fixture
def interp():
    """Fresh interpreter session."""
    return Interpreter()


@pytest.fixture
def output():
    """Line buffer that print appends to."""
    return []


@pytest.fixture
def env(output):
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e, output)
    return e
