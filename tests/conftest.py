import pytest

from lispy.builtin.env_builtin import register
from lispy.interpreter import Interpreter
from lispy.printer import lisp_str
from lispy.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source in a shared interpreter and return the printed result."""
    def _run(source: str) -> str:
        return lisp_str(interp.eval(source))
    return _run
