import pytest

from lithp.interpreter import Interpreter


@pytest.fixture
def interp():
    """Fresh interpreter; it carries no state but keeps tests uniform."""
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate one line and return its printed form."""
    return interp.eval_to_string
