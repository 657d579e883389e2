import pytest

from schemelet.context import initialize_runtime
from schemelet.interpreter import Interpreter


@pytest.fixture
def ctx():
    """A fresh runtime context with the standard primitives."""
    return initialize_runtime()


@pytest.fixture
def interp():
    """A fresh interpreter; definitions persist across eval calls."""
    return Interpreter()
