import pytest

from bprog.interpreter import Interpreter
from bprog.types.environment import Environment


# Every test starts from a clean configuration: no prelude files picked up
# from the developer's shell and no read prompt.
@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    monkeypatch.delenv("BPROG_PRELUDE_PATH", raising=False)
    monkeypatch.delenv("BPROG_READ_PROMPT", raising=False)


@pytest.fixture
def interp():
    """Fresh interpreter without a prelude."""
    return Interpreter(prelude=None)


@pytest.fixture
def env():
    return Environment()


@pytest.fixture
def run(interp):
    """Run source on a fresh interpreter and return the stack, bottom to top."""
    def _run(source: str) -> list:
        interp.run(source)
        return interp.stack.to_list()
    return _run
