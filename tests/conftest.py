import os
import pytest

from simplelang import run_program, set_debug

PROGRAMS_DIR = os.path.join(os.path.dirname(__file__), "programs")

@pytest.fixture(autouse=True)
def no_debug():
    yield
    set_debug(False)

@pytest.fixture
def programs_dir():
    return PROGRAMS_DIR

@pytest.fixture
def run():
    """Run source text (one statement per line) and return (outputs, errors)."""
    def _run(source, inputs=()):
        lines = source.splitlines() if isinstance(source, str) else source
        return run_program(lines, inputs)
    return _run
