import pytest

from sprig.builtin.env_builtin import make_global_env
from sprig.printer import to_string
from sprig.reader.parser import read_all
from sprig.evaluation.evaluator import evaluate


@pytest.fixture
def env():
    """Fresh global environment with the builtin procedures for each test."""
    return make_global_env()


@pytest.fixture
def run(env):
    """Evaluate every form in a source string and return the printed value of the last one."""
    def _run(source: str) -> str:
        result = None
        for expr in read_all(source):
            result = evaluate(expr, env)
        return to_string(result)
    return _run
