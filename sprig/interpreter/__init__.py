from __future__ import annotations

import logging

from sprig import LispValue
from sprig.reader.parser import read, read_all
from sprig.types.nil import Nil
from sprig.types.environment import Environment
from sprig.evaluation.evaluator import evaluate
from sprig.builtin.env_builtin import make_global_env

_log = logging.getLogger(__name__)


def evaluate_one(text: str, env: Environment) -> LispValue:
    """Read exactly one top-level form from `text` and evaluate it in `env`."""
    return evaluate(read(text), env)


class Interpreter:
    """
    Orchestrates reading and evaluating Sprig code.
    Owns a global Environment that persists across calls.
    """

    def __init__(self, env: Environment | None = None, prelude: str | None = None):
        self.env: Environment = env if env is not None else make_global_env()
        if prelude:
            self.eval(prelude)

    def eval_one(self, code: str) -> LispValue:
        return evaluate_one(code, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code` and return the last value (nil if none)."""
        result: LispValue = Nil
        for expr in read_all(code):
            result = evaluate(expr, self.env)
        return result

    def eval_each(self, code: str):
        """Yield the value of each top-level form as it is evaluated."""
        for expr in read_all(code):
            value = evaluate(expr, self.env)
            _log.debug("evaluated %s", expr)
            yield value
