import logging

from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.types.errors import SprigArityError, SprigTypeError
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol

_log = logging.getLogger(__name__)


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    The value is evaluated before anything is bound, so a failing initializer
    leaves the environment untouched. Returns the symbol.
    """
    if len(tail) != 2:
        raise SprigArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SprigTypeError(f"define expects a symbol, got {name}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    _log.debug("define: %s", name)
    return name
