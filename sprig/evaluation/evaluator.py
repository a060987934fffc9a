"""Core evaluator for the Sprig interpreter.

Dispatches self-evaluating atoms, symbol lookup, special forms and ordinary
application. Evaluation is plain Python recursion: there is no trampoline,
so very deep programs hit the host recursion limit.
"""

from __future__ import annotations

import logging

from sprig import SExpression, LispValue
from sprig.printer import to_string
from sprig.types.environment import Environment
from sprig.types.errors import SprigNotAFunction
from sprig.types.pair import Pair, to_python_list
from sprig.types.symbol import Symbol, T
from sprig.evaluation.apply import apply, is_procedure
from sprig.evaluation.special_forms import SPECIAL_FORMS

_log = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case Symbol():
            if expr == T:
                return expr
            return env.lookup(expr)

        case Pair(car=head, cdr=rest):
            tail_args = to_python_list(rest, "argument list")

            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                _log.debug("special form: %s", head)
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            fn = evaluate(head, env)
            if not is_procedure(fn):
                raise SprigNotAFunction(f"Not a function object: {to_string(fn)}")
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate)

    # --- Numbers, strings, Nil and procedures evaluate to themselves ---
    return expr
