"""Application engine for Sprig.

This module centralizes function application semantics for the interpreter:
- Lambdas bind their arguments in a fresh child of the captured environment
  (see Lambda.extend_env) and evaluate their body there.
- Python callables registered in the environment (builtins) are invoked with
  the caller's environment and the evaluated argument list.

Both the evaluator and the `apply` builtin go through here.
"""

import logging
from typing import Callable

from sprig import LispValue, EvaluatorFn
from sprig.types.environment import Environment
from sprig.types.lambda_fn import Lambda
from sprig.types.errors import SprigNotAFunction
from sprig.printer import to_string

_log = logging.getLogger(__name__)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lisp Lambda value to already-evaluated arguments."""
    new_env = fn.extend_env(args)
    _log.debug("apply %s to %d argument(s)", fn, len(args))
    return evaluate_fn(fn.body, new_env)


def is_procedure(value: LispValue) -> bool:
    return isinstance(value, Lambda) or callable(value)


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Python callable.

    - For Lambda, defer to apply_lambda.
    - For Python callables (builtins), invoke with the runtime env and list of args.
    - Otherwise, raise SprigNotAFunction.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise SprigNotAFunction(f"Not a function object: {to_string(head)}")
