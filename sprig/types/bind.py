from __future__ import annotations

from typing import List

from sprig import LispValue, SExpression
from sprig.types.environment import Environment
from sprig.types.errors import SprigArityError, SprigTypeError
from sprig.types.pair import from_iterable, to_python_list
from sprig.types.symbol import Symbol, REST


def parse_formals(params: SExpression) -> list[Symbol]:
    """
    Validate a lambda list and return its symbols.

    The list must be proper and contain only symbols. `&rest` may appear only
    once, as the second-to-last element; the symbol after it receives the
    surplus arguments.
    """
    formals = to_python_list(params, "lambda parameter list")
    for f in formals:
        if not isinstance(f, Symbol):
            raise SprigTypeError(f"Lambda parameter must be a symbol, got {f}")
    if REST in formals:
        if formals.count(REST) > 1 or formals.index(REST) != len(formals) - 2:
            raise SprigArityError(
                "Malformed parameter list: &rest must be followed by exactly one name"
            )
    return formals


def bind_arguments(
    formals: List[Symbol],
    supplied_args: List[LispValue],
    closure_env: Environment,
) -> Environment:
    """
    Single source of truth for lambda-list binding in Sprig.

    Binds positional parameters left to right; a trailing `&rest name`
    captures the remaining supplied args as a list. Returns a new Environment
    whose outer is the closure_env.
    """
    local_env = Environment(outer=closure_env)

    if REST in formals:
        required = formals[:-2]
        rest_name = formals[-1]
    else:
        required = formals
        rest_name = None

    if len(supplied_args) < len(required):
        missing = required[len(supplied_args):]
        raise SprigArityError(
            f"Too few arguments; missing {len(missing)} parameter(s): {[str(s) for s in missing]}"
        )
    if rest_name is None and len(supplied_args) > len(required):
        extra = supplied_args[len(required):]
        raise SprigArityError(f"Too many arguments: {[str(a) for a in extra]}")

    for name, value in zip(required, supplied_args):
        local_env.define(name, value)
    if rest_name is not None:
        local_env.define(rest_name, from_iterable(supplied_args[len(required):]))

    return local_env
