"""Built-in functions for the Sprig global environment.

This module defines arithmetic over the numeric tower, numeric equality,
evaluation and application helpers, and the registration entry point that
builds the initial global environment (list primitives live in
sprig.builtin.list_builtin).
"""
from __future__ import annotations

from functools import reduce

from sprig import LispValue
from sprig.builtin.list_builtin import LIST_BUILTINS
from sprig.evaluation.apply import apply as apply_engine
from sprig.evaluation.evaluator import evaluate
from sprig.types import number
from sprig.types.environment import Environment
from sprig.types.errors import SprigArityError, SprigTypeError
from sprig.types.nil import Nil
from sprig.types.number import MINUS_ONE, ONE, ZERO
from sprig.types.pair import to_python_list
from sprig.types.symbol import Symbol, T


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the sum of all arguments; 0 for none."""
    return reduce(number.add, args, ZERO)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise SprigArityError("- requires at least 1 argument")
    if len(args) == 1:
        return number.multiply(MINUS_ONE, args[0])
    return reduce(number.subtract, args[1:], args[0])


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the product of all arguments; 1 for none."""
    return reduce(number.multiply, args, ONE)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide the first number by all subsequent ones; reciprocal for one arg."""
    if not args:
        raise SprigArityError("/ requires at least 1 argument")
    if len(args) == 1:
        return number.divide(ONE, args[0])
    return reduce(number.divide, args[1:], args[0])


def equals(env: Environment, args: list[LispValue]) -> LispValue:
    """Return t if every argument is a number structurally equal to the first, else nil."""
    if not args:
        raise SprigArityError("= requires at least 1 argument")
    first = args[0]
    if not number.is_number(first):
        raise SprigTypeError(f"Not a number for =: {first}")
    # check every operand's type even after a mismatch
    results = [number.numbers_equal(first, other) for other in args[1:]]
    return T if all(results) else Nil


# -------------------------------
# Evaluation and application
# -------------------------------
def make_eval(global_env: Environment):
    def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
        """Evaluate the argument again, always in the global environment."""
        if len(args) != 1:
            raise SprigArityError("eval requires exactly 1 argument")
        return evaluate(args[0], global_env)
    return eval_builtin


def apply(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply fn args): call fn with the elements of the list args."""
    if len(args) != 2:
        raise SprigArityError("apply requires exactly 2 arguments: func and list of args")
    fn, arg_list = args
    return apply_engine(fn, to_python_list(arg_list, "apply argument list"), env, evaluate)


def quit_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    raise SystemExit(0)


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> Environment:
    """Install the builtin procedures into `env`, which becomes the global scope for eval."""
    table = {
        Symbol('eval'): make_eval(env),
        Symbol('apply'): apply,
        Symbol('+'): add,
        Symbol('-'): sub,
        Symbol('*'): mul,
        Symbol('/'): div,
        Symbol('='): equals,
        Symbol('quit'): quit_builtin,
        **LIST_BUILTINS,
    }
    for sym, fn in table.items():
        fn._sprig_name = str(sym)
    env.update(table)
    return env


def make_global_env() -> Environment:
    return register(Environment())
