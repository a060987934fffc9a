"""List primitives shared by the global environment and quasiquote expansion.

Every builtin takes the calling environment and the list of evaluated
arguments, like any other procedure registered in an Environment.
"""
from __future__ import annotations

from sprig import LispValue
from sprig.types.environment import Environment
from sprig.types.errors import SprigArityError, SprigTypeError
from sprig.types.nil import Nil
from sprig.types.number import Fraction
from sprig.types.pair import Pair, append as append_lists, from_iterable, is_list, length
from sprig.types.symbol import Symbol, T


def _expect(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise SprigArityError(f"{name} requires exactly {n} argument(s), got {len(args)}")


def cons(env: Environment, args: list[LispValue]) -> Pair:
    _expect("cons", args, 2)
    head, tail = args
    return Pair(head, tail)


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    return from_iterable(args)


def append(env: Environment, args: list[LispValue]) -> LispValue:
    return append_lists(*args)


def car(env: Environment, args: list[LispValue]) -> LispValue:
    _expect("car", args, 1)
    if not is_list(args[0]):
        raise SprigTypeError(f"Argument must be list : car, got {args[0]}")
    return args[0].car


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    _expect("cdr", args, 1)
    if not is_list(args[0]):
        raise SprigTypeError(f"Argument must be list : cdr, got {args[0]}")
    return args[0].cdr


def list_length(env: Environment, args: list[LispValue]) -> Fraction:
    _expect("len", args, 1)
    return Fraction(length(args[0]))


def is_atom(env: Environment, args: list[LispValue]) -> LispValue:
    """Predicate: t unless the single argument is a list (nil included)."""
    _expect("atom?", args, 1)
    return Nil if is_list(args[0]) else T


LIST_BUILTINS = {
    Symbol("cons"): cons,
    Symbol("list"): list_builtin,
    Symbol("append"): append,
    Symbol("car"): car,
    Symbol("cdr"): cdr,
    Symbol("len"): list_length,
    Symbol("atom?"): is_atom,
}

for _sym, _fn in LIST_BUILTINS.items():
    _fn._sprig_name = str(_sym)
