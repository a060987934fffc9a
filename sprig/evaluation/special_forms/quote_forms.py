"""quote, quasiquote and the unquote markers.

Quasiquote works in two phases. `expand` rewrites a template into an
ordinary expression built from cons/append/list applications and quoted
literals; the caller then evaluates that expression once in the ambient
environment, which is what lets unquoted parts see lexical variables.

The primitives are embedded as procedure objects rather than symbols, so a
local binding named `list` or `append` cannot capture the expansion.
"""

from sprig import SExpression, LispValue, EvaluatorFn
from sprig.builtin.list_builtin import append, cons, list_builtin
from sprig.types.environment import Environment
from sprig.types.errors import SprigArityError, SprigInvalidUnquote
from sprig.types.pair import Pair, make_list, to_python_list
from sprig.types.symbol import QUOTE, QUASIQUOTE, UNQUOTE, UNQUOTE_SPLICE


def _quoted(value: SExpression) -> SExpression:
    return make_list(QUOTE, value)


def _operand(form: Pair) -> SExpression:
    args = to_python_list(form.cdr, f"{form.car} form")
    if len(args) != 1:
        raise SprigArityError(f"{form.car} expects exactly 1 argument")
    return args[0]


def expand(form: SExpression, depth: int = 0, splice: bool = False) -> SExpression:
    """Expand a quasiquote template at nesting `depth`.

    With `splice` set, the expansion evaluates to a list of the values to
    insert at this position (one element, or the spliced elements for
    unquote-splice); otherwise it evaluates to the value itself.
    """

    def wrap(expansion: SExpression) -> SExpression:
        return make_list(list_builtin, expansion) if splice else expansion

    if not isinstance(form, Pair):
        return wrap(_quoted(form))

    head = form.car
    if head == QUASIQUOTE:
        return wrap(make_list(cons, _quoted(QUASIQUOTE), expand(form.cdr, depth + 1)))

    if head == UNQUOTE or head == UNQUOTE_SPLICE:
        if depth > 0:
            return wrap(make_list(cons, _quoted(head), expand(form.cdr, depth - 1)))
        operand = _operand(form)
        if head == UNQUOTE:
            return wrap(operand)
        if not splice:
            raise SprigInvalidUnquote("unquote-splice is only valid as an element of a list template")
        return operand

    return wrap(make_list(append, expand(head, depth, splice=True), expand(form.cdr, depth)))


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise SprigArityError("quote expects exactly 1 argument")
    return tail[0]


def quasiquote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise SprigArityError("quasiquote expects exactly 1 argument")
    return evaluate_fn(expand(tail[0]), env)


def unquote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    raise SprigInvalidUnquote("unquote not valid outside of quasiquote")


def unquote_splice_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    raise SprigInvalidUnquote("unquote-splice not valid outside of quasiquote")
