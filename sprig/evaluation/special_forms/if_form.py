from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.types.errors import SprigArityError
from sprig.types.nil import Nil
from sprig.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise SprigArityError("if requires a condition, a then-expression and an optional else-expression")

    # anything but nil is true
    if evaluate_fn(tail[0], env) is not Nil:
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
