from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.types.bind import parse_formals
from sprig.types.environment import Environment
from sprig.types.errors import SprigArityError
from sprig.types.lambda_fn import Lambda


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (params...) body)
    The closure captures `env` by reference, not by copy.
    """
    if len(tail) != 2:
        raise SprigArityError("lambda requires a parameter list and exactly one body form")

    params, body = tail
    return Lambda(parse_formals(params), body, env)
