from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.types.environment import Environment
from sprig.types.errors import SprigArityError, SprigTypeError
from sprig.types.nil import Nil
from sprig.types.pair import to_python_list
from sprig.types.symbol import Symbol


def _binding(form: SExpression) -> tuple[Symbol, SExpression | None]:
    """Split one let binding into (name, initializer or None)."""
    if isinstance(form, Symbol):
        return form, None
    parts = to_python_list(form, "let binding")
    if not parts or len(parts) > 2:
        raise SprigArityError(f"Invalid let binding: {form}")
    name = parts[0]
    if not isinstance(name, Symbol):
        raise SprigTypeError(f"let binding name must be a symbol, got {name}")
    return name, parts[1] if len(parts) == 2 else None


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((name expr) name ...) body...)
    Initializers run in the outer env and cannot see each other. The child
    scope is only populated once every initializer has succeeded.
    """
    if not tail:
        raise SprigArityError("let requires a binding list")

    pairs = [_binding(item) for item in to_python_list(tail[0], "let binding list")]
    values = [Nil if init is None else evaluate_fn(init, env) for _, init in pairs]

    local_env = Environment(outer=env)
    for (name, _), value in zip(pairs, values):
        local_env.define(name, value)

    result: LispValue = Nil
    for form in tail[1:]:
        result = evaluate_fn(form, local_env)
    return result
