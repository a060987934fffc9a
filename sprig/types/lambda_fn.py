"""Lambda function representation for Sprig."""

from __future__ import annotations

from sprig import SExpression, LispValue
from sprig.types.bind import bind_arguments
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


class Lambda:
    """A first-class closure with formal parameters, body, and captured env.

    The env is shared, not copied: later definitions in the capturing scope
    are visible when the closure runs.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        return f"#<lambda ({' '.join(str(f) for f in self.formals)})>"

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new child Environment of the captured env for evaluating the body.
        """
        return bind_arguments(self.formals, args, self.env)
