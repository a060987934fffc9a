# Core type aliases for Sprig's data model.
# Expressions are represented by a small closed set of Python types:
#   Symbol, Fraction, float, str, Nil, Pair, Lambda (and builtin procedures).
#
# Naming guidance:
# - SExpression: Use in reader/parser/quasiquote code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; code and data share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
