"""Printed representation of Sprig expressions.

- fractions print as ``n`` or ``n/d``
- floats use Python's repr
- strings get their surrounding quotes back (escapes were kept verbatim)
- lists print parenthesized; an improper tail follows a ``.``
"""

from io import StringIO

from sprig.types.lambda_fn import Lambda
from sprig.types.nil import Nil
from sprig.types.number import Fraction
from sprig.types.pair import Pair
from sprig.types.symbol import Symbol


def to_string(expr) -> str:
    match expr:
        case Pair():
            with StringIO() as buffer:
                _write_list(expr, buffer)
                return buffer.getvalue()
        case str():
            return f'"{expr}"'
        case float():
            return repr(expr)
        case Fraction() | Symbol() | Lambda():
            return str(expr)
        case _ if expr is Nil:
            return "nil"
        case _ if callable(expr):
            name = getattr(expr, "_sprig_name", getattr(expr, "__name__", "?"))
            return f"#<builtin {name}>"
    return str(expr)


def _write_list(pair: Pair, buffer: StringIO) -> None:
    buffer.write("(")
    node = pair
    first = True
    while isinstance(node, Pair):
        if not first:
            buffer.write(" ")
        buffer.write(to_string(node.car))
        first = False
        node = node.cdr
    if node is not Nil:
        buffer.write(" . ")
        buffer.write(to_string(node))
    buffer.write(")")
