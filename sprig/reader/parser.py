"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy tokenization with a single regular expression
- Recursive-descent parsing into Sprig expressions:

    - nil / ()        -> Nil
    - t               -> the canonical truthy Symbol
    - lists           -> Pair chains ending in Nil
    - integers/ratios -> Fraction (reduced)
    - decimals        -> float
    - strings         -> str (escapes kept verbatim)
    - symbols         -> Symbol
    - 'x `x ,x ,@x    -> (quote x) (quasiquote x) (unquote x) (unquote-splice x)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from sprig import SExpression
from sprig.types.errors import SprigSyntaxError
from sprig.types.nil import Nil
from sprig.types.number import Fraction, FRACTION_RE, FLOAT_RE
from sprig.types.pair import from_iterable, make_list
from sprig.types.symbol import Symbol, T, QUOTE, QUASIQUOTE, UNQUOTE, UNQUOTE_SPLICE


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>['`])"  # ' and `
    r"|(?P<unquote>,@|,)"  # ,@ and ,
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<atom>[^\s()\'`,";]+)'  # bareword
    r")",
    re.DOTALL,
)

# Barewords that start like a number must be one.
NUMERIC_START_RE = re.compile(r"^[+-]?[0-9]")

QUOTE_FORMS: dict[str, Symbol] = {
    "'": QUOTE,
    "`": QUASIQUOTE,
    ",": UNQUOTE,
    ",@": UNQUOTE_SPLICE,
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples; comments are dropped."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            if source[pos:].isspace():
                return
            raise SprigSyntaxError(f"Unexpected char at {pos}: {source[pos:].lstrip()[0]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        yield kind, m.group(kind)


def read_atom(token: str) -> SExpression:
    """Classify a bareword or string token."""
    if FRACTION_RE.match(token):
        return Fraction.from_token(token)
    if FLOAT_RE.match(token):
        return float(token)
    if len(token) >= 2 and token[0] == '"' and token[-1] == '"':
        return token[1:-1]
    if token == "t":
        return T
    if token == "nil":
        return Nil
    if NUMERIC_START_RE.match(token):
        raise SprigSyntaxError(f"Unknown atom : {token}")
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()

        if tok_type is None:
            raise SprigSyntaxError("Form expected, got end of input")

        if tok_type in ("atom", "string"):
            return read_atom(tok_val)

        # Quote forms
        if tok_type in ("quote", "unquote"):
            if self.at_end():
                raise SprigSyntaxError(f"Form expected after {tok_val!r}, got end of input")
            return make_list(QUOTE_FORMS[tok_val], self.parse_expr())

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise SprigSyntaxError("')' expected, got end of input")
                if next_type == "rparen":
                    self.advance()
                    break
                items.append(self.parse_expr())
            return from_iterable(items)

        if tok_type == "rparen":
            raise SprigSyntaxError("Form expected, got ')'")

        raise SprigSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def read(source: str) -> SExpression:
    """Read exactly one form from `source`; trailing tokens are a syntax error."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if not stream.at_end():
        _, extra = stream.peek()
        raise SprigSyntaxError(f"Unexpected token after form: {extra!r}")
    return expr


def read_all(source: str) -> Iterator[SExpression]:
    """Lazily read every top-level form in `source`."""
    return TokenStream(lex(source)).parse_all()
