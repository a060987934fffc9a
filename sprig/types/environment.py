"""Runtime environment for Sprig.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Child scopes hold a reference to their parent,
so a closure sees every later `define` made in the scope it captured.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from sprig import LispValue
from sprig.types.errors import SprigTypeError, SprigUnboundSymbol, SprigRedefinitionError
from sprig.types.symbol import Symbol, T


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises SprigTypeError if `name` is not a bindable Symbol and
        SprigRedefinitionError if this frame already binds it. Enclosing
        frames are not consulted, so shadowing an outer binding is allowed.
        """
        if not isinstance(name, Symbol):
            raise SprigTypeError(f"Cannot bind {name}: not a symbol")
        if name == T:
            raise SprigTypeError("Cannot bind the constant t")
        if name in self.vars:
            raise SprigRedefinitionError(f"Symbol {name} is already defined in this scope")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost scope first.

        Raises SprigUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise SprigUnboundSymbol(f"Symbol '{name}' not found")
        return env.vars[name]

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def child(self) -> Environment:
        return Environment(outer=self)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                chain.append(buffer.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
