"""Runtime environment for simple-lisp.

An Environment is a flat mapping from Symbols to values or Procedures. There is
no chain of enclosing scopes: each user-function call works on a copy of the
function's defining environment, so bindings made during a call never leak back
into the caller.
"""

from __future__ import annotations

from io import StringIO

from simple_lisp import LispValue
from simple_lisp.errors import UnboundSymbol, LispTypeError
from simple_lisp.types.symbol import Symbol


class Environment:
    """Mapping from Symbols to Lisp values and procedures."""

    __slots__ = ("vars",)

    def __init__(self, bindings: dict[Symbol, LispValue] | None = None):
        self.vars: dict[Symbol, LispValue] = dict(bindings) if bindings else {}

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value`, replacing any previous binding.

        Raises LispTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispTypeError(f"Cannot bind {name!r}: not a symbol")
        self.vars[name] = value

    def undefine(self, name: Symbol) -> None:
        """Remove any binding for `name`."""
        self.vars.pop(name, None)

    def lookup(self, name: Symbol) -> LispValue:
        """Return the value bound to `name`; raises UnboundSymbol if there is none."""
        try:
            return self.vars[name]
        except KeyError:
            raise UnboundSymbol(f"Undefined symbol: {name}") from None

    def get(self, name: Symbol, default: LispValue = None) -> LispValue:
        return self.vars.get(name, default)

    def copy(self) -> Environment:
        """Shallow snapshot of the current bindings."""
        return Environment(self.vars)

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings>"
