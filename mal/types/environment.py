"""Symbol table for mal.

The Environment maps Symbols to Operations. Scopes nest through an `outer`
back-reference: lookup falls back to the outer table, but a child never owns
its parent. The interpreter builds the global table once per session and the
evaluator only reads from it.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from mal.errors import MalUnboundSymbol
from mal.types.operation import Operation
from mal.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Operations."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Operation] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: Operation) -> None:
        """Bind `name` to `value` in this scope.

        Raises TypeError if `name` is not a Symbol or `value` is not an Operation.
        """
        if not isinstance(name, Symbol):
            raise TypeError(f"Cannot define {name!r}: not a symbol")
        if not isinstance(value, Operation):
            raise TypeError(f"Cannot bind {name} to {value!r}: not an operation")
        self.vars[name] = value

    def update(self, mapping: Mapping[Symbol, Operation]) -> None:
        for k, v in mapping.items():
            self.define(k, v)

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> Operation:
        """Look up the operation bound to `name`.

        Raises MalUnboundSymbol if not found in this scope or any outer one.
        """
        env = self.find(name)
        if env is None:
            raise MalUnboundSymbol(str(name))
        return env.vars[name]

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_vars(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
