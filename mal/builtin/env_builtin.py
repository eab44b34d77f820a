"""Built-in operations for the mal symbol table.

Each builtin receives the list of already-evaluated arguments. Arity is
enforced by the evaluator from the contract given at registration time, so
the functions below only check operand types.
"""
from __future__ import annotations
from typing import Sequence

from mal import LispValue
from mal.errors import MalTypeError
from mal.types.environment import Environment
from mal.types.operation import Builtin, Exact, VARIADIC
from mal.types.symbol import Symbol


def is_number(value: LispValue) -> bool:
    # bool is an int subclass but never a mal number
    return isinstance(value, int) and not isinstance(value, bool)


# -------------------------------
# Arithmetic
# -------------------------------
def increment(args: Sequence[LispValue]) -> int:
    """Return the single numeric argument plus one."""
    (n,) = args
    if not is_number(n):
        raise MalTypeError("Argument to +1 must be a number")
    return n + 1


def add(args: Sequence[LispValue]) -> int:
    """Return the numeric sum of all arguments; errors if any arg is non-numeric."""
    if not all(is_number(x) for x in args):
        raise MalTypeError("All arguments to + must be numbers")
    return sum(args)


BUILTINS: tuple[Builtin, ...] = (
    Builtin("+1", Exact(1), increment),
    Builtin("+", VARIADIC, add),
)


def register(env: Environment) -> None:
    """Register all builtin operations into the given environment."""
    env.update({Symbol(op.name): op for op in BUILTINS})
