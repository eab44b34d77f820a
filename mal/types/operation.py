"""Operations callable from the head of a list, and their arity contracts.

An Operation has a name, an Arity and a single capability: ``apply`` to a
sequence of already-evaluated arguments. The evaluator checks the arity before
evaluating any argument, so implementations may assume the count is right.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from mal import BuiltinFn, LispValue
from mal.errors import MalArityError


class Arity(ABC):
    """Required-argument-count policy of an operation."""

    @abstractmethod
    def check(self, name: str, count: int) -> None:
        """Raise MalArityError if `count` arguments are not acceptable."""


@dataclass(frozen=True)
class Exact(Arity):
    """Exactly `count` arguments, not counting the head symbol."""

    count: int

    def check(self, name: str, count: int) -> None:
        if count != self.count:
            raise MalArityError(name, self.count, count)

    def __str__(self) -> str:
        return str(self.count)


@dataclass(frozen=True)
class Variadic(Arity):
    """Any number of arguments, including none."""

    def check(self, name: str, count: int) -> None:
        return None

    def __str__(self) -> str:
        return "*"


VARIADIC = Variadic()


class Operation(ABC):
    name: str
    arity: Arity

    @abstractmethod
    def apply(self, args: Sequence[LispValue]) -> LispValue:
        ...


@dataclass(frozen=True)
class Builtin(Operation):
    """An operation implemented by a Python function of the evaluated arguments."""

    name: str
    arity: Arity
    fn: BuiltinFn

    def apply(self, args: Sequence[LispValue]) -> LispValue:
        return self.fn(args)

    def __str__(self) -> str:
        return f"<builtin {self.name}/{self.arity}>"
