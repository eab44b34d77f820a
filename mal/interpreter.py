from __future__ import annotations

from mal import SExpression, LispValue
from mal.reader.parser import read
from mal.printer import pr_str
from mal.types.environment import Environment
from mal.evaluation.evaluator import evaluate
from mal.builtin.env_builtin import register


class Interpreter:
    """
    Orchestrates reading, evaluating and printing mal code.
    Builds the symbol table once and keeps it for every call.
    """

    def __init__(self, env: Environment | None = None):
        if env is None:
            env = Environment()
            register(env)
        self.env: Environment = env

    def read(self, code: str) -> SExpression:
        return read(code)

    def eval(self, expr: SExpression) -> LispValue:
        return evaluate(expr, self.env)

    def print(self, value: LispValue) -> str:
        return pr_str(value)

    def rep(self, code: str) -> str:
        """Read, evaluate and print the first form in `code`.

        Raises MalEmptyInput for blank input and the other MalError
        subclasses for read and evaluation failures.
        """
        return self.print(self.eval(self.read(code)))
