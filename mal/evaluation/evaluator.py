"""Core evaluator for mal.

Atoms evaluate to themselves. A list is an application: its head symbol is
resolved in the symbol table, the arity contract is checked against the
unevaluated argument forms, the arguments are evaluated left to right and the
operation is applied to the results. There are no special forms.
"""

from __future__ import annotations

from mal import SExpression, LispValue
from mal.errors import MalInvalidList
from mal.types.environment import Environment
from mal.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` against the operations bound in `env`."""
    match expr:
        case []:
            raise MalInvalidList("cannot evaluate the empty list")

        case [Symbol() as head, *tail_args]:
            op = env.lookup(head)
            # Arity is checked before any argument is evaluated.
            op.arity.check(op.name, len(tail_args))
            args = [evaluate(arg, env) for arg in tail_args]
            return op.apply(args)

        case [head, *_]:
            raise MalInvalidList(f"list head must be a symbol, got {head!r}")

    # --- Atoms return as-is ---
    return expr
