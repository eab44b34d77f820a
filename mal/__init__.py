# Core type aliases for mal's data model.
# Forms and values are plain Python types: list for lists, str for strings,
# int for numbers and mal.types.symbol.Symbol for symbols. There is no Cons type.
#
# Naming guidance:
# - SExpression: use in reader/printer code for syntactic forms.
# - LispValue:   use in evaluator/runtime code for evaluated values.
# Every atom evaluates to itself, so the two aliases are interchangeable.

from typing import Any, Callable, Sequence

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Python implementation behind a builtin operation: receives evaluated arguments
BuiltinFn = Callable[[Sequence[LispValue]], LispValue]
