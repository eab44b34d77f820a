from __future__ import annotations

from typing import Any


class MalError(Exception):
    """ Base class for all mal errors"""
    pass


# -------------------------------
# Read stage
# -------------------------------
class MalSyntaxError(MalError):
    """ Raised when input text cannot be read into a form"""


class MalEmptyInput(MalSyntaxError):
    """ Raised when the input holds no tokens at all (blank or comment-only)"""

    def __init__(self, message: str = "empty input"):
        super().__init__(message)


class MalUnmatchedToken(MalSyntaxError):
    """ Raised when a list is opened but its closing token never arrives"""

    def __init__(self, token: Any):
        super().__init__(f"expected {token.value!r}, got end of input")
        self.token = token


class MalUnexpectedToken(MalSyntaxError):
    """ Raised when a token appears where a form is expected"""

    def __init__(self, token: Any):
        super().__init__(f"unexpected {token.value!r}")
        self.token = token


class MalInvalidNumber(MalSyntaxError):
    """ Raised when an atom starting with a digit is not a valid integer"""

    def __init__(self, text: str):
        shown = text if len(text) <= 40 else f"{text[:20]}...{text[-5:]}"
        super().__init__(f"invalid number literal {shown!r}")
        self.text = text


# -------------------------------
# Evaluation stage
# -------------------------------
class MalEvalError(MalError):
    """ Raised when a form cannot be evaluated"""


class MalInvalidList(MalEvalError):
    """ Raised when a list is empty or its head is not a symbol"""


class MalArityError(MalEvalError):
    """ Raised when the number of arguments passed to an operation is incorrect"""

    def __init__(self, name: str, expected: int, actual: int):
        super().__init__(f"{name} expects {expected} argument(s), got {actual}")
        self.name = name
        self.expected = expected
        self.actual = actual


class MalTypeError(MalEvalError):
    """ Raised when the types of arguments passed to an operation are incorrect"""


class MalUnboundSymbol(MalEvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"'{name}' not found")
        self.name = name
