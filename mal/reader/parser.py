"""
  mal Reader: Lexer, Cursor and Parser

- Emits Python primitives instead of Cons cells:

    - lists   -> Python list
    - symbols -> Symbol
    - strings -> str (escape sequences decoded)
    - numbers -> int

- Parsing never mutates shared state. A Cursor is a frozen position over a
  tuple of tokens; every parse step returns the advanced cursor together with
  the node it built, and callers carry that cursor forward themselves.

- The reader macro characters  ~@ [ ] { } ' ` ~ ^ @  are lexed as tokens of
  their own but carry no meaning yet: they are read as plain symbols.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Optional

from mal import SExpression
from mal.errors import (
    MalEmptyInput,
    MalInvalidNumber,
    MalUnexpectedToken,
    MalUnmatchedToken,
)
from mal.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<splice>~@)"  # reserved: unquote-splicing
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<special>[\[\]{}'`~^@])"  # reserved punctuation
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    # an unterminated string takes the rest of the input, closing parens too
    r'|(?P<open_string>"(?:\\.|[^\\"])*\\?)'
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<atom>[^\s\[\]{}()'\"`,;]+)"  # fallback: numbers and symbols
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[0-9]+")

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


class Token(NamedTuple):
    kind: str
    value: SExpression


LPAREN = Token("lparen", "(")
RPAREN = Token("rparen", ")")


def unescape(body: str) -> str:
    """Decode the backslash escapes of a string literal's payload."""
    return _ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(1)), body)


def classify_atom(text: str) -> Token:
    """Numbers start with a decimal digit; every other atom is a symbol."""
    if "0" <= text[0] <= "9":
        if not NUMBER_RE.fullmatch(text):
            raise MalInvalidNumber(text)
        try:
            value = int(text)
        except ValueError:
            # longer than the interpreter's int conversion limit
            raise MalInvalidNumber(text) from None
        return Token("number", value)
    return Token("symbol", text)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens in textual order.

    Whitespace, commas and comments produce nothing. Raises MalInvalidNumber
    for an atom that starts with a digit but is not an integer.
    """
    pos = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            # only whitespace and commas remain
            break
        pos = m.end()
        kind = m.lastgroup

        if kind == "lparen":
            yield LPAREN
        elif kind == "rparen":
            yield RPAREN
        elif kind == "string":
            yield Token("string", unescape(m.group(kind)[1:-1]))
        elif kind == "atom":
            yield classify_atom(m.group(kind))
        elif kind == "comment":
            continue
        else:
            # splice, special, open_string: passed through verbatim
            yield Token("symbol", m.group(kind))


@dataclass(frozen=True)
class Cursor:
    """Immutable position over a token sequence."""

    tokens: tuple[Token, ...]
    pos: int = 0

    def peek(self) -> Optional[Token]:
        """Return the current token without advancing, or None at the end."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> tuple[Cursor, Optional[Token]]:
        """Return the next cursor and the token consumed to reach it.

        At the end of the sequence the same cursor is returned with None.
        """
        if self.pos < len(self.tokens):
            return Cursor(self.tokens, self.pos + 1), self.tokens[self.pos]
        return self, None


def parse_form(cursor: Cursor) -> tuple[Cursor, SExpression]:
    """Parse one form starting at `cursor`; return the advanced cursor and the form."""
    tok = cursor.peek()
    if tok is None:
        raise MalEmptyInput()

    if tok.kind == "lparen":
        return parse_list(cursor)

    if tok.kind == "symbol":
        return cursor.advance()[0], Symbol(tok.value)

    if tok.kind in ("string", "number"):
        return cursor.advance()[0], tok.value

    raise MalUnexpectedToken(tok)


def parse_list(cursor: Cursor) -> tuple[Cursor, list[SExpression]]:
    """Parse a list whose opening token is under `cursor`."""
    assert cursor.peek() == LPAREN, "parse_list must start at '('"

    cursor = cursor.advance()[0]
    items: list[SExpression] = []

    while (tok := cursor.peek()) is not None:
        if tok.kind == "rparen":
            return cursor.advance()[0], items
        cursor, item = parse_form(cursor)
        items.append(item)

    raise MalUnmatchedToken(RPAREN)


def read(source: str) -> SExpression:
    """Read the first form in `source`. Tokens after it are ignored.

    Raises MalEmptyInput when `source` holds no tokens at all.
    """
    cursor = Cursor(tuple(lex(source)))
    _, form = parse_form(cursor)
    return form
