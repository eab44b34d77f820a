from __future__ import annotations

from io import StringIO

from mal import SExpression

# Digits per chunk when an int is too long for a single str() conversion
_CHUNK_DIGITS = 1000
_CHUNK = 10 ** _CHUNK_DIGITS


def pr_str(expr: SExpression) -> str:
    """Serialize a form to canonical text.

    Lists print as space-separated elements in parentheses. Symbols and
    strings print their raw text; strings are not re-quoted or re-escaped.
    """
    with StringIO() as buffer:
        _write(expr, buffer)
        return buffer.getvalue()


def _write(expr: SExpression, buffer: StringIO) -> None:
    if isinstance(expr, list):
        _write_list(expr, buffer)
    elif isinstance(expr, int) and not isinstance(expr, bool):
        _write_int(expr, buffer)
    else:
        buffer.write(str(expr))


def _write_list(items: list[SExpression], buffer: StringIO) -> None:
    buffer.write("(")
    first = True
    for item in items:
        if not first:
            buffer.write(" ")
        _write(item, buffer)
        first = False
    buffer.write(")")


def _write_int(n: int, buffer: StringIO) -> None:
    try:
        buffer.write(str(n))
        return
    except ValueError:
        # more digits than sys.get_int_max_str_digits() allows
        pass
    if n < 0:
        buffer.write("-")
        n = -n
    chunks: list[str] = []
    while n >= _CHUNK:
        n, low = divmod(n, _CHUNK)
        chunks.append(f"{low:0{_CHUNK_DIGITS}d}")
    chunks.append(str(n))
    buffer.write("".join(reversed(chunks)))
