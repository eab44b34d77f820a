"""
Interactive read-eval-print loop for mal.

Each line is read, evaluated and printed to completion before the next prompt.
- Result:      printed on one line.
- Read/eval error: printed as "Error: <message>".
- Blank or comment-only line: nothing printed.

Errors never stop the loop; only end of input does.
"""

from __future__ import annotations

from typing import Optional

from mal.config import get_history_length, get_prompt
from mal.errors import MalEmptyInput, MalError
from mal.interpreter import Interpreter


class LineEditor:
    """Line input through input(), with in-memory history from readline when present."""

    def __init__(self, history_length: int = -1):
        try:
            import readline
        except ImportError:
            # e.g. Windows: plain input(), no history
            readline = None
        self._readline = readline
        if readline is not None:
            readline.set_history_length(history_length)
            # history is added by add_history after the line is processed
            readline.set_auto_history(False)

    def read_line(self, prompt: str) -> str:
        return input(prompt)

    def add_history(self, line: str) -> None:
        if self._readline is not None:
            self._readline.add_history(line)


def rep_line(interp: Interpreter, line: str) -> Optional[str]:
    """Return the text to show for one input line, or None to show nothing."""
    try:
        return interp.rep(line)
    except MalEmptyInput:
        return None
    except MalError as ex:
        return f"Error: {ex}"


def repl(
    interp: Interpreter | None = None,
    editor: LineEditor | None = None,
    prompt: str | None = None,
) -> int:
    """Run the loop until end of input; return the exit status."""
    if interp is None:
        interp = Interpreter()
    if editor is None:
        editor = LineEditor(get_history_length())
    if prompt is None:
        prompt = get_prompt()

    while True:
        try:
            line = editor.read_line(prompt)
        except EOFError:
            return 0
        except KeyboardInterrupt:
            # cancel the current line
            print()
            continue
        except (OSError, UnicodeDecodeError) as ex:
            print(f"Error: {ex}")
            continue

        output = rep_line(interp, line)
        if output is not None:
            print(output)

        try:
            editor.add_history(line)
        except (OSError, ValueError) as ex:
            print(f"Error: could not add to history: {ex}")
