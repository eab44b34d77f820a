from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from mal.errors import MalEmptyInput, MalError
from mal.interpreter import Interpreter
from mal.repl import repl


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="mal", description="mal read-eval-print loop")
    ap.add_argument("--prompt", default=None, help="prompt string (default: $MAL_PROMPT or 'user> ')")
    ap.add_argument("-e", "--eval", dest="expr", default=None, help="evaluate EXPR, print the result and exit")
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    interp = Interpreter()

    if args.expr is None:
        return repl(interp, prompt=args.prompt)

    try:
        print(interp.rep(args.expr))
    except MalEmptyInput:
        pass
    except MalError as ex:
        print(f"Error: {ex}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
