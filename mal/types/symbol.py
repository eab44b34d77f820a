"""Symbol atoms.

A Symbol is kept distinct from ``str`` so that the reader can tell the symbol
``hello`` apart from the string ``"hello"``; the two never compare equal.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Symbol:
    name: str = field()

    def __post_init__(self):
        # Intern so that table lookups hash and compare cheaply
        object.__setattr__(self, "name", sys.intern(self.name))

    def __str__(self) -> str:
        return self.name
