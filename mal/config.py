from __future__ import annotations
import os


# Defaults
_DEFAULT_PROMPT = "user> "
_DEFAULT_HISTORY_LENGTH = -1


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_prompt() -> str:
    return str_from_env('MAL_PROMPT', _DEFAULT_PROMPT)


def get_history_length() -> int:
    # readline treats any negative length as unlimited
    return int_from_env('MAL_HISTORY_LENGTH', _DEFAULT_HISTORY_LENGTH)
