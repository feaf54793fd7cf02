from __future__ import annotations
import os

_DEFAULT_REPL_HOST = "127.0.0.1"
_DEFAULT_REPL_PORT = 8765
_DEFAULT_PROMPT = "lisp> "


def get_repl_host() -> str:
    return os.environ.get("SIMPLE_LISP_REPL_HOST") or _DEFAULT_REPL_HOST


def get_repl_port() -> int:
    raw = os.environ.get("SIMPLE_LISP_REPL_PORT")
    if not raw:
        return _DEFAULT_REPL_PORT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"SIMPLE_LISP_REPL_PORT must be an integer, got {raw!r}") from None


def get_prompt() -> str:
    return os.environ.get("SIMPLE_LISP_PROMPT", _DEFAULT_PROMPT)
