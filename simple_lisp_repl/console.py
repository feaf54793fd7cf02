"""Command-line host for simple-lisp.

With a file argument, evaluates the whole file in one session and prints the
output. Without one, runs an interactive loop: every line entered is one
evaluate call on the same session, so defun definitions accumulate.
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO

from simple_lisp.config import get_prompt
from simple_lisp.errors import LispError
from simple_lisp.interpreter import Interpreter

RESET_COMMAND = ":reset"
QUIT_COMMANDS = (":quit", ":q")


def run_source(interp: Interpreter, code: str, out: TextIO) -> bool:
    """Evaluate `code` and write its output or error message. Returns False on error."""
    try:
        res = interp.evaluate(code)
    except LispError as ex:
        out.write(f"error: {ex}\n")
        return False
    except RecursionError:
        out.write("error: maximum recursion depth exceeded\n")
        return False
    out.write(res.output + "\n")
    return True


def repl(lines: Iterable[str], out: TextIO, prompt: str = "") -> Interpreter:
    """Evaluate each non-blank line in one session; returns the final session."""
    interp = Interpreter()
    if prompt:
        out.write(prompt)
        out.flush()
    for line in lines:
        code = line.strip()
        if code in QUIT_COMMANDS:
            break
        if code == RESET_COMMAND:
            interp = Interpreter()
            out.write("session reset\n")
        elif code:
            run_source(interp, code, out)
        if prompt:
            out.write(prompt)
            out.flush()
    return interp


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="simple-lisp", description="Evaluate simple-lisp code.")
    parser.add_argument("file", nargs="?", help="file to evaluate (if omitted, starts an interactive session)")
    args = parser.parse_args(argv)

    if args.file is not None:
        with open(args.file, encoding="utf-8") as f:
            code = f.read()
        return 0 if run_source(Interpreter(), code, sys.stdout) else 1

    prompt = get_prompt() if sys.stdin.isatty() else ""
    repl(sys.stdin, sys.stdout, prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
