from __future__ import annotations

from dataclasses import dataclass

from simple_lisp import LispValue
from simple_lisp.builtin.env_builtin import register
from simple_lisp.evaluation.evaluator import evaluate
from simple_lisp.printer import stringify
from simple_lisp.reader.parser import read
from simple_lisp.types.environment import Environment
from simple_lisp.types.nil import Nil


@dataclass(frozen=True)
class EvalResult:
    """Printed value of the last expression, and that value preceded by any print output."""
    result: str
    output: str


class Interpreter:
    """
    One interpreter session. Owns a global Environment, seeded with the builtins,
    that persists across evaluate calls so defun definitions accumulate.
    """

    def __init__(self):
        self.output: list[str] = []
        self.env: Environment = Environment()
        register(self.env, self.output)

    def eval_value(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the last value (Nil if none)."""
        self.output.clear()
        result: LispValue = Nil
        for expr in read(code):
            result = evaluate(expr, self.env)
        return result

    def evaluate(self, code: str) -> EvalResult:
        """Evaluate `code` and render its result and print output.

        Errors from reading or evaluation propagate to the caller.
        """
        result = stringify(self.eval_value(code))
        if self.output:
            output = "\n".join(self.output) + "\n" + result
        else:
            output = result
        return EvalResult(result=result, output=output)
