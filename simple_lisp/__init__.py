# Core type aliases for the simple-lisp data model.
# Values are plain Python objects: float for numbers, bool for booleans, list for
# lists, plus the Symbol and Nil types from simple_lisp.types. Callables are the
# Procedure subclasses in simple_lisp.types.procedure.
#
# Naming guidance:
# - SExpression: reader/parser code, denotes syntactic forms (code-as-data).
# - LispValue:  evaluator/runtime code, denotes evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type passed to special forms
EvaluatorFn = Callable[..., LispValue]

from simple_lisp.interpreter import Interpreter, EvalResult  # noqa: E402

__all__ = ["LispValue", "SExpression", "EvaluatorFn", "Interpreter", "EvalResult"]
