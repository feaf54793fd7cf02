"""Core tree-walking evaluator for simple-lisp.

Dispatches on the shape of an expression: atoms evaluate to themselves,
symbols are looked up, lists are either special forms or function calls.
"""

from __future__ import annotations

from simple_lisp import SExpression, LispValue
from simple_lisp.errors import CallableUsedAsValue, NotAFunction, Uninterpretable
from simple_lisp.evaluation.apply import apply
from simple_lisp.evaluation.special_forms import SPECIAL_FORMS
from simple_lisp.printer import stringify
from simple_lisp.types.environment import Environment
from simple_lisp.types.nil import Nil
from simple_lisp.types.procedure import Procedure
from simple_lisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one expression against `env` and return its value."""
    match expr:
        case bool() | float() | int():
            return expr
        case _ if expr is Nil:
            return expr

        case Symbol():
            value = env.lookup(expr)
            if isinstance(value, Procedure):
                raise CallableUsedAsValue(
                    f"Cannot use function {expr} as a value (missing parentheses?)"
                )
            return value

        case []:
            return Nil

        case [head, *tail]:
            if isinstance(head, Symbol):
                if head in SPECIAL_FORMS:
                    return SPECIAL_FORMS[head](tail, env, evaluate)
                fn = env.get(head)
                if fn is None:
                    raise NotAFunction(f"Undefined function: {head}")
            else:
                fn = evaluate(head, env)

            if not isinstance(fn, Procedure):
                raise NotAFunction(f"Not a function: {stringify(head)}")

            args = [evaluate(arg, env) for arg in tail]
            return apply(fn, args, env, evaluate)

    raise Uninterpretable(f"Cannot evaluate: {expr!r}")
