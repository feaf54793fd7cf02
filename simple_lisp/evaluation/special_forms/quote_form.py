from simple_lisp import SExpression, LispValue, EvaluatorFn
from simple_lisp.errors import MalformedForm
from simple_lisp.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote expr) -> expr, unevaluated."""
    if len(tail) != 1:
        raise MalformedForm("quote requires exactly 1 argument")
    return tail[0]
