from simple_lisp import EvaluatorFn
from simple_lisp import SExpression, LispValue
from simple_lisp.errors import MalformedForm
from simple_lisp.types.nil import Nil, is_true
from simple_lisp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if test then [else]); only the selected branch is evaluated."""
    if len(tail) not in (2, 3):
        raise MalformedForm("if requires a condition, a then-expression and an optional else-expression")

    if is_true(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
