from simple_lisp import EvaluatorFn
from simple_lisp import SExpression, LispValue
from simple_lisp.errors import MalformedForm
from simple_lisp.types.environment import Environment
from simple_lisp.types.procedure import UserFunction
from simple_lisp.types.symbol import Symbol


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params...) body...)

    Binds a UserFunction under `name` in `env` itself and returns the symbol
    `name`. The function keeps a reference to `env` and copies it on every
    call, so bindings added to `env` later (including its own) are visible to
    its calls.
    """
    if len(tail) < 2:
        raise MalformedForm("defun requires a name and a parameter list")

    name, params, *body = tail
    if not isinstance(name, Symbol):
        raise MalformedForm(f"defun name must be a symbol, got {name!r}")
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise MalformedForm(f"defun {name} parameter list must be a list of symbols")

    env.define(name, UserFunction(name.name, list(params), list(body), env))
    return name
