"""Application of procedures to already-evaluated arguments."""

from simple_lisp import LispValue, EvaluatorFn
from simple_lisp.errors import NotAFunction
from simple_lisp.printer import stringify
from simple_lisp.types.environment import Environment
from simple_lisp.types.nil import Nil
from simple_lisp.types.procedure import Primitive, UserFunction


def apply_user_function(
    fn: UserFunction,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate the body of `fn` in a fresh copy of its defining environment.

    Returns the value of the last body form, or Nil for an empty body.
    """
    local_env = fn.bind_arguments(args)
    result: LispValue = Nil
    for form in fn.body:
        result = evaluate_fn(form, local_env)
    return result


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Primitive or a UserFunction.

    - Primitives are called with the caller's environment and the argument list.
    - UserFunctions run via apply_user_function.
    - Anything else raises NotAFunction.
    """
    match head:
        case Primitive():
            return head(env, args)
        case UserFunction():
            return apply_user_function(head, args, evaluate_fn)
    raise NotAFunction(f"Not a function: {stringify(head)}")
