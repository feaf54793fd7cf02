"""Callable values: native primitives and user functions created by defun."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from simple_lisp import SExpression, LispValue
from simple_lisp.types.symbol import Symbol

if TYPE_CHECKING:
    from simple_lisp.types.environment import Environment


class Procedure:
    """Base for everything that may appear in function-call position."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"#<FUNCTION {self.name.upper()}>"


class Primitive(Procedure):
    """A built-in operation over already-evaluated arguments.

    `fn` is called as fn(env, args) with the caller's environment and the
    argument list.
    """

    __slots__ = ("fn",)

    def __init__(self, name: str, fn: Callable[[Environment, list[LispValue]], LispValue]):
        super().__init__(name)
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)


class UserFunction(Procedure):
    """A function defined with defun: parameters, body and defining environment."""

    __slots__ = ("params", "body", "env")

    def __init__(
        self,
        name: str,
        params: list[Symbol],
        body: list[SExpression],
        env: Environment,
    ):
        super().__init__(name)
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body
        self.env: Environment = env

    def bind_arguments(self, args: list[LispValue]) -> Environment:
        """
        Return a fresh environment for one call: a copy of the defining
        environment with each parameter bound positionally.

        Extra arguments are ignored. A parameter with no matching argument is
        left unbound in the copy, so reading it raises UnboundSymbol even if
        the defining environment binds that name.
        """
        local_env = self.env.copy()
        for i, param in enumerate(self.params):
            if i < len(args):
                local_env.define(param, args[i])
            else:
                local_env.undefine(param)
        return local_env
