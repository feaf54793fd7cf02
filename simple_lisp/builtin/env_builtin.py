"""Built-in functions for the simple-lisp runtime environment.

This module defines arithmetic, comparison, list processing, predicates,
boolean operators and print, plus `register` which installs them (and the
constants t and nil) into an Environment.

Every builtin is called as fn(env, args) with already-evaluated arguments and
checks its argument count and types instead of coercing.
"""
from __future__ import annotations

from typing import Callable

from simple_lisp import LispValue
from simple_lisp.errors import ArityError, LispTypeError, DivisionByZero, EmptyListError
from simple_lisp.printer import stringify
from simple_lisp.types.environment import Environment
from simple_lisp.types.nil import Nil, is_true
from simple_lisp.types.procedure import Primitive
from simple_lisp.types.symbol import Symbol


def _is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _expect_arity(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise ArityError(f"{name} requires exactly {n} argument{'s' if n != 1 else ''}, got {len(args)}")


def _numbers(name: str, args: list[LispValue]) -> list[LispValue]:
    for a in args:
        if not _is_number(a):
            raise LispTypeError(f"All arguments to {name} must be numbers, got {stringify(a)}")
    return args


def _list_arg(name: str, x: LispValue) -> list[LispValue]:
    if not isinstance(x, list):
        raise LispTypeError(f"{name} expects a list, got {stringify(x)}")
    return x


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; numbers never equal booleans."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if _is_number(a) and _is_number(b):
        return a == b
    if type(a) != type(b):
        return False
    return a == b


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Sum of all arguments; (+) is 0."""
    result = 0.0
    for x in _numbers("+", args):
        result += x
    return result


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Negation for one argument, otherwise subtract the rest from the first."""
    if not args:
        raise ArityError("- requires at least 1 argument")
    _numbers("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Product of all arguments; (*) is 1."""
    result = 1.0
    for x in _numbers("*", args):
        result *= x
    return result


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left-to-right. A single argument is returned unchanged."""
    if not args:
        raise ArityError("/ requires at least 1 argument")
    _numbers("/", args)
    result = args[0]
    for x in args[1:]:
        if x == 0:
            raise DivisionByZero("Division by zero")
        result /= x
    return result


# -------------------------------
# Comparison
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> bool:
    _expect_arity("=", args, 2)
    return is_equal(args[0], args[1])


def _comparison(name: str, op: Callable[[LispValue, LispValue], bool]):
    def compare(env: Environment, args: list[LispValue]) -> bool:
        _expect_arity(name, args, 2)
        a, b = _numbers(name, args)
        return op(a, b)
    compare.__name__ = f"compare_{name}"
    compare.__doc__ = f"({name} a b) for two numbers."
    return compare


lt = _comparison("<", lambda a, b: a < b)
gt = _comparison(">", lambda a, b: a > b)
lte = _comparison("<=", lambda a, b: a <= b)
gte = _comparison(">=", lambda a, b: a >= b)


# -------------------------------
# Lists
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments."""
    return list(args)


def cons(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Prepend head to tail.

    - If tail is a list, returns the new list [head] + tail.
    - Otherwise tail is first wrapped as a one-element list, giving [head, tail].
    """
    _expect_arity("cons", args, 2)
    head, tail = args
    if isinstance(tail, list):
        return [head] + tail
    return [head, tail]


def car(env: Environment, args: list[LispValue]) -> LispValue:
    """First element of a non-empty list."""
    _expect_arity("car", args, 1)
    xs = _list_arg("car", args[0])
    if not xs:
        raise EmptyListError("car of an empty list")
    return xs[0]


def cdr(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """All but the first element; the empty list for lists of length <= 1."""
    _expect_arity("cdr", args, 1)
    return _list_arg("cdr", args[0])[1:]


def length(env: Environment, args: list[LispValue]) -> float:
    """Element count of a list; 0 for anything else."""
    _expect_arity("length", args, 1)
    x = args[0]
    return float(len(x)) if isinstance(x, list) else 0.0


def append(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Concatenate any number of lists into a new list."""
    result: list[LispValue] = []
    for item in args:
        result.extend(_list_arg("append", item))
    return result


# -------------------------------
# Predicates
# -------------------------------
def atom(env: Environment, args: list[LispValue]) -> bool:
    _expect_arity("atom", args, 1)
    return not isinstance(args[0], list)


def null(env: Environment, args: list[LispValue]) -> bool:
    """(null x) is true for nil and the empty list."""
    _expect_arity("null", args, 1)
    x = args[0]
    return x is Nil or x == []


def numberp(env: Environment, args: list[LispValue]) -> bool:
    _expect_arity("numberp", args, 1)
    return _is_number(args[0])


def symbolp(env: Environment, args: list[LispValue]) -> bool:
    _expect_arity("symbolp", args, 1)
    return isinstance(args[0], Symbol)


# -------------------------------
# Boolean operators
# -------------------------------
def logical_and(env: Environment, args: list[LispValue]) -> bool:
    """True if every argument is true; (and) is true."""
    return all(is_true(a) for a in args)


def logical_or(env: Environment, args: list[LispValue]) -> bool:
    """True if any argument is true; (or) is false."""
    return any(is_true(a) for a in args)


def logical_not(env: Environment, args: list[LispValue]) -> bool:
    _expect_arity("not", args, 1)
    return not is_true(args[0])


def make_print(output: list[str]) -> Callable[[Environment, list[LispValue]], LispValue]:
    """Build a print builtin that appends one line per call to `output`."""

    def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
        """Append the space-separated printed forms of args as one line; returns Nil."""
        output.append(" ".join(stringify(a) for a in args))
        return Nil

    return print_builtin


BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    ">": gt,
    "<=": lte,
    ">=": gte,
    "list": list_builtin,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "length": length,
    "append": append,
    "atom": atom,
    "null": null,
    "numberp": numberp,
    "symbolp": symbolp,
    "and": logical_and,
    "or": logical_or,
    "not": logical_not,
}


def register(env: Environment, output: list[str]) -> None:
    """Register all builtin functions and constants into the given environment.

    `output` is the line buffer that print appends to.
    """
    env.update({Symbol(name): Primitive(name, fn) for name, fn in BUILTINS.items()})
    env.define(Symbol("print"), Primitive("print", make_print(output)))
    env.define(Symbol("t"), True)
    env.define(Symbol("nil"), Nil)
