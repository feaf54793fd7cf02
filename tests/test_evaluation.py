import pytest

from simple_lisp.errors import (
    UnboundSymbol,
    CallableUsedAsValue,
    NotAFunction,
    Uninterpretable,
)
from simple_lisp.evaluation.evaluator import evaluate
from simple_lisp.types.nil import Nil
from simple_lisp.types.procedure import Primitive
from simple_lisp.types.symbol import Symbol


def test_self_evaluating_literals(env):
    assert evaluate(1.0, env) == 1.0
    assert evaluate(3.14, env) == 3.14
    assert evaluate(True, env) is True
    assert evaluate(False, env) is False
    assert evaluate(Nil, env) is Nil


def test_empty_list_is_nil(env):
    assert evaluate([], env) is Nil


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42.0)
    assert evaluate(Symbol("x"), env) == 42.0
    with pytest.raises(UnboundSymbol):
        evaluate(Symbol("z"), env)


def test_constants(env):
    assert evaluate(Symbol("t"), env) is True
    assert evaluate(Symbol("nil"), env) is Nil


def test_callable_used_as_value(env):
    with pytest.raises(CallableUsedAsValue):
        evaluate(Symbol("car"), env)


def test_simple_expression(env):
    expr = [Symbol("+"), 1.0, 2.0]
    assert evaluate(expr, env) == 3.0


def test_arguments_evaluated_left_to_right(env, output):
    expr = [
        Symbol("list"),
        [Symbol("print"), [Symbol("quote"), Symbol("a")]],
        [Symbol("print"), [Symbol("quote"), Symbol("b")]],
    ]
    assert evaluate(expr, env) == [Nil, Nil]
    assert output == ["A", "B"]


def test_primitive_receives_caller_env(env):
    seen = []
    env.define(Symbol("probe"), Primitive("probe", lambda e, args: seen.append(e) or Nil))
    evaluate([Symbol("probe")], env)
    assert seen == [env]


@pytest.mark.parametrize(
    "expr",
    [
        [1.0, 2.0],
        [Symbol("nil"), 1.0],
        [Symbol("undefined-fn"), 1.0],
        [[Symbol("quote"), Symbol("car")], [Symbol("quote"), [1.0]]],
        [[Symbol("list"), 1.0]],
    ]
)
def test_not_a_function(env, expr):
    with pytest.raises(NotAFunction):
        evaluate(expr, env)


def test_computed_head_cannot_yield_function(env):
    # a function name in argument position is a value reference
    expr = [[Symbol("if"), Symbol("t"), Symbol("car"), Symbol("cdr")], [Symbol("quote"), [1.0]]]
    with pytest.raises(CallableUsedAsValue):
        evaluate(expr, env)


def test_uninterpretable(env):
    with pytest.raises(Uninterpretable):
        evaluate("a python string", env)
    with pytest.raises(Uninterpretable):
        evaluate({"not": "lisp"}, env)


def test_quoted_tree_is_returned_unchanged(env):
    tree = [1.0, [Symbol("a")]]
    assert evaluate([Symbol("quote"), tree], env) is tree


def test_evaluation_does_not_mutate_tree(env):
    tree = [Symbol("cons"), 1.0, [Symbol("quote"), [2.0, 3.0]]]
    snapshot = [Symbol("cons"), 1.0, [Symbol("quote"), [2.0, 3.0]]]
    assert evaluate(tree, env) == [1.0, 2.0, 3.0]
    assert tree == snapshot
