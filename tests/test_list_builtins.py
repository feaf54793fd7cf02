import pytest

from simple_lisp.errors import ArityError, LispTypeError, EmptyListError
from simple_lisp.builtin.env_builtin import cons, car, cdr, append, is_equal
from simple_lisp.types.nil import Nil
from simple_lisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car '(1 2 3))", "1"),
        ("(cdr '(1 2 3))", "(2 3)"),
        ("(cdr '(1))", "()"),
        ("(cdr '())", "()"),
        ("(car (cdr '(a b c)))", "B"),
        ("(car '((1 2) 3))", "(1 2)"),
        ("(list 1 2 3)", "(1 2 3)"),
        ("(list)", "()"),
        ("(list 'a (list 'b))", "(A (B))"),
        ("(cons 1 '(2 3))", "(1 2 3)"),
        ("(cons 1 '())", "(1)"),
        ("(cons 1 2)", "(1 2)"),
        ("(cons 1 nil)", "(1 NIL)"),
        ("(cons '(a) '(b))", "((A) B)"),
        ("(length '(1 2 3))", "3"),
        ("(length '())", "0"),
        ("(length 5)", "0"),
        ("(length 'abc)", "0"),
        ("(append '(1 2) '(3) '() '(4 5))", "(1 2 3 4 5)"),
        ("(append)", "()"),
        ("(append '(a))", "(A)"),
    ]
)
def test_list_operations(interp, source, expected):
    assert interp.evaluate(source).result == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(atom 1)", "T"),
        ("(atom 'a)", "T"),
        ("(atom nil)", "T"),
        ("(atom '())", "NIL"),
        ("(atom '(1))", "NIL"),
        ("(null nil)", "T"),
        ("(null '())", "T"),
        ("(null ())", "T"),
        ("(null '(1))", "NIL"),
        ("(null 0)", "NIL"),
        ("(numberp 1)", "T"),
        ("(numberp 'a)", "NIL"),
        ("(numberp t)", "NIL"),
        ("(symbolp 'a)", "T"),
        ("(symbolp 1)", "NIL"),
        ("(symbolp nil)", "NIL"),
        ("(symbolp t)", "NIL"),
        ("(symbolp '(a))", "NIL"),
        ("(= '(1 (2 a)) (list 1 (list 2 'a)))", "T"),
        ("(= '(1 2) '(1 3))", "NIL"),
        ("(= 'a 'a)", "T"),
        ("(= 'a 'b)", "NIL"),
        ("(= t 1)", "NIL"),
        ("(= nil '())", "NIL"),
        ("(= nil nil)", "T"),
    ]
)
def test_predicates(interp, source, expected):
    assert interp.evaluate(source).result == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and)", "T"),
        ("(and 1 2 3)", "T"),
        ("(and 1 nil 3)", "NIL"),
        ("(and t (= 1 2))", "NIL"),
        ("(or)", "NIL"),
        ("(or nil nil)", "NIL"),
        ("(or nil 0)", "T"),
        ("(not nil)", "T"),
        ("(not t)", "NIL"),
        ("(not 0)", "NIL"),
        ("(not '())", "NIL"),
        ("(not (= 1 2))", "T"),
    ]
)
def test_boolean_operators(interp, source, expected):
    assert interp.evaluate(source).result == expected


def test_and_or_evaluate_all_arguments(interp):
    res = interp.evaluate("(or t (print 'evaluated))")
    assert res.output == "EVALUATED\nT"


@pytest.mark.parametrize(
    "source,error",
    [
        ("(car '())", EmptyListError),
        ("(car 1)", LispTypeError),
        ("(car nil)", LispTypeError),
        ("(cdr 'a)", LispTypeError),
        ("(car)", ArityError),
        ("(car '(1) '(2))", ArityError),
        ("(cons 1)", ArityError),
        ("(append '(1) 2)", LispTypeError),
        ("(atom)", ArityError),
        ("(null 1 2)", ArityError),
        ("(not)", ArityError),
        ("(= 1)", ArityError),
    ]
)
def test_list_errors(interp, source, error):
    with pytest.raises(error):
        interp.evaluate(source)


def test_car_of_empty_list_is_index_error(interp):
    with pytest.raises(IndexError):
        interp.evaluate("(car (cdr '(1)))")


def test_cons_does_not_mutate_tail(env):
    tail = [2.0, 3.0]
    assert cons(env, [1.0, tail]) == [1.0, 2.0, 3.0]
    assert tail == [2.0, 3.0]


def test_cdr_returns_new_list(env):
    xs = [1.0, 2.0]
    rest = cdr(env, [xs])
    rest.append(9.0)
    assert xs == [1.0, 2.0]


def test_append_returns_new_list(env):
    a = [1.0]
    result = append(env, [a, [2.0]])
    assert result == [1.0, 2.0]
    assert result is not a
    assert a == [1.0]


def test_car_direct(env):
    assert car(env, [[Symbol("x")]]) == Symbol("x")


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (1.0, 1.0, True),
        (1.0, True, False),
        (0.0, False, False),
        (Nil, Nil, True),
        (Nil, [], False),
        ([1.0, [Symbol("a")]], [1.0, [Symbol("a")]], True),
        ([1.0], [1.0, 2.0], False),
    ]
)
def test_is_equal(a, b, expected):
    assert is_equal(a, b) is expected
