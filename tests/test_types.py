import pytest

from sprig.builtin.list_builtin import car
from sprig.printer import to_string
from sprig.types.environment import Environment
from sprig.types.errors import SprigRedefinitionError, SprigTypeError, SprigUnboundSymbol
from sprig.types.lambda_fn import Lambda
from sprig.types.nil import Nil, NilType
from sprig.types.number import Fraction
from sprig.types.pair import Pair, append, from_iterable, is_proper_list, length, make_list, to_python_list
from sprig.types.symbol import Symbol, T


def test_symbols_compare_by_name():
    assert Symbol("abc") == Symbol("abc")
    assert hash(Symbol("abc")) == hash(Symbol("abc"))
    assert Symbol("abc") != Symbol("abd")
    assert Symbol("t") == T
    assert Symbol("abc") != "abc"


def test_nil_is_a_self_referential_singleton():
    assert NilType() is Nil
    assert Nil.car is Nil
    assert Nil.cdr is Nil
    assert list(Nil) == []
    assert not Nil


def test_pairs_are_immutable():
    p = Pair(Fraction(1), Nil)
    with pytest.raises(AttributeError):
        p.car = Fraction(2)
    with pytest.raises(AttributeError):
        p.cdr = Nil


def test_pair_structural_equality():
    assert make_list(Fraction(1), make_list(Symbol("a"))) == make_list(Fraction(1), make_list(Symbol("a")))
    assert make_list(Fraction(1)) != make_list(Fraction(1), Fraction(2))
    assert make_list(Fraction(1), Fraction(2)) != make_list(Fraction(1))
    assert make_list(Fraction(1)) != make_list(1.0)
    assert Pair(Fraction(1), Fraction(2)) == Pair(Fraction(1), Fraction(2))
    assert Pair(Fraction(1), Fraction(2)) != make_list(Fraction(1), Fraction(2))


def test_improper_list_iteration_fails():
    dotted = Pair(Fraction(1), Pair(Fraction(2), Fraction(3)))
    assert not is_proper_list(dotted)
    with pytest.raises(SprigTypeError):
        list(dotted)
    with pytest.raises(SprigTypeError):
        length(dotted)


def test_list_helpers():
    lst = from_iterable([Fraction(1), Fraction(2)])
    assert to_python_list(lst) == [Fraction(1), Fraction(2)]
    assert to_python_list(Nil) == []
    assert length(lst) == 2
    assert from_iterable([]) is Nil
    assert to_string(from_iterable([Fraction(1)], tail=Fraction(2))) == "(1 . 2)"
    with pytest.raises(SprigTypeError):
        to_python_list(Fraction(1))


def test_append_shares_last_argument():
    tail = make_list(Fraction(3), Fraction(4))
    joined = append(make_list(Fraction(1), Fraction(2)), tail)
    assert to_string(joined) == "(1 2 3 4)"
    assert joined.cdr.cdr is tail
    assert append() is Nil
    assert append(Nil, Nil) is Nil


# -----------------------------------------------------
# printer
# -----------------------------------------------------

@pytest.mark.parametrize(
    "value,printed",
    [
        (Fraction(1, 2), "1/2"),
        (Fraction(6, 3), "2"),
        (2.5, "2.5"),
        (1.0, "1.0"),
        ("hi", '"hi"'),
        (Nil, "nil"),
        (T, "t"),
        (Symbol("foo"), "foo"),
        (make_list(Fraction(1), "a", make_list(Symbol("b"), Nil)), '(1 "a" (b nil))'),
        (Pair(Fraction(1), Pair(Fraction(2), Fraction(3))), "(1 2 . 3)"),
        (Pair(Nil, Nil), "(nil)"),
        (car, "#<builtin car>"),
    ]
)
def test_printer(value, printed):
    assert to_string(value) == printed


def test_lambda_printing():
    lam = Lambda([Symbol("a"), Symbol("&rest"), Symbol("b")], Nil, Environment())
    assert to_string(lam) == "#<lambda (a &rest b)>"
    assert str(make_list(lam)) == "(#<lambda (a &rest b)>)"


# -----------------------------------------------------
# environment
# -----------------------------------------------------

def test_environment_define_and_lookup():
    env = Environment()
    env.define(Symbol("x"), Fraction(1))
    assert env.lookup(Symbol("x")) == Fraction(1)
    with pytest.raises(SprigUnboundSymbol):
        env.lookup(Symbol("y"))


def test_environment_redefinition_only_checks_own_frame():
    outer = Environment()
    outer.define(Symbol("x"), Fraction(1))
    inner = outer.child()
    inner.define(Symbol("x"), Fraction(2))
    assert inner.lookup(Symbol("x")) == Fraction(2)
    assert outer.lookup(Symbol("x")) == Fraction(1)
    with pytest.raises(SprigRedefinitionError):
        outer.define(Symbol("x"), Fraction(3))


def test_environment_child_sees_later_outer_definitions():
    outer = Environment()
    inner = Environment(outer=outer)
    outer.define(Symbol("late"), Fraction(5))
    assert inner.lookup(Symbol("late")) == Fraction(5)
    assert inner.find(Symbol("late")) is outer
    assert Symbol("late") in inner


@pytest.mark.parametrize("name", ["x", Fraction(1), T])
def test_environment_rejects_bad_names(name):
    with pytest.raises(SprigTypeError):
        Environment().define(name, Nil)


def test_environment_repr_shows_chain():
    outer = Environment()
    outer.define(Symbol("a"), Fraction(1))
    inner = outer.child()
    inner.define(Symbol("b"), Fraction(2))
    assert str(inner) == "{b: Fraction(2, 1)} -> ..."
    assert repr(inner) == "<Environment chain: {b: Fraction(2, 1)} -> {a: Fraction(1, 1)}>"
