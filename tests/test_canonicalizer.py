import pytest

from Algebra import error as E
from Algebra.Nodes import Number, Variable, BinOp
from Algebra.Canonicalizer import flatten, group, render


def test_flatten_applies_subtraction_to_every_term_of_the_right_side():
    tree = BinOp(Number(10), "-", BinOp(Variable("x"), "-", Number(3)))

    assert flatten(tree) == [Number(10), Variable("x", -1, 1), Number(3)]


def test_flatten_rejects_an_unreduced_tree():
    with pytest.raises(E.CalculationError) as excinfo:
        flatten(BinOp(Variable("x"), "*", Variable("y")))

    assert excinfo.value.code == "3104"


def test_group_sums_constants_and_colliding_keys():
    constant, coefficients = group([Number(2), Variable("x", 2), Number(-5), Variable("x", 3)])

    assert constant == -3
    assert coefficients == {("x", 1): 5}


def test_group_orders_by_name_then_exponent_descending():
    terms = [Variable("y"), Variable("x", 1, 1), Variable("x", 1, 3), Variable("a", 1, -1)]

    _, coefficients = group(terms)

    assert list(coefficients) == [("a", -1), ("x", 3), ("x", 1), ("y", 1)]


@pytest.mark.parametrize(
    ("tree", "expected"),
    [
        (Number(0), "0"),
        (Number(-12), "-12"),
        (Variable("x", 0), "0"),
        (Variable("x"), "x"),
        (Variable("x", -1, 2), "-x^2"),
        (Variable("x", -5), "-5*x"),
        (Variable("x", 6, -1), "6*x^-1"),
        (BinOp(Variable("x", 2, 1), "+", Number(6)), "2*x + 6"),
        (BinOp(Variable("x", 1, 2), "-", Variable("x", 5)), "x^2 - 5*x"),
        (BinOp(Variable("x", 1, 2), "+", Variable("x", -1)), "x^2 - x"),
        (BinOp(Variable("x"), "-", Number(4)), "x - 4"),
        (BinOp(Variable("x"), "+", Number(0)), "x"),
    ],
)
def test_render_formats_terms(tree, expected):
    assert render(tree) == expected


def test_render_sorts_terms_and_puts_the_constant_last():
    tree = BinOp(
        BinOp(BinOp(Variable("y"), "+", Variable("x")), "+", Variable("x", 3, 2)),
        "+",
        Number(-4),
    )

    assert render(tree) == "3*x^2 + x + y - 4"


def test_render_folds_zero_exponent_terms_into_the_constant():
    assert render(BinOp(Variable("x", 3, 0), "+", Number(2))) == "5"
    assert render(BinOp(Variable("x", 3, 0), "+", Variable("x"))) == "x + 3"


def test_render_skips_cancelled_terms():
    tree = BinOp(BinOp(Variable("x", 2), "-", Variable("x", 2)), "+", Number(7))

    assert render(tree) == "7"


def test_render_handles_subtracted_sums():
    tree = BinOp(Number(10), "-", BinOp(Variable("x"), "-", Number(3)))

    assert render(tree) == "-x + 13"
