import pytest

from Algebra import error as E
from Algebra.Nodes import Number, Variable, UnaryOp, BinOp
from Algebra.Parser import parse


def test_parser_gives_multiplication_precedence_over_addition():
    assert parse("1 + 2 * 3") == BinOp(Number(1), "+", BinOp(Number(2), "*", Number(3)))


def test_parser_keeps_subtraction_and_division_left_associative():
    assert parse("8 - 4 - 2") == BinOp(BinOp(Number(8), "-", Number(4)), "-", Number(2))
    assert parse("8 / 4 / 2") == BinOp(BinOp(Number(8), "/", Number(4)), "/", Number(2))


def test_parser_makes_power_right_associative():
    assert parse("2^3^2") == BinOp(Number(2), "^", BinOp(Number(3), "^", Number(2)))


def test_unary_minus_applies_to_the_whole_power():
    assert parse("-2^2") == UnaryOp("-", BinOp(Number(2), "^", Number(2)))


def test_unary_minus_is_a_single_factor_of_a_product():
    assert parse("-x * 3") == BinOp(UnaryOp("-", Variable("x")), "*", Number(3))


def test_parenthesized_expression_becomes_a_subtree():
    assert parse("(x + 1) * 2") == BinOp(BinOp(Variable("x"), "+", Number(1)), "*", Number(2))


def test_identifier_becomes_variable_with_unit_coefficient_and_exponent():
    node = parse("abc")

    assert node == Variable("abc")
    assert node.coefficient == 1
    assert node.exponent == 1


@pytest.mark.parametrize("text", ["2x", "x2", "2 3", "x y", "2(3)", "x(3)", "(2)3", "(2)x"])
def test_parser_rejects_implicit_multiplication(text):
    with pytest.raises(E.InvalidSyntaxError) as excinfo:
        parse(text)

    assert excinfo.value.code == "3101"


@pytest.mark.parametrize("text", ["", "   ", "2 +", "*2", "(2", "()", "x ^"])
def test_parser_rejects_incomplete_expressions(text):
    with pytest.raises(E.InvalidSyntaxError):
        parse(text)


def test_parser_stops_after_the_first_complete_expression():
    # ")(" is not a forbidden pair; the second group is never read
    assert parse("(2)(3)") == Number(2)


def test_parser_propagates_invalid_character():
    with pytest.raises(E.InvalidCharacterError):
        parse("2 $ 3")


@pytest.mark.parametrize("text", ["x ) $", "(2)(3) $", "2 + 3 ) # junk"])
def test_parser_scans_ignored_tail_for_invalid_characters(text):
    with pytest.raises(E.InvalidCharacterError):
        parse(text)


def test_parser_ignores_a_well_formed_tail():
    assert parse("x ) (") == Variable("x")
