from fractions import Fraction

import pytest

from calculus.expression import (
	Sum, Product, Quotient, Power, Exponential, Logarithm, Variable, Integer,
	ONE, MINUS_ONE, negate, walk, variables, map_ids, rational_value, from_rational,
	int_to_digits, int_from_digits,
)

x = Variable("x")
y = Variable("y")


def test_structural_equality_is_ordered():
	assert Sum((x, ONE)) == Sum((x, ONE))
	assert Sum((x, ONE)) != Sum((ONE, x))
	assert Product((x, y)) != Sum((x, y))


def test_sequences_are_stored_as_tuples():
	assert Sum([x, y]) == Sum((x, y))
	assert isinstance(Product([x]).factors, tuple)


def test_nodes_are_hashable():
	table = {Power(x, Integer(2)): "square"}
	assert table[Power(Variable("x"), Integer(2))] == "square"


def test_integer_rejects_non_int_values():
	with pytest.raises(TypeError):
		Integer(1.5)
	with pytest.raises(TypeError):
		Integer(True)


def test_integer_is_arbitrary_precision():
	big = Integer(10 ** 50)
	assert big.value + 1 == 10 ** 50 + 1


def test_negate_multiplies_by_minus_one():
	assert negate(x) == Product((MINUS_ONE, x))


def test_walk_is_pre_order():
	tree = Sum((x, Product((y, Integer(2)))))
	assert list(walk(tree)) == [tree, x, Product((y, Integer(2))), y, Integer(2)]


def test_variables_collects_identities():
	tree = Quotient(Exponential(x), Logarithm(Sum((x, y, Integer(1)))))
	assert variables(tree) == {"x", "y"}


def test_map_ids_converts_identity_type():
	tree = Sum((Power(x, y), Logarithm(x)))
	indices = {"x": 0, "y": 1}
	mapped = map_ids(tree, indices.__getitem__)
	assert mapped == Sum((Power(Variable(0), Variable(1)), Logarithm(Variable(0))))
	names = {0: "x", 1: "y"}
	assert map_ids(mapped, names.__getitem__) == tree


def test_rational_value():
	assert rational_value(Integer(3)) == Fraction(3)
	assert rational_value(Quotient(Integer(2), Integer(4))) == Fraction(1, 2)
	assert rational_value(Quotient(Integer(1), Integer(0))) is None
	assert rational_value(Quotient(x, Integer(2))) is None
	assert rational_value(x) is None


def test_from_rational_builds_lowest_terms():
	assert from_rational(Fraction(4, 2)) == Integer(2)
	assert from_rational(Fraction(-2, 6)) == Quotient(Integer(-1), Integer(3))


@pytest.mark.parametrize("n", [0, 7, -42, 10 ** 999, 10 ** 1000, 10 ** 1000 + 1, -(7 * 10 ** 2500 + 12345)])
def test_digits_match_str_below_the_interpreter_limit(n):
	assert int_to_digits(n) == str(n)
	assert int_from_digits(str(n)) == n


def test_digits_beyond_the_interpreter_limit():
	n = 2 ** 20000
	text = int_to_digits(n)
	assert len(text) == 6021
	assert int_from_digits(text) == n
	assert int_to_digits(-(10 ** 5000)) == "-1" + "0" * 5000
	assert int_from_digits("0" * 4999 + "9") == 9


@pytest.mark.parametrize("text", ["", "-", "1.5", "12a"])
def test_int_from_digits_rejects_non_digits(text):
	with pytest.raises(ValueError):
		int_from_digits(text)
