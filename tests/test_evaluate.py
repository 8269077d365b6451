import math

import numpy as np
import pytest

from calculus.engine.evaluate import EvaluationError, Evaluator, evaluate
from calculus.expression import (
	Sum, Product, Quotient, Power, Exponential, Logarithm, Variable, Integer,
)
from calculus.syntax.parser import parse

x = Variable("x")


def test_division_by_zero_is_a_gap_not_a_failure():
	out = evaluate(Quotient(Integer(1), x), "x", [-1.0, 0.0, 1.0])
	assert out[0] == -1.0
	assert not np.isfinite(out[1])
	assert out[2] == 1.0


def test_logarithm_domain():
	out = evaluate(Logarithm(x), "x", [-1.0, 0.0, math.e])
	assert np.isnan(out[0])
	assert out[1] == -np.inf
	assert out[2] == pytest.approx(1.0)


def test_arithmetic_is_elementwise():
	tree = parse("3*x^2 - x + 5")
	out = evaluate(tree, "x", [0.0, 1.0, 2.0])
	np.testing.assert_allclose(out, [5.0, 7.0, 15.0])


def test_exponential_and_quotients():
	tree = parse("exp(x) / (x + 1)")
	out = evaluate(tree, "x", [0.0, 1.0])
	np.testing.assert_allclose(out, [1.0, math.e / 2.0])


def test_fractional_power_of_negative_base_is_nan():
	out = evaluate(Power(x, Quotient(Integer(1), Integer(2))), "x", [-4.0, 4.0])
	assert np.isnan(out[0])
	assert out[1] == pytest.approx(2.0)


def test_empty_aggregates_are_identities():
	assert list(evaluate(Sum(()), "x", [3.0, 4.0])) == [0.0, 0.0]
	assert list(evaluate(Product(()), "x", [3.0, 4.0])) == [1.0, 1.0]


def test_constant_broadcasts_over_samples():
	out = evaluate(Integer(7), "x", [1.0, 2.0, 3.0])
	assert out.shape == (3,)
	assert list(out) == [7.0, 7.0, 7.0]


def test_huge_integer_is_nan():
	out = evaluate(Integer(10 ** 400), "x", [0.0])
	assert np.isnan(out[0])


def test_exponential_overflow_is_infinite():
	out = evaluate(Exponential(x), "x", [1000.0])
	assert out[0] == np.inf


def test_other_free_variable_fails():
	with pytest.raises(EvaluationError):
		evaluate(Sum((x, Variable("y"))), "x", [1.0])


def test_interned_identities():
	out = Evaluator.evaluate(Product((Variable(0), Variable(0))), 0, [3.0])
	assert list(out) == [9.0]
