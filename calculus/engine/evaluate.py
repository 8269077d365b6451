"""
Numeric evaluator over a vector of samples for one variable.

float64 semantics throughout; floating-point domain errors are not guarded:
  • x / 0        → ±inf (0 / 0 → nan)
  • log(x ≤ 0)   → nan or -inf
  • (-x) ** p    → nan for non-integer p
so a sampled curve can contain isolated undefined points.

A Variable other than the evaluated one raises EvaluationError.
"""

from __future__ import annotations
from typing import Hashable, Sequence

import numpy as np

from calculus.expression.tree import (
	Expression, Sum, Product, Quotient, Power, Exponential, Logarithm, Variable, Integer,
)


class EvaluationError(ValueError):
	"""The tree references a variable other than the one being evaluated."""


class Evaluator:
	"""Elementwise float64 evaluation of an expression tree."""

	@staticmethod
	def _as_array(x) -> np.ndarray:
		"""Convert input to a 1-D np.float64 ndarray."""
		return np.atleast_1d(np.asarray(x, dtype=np.float64))

	@staticmethod
	def _integer_value(n: int) -> float:
		"""Float value of an exact integer; nan when out of float64 range."""
		try:
			return float(n)
		except OverflowError:
			return float("nan")

	@staticmethod
	def _eval(e: Expression, variable: Hashable, xs: np.ndarray) -> np.ndarray:
		if isinstance(e, Variable):
			if e.id != variable:
				raise EvaluationError(f"Free variable {e.id!r} is not the evaluated variable {variable!r}")
			return xs.copy()
		if isinstance(e, Integer):
			return np.full(xs.shape, Evaluator._integer_value(e.value), dtype=np.float64)
		if isinstance(e, Sum):
			out = np.zeros(xs.shape, dtype=np.float64)
			for t in e.terms:
				out = out + Evaluator._eval(t, variable, xs)
			return out
		if isinstance(e, Product):
			out = np.ones(xs.shape, dtype=np.float64)
			for f in e.factors:
				out = out * Evaluator._eval(f, variable, xs)
			return out
		if isinstance(e, Quotient):
			num = Evaluator._eval(e.numerator, variable, xs)
			den = Evaluator._eval(e.denominator, variable, xs)
			return np.divide(num, den)
		if isinstance(e, Power):
			base = Evaluator._eval(e.base, variable, xs)
			exponent = Evaluator._eval(e.exponent, variable, xs)
			return np.power(base, exponent)
		if isinstance(e, Exponential):
			return np.exp(Evaluator._eval(e.operand, variable, xs))
		if isinstance(e, Logarithm):
			return np.log(Evaluator._eval(e.operand, variable, xs))
		raise TypeError(f"Unsupported expression node: {type(e).__name__}")

	@staticmethod
	def evaluate(e: Expression, variable: Hashable, samples: Sequence[float]) -> np.ndarray:
		"""
		Return e evaluated at every sample of `variable`, one float64 per sample.
		"""
		xs = Evaluator._as_array(samples)
		with np.errstate(divide="ignore", invalid="ignore", over="ignore", under="ignore"):
			return Evaluator._eval(e, variable, xs)


def evaluate(e: Expression, variable: Hashable, samples: Sequence[float]) -> np.ndarray:
	"""Proxy to Evaluator.evaluate."""
	return Evaluator.evaluate(e, variable, samples)
