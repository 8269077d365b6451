"""
Rule-based symbolic differentiation.

The output is not reduced: callers pass it through Normalizer.reduce.
"""

from __future__ import annotations
from typing import Hashable, List

from calculus.expression.tree import (
	Expression, Sum, Product, Quotient, Power, Exponential, Logarithm, Variable, Integer,
	ZERO, ONE, negate,
)


class Differentiator:
	"""Structural derivative d/d(variable) over every node kind."""

	def _product_rule(self, e: Product, variable: Hashable) -> Expression:
		"""One summand per factor: d(f_i) followed by the other factors in order."""
		terms: List[Expression] = []
		for i, f in enumerate(e.factors):
			factors: List[Expression] = [self.differentiate(f, variable)]
			for j, g in enumerate(e.factors):
				if j != i:
					factors.append(g)
			terms.append(Product(tuple(factors)))
		return Sum(tuple(terms))

	def _quotient_rule(self, e: Quotient, variable: Hashable) -> Expression:
		"""(n' * d - n * d') / (d * d)"""
		n, d = e.numerator, e.denominator
		top = Sum((
			Product((self.differentiate(n, variable), d)),
			Product((n, negate(self.differentiate(d, variable)))),
		))
		return Quotient(top, Product((d, d)))

	def _power_rule(self, e: Power, variable: Hashable) -> Expression:
		"""Constant base, then constant exponent, then the general f^g rule."""
		base, exponent = e.base, e.exponent
		if isinstance(base, Integer):
			return Product((
				Power(base, exponent),
				Logarithm(base),
				self.differentiate(exponent, variable),
			))
		if isinstance(exponent, Integer):
			n = exponent.value
			if n == 0:
				return ZERO
			if n == 1:
				return self.differentiate(base, variable)
			return Product((
				Integer(n),
				Power(base, Integer(n - 1)),
				self.differentiate(base, variable),
			))
		return Product((
			Power(base, exponent),
			Sum((
				Product((self.differentiate(exponent, variable), Logarithm(base))),
				Product((exponent, Quotient(self.differentiate(base, variable), base))),
			)),
		))

	def differentiate(self, e: Expression, variable: Hashable) -> Expression:
		"""Return the unreduced derivative of `e` with respect to `variable`."""
		if isinstance(e, Variable):
			if e.id == variable:
				return ONE
			return ZERO
		if isinstance(e, Integer):
			return ZERO
		if isinstance(e, Sum):
			return Sum(tuple(self.differentiate(t, variable) for t in e.terms))
		if isinstance(e, Product):
			return self._product_rule(e, variable)
		if isinstance(e, Quotient):
			return self._quotient_rule(e, variable)
		if isinstance(e, Power):
			return self._power_rule(e, variable)
		if isinstance(e, Exponential):
			return Product((e, self.differentiate(e.operand, variable)))
		if isinstance(e, Logarithm):
			return Quotient(self.differentiate(e.operand, variable), e.operand)
		raise TypeError(f"Unsupported expression node: {type(e).__name__}")


_default = Differentiator()


def differentiate(e: Expression, variable: Hashable) -> Expression:
	"""Proxy to a default Differentiator.differentiate."""
	return _default.differentiate(e, variable)
