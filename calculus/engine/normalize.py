"""
Canonical normalization ("reduce") for expression trees (finite, terminating transform set).

Transforms:
  • Flatten nested Sum into Sum and Product into Product (never across Quotient/Power)
  • Fold rational literals exactly (int / Fraction), one literal per Sum or Product
  • Collect like terms (equal up to a rational coefficient) and like factors
    (equal base, integer exponent) in first-occurrence order
  • Short-circuit a zero literal factor in Product
  • Reduce Integer/Integer quotients to lowest terms, fold non-negative integer powers
  • exp(0) → 1, log(1) → 0, b^1 → b, b^0 → 1

One pass is applied bottom-up; passes repeat until the tree is stable, so the
result is a fixpoint and reduce() is idempotent.
"""

from __future__ import annotations
from fractions import Fraction
from typing import Dict, List, Optional, Tuple

from calculus.expression.tree import (
	Expression, Sum, Product, Quotient, Power, Exponential, Logarithm, Variable, Integer,
	ZERO, ONE, children, rational_value, from_rational,
)
from calculus.pipeline.config import EngineConfig


class Normalizer:
	"""Stateless canonicalizer with a finite, terminating transform set."""

	def __init__(self, config: Optional[EngineConfig] = None) -> None:
		self.config = config or EngineConfig()

	def _flatten(self, args: Tuple[Expression, ...], kind: type) -> List[Expression]:
		"""Reduce each child and inline children of the same associative kind."""
		out: List[Expression] = []
		for a in args:
			if isinstance(a, kind):
				out.extend(self._flatten(children(a), kind))
				continue
			r = self._reduce_once(a)
			if isinstance(r, kind):
				out.extend(children(r))
			else:
				out.append(r)
		return out

	def _split_coefficient(self, e: Expression) -> Tuple[Fraction, Tuple[Expression, ...]]:
		"""Split a term into (rational coefficient, remaining factors)."""
		if isinstance(e, Product):
			coeff = Fraction(1)
			rest: List[Expression] = []
			for f in e.factors:
				q = rational_value(f)
				if q is not None:
					coeff *= q
				else:
					rest.append(f)
			return coeff, tuple(rest)
		return Fraction(1), (e,)

	def _scaled(self, coeff: Fraction, rest: Tuple[Expression, ...]) -> Expression:
		"""Rebuild coeff * rest with the coefficient leading."""
		if not rest:
			return from_rational(coeff)
		if coeff == 1:
			if len(rest) == 1:
				return rest[0]
			return Product(rest)
		return Product((from_rational(coeff),) + rest)

	def _reduce_sum(self, e: Sum) -> Expression:
		"""Flatten, fold literals, collect like terms, and collapse trivial sums."""
		terms = self._flatten(e.terms, Sum)
		constant = Fraction(0)
		order: List[Tuple[Expression, ...]] = []
		coeffs: Dict[Tuple[Expression, ...], Fraction] = {}
		for t in terms:
			q = rational_value(t)
			if q is not None:
				constant += q
				continue
			c, rest = self._split_coefficient(t)
			if rest not in coeffs:
				order.append(rest)
				coeffs[rest] = Fraction(0)
			coeffs[rest] += c

		out: List[Expression] = []
		for rest in order:
			c = coeffs[rest]
			if c == 0:
				continue
			out.append(self._scaled(c, rest))
		if constant != 0:
			out.append(from_rational(constant))

		if not out:
			return ZERO
		if len(out) == 1:
			return out[0]
		return Sum(tuple(out))

	def _reduce_product(self, e: Product) -> Expression:
		"""Flatten, fold literals with zero short-circuit, and collect like factors."""
		factors = self._flatten(e.factors, Product)
		coeff = Fraction(1)
		order: List[Expression] = []
		exponents: Dict[Expression, int] = {}
		for f in factors:
			q = rational_value(f)
			if q is not None:
				coeff *= q
				if coeff == 0:
					return ZERO
				continue
			if isinstance(f, Power) and isinstance(f.exponent, Integer):
				base, n = f.base, f.exponent.value
			else:
				base, n = f, 1
			if base not in exponents:
				order.append(base)
				exponents[base] = 0
			exponents[base] += n

		rest: List[Expression] = []
		for base in order:
			n = exponents[base]
			if n == 0:
				continue
			if n == 1:
				rest.append(base)
			else:
				rest.append(Power(base, Integer(n)))

		if not rest:
			return from_rational(coeff)
		return self._scaled(coeff, tuple(rest))

	def _reduce_quotient(self, e: Quotient) -> Expression:
		"""Reduce both sides; fold exact rationals, never cancel symbolically."""
		num = self._reduce_once(e.numerator)
		den = self._reduce_once(e.denominator)
		qn = rational_value(num)
		qd = rational_value(den)
		if qd is not None and qd != 0:
			if qn is not None:
				return from_rational(qn / qd)
			if qd == 1:
				return num
		return Quotient(num, den)

	def _reduce_power(self, e: Power) -> Expression:
		"""Reduce base and exponent; fold exact non-negative integer powers."""
		base = self._reduce_once(e.base)
		exponent = self._reduce_once(e.exponent)
		if isinstance(exponent, Integer):
			n = exponent.value
			if n == 1:
				return base
			q = rational_value(base)
			if q is not None and 0 <= n <= self.config.max_fold_exponent:
				return from_rational(q ** n)
			if n == 0 and q is None:
				return ONE
		return Power(base, exponent)

	def _reduce_once(self, e: Expression) -> Expression:
		"""Apply one pass of canonical transforms by dispatch on node type."""
		if isinstance(e, (Integer, Variable)):
			return e
		if isinstance(e, Sum):
			return self._reduce_sum(e)
		if isinstance(e, Product):
			return self._reduce_product(e)
		if isinstance(e, Quotient):
			return self._reduce_quotient(e)
		if isinstance(e, Power):
			return self._reduce_power(e)
		if isinstance(e, Exponential):
			operand = self._reduce_once(e.operand)
			if operand == ZERO:
				return ONE
			return Exponential(operand)
		if isinstance(e, Logarithm):
			operand = self._reduce_once(e.operand)
			if operand == ONE:
				return ZERO
			return Logarithm(operand)
		raise TypeError(f"Unsupported expression node: {type(e).__name__}")

	def reduce(self, e: Expression) -> Expression:
		"""
		Return the canonical normal form of `e`.
		"""
		cur = e
		for _ in range(max(1, int(self.config.max_passes))):
			nxt = self._reduce_once(cur)
			if nxt == cur:
				return nxt
			cur = nxt
		return cur


_default = Normalizer()


def reduce(e: Expression) -> Expression:
	"""Proxy to a default Normalizer.reduce."""
	return _default.reduce(e)
