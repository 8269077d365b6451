"""SymPy bridge: non-evaluating conversion of expression trees to SymPy, for cross-checks.

Provides:
  • SympyBridge.to_sympy(e): structure-preserving SymPy expression (evaluate=False).
  • SympyBridge.equivalent(a, b): True when SymPy simplifies a - b to zero.

Module-level functions proxy to SympyBridge methods.
"""

from __future__ import annotations
from typing import Dict, Optional

import sympy as sp

from calculus.expression.tree import (
	Expression, Sum, Product, Quotient, Power, Exponential, Logarithm, Variable, Integer,
)


class SympyBridge:
	"""Utility namespace for SymPy conversion."""

	@staticmethod
	def to_sympy(e: Expression, symbols: Optional[Dict[str, sp.Symbol]] = None) -> sp.Expr:
		"""
		Convert a tree to SymPy without evaluation. Variables map to Symbol(str(id));
		pass `symbols` to reuse existing Symbol objects.
		"""
		if symbols is None:
			symbols = {}
		if isinstance(e, Integer):
			return sp.Integer(e.value)
		if isinstance(e, Variable):
			name = str(e.id)
			if name not in symbols:
				symbols[name] = sp.Symbol(name)
			return symbols[name]
		if isinstance(e, Sum):
			args = []
			for t in e.terms:
				args.append(SympyBridge.to_sympy(t, symbols))
			return sp.Add(*args, evaluate=False)
		if isinstance(e, Product):
			args = []
			for f in e.factors:
				args.append(SympyBridge.to_sympy(f, symbols))
			return sp.Mul(*args, evaluate=False)
		if isinstance(e, Quotient):
			num = SympyBridge.to_sympy(e.numerator, symbols)
			den = SympyBridge.to_sympy(e.denominator, symbols)
			return sp.Mul(num, sp.Pow(den, -1, evaluate=False), evaluate=False)
		if isinstance(e, Power):
			base = SympyBridge.to_sympy(e.base, symbols)
			exponent = SympyBridge.to_sympy(e.exponent, symbols)
			return sp.Pow(base, exponent, evaluate=False)
		if isinstance(e, Exponential):
			return sp.exp(SympyBridge.to_sympy(e.operand, symbols), evaluate=False)
		if isinstance(e, Logarithm):
			return sp.log(SympyBridge.to_sympy(e.operand, symbols), evaluate=False)
		raise TypeError(f"Unsupported expression node: {type(e).__name__}")

	@staticmethod
	def equivalent(a: Expression, b: Expression) -> bool:
		"""Return True if the two trees are equal as functions according to SymPy."""
		symbols: Dict[str, sp.Symbol] = {}
		lhs = SympyBridge.to_sympy(a, symbols)
		rhs = SympyBridge.to_sympy(b, symbols)
		return sp.simplify(lhs - rhs) == 0


def to_sympy(e: Expression, symbols: Optional[Dict[str, sp.Symbol]] = None) -> sp.Expr:
	"""Proxy to SympyBridge.to_sympy."""
	return SympyBridge.to_sympy(e, symbols)


def equivalent(a: Expression, b: Expression) -> bool:
	"""Proxy to SympyBridge.equivalent."""
	return SympyBridge.equivalent(a, b)
