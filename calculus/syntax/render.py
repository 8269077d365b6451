"""
Text and LaTeX rendering of expression trees.

to_text() emits the infix syntax accepted by the parser, parenthesizing only
where the grammar needs it, so parse(to_text(t)) == t for canonical trees:
  • sum terms joined by " + " (negative literals stay signed: "x + -2")
  • product factors joined by " * "; Sum, Product and Quotient factors are parenthesized
  • quotient "n / d"; Sum or Quotient numerators and compound denominators are parenthesized
  • power "b^e"; operands other than variables, non-negative integers and function calls are parenthesized
  • exp(...) and log(...)

to_latex() is for display only: \\cdot, \\frac{}{}, e^{...}, \\ln\\left(...\\right),
and a leading minus sign for negative terms of a sum.
"""

from __future__ import annotations
from typing import List

from calculus.expression.tree import (
	Expression, Sum, Product, Quotient, Power, Exponential, Logarithm, Variable, Integer,
	int_to_digits, rational_value,
)


class Renderer:
	"""Deterministic serializers for expression trees."""

	@staticmethod
	def _is_atom(e: Expression) -> bool:
		"""Nodes that parse as a primary without parentheses."""
		if isinstance(e, Integer):
			return e.value >= 0
		return isinstance(e, (Variable, Exponential, Logarithm))

	@staticmethod
	def _wrap(s: str) -> str:
		return "(" + s + ")"

	@staticmethod
	def to_text(e: Expression) -> str:
		"""Render infix text accepted by the parser."""
		if isinstance(e, Integer):
			return int_to_digits(e.value)
		if isinstance(e, Variable):
			return str(e.id)
		if isinstance(e, Sum):
			if not e.terms:
				return "0"
			parts: List[str] = []
			for t in e.terms:
				s = Renderer.to_text(t)
				if isinstance(t, Sum):
					s = Renderer._wrap(s)
				parts.append(s)
			return " + ".join(parts)
		if isinstance(e, Product):
			if not e.factors:
				return "1"
			parts = []
			for f in e.factors:
				s = Renderer.to_text(f)
				if isinstance(f, (Sum, Product, Quotient)):
					s = Renderer._wrap(s)
				parts.append(s)
			return " * ".join(parts)
		if isinstance(e, Quotient):
			num = Renderer.to_text(e.numerator)
			if isinstance(e.numerator, (Sum, Quotient)):
				num = Renderer._wrap(num)
			den = Renderer.to_text(e.denominator)
			if isinstance(e.denominator, (Sum, Product, Quotient)):
				den = Renderer._wrap(den)
			return num + " / " + den
		if isinstance(e, Power):
			base = Renderer.to_text(e.base)
			if not Renderer._is_atom(e.base):
				base = Renderer._wrap(base)
			exponent = Renderer.to_text(e.exponent)
			if not Renderer._is_atom(e.exponent):
				exponent = Renderer._wrap(exponent)
			return base + "^" + exponent
		if isinstance(e, Exponential):
			return "exp(" + Renderer.to_text(e.operand) + ")"
		if isinstance(e, Logarithm):
			return "log(" + Renderer.to_text(e.operand) + ")"
		raise TypeError(f"Unsupported expression node: {type(e).__name__}")

	@staticmethod
	def _negated(e: Expression):
		"""Return the positive counterpart of a negative term, or None."""
		if isinstance(e, Integer) and e.value < 0:
			return Integer(-e.value)
		q = rational_value(e)
		if isinstance(e, Quotient) and q is not None and q < 0:
			return Quotient(Integer(-e.numerator.value), e.denominator)
		if isinstance(e, Product) and e.factors:
			lead = e.factors[0]
			if isinstance(lead, Integer) and lead.value < 0:
				if lead.value == -1:
					rest = e.factors[1:]
					if len(rest) == 1:
						return rest[0]
					return Product(rest)
				return Product((Integer(-lead.value),) + e.factors[1:])
		return None

	@staticmethod
	def to_latex(e: Expression) -> str:
		"""Render LaTeX for display."""
		if isinstance(e, Integer):
			return int_to_digits(e.value)
		if isinstance(e, Variable):
			return str(e.id)
		if isinstance(e, Sum):
			if not e.terms:
				return "0"
			out = ""
			for i, t in enumerate(e.terms):
				pos = Renderer._negated(t)
				if pos is not None:
					s = Renderer.to_latex(pos)
					if isinstance(pos, Sum):
						s = "\\left(" + s + "\\right)"
					out += ("-" if i == 0 else " - ") + s
				else:
					s = Renderer.to_latex(t)
					if isinstance(t, Sum):
						s = "\\left(" + s + "\\right)"
					out += s if i == 0 else " + " + s
			return out
		if isinstance(e, Product):
			if not e.factors:
				return "1"
			pos = Renderer._negated(e)
			if pos is not None:
				s = Renderer.to_latex(pos)
				if isinstance(pos, Sum):
					s = "\\left(" + s + "\\right)"
				return "-" + s
			parts = []
			for f in e.factors:
				s = Renderer.to_latex(f)
				if isinstance(f, (Sum, Product)) or (isinstance(f, Integer) and f.value < 0 and parts):
					s = "\\left(" + s + "\\right)"
				parts.append(s)
			return " \\cdot ".join(parts)
		if isinstance(e, Quotient):
			return "\\frac{" + Renderer.to_latex(e.numerator) + "}{" + Renderer.to_latex(e.denominator) + "}"
		if isinstance(e, Power):
			base = Renderer.to_latex(e.base)
			if not Renderer._is_atom(e.base) or isinstance(e.base, (Exponential, Logarithm)):
				base = "\\left(" + base + "\\right)"
			return base + "^{" + Renderer.to_latex(e.exponent) + "}"
		if isinstance(e, Exponential):
			return "e^{" + Renderer.to_latex(e.operand) + "}"
		if isinstance(e, Logarithm):
			return "\\ln\\left(" + Renderer.to_latex(e.operand) + "\\right)"
		raise TypeError(f"Unsupported expression node: {type(e).__name__}")


def to_text(e: Expression) -> str:
	"""Proxy to Renderer.to_text."""
	return Renderer.to_text(e)


def to_latex(e: Expression) -> str:
	"""Proxy to Renderer.to_latex."""
	return Renderer.to_latex(e)
