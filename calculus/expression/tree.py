"""
Expression trees for the differentiation engine.

Node kinds (immutable, structurally compared and hashable):
  • Sum(terms)                 — n-ary addition, Sum(()) is 0
  • Product(factors)           — n-ary multiplication, Product(()) is 1
  • Quotient(numerator, denominator)
  • Power(base, exponent)
  • Exponential(operand)       — e ** operand
  • Logarithm(operand)         — natural logarithm
  • Variable(id)               — id is any hashable identity (a name, an interned index)
  • Integer(value)             — arbitrary precision

There is no subtraction node: a - b is Sum((a, negate(b))) and negate(b) is
Product((Integer(-1), b)).
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Callable, Hashable, Iterator, Optional, Set, Tuple


class Expression:
	"""Base class of every tree node."""

	__slots__ = ()


@dataclass(frozen=True)
class Sum(Expression):
	terms: Tuple[Expression, ...] = ()

	def __post_init__(self) -> None:
		if not isinstance(self.terms, tuple):
			object.__setattr__(self, "terms", tuple(self.terms))


@dataclass(frozen=True)
class Product(Expression):
	factors: Tuple[Expression, ...] = ()

	def __post_init__(self) -> None:
		if not isinstance(self.factors, tuple):
			object.__setattr__(self, "factors", tuple(self.factors))


@dataclass(frozen=True)
class Quotient(Expression):
	numerator: Expression
	denominator: Expression


@dataclass(frozen=True)
class Power(Expression):
	base: Expression
	exponent: Expression


@dataclass(frozen=True)
class Exponential(Expression):
	operand: Expression


@dataclass(frozen=True)
class Logarithm(Expression):
	operand: Expression


@dataclass(frozen=True)
class Variable(Expression):
	id: Hashable


@dataclass(frozen=True)
class Integer(Expression):
	value: int

	def __post_init__(self) -> None:
		if isinstance(self.value, bool) or not isinstance(self.value, int):
			raise TypeError(f"Integer expects an int, got {type(self.value).__name__}")


ZERO = Integer(0)
ONE = Integer(1)
MINUS_ONE = Integer(-1)


def negate(e: Expression) -> Expression:
	"""Return -e as a product with the literal -1."""
	return Product((MINUS_ONE, e))


def children(e: Expression) -> Tuple[Expression, ...]:
	"""Return the direct subexpressions of a node in order."""
	if isinstance(e, Sum):
		return e.terms
	if isinstance(e, Product):
		return e.factors
	if isinstance(e, Quotient):
		return (e.numerator, e.denominator)
	if isinstance(e, Power):
		return (e.base, e.exponent)
	if isinstance(e, (Exponential, Logarithm)):
		return (e.operand,)
	return ()


def walk(e: Expression) -> Iterator[Expression]:
	"""Yield every node of the tree in pre-order."""
	stack = [e]
	while stack:
		node = stack.pop()
		yield node
		stack.extend(reversed(children(node)))


def variables(e: Expression) -> Set[Hashable]:
	"""Return the set of variable identities occurring in the tree."""
	out: Set[Hashable] = set()
	for node in walk(e):
		if isinstance(node, Variable):
			out.add(node.id)
	return out


def map_ids(e: Expression, fn: Callable[[Hashable], Hashable]) -> Expression:
	"""
	Rebuild the tree with every variable identity replaced by fn(identity).
	Used to move between name-keyed and index-keyed trees.
	"""
	if isinstance(e, Variable):
		return Variable(fn(e.id))
	if isinstance(e, Integer):
		return e
	if isinstance(e, Sum):
		return Sum(tuple(map_ids(t, fn) for t in e.terms))
	if isinstance(e, Product):
		return Product(tuple(map_ids(f, fn) for f in e.factors))
	if isinstance(e, Quotient):
		return Quotient(map_ids(e.numerator, fn), map_ids(e.denominator, fn))
	if isinstance(e, Power):
		return Power(map_ids(e.base, fn), map_ids(e.exponent, fn))
	if isinstance(e, Exponential):
		return Exponential(map_ids(e.operand, fn))
	if isinstance(e, Logarithm):
		return Logarithm(map_ids(e.operand, fn))
	raise TypeError(f"Unsupported expression node: {type(e).__name__}")


def rational_value(e: Expression) -> Optional[Fraction]:
	"""
	Return the exact value of a rational literal (an Integer, or a Quotient of
	two Integers with a non-zero denominator), else None.
	"""
	if isinstance(e, Integer):
		return Fraction(e.value)
	if isinstance(e, Quotient):
		num, den = e.numerator, e.denominator
		if isinstance(num, Integer) and isinstance(den, Integer) and den.value != 0:
			return Fraction(num.value, den.value)
	return None


def from_rational(q: Fraction) -> Expression:
	"""Build the canonical literal for an exact rational."""
	if q.denominator == 1:
		return Integer(int(q.numerator))
	return Quotient(Integer(int(q.numerator)), Integer(int(q.denominator)))


_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10 ** _CHUNK_DIGITS


def int_to_digits(n: int) -> str:
	"""Decimal text of an int of any size (no interpreter digit limit)."""
	if n < 0:
		return "-" + int_to_digits(-n)
	chunks = []
	while n >= _CHUNK_BASE:
		n, r = divmod(n, _CHUNK_BASE)
		chunks.append(str(r).zfill(_CHUNK_DIGITS))
	chunks.append(str(n))
	return "".join(reversed(chunks))


def int_from_digits(s: str) -> int:
	"""Inverse of int_to_digits; accepts an optional leading '-'."""
	if s.startswith("-"):
		return -int_from_digits(s[1:])
	if not s or not s.isascii() or not s.isdigit():
		raise ValueError(f"not a decimal integer: {s[:20]!r}")
	head = len(s) % _CHUNK_DIGITS or _CHUNK_DIGITS
	value = int(s[:head])
	for i in range(head, len(s), _CHUNK_DIGITS):
		value = value * _CHUNK_BASE + int(s[i:i + _CHUNK_DIGITS])
	return value
