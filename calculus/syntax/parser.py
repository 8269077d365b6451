"""
Recursive-descent parser for algebraic formulas.

Grammar, loosest to tightest binding:

	additive       := ["-"] multiplicative (("+" | "-") multiplicative)*
	multiplicative := power (("*" | "/") power)*
	power          := primary ["^" primary]
	primary        := ("exp" | "log" | "ln") "(" additive ")"
	                | ["-"] digits
	                | identifier
	                | "(" additive ")"

Notes
-----
- Subtraction and a leading unary minus become Product((Integer(-1), term)).
  A minus directly followed by digits at the start of a term is part of the
  integer literal instead, so "-2 * x" is Product((Integer(-2), x)).
- "*" chains gather into one flat Product; "/" is left-associative and closes
  everything gathered so far into a Quotient numerator:
  a*b/c → Quotient(Product(a, b), c), a/b*c → Product(Quotient(a, b), c).
- "^" takes a single primary on each side, so a^b^c needs parentheses.
- Whitespace is optional everywhere. The whole input must be consumed.
- Nesting deeper than the interpreter stack allows is a ParseError.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Optional

from calculus.expression.tree import (
	Expression, Sum, Product, Quotient, Power, Exponential, Logarithm, Variable, Integer,
	int_from_digits, negate,
)


class ParseError(ValueError):
	"""The source text is not a well-formed formula."""


_TOKEN = re.compile(r"\s*(?:(?P<number>[0-9]+)|(?P<name>[^\W\d]\w*)|(?P<op>[-+*/^()]))")

FUNCTIONS = {
	"exp": Exponential,
	"log": Logarithm,
	"ln": Logarithm,
}


@dataclass(frozen=True)
class Token:
	kind: str
	text: str


def tokenize(text: str) -> List[Token]:
	"""Split source text into number, name and operator tokens."""
	if not isinstance(text, str):
		raise ParseError(f"expected a string, got {type(text).__name__}")
	s = text.rstrip()
	out: List[Token] = []
	i = 0
	n = len(s)
	while i < n:
		m = _TOKEN.match(s, i)
		if m is None:
			raise ParseError("unexpected character")
		kind = m.lastgroup
		out.append(Token(kind, m.group(kind)))
		i = m.end()
	return out


class Parser:
	"""Single-use parser over the tokens of one formula."""

	def __init__(self, text: str) -> None:
		self.tokens = tokenize(text)
		self.pos = 0

	def _peek(self, offset: int = 0) -> Optional[Token]:
		k = self.pos + offset
		if k < len(self.tokens):
			return self.tokens[k]
		return None

	def _at(self, text: str, offset: int = 0) -> bool:
		tok = self._peek(offset)
		return tok is not None and tok.kind == "op" and tok.text == text

	def _expect(self, text: str) -> None:
		if not self._at(text):
			raise ParseError(f"expected '{text}'")
		self.pos += 1

	def _starts_literal(self) -> bool:
		"""True when a '-' at the cursor introduces a signed integer literal."""
		nxt = self._peek(1)
		return self._at("-") and nxt is not None and nxt.kind == "number"

	def _additive(self) -> Expression:
		negative = False
		if self._at("-") and not self._starts_literal():
			self.pos += 1
			negative = True
		first = self._multiplicative()
		terms: List[Expression] = [negate(first) if negative else first]
		while self._at("+") or self._at("-"):
			op = self._peek().text
			self.pos += 1
			term = self._multiplicative()
			if op == "-":
				term = negate(term)
			terms.append(term)
		if len(terms) == 1:
			return terms[0]
		return Sum(tuple(terms))

	def _multiplicative(self) -> Expression:
		factors: List[Expression] = [self._power()]
		while self._at("*") or self._at("/"):
			op = self._peek().text
			self.pos += 1
			operand = self._power()
			if op == "*":
				factors.append(operand)
			else:
				if len(factors) == 1:
					numerator = factors[0]
				else:
					numerator = Product(tuple(factors))
				factors = [Quotient(numerator, operand)]
		if len(factors) == 1:
			return factors[0]
		return Product(tuple(factors))

	def _power(self) -> Expression:
		base = self._primary()
		if self._at("^"):
			self.pos += 1
			return Power(base, self._primary())
		return base

	def _primary(self) -> Expression:
		tok = self._peek()
		if tok is None:
			raise ParseError("unexpected end of input")
		if tok.kind == "number":
			self.pos += 1
			return Integer(int_from_digits(tok.text))
		if self._starts_literal():
			self.pos += 2
			return Integer(-int_from_digits(self._peek(-1).text))
		if tok.kind == "name":
			self.pos += 1
			if tok.text in FUNCTIONS and self._at("("):
				self.pos += 1
				operand = self._additive()
				self._expect(")")
				return FUNCTIONS[tok.text](operand)
			return Variable(tok.text)
		if self._at("("):
			self.pos += 1
			inner = self._additive()
			self._expect(")")
			return inner
		raise ParseError(f"unexpected token '{tok.text}'")

	def parse(self) -> Expression:
		"""Parse the whole input as one additive expression."""
		if not self.tokens:
			raise ParseError("empty input")
		try:
			e = self._additive()
		except RecursionError:
			raise ParseError("expression nested too deeply") from None
		if self.pos != len(self.tokens):
			raise ParseError(f"unexpected token '{self.tokens[self.pos].text}'")
		return e


def parse(text: str) -> Expression:
	"""Parse source text into a name-keyed expression tree; raise ParseError on failure."""
	return Parser(text).parse()
