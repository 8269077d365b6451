"""
parse -> intern -> reduce -> differentiate -> reduce -> resolve -> render.
"""

from __future__ import annotations
from typing import Hashable, Optional, Sequence

import numpy as np

from calculus.engine.differentiate import Differentiator
from calculus.engine.evaluate import Evaluator
from calculus.engine.normalize import Normalizer
from calculus.expression.namespace import Namespace
from calculus.expression.tree import ZERO, Expression
from calculus.pipeline.config import DerivativeResult, EngineConfig
from calculus.syntax.parser import ParseError, Parser
from calculus.syntax.render import Renderer


class Session:
	"""Public facade for one user session; owns the variable interning table."""

	def __init__(self, config: Optional[EngineConfig] = None) -> None:
		self.config = config or EngineConfig()
		self.namespace = Namespace()
		self.norm = Normalizer(self.config)
		self.diff = Differentiator()

	def parse(self, text: str) -> Expression:
		"""Parse source text into a name-keyed tree; raise ParseError on failure."""
		return Parser(text).parse()

	def reduce(self, e: Expression) -> Expression:
		"""Return the canonical normal form."""
		return self.norm.reduce(e)

	def derivative(self, e: Expression, variable: str) -> Expression:
		"""
		Return the reduced derivative of a name-keyed tree. Identities are interned
		for the engine pass and resolved back to names afterwards.
		"""
		interned = self.reduce(self.namespace.intern(e))
		if variable not in self.namespace:
			return ZERO
		target = self.namespace.index_of(variable)
		d = self.reduce(self.diff.differentiate(interned, target))
		return self.namespace.resolve(d)

	def differentiate(self, text: str, variable: str) -> DerivativeResult:
		"""
		Differentiate a formula given as text with respect to a named variable.
		"""
		name = (variable or "").strip()
		if name == "":
			print("differentiate: variable name is empty")
			return DerivativeResult(False, None, None, "invalid_variable:empty")
		if not name.isidentifier():
			print(f"differentiate: variable name is not an identifier ({name!r})")
			return DerivativeResult(False, None, None, "invalid_variable:not_identifier")
		try:
			parsed = self.parse(text)
		except ParseError as e:
			print(f"differentiate: invalid expression ({e})")
			return DerivativeResult(False, None, None, f"parse_error:{e}")

		try:
			formula = self.reduce(parsed)
			d = self.derivative(formula, name)
		except RecursionError:
			print("differentiate: expression nested too deeply")
			return DerivativeResult(False, None, None, "depth_error:nested too deeply")
		return DerivativeResult(
			ok=True,
			formula=formula,
			derivative=d,
			message="ok",
			text=Renderer.to_text(formula),
			derivative_text=Renderer.to_text(d),
			latex=Renderer.to_latex(formula),
			derivative_latex=Renderer.to_latex(d),
		)

	def evaluate(self, e: Expression, variable: Hashable, samples: Sequence[float]) -> np.ndarray:
		"""Evaluate a tree over samples of one variable; raise EvaluationError on other free variables."""
		return Evaluator.evaluate(e, variable, samples)
