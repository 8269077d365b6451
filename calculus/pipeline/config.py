"""
Engine configuration and typed containers for the differentiation pipeline.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from calculus.expression.tree import Expression


@dataclass(frozen=True)
class EngineConfig:
	"""
	Bounds for the normalizer.

	  • max_passes: upper bound on reduction passes before the fixpoint loop stops
	  • max_fold_exponent: largest integer exponent folded into an exact Integer
	"""
	max_passes: int = 64
	max_fold_exponent: int = 2 ** 32 - 1


@dataclass(frozen=True)
class GraphConfig:
	"""
	Sampling window for graph export. The window is the square [-scale, scale]².
	"""
	scale: float = 10.0
	vertex_count: int = 500
	dpi: int = 100

	@property
	def x_min(self) -> float:
		return -float(self.scale)

	@property
	def x_max(self) -> float:
		return float(self.scale)

	@property
	def y_min(self) -> float:
		return -float(self.scale)

	@property
	def y_max(self) -> float:
		return float(self.scale)


@dataclass(frozen=True)
class DerivativeResult:
	"""
	Immutable container for one differentiation request and its rendered forms.
	"""
	ok: bool
	formula: Optional[Expression]
	derivative: Optional[Expression]
	message: str
	text: str = ""
	derivative_text: str = ""
	latex: str = ""
	derivative_latex: str = ""
