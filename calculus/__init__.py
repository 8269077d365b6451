"""
Miniature computer-algebra pipeline: parse a formula, reduce it to canonical
form, and differentiate it symbolically.

Top-level re-exports keep the public API flat.
"""

from .expression import (
	Expression, Sum, Product, Quotient, Power, Exponential, Logarithm, Variable, Integer,
	negate, map_ids, Namespace,
)
from .engine import Normalizer, reduce, Differentiator, differentiate, Evaluator, EvaluationError, evaluate
from .syntax import ParseError, parse, to_text, to_latex
from .pipeline import EngineConfig, GraphConfig, DerivativeResult
from .pipeline.session import Session

__all__ = [
	"Expression", "Sum", "Product", "Quotient", "Power", "Exponential", "Logarithm",
	"Variable", "Integer", "negate", "map_ids", "Namespace",
	"Normalizer", "reduce", "Differentiator", "differentiate",
	"Evaluator", "EvaluationError", "evaluate",
	"ParseError", "parse", "to_text", "to_latex",
	"EngineConfig", "GraphConfig", "DerivativeResult", "Session",
]
