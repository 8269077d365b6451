"""
Normalization, differentiation and numeric evaluation of expression trees.

Public API re-export:
	Normalizer, reduce          — canonical normal form
	Differentiator, differentiate — unreduced symbolic derivative
	Evaluator, evaluate, EvaluationError — float64 sampling
"""

from .normalize import Normalizer, reduce
from .differentiate import Differentiator, differentiate
from .evaluate import Evaluator, EvaluationError, evaluate

__all__ = [
	"Normalizer", "reduce",
	"Differentiator", "differentiate",
	"Evaluator", "EvaluationError", "evaluate",
]
