"""
Expression trees and variable interning.

Public API re-export:
	node types, traversal helpers, Namespace
"""

from .tree import (
	Expression, Sum, Product, Quotient, Power, Exponential, Logarithm, Variable, Integer,
	ZERO, ONE, MINUS_ONE,
	negate, children, walk, variables, map_ids, rational_value, from_rational,
	int_to_digits, int_from_digits,
)
from .namespace import Namespace

__all__ = [
	"Expression", "Sum", "Product", "Quotient", "Power", "Exponential", "Logarithm",
	"Variable", "Integer", "ZERO", "ONE", "MINUS_ONE",
	"negate", "children", "walk", "variables", "map_ids", "rational_value", "from_rational",
	"int_to_digits", "int_from_digits",
	"Namespace",
]
