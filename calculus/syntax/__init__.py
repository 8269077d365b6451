"""
Formula syntax: parsing source text and rendering trees back to text or LaTeX.
"""

from .parser import Parser, ParseError, parse, tokenize
from .render import Renderer, to_text, to_latex

__all__ = [
	"Parser", "ParseError", "parse", "tokenize",
	"Renderer", "to_text", "to_latex",
]
