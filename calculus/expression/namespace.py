"""
Name <-> index interning for variable identities.

A Namespace is owned by one session. intern() turns a name-keyed tree into an
index-keyed one, assigning indices in first-seen order; resolve() goes back.
"""

from __future__ import annotations
import threading
from typing import Dict, List, Tuple

from calculus.expression.tree import Expression, map_ids


class Namespace:
	"""Interning table mapping variable names to dense integer indices."""

	def __init__(self) -> None:
		self._names: List[str] = []
		self._indices: Dict[str, int] = {}
		self._lock = threading.Lock()

	def __len__(self) -> int:
		return len(self._names)

	def __contains__(self, name: object) -> bool:
		return name in self._indices

	def index_of(self, name: str) -> int:
		"""Return the index for name, interning it if unseen."""
		with self._lock:
			idx = self._indices.get(name)
			if idx is None:
				idx = len(self._names)
				self._indices[name] = idx
				self._names.append(name)
			return idx

	def name_of(self, index: int) -> str:
		"""Return the name interned at index."""
		if not isinstance(index, int) or index < 0 or index >= len(self._names):
			raise LookupError(f"Unknown variable index: {index!r}")
		return self._names[index]

	def names(self) -> Tuple[str, ...]:
		return tuple(self._names)

	def intern(self, e: Expression) -> Expression:
		"""Convert a name-keyed tree into an index-keyed tree."""
		return map_ids(e, self.index_of)

	def resolve(self, e: Expression) -> Expression:
		"""Convert an index-keyed tree back into a name-keyed tree."""
		return map_ids(e, self.name_of)
