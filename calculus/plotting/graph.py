"""
Graph sampling and image export for a formula and its derivative.

  • sample_domain(config): vertex_count evenly spaced x values on [x_min, x_max)
  • segments(xs, ys, y_min, y_max): maximal runs of finite in-range points
  • save_graph(formula, derivative, variable, path, config): draw both curves with matplotlib

A point whose value is nan, infinite, or outside [y_min, y_max] breaks the curve.
"""

from __future__ import annotations
from pathlib import Path
from typing import Hashable, List, Optional, Tuple

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from calculus.engine.evaluate import EvaluationError, evaluate
from calculus.expression.tree import Expression
from calculus.pipeline.config import GraphConfig

Segment = Tuple[np.ndarray, np.ndarray]


def sample_domain(config: GraphConfig) -> np.ndarray:
	"""Return the x samples for a graph window."""
	n = max(1, int(config.vertex_count))
	step = (config.x_max - config.x_min) / float(n)
	return config.x_min + step * np.arange(n, dtype=np.float64)


def segments(xs: np.ndarray, ys: np.ndarray, y_min: float, y_max: float) -> List[Segment]:
	"""Split sampled points into drawable runs, breaking at undefined or out-of-range values."""
	xs64 = np.asarray(xs, dtype=np.float64)
	ys64 = np.asarray(ys, dtype=np.float64)
	keep = np.isfinite(ys64) & (ys64 >= y_min) & (ys64 <= y_max)
	out: List[Segment] = []
	start: Optional[int] = None
	for i, ok in enumerate(keep):
		if ok and start is None:
			start = i
		elif not ok and start is not None:
			out.append((xs64[start:i], ys64[start:i]))
			start = None
	if start is not None:
		out.append((xs64[start:], ys64[start:]))
	return out


def curve_segments(e: Expression, variable: Hashable, config: GraphConfig) -> List[Segment]:
	"""Evaluate e over the graph window; a tree with other free variables yields no segments."""
	xs = sample_domain(config)
	try:
		ys = evaluate(e, variable, xs)
	except EvaluationError as exc:
		print(f"curve_segments: {exc}; drawing nothing")
		return []
	return segments(xs, ys, config.y_min, config.y_max)


def save_graph(
	formula: Expression,
	derivative: Expression,
	variable: Hashable,
	path: str | Path,
	config: GraphConfig | None = None,
) -> Path:
	"""
	Draw a formula (blue) and its derivative (green) inside the configured window and write the image.
	"""
	cfg = config or GraphConfig()
	out = Path(path)
	fig, ax = plt.subplots(1, 1, figsize=(6, 6))
	for seg_x, seg_y in curve_segments(formula, variable, cfg):
		ax.plot(seg_x, seg_y, color="tab:blue", linewidth=1.5)
	for seg_x, seg_y in curve_segments(derivative, variable, cfg):
		ax.plot(seg_x, seg_y, color="tab:green", linewidth=1.5)
	ax.set_xlim(cfg.x_min, cfg.x_max)
	ax.set_ylim(cfg.y_min, cfg.y_max)
	ax.axhline(0.0, color="black", linewidth=0.5)
	ax.axvline(0.0, color="black", linewidth=0.5)
	ax.grid(True, alpha=0.3)
	fig.savefig(out, dpi=cfg.dpi, bbox_inches="tight")
	plt.close(fig)
	return out
