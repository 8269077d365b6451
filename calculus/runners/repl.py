"""
Line-oriented front end: read a formula, read a variable, print the parsed and differentiated forms.

Interactive by default; --formula/--variable run once and exit non-zero on invalid input.
"""

from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from calculus.pipeline.config import DerivativeResult, GraphConfig
from calculus.pipeline.session import Session
from calculus.plotting.graph import save_graph


def report(result: DerivativeResult, latex: bool, out: TextIO) -> None:
	"""Print one result the way the interactive loop shows it."""
	if not result.ok:
		out.write("\nInvalid expression\n\n\n")
		return
	if latex:
		out.write(f"\nParsed: {result.latex}\n\n")
		out.write(f"Differentiated: {result.derivative_latex}\n\n\n")
	else:
		out.write(f"\nParsed: {result.text}\n\n")
		out.write(f"Differentiated: {result.derivative_text}\n\n\n")


def run_once(session: Session, formula: str, variable: str, args: argparse.Namespace, out: TextIO) -> int:
	result = session.differentiate(formula, variable)
	report(result, args.latex, out)
	if not result.ok:
		return 1
	if args.plot:
		path = save_graph(
			result.formula,
			result.derivative,
			variable.strip(),
			Path(args.plot),
			GraphConfig(scale=args.scale),
		)
		out.write(f"Graph written to {path}\n")
	return 0


def run_interactive(session: Session, args: argparse.Namespace, inp: TextIO, out: TextIO) -> int:
	while True:
		out.write("differentiate expression: ")
		out.flush()
		formula = inp.readline()
		if formula == "":
			break
		out.write("with respect to variable: ")
		out.flush()
		variable = inp.readline()
		if variable == "":
			break
		result = session.differentiate(formula.strip(), variable.strip())
		report(result, args.latex, out)
	out.write("\n")
	return 0


def build_parser() -> argparse.ArgumentParser:
	ap = argparse.ArgumentParser(description="Symbolic differentiation of algebraic formulas.")
	ap.add_argument("--formula", type=str, default=None, help="Formula to differentiate (one-shot mode).")
	ap.add_argument("--variable", type=str, default=None, help="Variable to differentiate with respect to.")
	ap.add_argument("--latex", action="store_true", help="Print LaTeX instead of plain text.")
	ap.add_argument("--plot", type=str, default=None, help="Write a graph of the formula and its derivative to this path.")
	ap.add_argument("--scale", type=float, default=10.0, help="Half-width of the square graph window.")
	return ap


def main(argv: Optional[List[str]] = None, inp: TextIO = sys.stdin, out: TextIO = sys.stdout) -> int:
	args = build_parser().parse_args(argv)
	session = Session()
	if args.formula is not None or args.variable is not None:
		if args.formula is None or args.variable is None:
			print("main: --formula and --variable must be given together")
			return 2
		return run_once(session, args.formula, args.variable, args, out)
	return run_interactive(session, args, inp, out)


if __name__ == "__main__":
	sys.exit(main())
