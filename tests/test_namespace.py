import threading

import pytest

from calculus.expression import Namespace, Sum, Power, Logarithm, Variable, Integer
from calculus.syntax.parser import parse


def test_intern_assigns_indices_in_first_seen_order():
	ns = Namespace()
	tree = parse("y + x^y")
	assert ns.intern(tree) == Sum((Variable(0), Power(Variable(1), Variable(0))))
	assert ns.names() == ("y", "x")
	assert len(ns) == 2


def test_intern_reuses_indices_across_trees():
	ns = Namespace()
	ns.intern(parse("x"))
	assert ns.intern(parse("log(z) + x")) == Sum((Logarithm(Variable(1)), Variable(0)))
	assert ns.index_of("x") == 0
	assert "z" in ns


def test_resolve_inverts_intern():
	ns = Namespace()
	tree = parse("a * b / (c + 2)")
	assert ns.resolve(ns.intern(tree)) == tree


def test_unknown_index_fails():
	ns = Namespace()
	with pytest.raises(LookupError):
		ns.name_of(0)
	with pytest.raises(LookupError):
		ns.resolve(Variable(3))


def test_integers_are_untouched():
	ns = Namespace()
	assert ns.intern(Integer(5)) == Integer(5)
	assert len(ns) == 0


def test_concurrent_interning_is_consistent():
	ns = Namespace()
	names = [f"v{i}" for i in range(50)]
	results = []

	def work():
		results.append(tuple(ns.index_of(n) for n in names))

	threads = [threading.Thread(target=work) for _ in range(8)]
	for t in threads:
		t.start()
	for t in threads:
		t.join()
	assert len(ns) == 50
	assert len(set(results)) == 1
	assert sorted(results[0]) == list(range(50))
