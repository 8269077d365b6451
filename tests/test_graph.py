import numpy as np

from calculus.expression import Quotient, Power, Variable, Integer
from calculus.pipeline.config import GraphConfig
from calculus.plotting.graph import curve_segments, sample_domain, save_graph, segments

x = Variable("x")


def test_sample_domain():
	xs = sample_domain(GraphConfig(scale=1.0, vertex_count=4))
	np.testing.assert_allclose(xs, [-1.0, -0.5, 0.0, 0.5])


def test_segments_break_at_gaps_and_out_of_range():
	xs = np.arange(6, dtype=np.float64)
	ys = np.array([1.0, np.nan, 2.0, 3.0, np.inf, 100.0])
	out = segments(xs, ys, -10.0, 10.0)
	assert len(out) == 2
	np.testing.assert_array_equal(out[0][0], [0.0])
	np.testing.assert_array_equal(out[1][0], [2.0, 3.0])
	np.testing.assert_array_equal(out[1][1], [2.0, 3.0])


def test_segments_of_all_gaps():
	assert segments(np.arange(3), np.full(3, np.nan), -1.0, 1.0) == []


def test_pole_splits_the_curve():
	out = curve_segments(Quotient(Integer(1), x), "x", GraphConfig())
	assert len(out) == 2
	assert out[0][0][-1] < 0.0 < out[1][0][0]


def test_free_variable_draws_nothing(capsys):
	assert curve_segments(Variable("y"), "x", GraphConfig()) == []
	assert "curve_segments" in capsys.readouterr().out


def test_save_graph_writes_image(tmp_path):
	path = save_graph(Power(x, Integer(2)), Quotient(Integer(1), x), "x", tmp_path / "graph.png", GraphConfig(vertex_count=50))
	assert path.exists()
	assert path.stat().st_size > 0
