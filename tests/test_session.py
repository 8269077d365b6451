import numpy as np
import pytest

from calculus import Session
from calculus.expression import Sum, Product, Power, Variable, Integer, ZERO
from calculus.pipeline.config import EngineConfig
from calculus.syntax.parser import ParseError

x = Variable("x")


def test_differentiate_text():
	session = Session()
	result = session.differentiate("x^3", "x")
	assert result.ok
	assert result.message == "ok"
	assert result.formula == Power(x, Integer(3))
	assert result.derivative == Product((Integer(3), Power(x, Integer(2))))
	assert result.text == "x^3"
	assert result.derivative_text == "3 * x^2"
	assert result.latex == "x^{3}"
	assert result.derivative_latex == "3 \\cdot x^{2}"


def test_formula_is_reduced_before_differentiation():
	result = Session().differentiate("x * x + 0", "x")
	assert result.formula == Power(x, Integer(2))
	assert result.derivative == Product((Integer(2), x))


def test_variable_is_trimmed():
	result = Session().differentiate("x^2 + y", "  x \n")
	assert result.ok
	assert result.derivative == Product((Integer(2), x))


def test_other_variables_are_constants():
	result = Session().differentiate("y^2", "x")
	assert result.ok
	assert result.derivative == ZERO


def test_invalid_formula(capsys):
	result = Session().differentiate("x +", "x")
	assert not result.ok
	assert result.formula is None
	assert result.message.startswith("parse_error")
	assert "differentiate: invalid expression" in capsys.readouterr().out


@pytest.mark.parametrize("variable", ["", "   ", "2x", "x y"])
def test_invalid_variable(variable):
	result = Session().differentiate("x", variable)
	assert not result.ok
	assert result.message.startswith("invalid_variable")


def test_namespace_is_per_session():
	first = Session()
	first.differentiate("a + b", "b")
	second = Session()
	second.differentiate("b", "b")
	assert first.namespace.names() == ("a", "b")
	assert second.namespace.names() == ("b",)


def test_parse_raises():
	with pytest.raises(ParseError):
		Session().parse("(x")


def test_reduce_uses_config():
	session = Session(EngineConfig(max_fold_exponent=3))
	assert session.reduce(Power(Integer(2), Integer(4))) == Power(Integer(2), Integer(4))
	assert session.reduce(Sum((x, x))) == Product((Integer(2), x))


def test_evaluate_derivative():
	session = Session()
	result = session.differentiate("log(x)", "x")
	out = session.evaluate(result.derivative, "x", [-1.0, 0.0, 2.0])
	assert out[0] == -1.0
	assert not np.isfinite(out[1])
	assert out[2] == 0.5


def test_long_integer_coefficient():
	result = Session().differentiate("10^5000 * x", "x")
	assert result.ok
	assert result.derivative == Integer(10 ** 5000)
	assert result.derivative_text == "1" + "0" * 5000


def test_long_integer_literal_input():
	result = Session().differentiate("1" * 5000 + " * x^2", "x")
	assert result.ok
	assert result.text == "1" * 5000 + " * x^2"


def test_deep_nesting_is_reported(capsys):
	result = Session().differentiate("(" * 300 + "x" + ")" * 300, "x")
	assert not result.ok
	assert result.message.startswith("parse_error")
	assert "nested too deeply" in capsys.readouterr().out


def test_absent_variable_is_not_interned():
	session = Session()
	result = session.differentiate("x^2", "y")
	assert result.derivative == ZERO
	assert session.namespace.names() == ("x",)
	assert "y" not in session.namespace
