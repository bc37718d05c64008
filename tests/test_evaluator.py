'''
Parser and evaluation pipeline tests
'''

import math

import regex

from torchcalc.util import DivisionByZeroError, ErrorMarker
from torchcalc.evaluator import Evaluator

from pytest import approx, mark, raises


@mark.parametrize('line, expected', [
    ('2+3*4', 14),
    ('(2+3)*4', 20),
    ('10-4-3', 3),
    ('100/10/5', 2),
    ('2^3^2', 512),
    ('2**3', 8),
    ('-2^2', -4),
    ('2^-1', 0.5),
    ('-5+3', -2),
    ('(-5)', -5),
    ('--5', 5),
    ('7%3', 1),
    ('-7%3', -1),
    ('6÷4×2−1', 2),
    (' 2 +  2 ', 4),
])
def test_arithmetic(line, expected):
    assert Evaluator().evaluate(line) == expected


def test_degree_trigonometry():
    e = Evaluator()
    assert e.evaluate('sin(30)') == approx(0.5, abs=1e-9)
    assert e.evaluate('cos(60)') == approx(0.5, abs=1e-9)
    assert e.evaluate('tan(45)') == approx(1.0, abs=1e-9)


def test_constants():
    e = Evaluator()
    assert e.evaluate('2*π') == approx(6.28318530718, abs=1e-9)
    assert e.evaluate('e') == math.e
    assert e.evaluate('ln(e)') == approx(1.0)


def test_function_argument_arithmetic():
    e = Evaluator()
    assert e.evaluate('sin(30+15)') == approx(math.sqrt(2) / 2)
    assert e.evaluate('log(1000)-1') == approx(2.0)
    assert e.evaluate('√(2)^2') == approx(2.0)


def test_nested_functions():
    e = Evaluator()
    assert e.evaluate('sin(log(10))') == approx(math.sin(math.radians(1)))
    assert e.evaluate('sqrt(sqrt(16))') == approx(2.0)
    assert e.evaluate('((sqrt(9)))*2') == approx(6.0)


def test_negative_function_value():
    e = Evaluator()
    assert e.evaluate('2^cos(180)') == approx(0.5)


@mark.parametrize('line', ['5/0', '5%0', '0^-1', '1/(2-2)'])
def test_division_by_zero(line):
    result = Evaluator().evaluate(line)
    assert isinstance(result, ErrorMarker)
    assert result.reason == 'DivisionByZero'


@mark.parametrize('line', ['log(-1)', 'ln(0)', 'sqrt(-1)', '(-8)^(1/3)',
                           '10^400', 'tan(90)'])
def test_domain_errors(line):
    assert Evaluator().evaluate(line).reason == 'DomainError'


@mark.parametrize('line', ['2+', '(2+3', '2+3)', '()', '*3', '2π', '2(3)',
                           'sin 30', 'sin()', '1.2.3+1', '2 3'])
def test_syntax_errors(line):
    assert Evaluator().evaluate(line).reason == 'SyntaxError'


@mark.parametrize('line', ['2&3', 'x+1', 'cot(45)'])
def test_unknown_tokens(line):
    assert Evaluator().evaluate(line).reason == 'UnknownToken'


def test_compute_raises():
    with raises(DivisionByZeroError,
                match=regex.escape('Division of 5.0 by zero')):
        Evaluator().compute('5/0')


def test_tokens_after_resolution():
    e = Evaluator()
    assert [t.value for t in e.tokens('sqrt(4)×3')] == ['(', 2.0, ')', '*',
                                                         3.0]


def test_long_run_of_signs():
    e = Evaluator()
    assert e.evaluate('-' * 1000 + '5') == 5
    assert e.evaluate('-' * 1001 + '5') == -5


@mark.parametrize('line', ['(' * 1000 + '1' + ')' * 1000,
                           'sin(' * 1000 + '1' + ')' * 1000])
def test_too_deeply_nested(line):
    result = Evaluator().evaluate(line)
    assert result == ErrorMarker('SyntaxError', 'Expression too deeply nested')


def test_moderate_nesting():
    assert Evaluator().evaluate('(' * 50 + '1' + ')' * 50) == 1
