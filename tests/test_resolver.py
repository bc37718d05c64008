'''
Function resolution tests
'''

from torchcalc.util import DomainError
from torchcalc.resolver import Resolver

from pytest import approx, raises


def test_reduces_to_literal():
    r = Resolver(float)
    assert r.resolve('sqrt(16)+1') == '(4)+1'
    assert r.resolve('log(100)') == '(2)'


def test_argument_handed_to_compute():
    seen = []

    def compute(argument):
        seen.append(argument)
        return 0.0

    r = Resolver(compute)
    assert r.resolve('cos((1+2)*3)') == '(1)'
    assert seen == ['(1+2)*3']


def test_outermost_application_takes_whole_argument():
    seen = []

    def compute(argument):
        seen.append(argument)
        return 1.0

    r = Resolver(compute)
    r.resolve('sin(log(10))')
    assert seen == ['log(10)']


def test_degrees():
    r = Resolver(float)
    assert float(r.resolve('sin(90)').strip('()')) == approx(1.0)


def test_non_positive_logarithms():
    r = Resolver(float)
    for line in 'log(0)', 'log(-1)', 'ln(0)', 'ln(-2.5)':
        with raises(DomainError):
            r.resolve(line)


def test_negative_square_root():
    r = Resolver(float)
    with raises(DomainError, match='sqrt of negative number'):
        r.resolve('sqrt(-4)')


def test_tangent_asymptote():
    r = Resolver(float)
    for line in 'tan(90)', 'tan(-90)', 'tan(270)':
        with raises(DomainError):
            r.resolve(line)


def test_no_application():
    r = Resolver(float)
    assert r.resolve('sin 30') == 'sin 30'
    assert r.resolve('sin(30') == 'sin(30'
