'''
Glyph and constant normalization tests
'''

import math

from torchcalc.normalizer import Normalizer


def test_operator_glyphs():
    n = Normalizer()
    assert n.normalize('3×4÷2−1') == '3*4/2-1'


def test_power_glyph():
    n = Normalizer()
    assert n.normalize('2^3') == '2**3'


def test_square_root_glyph():
    n = Normalizer()
    assert n.normalize('√(9)') == 'sqrt(9)'


def test_pi():
    n = Normalizer()
    assert n.normalize('2*π') == '2*(' + repr(math.pi) + ')'
    assert n.normalize('2*pi') == '2*(' + repr(math.pi) + ')'


def test_standalone_e():
    n = Normalizer()
    assert n.normalize('e^2') == '(' + repr(math.e) + ')**2'


def test_e_inside_name_untouched():
    n = Normalizer()
    assert n.normalize('pie') == 'pie'
    assert n.normalize('sqrt(2)') == 'sqrt(2)'


def test_empty():
    n = Normalizer()
    assert n.normalize('') == ''
