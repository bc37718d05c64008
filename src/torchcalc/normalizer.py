from functools import reduce
import math
import operator

import regex

from .util import to_literal


class Normalizer:
    '''
    Maps display glyphs and named constants to what the evaluator reads.

    Pure string transform; holds no state.
    '''
    # Display glyph to evaluator operator.
    GLYPHS = {
        '\N{MULTIPLICATION SIGN}': '*',
        '\N{DIVISION SIGN}': '/',
        '\N{MINUS SIGN}': '-',
        '^': '**',
        '\N{SQUARE ROOT}': 'sqrt',
    }

    # Constants, substituted as parenthesized literals so that "2π" is a
    # syntax error rather than 23.14159...
    CONSTANTS = {
        '\N{GREEK SMALL LETTER PI}': math.pi,
        'pi': math.pi,
        'e': math.e,
    }

    # Only a standalone name is a constant: the "e" in "exp" is not.
    CONSTANT = r'''
                (?<![A-Za-z_])
                (?<constant>
                    {NAMES}
                )
                (?![A-Za-z_])
                '''.format(NAMES='|'.join(map(regex.escape, CONSTANTS)))
    GLYPH = r'(?<glyph>' + r'|'.join(map(regex.escape, GLYPHS)) + r')'
    # Default regex flags for matching glyphs
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def normalize(self, line):
        '''
        Return line with every glyph and constant replaced.

        The empty string normalizes to itself.
        '''
        line = regex.sub(type(self).GLYPH,
                         lambda match: type(self).GLYPHS[match['glyph']],
                         line,
                         flags=type(self).FLAGS)
        return regex.sub(type(self).CONSTANT,
                         self._constant,
                         line,
                         flags=type(self).FLAGS)

    def _constant(self, match):
        value = type(self).CONSTANTS[match['constant']]
        return '(' + to_literal(value) + ')'
