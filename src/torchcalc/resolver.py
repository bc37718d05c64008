'''
Scientific functions of one parenthesized argument.

Trigonometric functions take degrees, like a pocket calculator.
'''

from functools import reduce
import math
import operator

import regex

from .util import DomainError, finite, to_literal, wrap_user_errors


@wrap_user_errors('Cannot take sin of {0}')
def sin(degrees):
    return math.sin(math.radians(degrees))


@wrap_user_errors('Cannot take cos of {0}')
def cos(degrees):
    return math.cos(math.radians(degrees))


@wrap_user_errors('Cannot take tan of {0}')
def tan(degrees):
    # Odd multiples of 90 degrees; -90 % 180 == 90 too.
    if degrees % 180 == 90:
        raise DomainError('tan is undefined at {0}'.format(degrees))
    return math.tan(math.radians(degrees))


@wrap_user_errors('Cannot take ln of {0}')
def ln(x):
    if x <= 0:
        raise DomainError('ln needs a positive argument, got {0}'.format(x))
    return math.log(x)


@wrap_user_errors('Cannot take log of {0}')
def log(x):
    if x <= 0:
        raise DomainError('log needs a positive argument, got {0}'.format(x))
    return math.log10(x)


@wrap_user_errors('Cannot take sqrt of {0}')
def sqrt(x):
    if x < 0:
        raise DomainError('sqrt of negative number {0}'.format(x))
    return math.sqrt(x)


class Resolver:
    '''
    Reduces function applications to numeric literals, innermost first.

    The argument of each application is handed to ``compute`` (the rest of
    the pipeline), which resolves any application nested inside it before
    doing the arithmetic. So sin(log(10)) is sin(1).
    '''
    FUNCTIONS = {
        'sin': sin,
        'cos': cos,
        'tan': tan,
        'ln': ln,
        'log': log,
        'sqrt': sqrt,
    }

    # Longest names first, so "log" is never read as "ln" + garbage.
    NAME = r'|'.join(sorted(FUNCTIONS, key=len, reverse=True))
    # A function name and its balanced parenthesized argument.
    APPLICATION = r'''
                   (?<![A-Za-z_])
                   (?<name>
                       {NAME}
                   )
                   \s*
                   (?<group>
                       \(
                       (?<argument>
                           (?:
                               [^()]++
                               |
                               (?&group)
                           )*
                       )
                       \)
                   )
                   '''.format(NAME=NAME)
    # Default regex flags for matching applications
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self, compute):
        '''
        :param compute: Evaluates a normalized argument string to a float,
                        raising CalcError.
        '''
        self.compute = compute

    def resolve(self, line):
        '''
        Return line with every function application replaced by its value.
        '''
        return regex.sub(type(self).APPLICATION,
                         self._apply,
                         line,
                         flags=type(self).FLAGS)

    def _apply(self, match):
        f = type(self).FUNCTIONS[match['name']]
        value = finite(f(self.compute(match['argument'])),
                       what='{}()'.format(match['name']))
        # Parenthesized, so a negative value stays one operand: 2^(-0.5).
        return '(' + to_literal(value) + ')'
