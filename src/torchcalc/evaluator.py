import math

from .lexer import Lexer
from .normalizer import Normalizer
from .resolver import Resolver
from .util import (CalcError, CalcSyntaxError, DivisionByZeroError, finite,
                   marker, wrap_user_errors)


@wrap_user_errors('Cannot add {0} and {1}')
def add(left, right):
    return finite(left + right)


@wrap_user_errors('Cannot subtract {1} from {0}')
def sub(left, right):
    return finite(left - right)


@wrap_user_errors('Cannot multiply {0} by {1}')
def mul(left, right):
    return finite(left * right)


@wrap_user_errors('Cannot divide {0} by {1}')
def div(left, right):
    if right == 0:
        raise DivisionByZeroError('Division of {0} by zero'.format(left))
    return finite(left / right)


@wrap_user_errors('Cannot take {0} modulo {1}')
def mod(left, right):
    '''
    Truncated remainder: the sign follows the dividend, -7 % 3 is -1.
    '''
    if right == 0:
        raise DivisionByZeroError('Modulo of {0} by zero'.format(left))
    return math.fmod(left, right)


@wrap_user_errors('Cannot raise {0} to {1}')
def power(base, exponent):
    if base == 0 and exponent < 0:
        raise DivisionByZeroError('Zero raised to negative power {0}'.format(
            exponent))
    # math.pow refuses fractional powers of negatives instead of going complex.
    return finite(math.pow(base, exponent))


class Parser:
    '''
    Recursive descent over one token list.

    Tightest binding first: parentheses, power (right associative), unary
    minus, then * / % and finally + -, both left associative. So -2^2 is -4
    and 2^3^2 is 512.
    '''
    ADDITIVE = {
        '+': add,
        '-': sub,
    }
    MULTIPLICATIVE = {
        '*': mul,
        '/': div,
        '%': mod,
    }
    POWER = '**'

    def __init__(self, tokens):
        self.tokens = tokens
        self.position = 0

    def parse(self):
        '''
        Evaluate all the tokens, as a single expression.
        '''
        if not self.tokens:
            raise CalcSyntaxError('Empty expression')
        value = self.expression()
        if self.peek() is not None and \
           self.peek().kind == Lexer.RPAREN_KIND:
            raise CalcSyntaxError('Unbalanced parentheses')
        if self.peek() is not None:
            raise CalcSyntaxError('Unexpected {0}'.format(
                repr(self.peek().value)))
        return value

    def peek(self):
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def next(self):
        token = self.peek()
        if token is None:
            raise CalcSyntaxError('Unexpected end of expression')
        self.position += 1
        return token

    def accept(self, kind, table):
        '''
        Consume and return the next token's operation if it's one in table.
        '''
        token = self.peek()
        if token is not None and token.kind == kind and token.value in table:
            self.position += 1
            return table[token.value]
        return None

    def expression(self):
        value = self.term()
        while True:
            f = self.accept(Lexer.OPERATOR_KIND, type(self).ADDITIVE)
            if f is None:
                return value
            value = f(value, self.term())

    def term(self):
        value = self.unary()
        while True:
            f = self.accept(Lexer.OPERATOR_KIND, type(self).MULTIPLICATIVE)
            if f is None:
                return value
            value = f(value, self.unary())

    def unary(self):
        # Iterative, so a long run of signs costs no stack.
        negative = False
        while self.peek() is not None and \
              self.peek().kind == Lexer.SIGN_KIND:
            self.position += 1
            negative = not negative
        value = self.exponentiation()
        return -value if negative else value

    def exponentiation(self):
        base = self.primary()
        if self.accept(Lexer.OPERATOR_KIND, {type(self).POWER: power}):
            # Recursing through unary makes this right associative, and lets
            # the exponent carry a sign: 2^-1.
            return power(base, self.unary())
        return base

    def primary(self):
        token = self.next()
        if token.kind == Lexer.NUMBER_KIND:
            return token.value
        elif token.kind == Lexer.LPAREN_KIND:
            if self.peek() is not None and \
               self.peek().kind == Lexer.RPAREN_KIND:
                raise CalcSyntaxError('Empty parentheses')
            value = self.expression()
            if self.peek() is None or self.peek().kind != Lexer.RPAREN_KIND:
                raise CalcSyntaxError('Unbalanced parentheses')
            self.position += 1
            return value
        elif token.kind == Lexer.FUNCTION_KIND:
            raise CalcSyntaxError(
                '{0} needs a parenthesized argument'.format(token.value))
        elif token.kind == Lexer.RPAREN_KIND:
            raise CalcSyntaxError('Unbalanced parentheses')
        raise CalcSyntaxError('Missing operand before {0}'.format(
            repr(token.value)))


class Evaluator:
    '''
    The whole pipeline: normalize, resolve functions, lex, parse.

    Holds no state between calls.
    '''

    def __init__(self):
        self.normalizer = Normalizer()
        self.lexer = Lexer()
        self.resolver = Resolver(self._compute)

    def tokens(self, line):
        '''
        Return the token list the parser would see for line.
        '''
        line = self.resolver.resolve(self.normalizer.normalize(line))
        return list(self.lexer.lex(line))

    def compute(self, line):
        '''
        Evaluate line to a float, raising CalcError on failure.
        '''
        try:
            return self._compute(self.normalizer.normalize(line))
        except RecursionError as e:
            raise CalcSyntaxError('Expression too deeply nested') from e

    def _compute(self, line):
        # Resolving recurses back in here for each function argument.
        line = self.resolver.resolve(line)
        return Parser(list(self.lexer.lex(line))).parse()

    def evaluate(self, line):
        '''
        Evaluate line to a float, or an ErrorMarker on failure. Never raises
        CalcError.
        '''
        try:
            return self.compute(line)
        except CalcError as e:
            return marker(e)
