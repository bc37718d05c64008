from collections import namedtuple
from functools import reduce
import operator

import regex

from .util import CalcSyntaxError, UnknownTokenError, finite


# kind is one of Lexer.KINDS; value is a float for numbers, the operator
# symbol or function name otherwise.
Token = namedtuple('Token', 'kind value')


class Lexer:
    '''
    Lexer for the normalized infix grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    NUMBER_KIND = 'number'
    OPERATOR_KIND = 'operator'
    # Unary minus, told apart from binary minus by what precedes it.
    SIGN_KIND = 'sign'
    LPAREN_KIND = 'lparen'
    RPAREN_KIND = 'rparen'
    FUNCTION_KIND = 'function'
    KINDS = (NUMBER_KIND, OPERATOR_KIND, SIGN_KIND,
             LPAREN_KIND, RPAREN_KIND, FUNCTION_KIND)

    # Functions the resolver reduces. Seeing one here means it wasn't applied
    # to a parenthesized argument.
    FUNCTIONS = ('sin', 'cos', 'tan', 'ln', 'log', 'sqrt')

    # Number: maximal run of digits and dots, validated after matching so
    # that 1.2.3 is a syntax error rather than two numbers.
    NUMBER = r'[0-9.]+'
    # Longest first, so ** isn't lexed as two *.
    OPERATOR = r'(?:\*\*|[-+*/%])'
    NAME = r'[^\W\d]+'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<lparen>\()|' \
             r'(?<rparen>\))|' \
             r'(?<name>' + NAME + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1},
                   0)

    def lex(self, line):
        '''
        Take a line and yield its tokens, left to right.

        Raises on the first bad lexeme; callers wanting all or nothing should
        list() the result.
        '''
        previous = None
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                raise UnknownTokenError(
                    "Unknown symbol {0}".format(repr(line[0])))
            line = line[len(match.group(0)):]
            if match['space']:
                continue
            token = self.token(match, previous)
            yield token
            previous = token

    def token(self, match, previous):
        '''
        Classify a lexeme match, given the token before it.
        '''
        if match['number']:
            return Token(type(self).NUMBER_KIND, self._number(match['number']))
        elif match['operator']:
            symbol = match['operator']
            if symbol == '-' and self.issignposition(previous):
                return Token(type(self).SIGN_KIND, symbol)
            return Token(type(self).OPERATOR_KIND, symbol)
        elif match['lparen']:
            return Token(type(self).LPAREN_KIND, '(')
        elif match['rparen']:
            return Token(type(self).RPAREN_KIND, ')')
        name = match['name']
        if name in type(self).FUNCTIONS:
            return Token(type(self).FUNCTION_KIND, name)
        raise UnknownTokenError("Unknown name {0}".format(repr(name)))

    def issignposition(self, previous):
        '''
        Return True if a minus after previous is a sign, not subtraction.
        '''
        return previous is None or previous.kind in {type(self).OPERATOR_KIND,
                                                     type(self).SIGN_KIND,
                                                     type(self).LPAREN_KIND}

    def _number(self, text):
        if text.count('.') > 1:
            raise CalcSyntaxError("Malformed number {0}".format(text))
        if text == '.':
            raise CalcSyntaxError("Lone decimal point")
        return finite(float(text), what='Number')
