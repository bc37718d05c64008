from collections import namedtuple
from decimal import Decimal
from functools import wraps
import math


class CalcError(Exception):
    '''
    Base of every error the evaluation pipeline raises.

    ``reason`` is the tag shown to the user and stored in history.
    '''
    reason = 'Error'


class CalcSyntaxError(CalcError):
    reason = 'SyntaxError'


class UnknownTokenError(CalcError):
    reason = 'UnknownToken'


class DivisionByZeroError(CalcError):
    reason = 'DivisionByZero'


class DomainError(CalcError):
    reason = 'DomainError'


# What a failed evaluation returns instead of a number.
ErrorMarker = namedtuple('ErrorMarker', 'reason message')

# One evaluated (or failed) expression.
HistoryEntry = namedtuple('HistoryEntry', 'expression result')


def iserror(result):
    '''
    Return True if evaluation result is an ErrorMarker, not a number.
    '''
    return isinstance(result, ErrorMarker)


def marker(error):
    '''
    Turn a CalcError into the ErrorMarker reported for it.
    '''
    return ErrorMarker(error.reason, error.args[0] if error.args else '')


def wrap_user_errors(fmt, error=DomainError):
    '''
    Ugly hack decorator that converts math exceptions to CalcErrors.

    Passes through CalcErrors. Division by zero always becomes a
    DivisionByZeroError, anything else the given error class.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except ZeroDivisionError as e:
                raise DivisionByZeroError(fmt.format(*args, **kwargs)) from e
            except (ArithmeticError, ValueError) as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator


def finite(value, what='Result'):
    '''
    Return value, unless it's infinite or NaN.
    '''
    if not math.isfinite(value):
        raise DomainError('{} out of range'.format(what))
    return value


def to_literal(value):
    '''
    Write a float back as a positional literal the lexer accepts.

    repr() would use exponent notation for very small or large numbers, and
    "e" is the constant, not an exponent, to the lexer.
    '''
    # -0.0 + 0.0 is 0.0
    text = format(Decimal(repr(finite(value) + 0.0)), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def to_display(value, precision=None):
    '''
    Round to precision significant digits and format for the display.
    '''
    if precision is None:
        return to_literal(value)
    # Float noise, like cos(90), is zero on a display this precise.
    if abs(finite(value)) < 10 ** -precision:
        value = 0.0
    rounded = Decimal('{:.{}g}'.format(finite(value) + 0.0, precision))
    text = format(rounded.normalize(), 'f')
    return '0' if text == '-0' else text
