'''
Scientific calculator core of the Torch Lite widget.

Takes what the user typed on the calculator keypad, glyphs and all (×, ÷, −,
^, √, π), and evaluates it with the usual precedence: no eval(), an explicit
lexer and recursive descent parser instead.

Trigonometric functions take degrees. Functions nest: sin(log(10)) works.

The flashlight half of the widget lives in the browser and shares nothing
with this package.
'''

# TODO: Inverse trigonometric functions, once the keypad has room for them.

from .cli import CLI
from .evaluator import Evaluator
from .lexer import Lexer
from .session import History, Session


__all__ = 'Session', 'History', 'Evaluator', 'Lexer', 'CLI'
