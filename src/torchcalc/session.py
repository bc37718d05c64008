from collections import deque

from .evaluator import Evaluator
from .util import HistoryEntry, iserror, to_display


class History:
    '''
    Evaluations, oldest first.

    Bounded to the most recent ``size`` entries, or unbounded if size is
    None.
    '''

    def __init__(self, size=None):
        if size is not None and size < 1:
            raise ValueError('History size must be positive, not {}'.format(
                size))
        self.entries = deque(maxlen=size)

    @property
    def size(self):
        return self.entries.maxlen

    def append(self, expression, result):
        entry = HistoryEntry(expression, result)
        self.entries.append(entry)
        return entry

    def clear(self):
        self.entries.clear()

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)


class Session:
    '''
    Calculator display state, driven one keystroke (or paste) at a time.

    States: empty display, composing an expression, or showing the result
    of the last evaluation. Typing after a result starts a new expression.
    A failed evaluation keeps the expression on display, composing, so it
    can be fixed; the failure is kept in ``error`` until the next edit.
    '''
    EMPTY = 'empty'
    COMPOSING = 'composing'
    EVALUATED = 'evaluated'

    DEFAULT_PRECISION = 12

    def __init__(self, history_size=None, precision=DEFAULT_PRECISION,
                 evaluator=None):
        '''
        :param history_size: Most recent evaluations to keep. None keeps all.
        :param precision: Significant digits of results written back to the
                          display.
        '''
        if precision is not None and precision < 1:
            raise ValueError('Precision must be positive, not {}'.format(
                precision))
        self.display = ''
        self.state = type(self).EMPTY
        self.error = None
        self.precision = precision
        self.history = History(history_size)
        self.evaluator = evaluator or Evaluator()

    def append(self, text):
        '''
        Type text at the end of the display.
        '''
        if not text:
            return
        if self.state == type(self).EVALUATED:
            self.display = ''
        self.display += text
        self.state = type(self).COMPOSING
        self.error = None

    def clear(self):
        '''
        Empty the display. History is kept.
        '''
        self.display = ''
        self.state = type(self).EMPTY
        self.error = None

    def backspace(self):
        '''
        Delete the last character of the display.
        '''
        if self.state == type(self).EMPTY:
            return
        self.display = self.display[:-1]
        self.state = type(self).COMPOSING if self.display else type(self).EMPTY
        self.error = None

    def evaluate(self):
        '''
        Evaluate the display, record it in history and return the result.

        Returns None, and records nothing, if the display is empty.
        '''
        if self.state == type(self).EMPTY:
            return None
        expression = self.display
        result = self.evaluator.evaluate(expression)
        self.history.append(expression, result)
        if iserror(result):
            self.error = result
            self.state = type(self).COMPOSING
        else:
            self.error = None
            self.display = to_display(result, self.precision)
            self.state = type(self).EVALUATED
        return result

    def get_display(self):
        return self.display

    def get_history(self):
        '''
        Return history entries, oldest first.
        '''
        return list(self.history)
