# coding= utf-8
import logging

from minforth.errors import ForthError
from minforth.parser import Parser
from minforth.stack import Stack
from minforth.words import Words

__all__ = ['evaluate', 'Machine']

log = logging.getLogger(__name__)


def evaluate(stack, words, text):
    """
    Runs every token of `text` against `stack` and returns the value left on
    top. Tokens naming a word in `words` call it; anything else is pushed as
    it is.

    A :exc:`~minforth.errors.ForthError` from a word, or from the final pop,
    stops the evaluation there and is raised as-is. The stack is not cleaned
    up in either case, so reset it before reusing it if you care.
    """
    for token in Parser(text).generate():
        op = words.get(token)
        if op is not None:
            log.debug('word: %s', token)
            op(stack)
        else:
            stack.push(token)
    return stack.pop()


class Machine(object):
    """
    A stack together with the words that act on it. Each machine gets its own
    registry (with the built-in words) unless one is handed in, in which case
    machines sharing it will all see words registered later.
    """
    def __init__(self, words=None, strict=False):
        self.stack = Stack()
        if words is None:
            words = Words(strict=strict)
        self.words = words

    def push(self, val):
        self.stack.push(val)

    def pop(self):
        return self.stack.pop()

    def length(self):
        return self.stack.length()

    def empty(self):
        return self.stack.empty()

    def reset(self):
        self.stack.reset()

    def register(self, name, op):
        self.words.register(name, op)

    def add_stackmethod(self, name, func):
        self.words.add_stackmethod(name, func)

    def evaluate(self, text):
        return evaluate(self.stack, self.words, text)

    def try_evaluate(self, text):
        """
        Like :meth:`evaluate`, but returns a ``(result, error)`` pair instead
        of raising, and always leaves the stack empty.
        """
        try:
            return self.evaluate(text), None
        except ForthError as e:
            log.debug('evaluation of %r failed: %s', text, e)
            return None, e
        finally:
            self.reset()

    def eval(self, text=''):
        result, error = self.try_evaluate(text)
        if error is not None:
            return ' ? %s' % error
        return result + ' ok'
