# coding= utf-8
import logging

from minforth.errors import EmptyStack

__all__ = ['Stack']

log = logging.getLogger(__name__)


class Stack(object):
    """
    The data stack shared by the evaluator and every word it runs. Values are
    strings; the end of the list is the top of the stack.

    A stack outlives a single evaluation: it is created empty, grows and
    shrinks while an expression runs and is cleared with :meth:`reset` by
    whoever wants to reuse it. It is not safe to share one between threads.
    """
    def __init__(self):
        self.items = []

    def push(self, val):
        self.items.append(val)
        log.debug('push: %r: stack: %r', val, self.items)

    def push_all(self, values):
        for val in values:
            self.push(val)

    def pop(self):
        if not self.items:
            raise EmptyStack()
        ret = self.items.pop()
        log.debug('pop: %r: stack: %r', ret, self.items)
        return ret

    def length(self):
        return len(self.items)

    def empty(self):
        return len(self.items) == 0

    def reset(self):
        del self.items[:]

    def __len__(self):
        return len(self.items)

    def __bool__(self):
        return bool(self.items)

    def __repr__(self):
        return 'Stack(%r)' % (self.items,)
