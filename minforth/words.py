# coding= utf-8
"""
The word registry: a mapping from names to operators, plus the built-in
words every fresh registry starts with.

An operator is any callable taking the :class:`~minforth.stack.Stack` as its
only argument. It pops what it needs and pushes what it produces; it returns
nothing. Plain functions of their operands can be turned into operators with
:meth:`Words.add_stackmethod`.
"""
import inspect
import logging
import re
import socket

from minforth.errors import BadNumber, DivisionByZero, HostnameError

__all__ = ['BUILTINS', 'Words', 'atoi', 'word']

log = logging.getLogger(__name__)

BUILTINS = {}

NUMBER = re.compile(r'[+-]?[0-9]+\Z')
HOST_PREFIX = 'abcdefghijklmnopqrstuvwxyz -'


def word(name):
    """
    Creates a decorator that registers its function in :data:`BUILTINS`
    under `name`, so that every :class:`Words` built afterwards (with
    builtins) will know it. Note that if you already have an instance of
    :class:`Words`, it's too late to decorate and you should call its
    :meth:`Words.register` instead.
    """
    def decorator(func):
        func.word = name
        BUILTINS[name] = func
        return func
    return decorator


def atoi(text, strict=False):
    """
    Parses a decimal integer with an optional sign. Anything else is zero,
    unless `strict` is set, in which case it's a :exc:`BadNumber`.
    """
    if NUMBER.match(text):
        return int(text)
    if strict:
        raise BadNumber(text)
    log.debug('not a number, using 0: %r', text)
    return 0


def itoa(number):
    return str(number)


def divide(y, x):
    """ y / x truncated toward zero. """
    if x == 0:
        raise DivisionByZero()
    quotient = abs(y) // abs(x)
    if (y < 0) != (x < 0):
        return -quotient
    return quotient


def remainder(y, x):
    """ What's left over from :func:`divide`; takes the sign of y. """
    return y - x * divide(y, x)


@word('swap')
def swap(stack):
    x = stack.pop()
    y = stack.pop()
    stack.push(x)
    stack.push(y)


@word('dup')
def dup(stack):
    x = stack.pop()
    stack.push_all((x, x))


@word('strcat')
def strcat(stack):
    x = stack.pop()
    y = stack.pop()
    stack.push(y + x)


@word('hostname')
def hostname(stack):
    try:
        name = socket.gethostname()
    except OSError as e:
        raise HostnameError() from e
    if not name:
        raise HostnameError()
    stack.push(name)


@word('hostbase')
def hostbase(stack):
    stack.push(stack.pop().lstrip(HOST_PREFIX))


class Words(object):
    """
    A registry of operators, looked up by name for every token the evaluator
    sees. Each instance is independent: registering a word in one registry
    has no effect on any other.

    Arithmetic words parse their operands with :func:`atoi`, so malformed
    numbers quietly count as zero. Pass ``strict=True`` to have them raise
    :exc:`BadNumber` instead.
    """
    def __init__(self, builtins=True, strict=False):
        self.strict = strict
        self.ops = {}

        if not builtins:
            return

        # Add decorated module-level words
        self.ops.update(BUILTINS)

        # Add integer math and selection
        self.add_stackmethod('+', lambda x, y: itoa(self.number(y) + self.number(x)))
        self.add_stackmethod('-', lambda x, y: itoa(self.number(y) - self.number(x)))
        self.add_stackmethod('*', lambda x, y: itoa(self.number(y) * self.number(x)))
        self.add_stackmethod('/', lambda x, y: itoa(divide(self.number(y), self.number(x))))
        self.add_stackmethod('%', lambda x, y: itoa(remainder(self.number(y), self.number(x))))
        self.add_stackmethod('roundup', self._roundup)
        self.add_stackmethod('ifelse', lambda x, y, z: y if self.number(x) != 0 else z)

    def number(self, text):
        return atoi(text, strict=self.strict)

    def _roundup(self, rnd, v):
        rnd = self.number(rnd)
        v = self.number(v)
        return itoa(divide(v + rnd - 1, rnd) * rnd)

    def register(self, name, op):
        """ Adds `op` under `name`, replacing whatever was there before. """
        if name in self.ops:
            log.info('replacing word %r', name)
        else:
            log.debug('adding word %r', name)
        self.ops[name] = op

    def add_stackmethod(self, name, func):
        """
        Turns a given function `func` into a stack-consumer and registers it.

        The function will get its arguments from the stack automatically, in
        the order they pop off (so from the stack ['1', '2'] the call to a
        two-argument function will be func('2', '1')). Only positional
        parameters count; keyword-only ones and ``*args``/``**kwargs`` are
        never filled from the stack.

        The function's return value is pushed back as strings: nothing for
        None, each element in order for a tuple or list, and the value itself
        otherwise.
        """
        num_args = len([p for p in inspect.signature(func).parameters.values()
                        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)])

        def stack_helper(stack):
            args = [stack.pop() for x in range(num_args)]
            ret = func(*args)
            if ret is None:
                return
            if isinstance(ret, (tuple, list)):
                stack.push_all(str(val) for val in ret)
            else:
                stack.push(str(ret))
        stack_helper.word = name
        self.register(name, stack_helper)

    def get(self, name, default=None):
        return self.ops.get(name, default)

    def __getitem__(self, name):
        return self.ops[name]

    def __contains__(self, name):
        return name in self.ops

    def __iter__(self):
        return iter(self.ops)

    def __len__(self):
        return len(self.ops)
