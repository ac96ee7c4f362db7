# coding= utf-8
"""
Implements a tiny stack-based expression evaluator in the style of Forth, for
the small expressions found in configuration files (sizes to round up,
suffixes to pull off host names, and so on).

Usage should be as simple as:
    >>> import minforth
    >>> minforth.Machine().evaluate("4095 4096 roundup")
    '4096'

Tokens are separated by spaces. A token naming a word runs it; any other
token is pushed onto the stack as a string. Whatever is on top of the stack
at the end is the result, and an expression that leaves nothing there raises
:exc:`EmptyStack`.

New words may be added to a machine with :meth:`Machine.register` (taking the
stack) or :meth:`Machine.add_stackmethod` (taking the popped operands):
    >>> m = minforth.Machine()
    >>> m.add_stackmethod('max', lambda x, y: max(x, y, key=int))
    >>> m.evaluate("3 7 max")
    '7'
"""
import logging

from minforth.errors import *
from minforth.machine import *
from minforth.parser import *
from minforth.stack import *
from minforth.words import *

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())
