# coding= utf-8
"""
Exceptions raised while evaluating an expression. Everything the evaluator
expects to go wrong is a :exc:`ForthError`; anything else is a bug and is
left to propagate untouched.
"""

__all__ = ['ForthError', 'EmptyStack', 'DivisionByZero', 'HostnameError', 'BadNumber']


class ForthError(Exception): pass


class EmptyStack(ForthError):
    def __init__(self, message='Empty stack'):
        super(EmptyStack, self).__init__(message)


class DivisionByZero(ForthError):
    def __init__(self, message='Division by zero'):
        super(DivisionByZero, self).__init__(message)


class HostnameError(ForthError):
    def __init__(self, message='No hostname'):
        super(HostnameError, self).__init__(message)


class BadNumber(ForthError):
    """ Only raised by registries built with ``strict=True``. """
    def __init__(self, text):
        super(BadNumber, self).__init__('bad number: %r' % (text,))
        self.text = text
