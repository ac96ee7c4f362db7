import re

__all__ = ['Parser', 'tokenize']


class Parser(object):
    """
    Splits an expression into tokens. Only the space character separates
    tokens: runs of spaces (including leading and trailing ones) never
    produce empty tokens, while tabs and newlines are ordinary characters and
    end up inside whichever token they touch.

    One Parser reads one expression. It keeps a cursor into the text, and
    every parse_* call moves that cursor forward past what it matched. When
    the cursor reaches the end of the text, parse_* raises
    :exc:`StopIteration` and :meth:`generate` stops.

    The parser knows nothing about words or literals: telling them apart is
    the evaluator's job, since the set of registered words can change between
    one expression and the next.
    """
    def __init__(self, text):
        self.text = text
        self.pos = 0

    @property
    def is_finished(self):
        return self.pos >= len(self.text)

    def _consume(self, pattern):
        """
        Consume (advancing self.pos) some characters based on a regex anchored
        at self.pos.
        """
        if self.is_finished:
            raise StopIteration()
        found = re.compile(pattern).match(self.text, self.pos)
        if found is None:
            return None
        self.pos = found.end()
        return found.group()

    def parse_spaces(self):
        return self._consume(r' *')

    def parse_token(self):
        return self._consume(r'[^ ]+')

    def next_token(self):
        self.parse_spaces()
        return self.parse_token()

    def generate(self):
        while True:
            try:
                yield self.next_token()
            except StopIteration:
                return


def tokenize(text):
    return list(Parser(text).generate())
