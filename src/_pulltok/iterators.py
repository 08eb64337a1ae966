"""
Lazy sequences of tokens. Both iterators stop at the end of input and stay
stopped. Stopping early has no effect beyond the tokens already read, and
an error from the source is raised from next() without ending the
iteration, so the step can be retried.
"""

from _pulltok.lookahead import Lookahead


class PeekingIterator:
    """
    Iterates over the tokens at the head of the buffer without consuming
    them. All steps share one lookahead, so each token starts where the
    previous one ended. Reading from the tokenizer while the iterator is in
    use makes it stale.

    >>> from _pulltok.token_types import Line
    >>> from _pulltok.tokenizer import Tokenizer
    >>> tokenizer = Tokenizer.from_string("ab\\ncd")
    >>> [line.value for line in PeekingIterator(tokenizer.buffer, Line)]
    ['ab\\n', 'cd']
    """

    def __init__(self, buffer, token_type):
        """
        :param buffer: The TokenBuffer of the tokenizer.
        :param token_type: The FromLookahead subclass to extract.
        """
        self._lookahead = Lookahead(buffer)
        self._token_type = token_type
        self._done = False

    @property
    def offset(self):
        """
        Number of bytes spanned by the tokens peeked so far.
        """
        return self._lookahead.offset

    def __iter__(self):
        return self

    def __next__(self):
        if self._done:
            raise StopIteration
        result = self._lookahead.extract(self._token_type)
        if result.is_absent:
            self._done = True
            raise StopIteration
        return result.value


class ReadingIterator:
    """
    Iterates over the tokens at the head of the buffer, consuming each
    token as it is returned.
    """

    def __init__(self, tokenizer, token_type):
        """
        :param tokenizer: The Tokenizer to read from.
        :param token_type: The FromLookahead subclass to extract.
        """
        self._tokenizer = tokenizer
        self._token_type = token_type
        self._done = False

    def __iter__(self):
        return self

    def __next__(self):
        if self._done:
            raise StopIteration
        value = self._tokenizer.read(self._token_type)
        if value is None:
            self._done = True
            raise StopIteration
        return value
