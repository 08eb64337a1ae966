"""
The tokenizer wraps a source and lets the caller extract typed tokens from
it, either by peeking (the token stays in the buffer) or by reading (the
bytes the token was taken from are removed from the buffer).

>>> tokenizer = Tokenizer.from_string("a\\nb\\nc")
>>> tokenizer.peek(Line)
Line(value='a\\n')
>>> tokenizer.read(Line)
Line(value='a\\n')
>>> [line.value for line in tokenizer.read_iter(Line)]
['b\\n', 'c']
>>> tokenizer.read(Line) is None
True
"""

from _pulltok.buffer import TokenBuffer, decode
from _pulltok.iterators import PeekingIterator, ReadingIterator
from _pulltok.lookahead import Lookahead
from _pulltok.sources import StreamSource, StringSource
from _pulltok.token_types import Line


class Tokenizer:
    def __init__(self, source):
        """
        :param source: The Source to tokenize, owned by the tokenizer
            from here on.
        """
        self._buffer = TokenBuffer(source)

    @classmethod
    def from_string(cls, text):
        """
        Tokenizer for text held in memory.
        """
        return cls(StringSource(text))

    @classmethod
    def from_stream(cls, stream, encoding="utf-8"):
        """
        Tokenizer for a text or byte stream, eg. sys.stdin.

        :param encoding: Encoding of the stream if it is a byte stream.
        """
        return cls(StreamSource(stream, encoding=encoding))

    @property
    def buffer(self):
        return self._buffer

    @property
    def buffered(self):
        """
        The text that has been fetched from the source but not yet read.
        """
        return decode(self._buffer[:])

    @property
    def exhausted(self):
        return self._buffer.exhausted

    def lookahead(self):
        """
        A new lookahead at the head of the unread text. It is only valid
        until the next read.
        """
        return Lookahead(self._buffer)

    def peek(self, token_type):
        """
        The next token of the given type, without consuming it.

        :param token_type: Any FromLookahead subclass, eg. Line.
        :returns: The token, or None at the end of input.
        """
        return self.lookahead().extract(token_type).value

    def read(self, token_type):
        """
        The next token of the given type, removing the text it spans from
        the buffer.

        :param token_type: Any FromLookahead subclass, eg. Line.
        :returns: The token, or None at the end of input.
        """
        result = self.lookahead().extract(token_type)
        if result.is_absent:
            return None
        self._buffer.consume(result.consumed)
        return result.value

    def peek_iter(self, token_type):
        """
        Iterator over the following tokens of the given type, without
        consuming any of them.
        """
        return PeekingIterator(self._buffer, token_type)

    def read_iter(self, token_type):
        """
        Iterator over the following tokens of the given type, consuming each
        as it is generated.
        """
        return ReadingIterator(self, token_type)

    def read_line(self):
        """
        Read the next line as a string.

        :returns: The line including its newline, or None at the end of input.
        """
        line = self.read(Line)
        if line is None:
            return None
        return line.value

    def peek_until(self, delimiter):
        """
        The text up to the first occurrence of delimiter, see
        Lookahead.peek_until.
        """
        return self.lookahead().peek_until(delimiter)

    def read_until(self, delimiter):
        """
        Read the text up to the first occurrence of delimiter. The delimiter
        itself is not consumed. If the delimiter does not occur, everything
        that is left is read.

        >>> tokenizer = Tokenizer.from_string("abc\\ndef")
        >>> tokenizer.read_until("b"), tokenizer.read_until("b")
        ('a', '')
        >>> tokenizer.read_until("x")
        'bc\\ndef'
        """
        match = self.lookahead().find(delimiter)
        if match is None:
            match = len(self._buffer)
        text = decode(self._buffer[:match])
        self._buffer.consume(match)
        return text
