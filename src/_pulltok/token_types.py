"""
Token types describe what a token looks like, independently of how the text
is fetched. A token type is any subclass of FromLookahead: given a
lookahead, it attempts to extract one token starting at the lookahead's
offset and reports how many bytes it took.

Line and Character are the built in token types, others can be defined
outside of this package in the same way, eg.

>>> @dataclass(frozen=True)
... class Word(FromLookahead):
...     value: str
...
...     @classmethod
...     def from_lookahead(cls, lookahead):
...         start = lookahead.offset
...         if lookahead.find(" ") is None:
...             return Tokenized.absent()
...         word = lookahead.peek_until(" ")
...         lookahead.skip(1)
...         return Tokenized(cls(word), lookahead.offset - start)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from _pulltok.tokenized import Tokenized


class FromLookahead(ABC):
    @classmethod
    @abstractmethod
    def from_lookahead(cls, lookahead):
        """
        Extract a token from the given lookahead, advancing its offset by
        exactly the number of bytes reported as consumed.

        :param lookahead: The Lookahead to extract from.
        :returns: Tokenized with an instance of cls and the number of bytes
            it was taken from, or Tokenized.absent() at the end of input.
        """
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is FromLookahead and callable(getattr(subclass, "from_lookahead", None)):
            return True
        return NotImplemented


@dataclass(frozen=True)
class Line(FromLookahead):
    """
    One line of text, including the terminating newline. The last line
    of the input has no newline if the input does not end with one. An empty
    line is "\\n", not absent.
    """

    value: str

    def __str__(self):
        return self.value

    @classmethod
    def from_lookahead(cls, lookahead):
        start = lookahead.offset
        line = lookahead.peek_line()
        if not line:
            return Tokenized.absent()
        return Tokenized(cls(line), lookahead.offset - start)


@dataclass(frozen=True)
class Character(FromLookahead):
    """
    One unicode character (code point). Characters outside of ascii take
    several bytes of the buffer, eg. "\\u20e3" consumes 3.
    """

    value: str

    def __str__(self):
        return self.value

    @classmethod
    def from_lookahead(cls, lookahead):
        start = lookahead.offset
        char = lookahead.peek_char()
        if char is None:
            return Tokenized.absent()
        return Tokenized(cls(char), lookahead.offset - start)
