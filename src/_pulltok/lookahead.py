"""
A lookahead is a cursor into the buffer of a tokenizer. It scans ahead
without consuming anything, so that a token type can look as far ahead as
it needs (several lines, up to some delimiter) before the tokenizer decides
how much to actually consume.

The offset of a lookahead only moves forward. Since offsets are relative to
the head of the buffer, a lookahead becomes stale as soon as the tokenizer
consumes a prefix, and using it after that raises StaleLookaheadError.
"""

import warnings

from _pulltok.buffer import decode
from _pulltok.errors import StaleLookaheadError
from _pulltok.token_types import FromLookahead
from _pulltok.tokenized import Tokenized


def utf8_width(lead):
    """
    The number of bytes in the utf-8 encoding of a character, given its
    first byte. Bytes which cannot start a character count as 1.
    """
    if lead < 0x80:
        return 1
    elif 0xC2 <= lead <= 0xDF:
        return 2
    elif 0xE0 <= lead <= 0xEF:
        return 3
    elif 0xF0 <= lead <= 0xF4:
        return 4
    else:
        return 1


class Lookahead:
    def __init__(self, buffer, offset=0):
        """
        :param buffer: The TokenBuffer to look into.
        :param offset: The byte offset in buffer to start from.
        """
        self._buffer = buffer
        self._generation = buffer.generation
        self._offset = offset

    @property
    def offset(self):
        """
        How many bytes from the head of the buffer this lookahead has
        advanced.
        """
        return self._offset

    def _check(self):
        if self._buffer.generation != self._generation:
            raise StaleLookaheadError(
                "Lookahead used after its tokenizer consumed from the buffer"
            )

    def _line(self):
        self._check()
        return self._buffer.line_at(self._offset)

    def peek_line(self):
        """
        The line at the current offset, including its newline. Advances
        past that line.

        :returns: The line, or the empty string at the end of input.
        """
        line = self._line()
        self._offset += len(line)
        return decode(line)

    def peek_char(self):
        """
        The character at the current offset. Advances by the number of bytes
        that character takes in utf-8.

        :returns: The character, or None at the end of input.
        """
        line = self._line()
        if not line:
            return None
        width = utf8_width(line[0])
        try:
            char = line[:width].decode("utf-8")
        except UnicodeDecodeError as err:
            warnings.warn(f"Replaced invalid utf-8 at offset {self._offset}: {err}")
            char, width = "\ufffd", 1
        self._offset += width
        return char

    def find(self, delimiter):
        """
        Find the first occurrence of delimiter at or after the current offset,
        fetching more lines from the source as needed. The delimiter may
        span several lines. Does not move the lookahead.

        :param delimiter: Non-empty string to look for.
        :returns: Byte offset of the occurrence, or None if the input ends
            before the delimiter occurs.
        """
        needle = delimiter.encode("utf-8")
        if not needle:
            raise ValueError("Cannot search for an empty delimiter")
        self._check()
        position = self._offset
        while True:
            line = self._buffer.line_at(position)
            if not line:
                return None
            line_end = position + len(line)
            # occurrences starting before this window were already ruled out
            search_from = max(self._offset, position - len(needle) + 1)
            match = self._buffer.find(needle, search_from, line_end)
            if match != -1:
                return match
            position = line_end

    def peek_until(self, delimiter):
        """
        Scan ahead until the delimiter and advance to where it starts.

        >>> from _pulltok.tokenizer import Tokenizer
        >>> tokenizer = Tokenizer.from_string("abc\\ndef")
        >>> lookahead = tokenizer.lookahead()
        >>> lookahead.peek_until("d")
        'abc\\n'
        >>> lookahead.peek_until("x")
        ''

        :param delimiter: Non-empty string to scan for.
        :returns: The text from the current offset up to, not including,
            the delimiter. The empty string if the delimiter does not occur
            before the end of input, in which case the lookahead is
            left at the end of input.
        """
        match = self.find(delimiter)
        if match is None:
            self._offset = len(self._buffer)
            return ""
        span = self._buffer[self._offset : match]
        self._offset = match
        return decode(span)

    def skip(self, nbytes):
        """
        Advance the lookahead by nbytes which have already been scanned,
        for instance to step over a delimiter found with peek_until.
        """
        self._check()
        if nbytes < 0 or self._offset + nbytes > len(self._buffer):
            raise ValueError(
                f"Cannot skip {nbytes} bytes from offset {self._offset}, "
                f"only {len(self._buffer)} bytes are buffered"
            )
        self._offset += nbytes

    def extract(self, token_type):
        """
        Extract one token of the given type at the current offset.

        :param token_type: A FromLookahead subclass, eg. Line or Character.
        :returns: The Tokenized result of token_type.from_lookahead.
        """
        if not (isinstance(token_type, type) and issubclass(token_type, FromLookahead)):
            raise TypeError(f"{token_type!r} does not implement from_lookahead")
        start = self._offset
        result = token_type.from_lookahead(self)
        if not isinstance(result, Tokenized):
            raise TypeError(
                f"{token_type.__name__}.from_lookahead returned {result!r}, "
                "expected Tokenized"
            )
        if not result.is_absent and result.consumed != self._offset - start:
            raise ValueError(
                f"{token_type.__name__} reported consuming {result.consumed} bytes "
                f"but advanced the lookahead {self._offset - start} bytes"
            )
        return result
