"""
The buffer holds all text fetched from a source that has not yet been
consumed by a read, as utf-8 encoded bytes. The unread text is always the
head of the buffer: a read removes a prefix, a fetch appends at the tail and
a peek leaves the buffer as is.
"""

import logging
import warnings

logger = logging.getLogger(__name__)


def decode(data):
    """
    Decode utf-8 bytes from the buffer. Byte streams can contain invalid
    utf-8, in which case the offending bytes are replaced by U+FFFD and a
    warning is emitted.

    :param data: utf-8 encoded bytes.
    :returns: The decoded string.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as err:
        warnings.warn(f"Replaced invalid utf-8 in input: {err}")
        return data.decode("utf-8", errors="replace")


class TokenBuffer:
    def __init__(self, source):
        """
        :param source: The Source to fetch more text from whenever the
            buffer runs out of complete lines.
        """
        self._source = source
        self._data = bytearray()
        self._exhausted = False
        self._generation = 0

    @property
    def exhausted(self):
        """
        Whether the source has reported that it will never produce more text.
        """
        return self._exhausted

    @property
    def generation(self):
        """
        Counter increased every time a prefix is consumed, offsets
        taken under an earlier generation no longer point to the same text.
        """
        return self._generation

    def __len__(self):
        return len(self._data)

    def __getitem__(self, key):
        return bytes(self._data[key])

    def fetch(self):
        """
        Ask the source for more text. Once the source has reported
        exhaustion it is not asked again.

        :returns: The number of bytes appended to the buffer.
        """
        if self._exhausted:
            return 0
        appended = self._source.fetch_more(self._data)
        if appended == 0:
            logger.debug("Source %r is exhausted", self._source)
            self._exhausted = True
        else:
            logger.debug("Fetched %d bytes from %r", appended, self._source)
        return appended

    def line_at(self, offset):
        """
        The line starting at the given offset, that is all bytes from the
        offset up to and including the next newline. If there is no newline
        in the buffer after offset, text is fetched from the source until
        there is, or until the source is exhausted in which case the rest
        of the buffer is returned.

        :param offset: Byte offset into the buffer.
        :returns: The line as bytes, empty only at the end of input.
        """
        if offset < 0 or offset > len(self._data):
            raise IndexError(
                f"Offset {offset} is outside of buffer of length {len(self._data)}"
            )
        search_from = offset
        newline = self._data.find(b"\n", search_from)
        while newline == -1 and not self._exhausted:
            search_from = len(self._data)
            self.fetch()
            newline = self._data.find(b"\n", search_from)
        if newline == -1:
            return bytes(self._data[offset:])
        return bytes(self._data[offset : newline + 1])

    def find(self, needle, start, end):
        """
        Byte offset of the first occurrence of needle within [start, end),
        or -1.
        """
        return self._data.find(needle, start, end)

    def consume(self, nbytes):
        """
        Remove the first nbytes from the buffer.
        """
        if nbytes < 0 or nbytes > len(self._data):
            raise IndexError(
                f"Cannot consume {nbytes} bytes from buffer of length {len(self._data)}"
            )
        if nbytes == 0:
            return
        del self._data[:nbytes]
        self._generation += 1
