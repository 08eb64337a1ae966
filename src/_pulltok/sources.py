"""
A source is where a tokenizer gets its text from. The tokenizer only ever
asks a source for "more", through Source.fetch_more, and the source appends
whatever it has available to the tail of the tokenizer buffer as utf-8
encoded bytes.

Sources are expected to be read forward only: a fetch may block until more
text is available (as when reading from stdin), and returning 0 appended
bytes means that the source is permanently exhausted.
"""

import codecs
import logging
from abc import ABC, abstractmethod

from _pulltok.errors import SourceError

logger = logging.getLogger(__name__)


def _is_utf8(encoding):
    return codecs.lookup(encoding).name == "utf-8"


class Source(ABC):
    """
    The capability of producing the next chunk of text for a tokenizer.
    Implementations must never reorder or duplicate bytes they have already
    delivered, and must not leave partial data in the sink when a fetch
    fails.
    """

    @abstractmethod
    def fetch_more(self, sink):
        """
        Append newly available text to the tail of sink.

        :param sink: The bytearray to append utf-8 encoded text to.
        :returns: The number of bytes appended, 0 if the source is exhausted.
        :raises SourceError: If the underlying channel fails.
        """
        pass


class StringSource(Source):
    """
    A source for text held in memory. Each fetch hands over one line
    (including its newline), or the remaining tail if there is no newline
    left, so that it behaves like an interactive line source.

    >>> source = StringSource("a\\nb")
    >>> sink = bytearray()
    >>> source.fetch_more(sink)
    2
    >>> bytes(sink)
    b'a\\n'
    """

    def __init__(self, text):
        """
        :param text: The text to tokenize.
        """
        self._text = text
        self._position = 0

    def fetch_more(self, sink):
        if self._position >= len(self._text):
            return 0
        newline = self._text.find("\n", self._position)
        end = len(self._text) if newline == -1 else newline + 1
        chunk = self._text[self._position : end].encode("utf-8")
        self._position = end
        sink.extend(chunk)
        return len(chunk)


class StreamSource(Source):
    def __init__(self, stream, encoding="utf-8"):
        """
        :param stream: Any text or byte stream with a readline method, for
            instance sys.stdin or an opened file.
        :param encoding: The encoding of the stream, only used for byte
            streams, text streams are already decoded.
        """
        self._stream = stream
        self._encoding = None
        self.encoding = encoding

    @property
    def stream(self):
        return self._stream

    @property
    def encoding(self):
        return self._encoding

    @encoding.setter
    def encoding(self, value):
        try:
            codecs.lookup(value)
        except LookupError as err:
            raise ValueError(f"Unknown encoding {value}") from err
        self._encoding = value

    def _as_utf8(self, line):
        if isinstance(line, str):
            return line.encode("utf-8", errors="surrogateescape")
        if _is_utf8(self.encoding):
            return bytes(line)
        return bytes(line).decode(self.encoding, errors="replace").encode("utf-8")

    def fetch_more(self, sink):
        try:
            line = self._stream.readline()
        except OSError as err:
            raise SourceError(f"Could not read from {self._stream!r}: {err}") from err
        data = self._as_utf8(line)
        sink.extend(data)
        return len(data)


class ChunkSource(Source):
    """
    A source for text arriving in arbitrary chunks, for instance from a
    network pipe. Chunks can be str or bytes (utf-8) and do not have to
    follow line or even character boundaries.

    >>> source = ChunkSource([b"\\xe2\\x82", b"\\xac\\n"])
    >>> sink = bytearray()
    >>> source.fetch_more(sink), source.fetch_more(sink)
    (2, 2)
    >>> sink.decode("utf-8")
    '€\\n'
    """

    def __init__(self, chunks):
        """
        :param chunks: Any iterable of str or bytes chunks. The end of
            the iterable is the end of input.
        """
        self._chunks = iter(chunks)
        self._error = None

    def fetch_more(self, sink):
        # a failed generator cannot be resumed, keep failing instead of
        # reporting the end of input
        if self._error is not None:
            raise self._error
        try:
            for chunk in self._chunks:
                if isinstance(chunk, str):
                    chunk = chunk.encode("utf-8", errors="surrogateescape")
                if chunk:
                    sink.extend(chunk)
                    return len(chunk)
                logger.debug("Skipping empty chunk")
        except OSError as err:
            self._error = SourceError(f"Could not read next chunk: {err}")
            raise self._error from err
        return 0
