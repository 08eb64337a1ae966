class SourceError(Exception):
    """
    Raised by a source when its underlying channel fails while fetching
    more text. The tokenizer never catches it, so it reaches the caller of
    peek/read unchanged and the unread buffer is left as it was before the
    failing fetch.
    """

    pass


class StaleLookaheadError(RuntimeError):
    """
    Thrown when a lookahead (or a peeking iterator) is used after the
    tokenizer it was created from has consumed part of its buffer, which
    invalidates the offsets the lookahead holds.
    """

    pass
