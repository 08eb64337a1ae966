from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Tokenized:
    """
    The outcome of one attempt at extracting a token: the token itself (None
    at the end of input) and how many bytes of the buffer it was taken from.
    """

    value: Optional[Any]
    consumed: int

    @classmethod
    def absent(cls):
        """
        The result for when there are no more tokens, ie. at the end of
        input. Consumes nothing.
        """
        return cls(None, 0)

    @property
    def is_absent(self):
        return self.value is None
