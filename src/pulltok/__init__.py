import pulltok.version
from _pulltok.errors import SourceError, StaleLookaheadError
from _pulltok.lookahead import Lookahead
from _pulltok.sources import ChunkSource, Source, StreamSource, StringSource
from _pulltok.token_types import Character, FromLookahead, Line
from _pulltok.tokenized import Tokenized
from _pulltok.tokenizer import Tokenizer

__version__ = pulltok.version.version

__all__ = [
    "Character",
    "ChunkSource",
    "FromLookahead",
    "Line",
    "Lookahead",
    "Source",
    "SourceError",
    "StaleLookaheadError",
    "StreamSource",
    "StringSource",
    "Tokenized",
    "Tokenizer",
]
