import pytest

from _pulltok.errors import SourceError
from _pulltok.sources import ChunkSource


class RecordingSource(ChunkSource):
    """
    ChunkSource which counts fetches and can be made to fail the next
    fetch.
    """

    def __init__(self, chunks):
        super().__init__(chunks)
        self.fetches = 0
        self.fail_next = False

    def fetch_more(self, sink):
        self.fetches += 1
        if self.fail_next:
            self.fail_next = False
            raise SourceError("fetch failed")
        return super().fetch_more(sink)


@pytest.fixture
def recording_source():
    return RecordingSource
