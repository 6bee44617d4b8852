"""Token batching ahead of the protocol parser.

Every parser pass re-scans the whole buffer, so feeding it one model token at
a time costs O(n^2) over a response. Batching coalesces tokens into larger
chunks; the parse result is the same whatever the chunk boundaries are.

A batch is released early when it completes a delimiter (``-->``), so screen
starts and ends reach the parser as soon as they arrive.
"""

from collections.abc import AsyncGenerator, AsyncIterable, Generator, Iterable
from dataclasses import dataclass, field

DELIMITER_CLOSE = "-->"


@dataclass
class TokenBatcher:
    """Coalesces tokens until batch_size characters or a delimiter close."""

    batch_size: int = 20
    boundary: str = DELIMITER_CLOSE
    _buffer: str = field(default="", init=False, repr=False)

    def add(self, token: str) -> str | None:
        """Add a token; returns a chunk when one is ready."""
        # The boundary may straddle the previous token
        scan_from = max(0, len(self._buffer) - len(self.boundary) + 1)
        self._buffer += token

        if len(self._buffer) >= self.batch_size:
            return self._take()
        if self.boundary and self.boundary in self._buffer[scan_from:]:
            return self._take()
        return None

    def flush(self) -> str | None:
        """Whatever is left once the stream ends."""
        return self._take() if self._buffer else None

    def _take(self) -> str:
        chunk, self._buffer = self._buffer, ""
        return chunk


@dataclass
class StreamCounter:
    """Chunks and characters fed to one session."""

    count: int = 0
    chars: int = 0
    largest: int = 0

    def track(self, chunk: str) -> None:
        self.count += 1
        self.chars += len(chunk)
        self.largest = max(self.largest, len(chunk))

    def reset(self) -> tuple[int, int]:
        """Reset and return (count, chars)."""
        totals = (self.count, self.chars)
        self.count = self.chars = self.largest = 0
        return totals


async def batch_tokens(
    stream: AsyncIterable[str],
    batch_size: int = 20,
    boundary: str = DELIMITER_CLOSE,
) -> AsyncGenerator[str, None]:
    """
    Batch an async token stream.

    Args:
        stream: Async token iterable (model output)
        batch_size: Minimum characters per batch
        boundary: Marker that releases a batch early

    Yields:
        Chunks in stream order; their concatenation equals the input
    """
    batcher = TokenBatcher(batch_size=batch_size, boundary=boundary)

    async for token in stream:
        if chunk := batcher.add(token):
            yield chunk

    if rest := batcher.flush():
        yield rest


def batch_tokens_sync(
    stream: Iterable[str],
    batch_size: int = 20,
    boundary: str = DELIMITER_CLOSE,
) -> Generator[str, None, None]:
    """Batch a synchronous token stream."""
    batcher = TokenBatcher(batch_size=batch_size, boundary=boundary)

    for token in stream:
        if chunk := batcher.add(token):
            yield chunk

    if rest := batcher.flush():
        yield rest
