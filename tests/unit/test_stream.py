"""Tests for stream batching."""

import pytest

from protostream.core.stream import StreamCounter, TokenBatcher, batch_tokens, batch_tokens_sync


@pytest.mark.unit
def test_token_batcher():
    """Test token batching."""
    batcher = TokenBatcher(batch_size=5)

    assert batcher.add("ab") is None
    assert batcher.add("cd") is None
    assert batcher.add("e") == "abcde"
    assert batcher.add("f") is None
    assert batcher.flush() == "f"
    assert batcher.flush() is None


@pytest.mark.unit
def test_token_batcher_releases_on_delimiter():
    """A completed delimiter releases the batch early."""
    batcher = TokenBatcher(batch_size=100)

    assert batcher.add("<!-- SCREEN_END -") is None
    assert batcher.add("->x") == "<!-- SCREEN_END -->x"
    assert batcher.add("<div>") is None


@pytest.mark.unit
def test_stream_counter():
    """Test counting chunks and characters."""
    counter = StreamCounter()
    counter.track("abc")
    counter.track("de")
    assert counter.largest == 3

    assert counter.reset() == (2, 5)
    assert (counter.count, counter.chars, counter.largest) == (0, 0, 0)


@pytest.mark.unit
def test_batch_tokens_sync():
    """Batches preserve content."""
    tokens = ["<!-- ", "SCREEN", "_END", " -->"]
    batches = list(batch_tokens_sync(tokens, batch_size=8))
    assert "".join(batches) == "".join(tokens)
    assert len(batches) < len(tokens)


@pytest.mark.unit
def test_batch_size_one_passes_through():
    """Batch size one forwards every token."""
    assert list(batch_tokens_sync(["a", "b"], batch_size=1)) == ["a", "b"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_batch_tokens():
    """Test async token batching."""
    async def token_stream():
        for token in ["Hello", " ", "world", "!"]:
            yield token

    batches = [batch async for batch in batch_tokens(token_stream(), batch_size=6)]

    assert "".join(batches) == "Hello world!"
    assert batches == ["Hello ", "world!"]
