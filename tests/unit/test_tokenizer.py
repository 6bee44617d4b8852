"""Tests for the delimiter tokenizer."""

import pytest

from protostream.protocol.tokenizer import Delimiter, TextSpan, match_directive, tokenize


@pytest.mark.unit
def test_match_directive():
    """Directive bodies need an upper-case keyword."""
    assert match_directive(" SCREEN_END ") == ("SCREEN_END", None)
    assert match_directive(" SCREEN_START: Home [0,0] ") == ("SCREEN_START", "Home [0,0]")
    assert match_directive(" Header ") is None
    assert match_directive(" TODO fix this ") is None


@pytest.mark.unit
def test_tokenize_text_and_delimiters():
    """Text and delimiters come out in buffer order."""
    buffer = "a<!-- SCREEN_END -->b"
    tokenized = tokenize(buffer)

    assert tokenized.consumed == len(buffer)
    assert tokenized.tokens == [
        TextSpan("a", 0),
        Delimiter("SCREEN_END", None, 1, 20, "<!-- SCREEN_END -->"),
        TextSpan("b", 20),
    ]


@pytest.mark.unit
def test_ordinary_comment_is_text():
    """Markup comments stay inside the surrounding text."""
    buffer = "<div><!-- Header --><h1>Hi</h1></div>"
    tokenized = tokenize(buffer)
    assert tokenized.tokens == [TextSpan(buffer, 0)]
    assert tokenized.consumed == len(buffer)


@pytest.mark.unit
def test_unclosed_delimiter_is_tail():
    """An open marker without its close is held back."""
    buffer = "<p>x</p><!-- SCREEN_E"
    tokenized = tokenize(buffer)
    assert tokenized.tokens == [TextSpan("<p>x</p>", 0)]
    assert tokenized.consumed == len("<p>x</p>")


@pytest.mark.unit
@pytest.mark.parametrize("tail", ["<", "<!", "<!-"])
def test_partial_open_marker_is_tail(tail):
    """A trailing prefix of the open marker is not emitted as text."""
    tokenized = tokenize("<p>x</p>" + tail)
    assert tokenized.tokens == [TextSpan("<p>x</p>", 0)]
    assert tokenized.consumed == len("<p>x</p>")


@pytest.mark.unit
def test_delimiter_split_across_buffers():
    """The delimiter appears once the buffer holds all of it."""
    full = "<!-- SCREEN_START: Home [0,0] -->"
    for cut in range(1, len(full)):
        assert not any(isinstance(t, Delimiter) for t in tokenize(full[:cut]).tokens)

    (token,) = tokenize(full).tokens
    assert token.keyword == "SCREEN_START"
    assert token.payload == "Home [0,0]"
    assert token.known


@pytest.mark.unit
def test_unknown_keyword():
    """Unknown upper-case keywords are still delimiters, just not known ones."""
    (token,) = tokenize("<!-- NAV_BAR -->").tokens
    assert token.keyword == "NAV_BAR"
    assert not token.known
