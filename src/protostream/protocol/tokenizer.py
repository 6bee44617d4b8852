"""Delimiter tokenizer.

Splits a generation buffer into text spans and delimiters of the form

    <!-- KEYWORD -->
    <!-- KEYWORD: payload -->

A comment is a delimiter only when its body starts with an upper-case
identifier followed by ':' or by the end of the comment, so ordinary markup
comments such as ``<!-- Header -->`` stay text.

The buffer may end anywhere. A ``<!--`` without its ``-->`` yet, or a
trailing ``<``, ``<!`` or ``<!-``, is unconsumed tail: it is reported as
neither text nor delimiter until a later, longer buffer completes it.
"""

import re
from dataclasses import dataclass
from typing import Union

OPEN_MARKER = "<!--"
CLOSE_MARKER = "-->"

KEYWORDS = frozenset(
    {"PROJECT_NAME", "PROJECT_ICON", "MESSAGE", "SCREEN_START", "SCREEN_EDIT", "SCREEN_END"}
)

_DIRECTIVE = re.compile(r"\s*(?P<keyword>[A-Z][A-Z0-9_]*)\s*(?::(?P<payload>.*))?", re.DOTALL)


@dataclass(frozen=True)
class TextSpan:
    text: str
    start: int


@dataclass(frozen=True)
class Delimiter:
    keyword: str
    payload: str | None
    start: int
    end: int  # Index just past the close marker
    raw: str

    @property
    def known(self) -> bool:
        return self.keyword in KEYWORDS


Token = Union[TextSpan, Delimiter]


@dataclass(frozen=True)
class Tokenized:
    tokens: list[Token]
    consumed: int  # Everything from here on is unconsumed tail


def _partial_open_length(buffer: str) -> int:
    """Length of a trailing proper prefix of OPEN_MARKER ("<", "<!", "<!-")."""
    for size in range(len(OPEN_MARKER) - 1, 0, -1):
        if buffer.endswith(OPEN_MARKER[:size]):
            return size
    return 0


def match_directive(body: str) -> tuple[str, str | None] | None:
    """Return (keyword, payload) if a comment body is a delimiter."""
    match = _DIRECTIVE.fullmatch(body)
    if match is None:
        return None
    payload = match.group("payload")
    return match.group("keyword"), payload.strip() if payload is not None else None


def tokenize(buffer: str) -> Tokenized:
    """
    Tokenize the whole buffer in one left-to-right pass.

    Args:
        buffer: Everything received so far

    Returns:
        Tokens in buffer order and the consumed length
    """
    tokens: list[Token] = []
    text_start = 0  # Start of the pending text span
    cursor = 0      # Where to look for the next open marker

    def flush_text(until: int) -> None:
        if until > text_start:
            tokens.append(TextSpan(buffer[text_start:until], text_start))

    while True:
        start = buffer.find(OPEN_MARKER, cursor)
        if start == -1:
            consumed = len(buffer) - _partial_open_length(buffer[cursor:])
            flush_text(consumed)
            return Tokenized(tokens, max(consumed, text_start))

        end = buffer.find(CLOSE_MARKER, start + len(OPEN_MARKER))
        if end == -1:
            flush_text(start)
            return Tokenized(tokens, max(start, text_start))

        close = end + len(CLOSE_MARKER)
        directive = match_directive(buffer[start + len(OPEN_MARKER):end])
        if directive is None:
            # Ordinary comment: keep it inside the current text span
            cursor = close
            continue

        flush_text(start)
        keyword, payload = directive
        tokens.append(Delimiter(keyword, payload, start, close, buffer[start:close]))
        text_start = cursor = close
