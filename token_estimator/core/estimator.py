"""Heuristic token estimation by character-class scanning.

Approximates how a subword tokenizer splits text without loading a model:
words are banded by length, numbers and symbols count as single tokens and
quoted strings are charged by content length. Character classes follow the
C locale, so only ASCII letters, digits and punctuation are recognised.
"""

from __future__ import annotations

import logging
import string
import struct
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

TextInput = Union[str, bytes]

# Checked in declared order; the first literal that matches wins, so "/*"
# shadows "/**".
CODE_PATTERNS: Tuple[str, ...] = (
    "->", "++", "--", "==", "!=", "<=", ">=", "&&", "||",
    "<<", ">>", "+=", "-=", "*=", "/=", "%=", "^=", "&=", "|=",
    "::", "//", "/*", "*/", "/**", "{", "}", "[", "]", "(", ")",
    ";",
)

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_NUMBER_CHARS = frozenset(string.digits + ".")
_WHITESPACE = frozenset(" \t\n\v\f\r")
_PUNCTUATION = frozenset(string.punctuation)
_QUOTES = frozenset("\"'")
_CODE_INDICATORS = frozenset("{};()[]")

CODE_MULTIPLIER = 1.2
PROSE_MULTIPLIER = 0.85

_FLOAT32 = struct.Struct("<f")


class TextStats(BaseModel):
    """Result of a basic estimation pass."""

    model_config = ConfigDict(frozen=True)

    tokens: int = Field(default=0, ge=0, description="Estimated token count")
    words: int = Field(default=0, ge=0, description="Words seen (letter-initial runs)")
    chars: int = Field(default=0, ge=0, description="Length of the input in characters")


def as_text(text: TextInput) -> str:
    """Return ``text`` as ``str``; bytes are decoded one character per byte."""
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("latin-1")
    raise TypeError(f"Expected str or bytes, got {type(text).__name__}")


def match_code_pattern(text: str, pos: int) -> int:
    """Return the length of the first pattern matching at ``pos``, or 0."""
    for pattern in CODE_PATTERNS:
        if text.startswith(pattern, pos):
            return len(pattern)
    return 0


def word_tokens(length: int) -> int:
    """Tokens charged for a word of ``length`` characters."""
    if length <= 4:
        return 1
    if length <= 8:
        return 2
    return (length + 3) // 4


def estimate_basic(text: TextInput) -> TextStats:
    """
    Estimate tokens, words and characters in a single left-to-right scan.

    Args:
        text: Input text. ``bytes`` are read as one character per byte.

    Returns:
        A fresh, immutable ``TextStats``.
    """
    text = as_text(text)
    length = len(text)
    tokens = 0
    words = 0
    i = 0

    while i < length:
        c = text[i]

        if c in _WHITESPACE:
            while i < length and text[i] in _WHITESPACE:
                i += 1
            continue

        pattern_len = match_code_pattern(text, i)
        if pattern_len:
            tokens += 1
            i += pattern_len
            continue

        if c in _LETTERS:
            start = i
            while i < length and text[i] in _WORD_CHARS:
                i += 1
            words += 1
            tokens += word_tokens(i - start)

        elif c in _DIGITS:
            while i < length and text[i] in _NUMBER_CHARS:
                i += 1
            tokens += 1

        elif c in _QUOTES:
            i += 1
            tokens += 1  # opening quote

            string_chars = 0
            while i < length and text[i] != c:
                if text[i] == "\\" and i + 1 < length:
                    i += 2
                    string_chars += 2
                else:
                    i += 1
                    string_chars += 1
            tokens += (string_chars + 3) // 4

            if i < length:
                i += 1
                tokens += 1  # closing quote

        else:
            tokens += 1
            i += 1

    stats = TextStats(tokens=tokens, words=words, chars=length)
    logger.debug("Basic estimate: %s", stats)
    return stats


def count_code_indicators(text: TextInput) -> int:
    """
    Count brackets and semicolons not directly preceded by a letter.

    The last character of the text is never examined.
    """
    text = as_text(text)
    count = 0
    for i in range(len(text) - 1):
        if text[i] in _CODE_INDICATORS and (i == 0 or text[i - 1] not in _LETTERS):
            count += 1
    return count


def code_multiplier(code_indicators: int, words: int) -> float:
    """Pick the content-type correction from indicator density."""
    multiplier = 1.0
    if code_indicators > words // 10:
        multiplier = CODE_MULTIPLIER
    if code_indicators < words // 20 and words > 10:
        multiplier = PROSE_MULTIPLIER
    return multiplier


def _to_float32(value: float) -> float:
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def scale_tokens(tokens: int, multiplier: float) -> int:
    """
    ``tokens * multiplier`` in single precision, truncated toward zero.

    Both operands and the product are rounded to 32-bit floats, so large
    counts truncate the same way as a C ``int * float`` expression.
    """
    return int(_to_float32(_to_float32(tokens) * _to_float32(multiplier)))


def estimate_advanced(text: TextInput) -> int:
    """Basic estimate scaled up for code-like text and down for prose."""
    text = as_text(text)
    basic = estimate_basic(text)
    indicators = count_code_indicators(text)
    multiplier = code_multiplier(indicators, basic.words)
    logger.debug(
        "Advanced estimate: indicators=%d words=%d multiplier=%.2f",
        indicators, basic.words, multiplier,
    )
    return scale_tokens(basic.tokens, multiplier)


def count_punctuation(text: TextInput) -> int:
    return sum(1 for c in as_text(text) if c in _PUNCTUATION)


def estimate_quick(text: TextInput) -> int:
    """~3 characters per token for punctuation-heavy text, ~4 otherwise."""
    text = as_text(text)
    length = len(text)
    if length == 0:
        return 0

    if count_punctuation(text) > length // 20:
        return (length + 2) // 3
    return (length + 3) // 4
