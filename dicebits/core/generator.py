# -*- coding: utf-8 -*-
"""
dicebits Generator - Passphrase, base64 and hex secret generation.
"""

import string
from enum import Enum
from typing import List, Optional

import numpy as np

from dicebits.core.entropy import EntropyBuffer
from dicebits.core.wordlist import WORDLIST, BITS_PER_WORD

# Alphabets, indexed directly by the drawn bits
BASE64_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
HEX_ALPHABET = string.hexdigits[:16]


class Engine(Enum):
    """
    Token engines: (name, bits per token, default token count, separator).

    Each engine's alphabet holds exactly 2**bits tokens, so every draw maps
    to a token without rejection.
    """

    WORDS = ("words", BITS_PER_WORD, 5, " ")
    BASE64 = ("base64", 6, 16, "")
    HEX = ("hex", 4, 16, "")

    def __init__(self, label: str, bits: int, default_count: int, separator: str):
        self.label = label
        self.bits = bits
        self.default_count = default_count
        self.separator = separator

    @property
    def size(self) -> int:
        """Number of distinct tokens."""
        return 1 << self.bits

    def render(self, index: int) -> str:
        """Map a drawn integer in [0, size) to its token."""
        if not 0 <= index < self.size:
            raise IndexError(f"{self.label} token index out of range: {index}")
        if self is Engine.WORDS:
            return WORDLIST[index]
        if self is Engine.BASE64:
            return BASE64_ALPHABET[index]
        return HEX_ALPHABET[index]


def generate_tokens(engine: Engine, count: int, buffer: EntropyBuffer) -> List[str]:
    """
    Draw ``count`` tokens from ``buffer``, one draw of ``engine.bits`` each.

    Raises:
        ValueError: If count is not positive
        EntropySourceError: If the random source fails
    """
    if count < 1:
        raise ValueError(f"token count must be positive, got {count}")

    tokens: List[str] = []
    for _ in range(count):
        tokens.append(engine.render(buffer.draw(engine.bits)))
    return tokens


def generate_line(
    engine: Engine = Engine.WORDS,
    count: Optional[int] = None,
    buffer: Optional[EntropyBuffer] = None
) -> str:
    """
    Generate one secret as a printable line.

    Args:
        engine: Token engine to use (default: words)
        count: Number of tokens (default: the engine's default count)
        buffer: Entropy buffer to draw from (default: a new system-backed one)

    Returns:
        Tokens joined by the engine separator, with one trailing newline

    Raises:
        ValueError: If count is not positive
        EntropySourceError: If the random source fails
    """
    if count is None:
        count = engine.default_count
    if buffer is None:
        buffer = EntropyBuffer()

    return engine.separator.join(generate_tokens(engine, count, buffer)) + "\n"


def calculate_entropy(engine: Engine, count: int) -> float:
    """
    Calculate theoretical entropy of a generated secret.

    Args:
        engine: Token engine used
        count: Number of tokens

    Returns:
        Entropy in bits
    """
    return float(count * np.log2(engine.size))
