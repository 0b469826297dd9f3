"""
dicebits Core - Entropy buffering, token engines, and the word list.
"""

from dicebits.core.entropy import (
    MAX_DRAW_BITS,
    EntropyBuffer,
    EntropySourceError,
    ReplayEntropySource,
    system_entropy,
)

from dicebits.core.generator import (
    Engine,
    generate_tokens,
    generate_line,
    calculate_entropy,
    BASE64_ALPHABET,
    HEX_ALPHABET,
)

from dicebits.core.wordlist import WORDLIST, WORDLIST_SIZE, WordListError

from dicebits.core.security import secure_zero

__all__ = [
    "MAX_DRAW_BITS",
    "EntropyBuffer",
    "EntropySourceError",
    "ReplayEntropySource",
    "system_entropy",
    "Engine",
    "generate_tokens",
    "generate_line",
    "calculate_entropy",
    "BASE64_ALPHABET",
    "HEX_ALPHABET",
    "WORDLIST",
    "WORDLIST_SIZE",
    "WordListError",
    "secure_zero",
]
