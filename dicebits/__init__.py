"""
dicebits - diceware8k / base64 / hex secret generator.

Draws uniformly distributed tokens from the operating system CSPRNG,
13, 6 or 4 bits at a time, without wasting entropy between tokens.
"""

__version__ = "1.0.0"

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
    # Version
    "__version__",
    # Entropy
    "MAX_DRAW_BITS",
    "EntropyBuffer",
    "EntropySourceError",
    "ReplayEntropySource",
    "system_entropy",
    # Generator
    "Engine",
    "generate_tokens",
    "generate_line",
    "calculate_entropy",
    "BASE64_ALPHABET",
    "HEX_ALPHABET",
    # Word list
    "WORDLIST",
    "WORDLIST_SIZE",
    "WordListError",
    # Security
    "secure_zero",
]
