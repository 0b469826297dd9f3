"""
dicebits Word list - The 8192-entry diceware8k table.

13 random bits index the list directly, so it must hold exactly 2**13
distinct words.
"""

from importlib import resources
from typing import Tuple

from dicebits.core.log import get_logger

logger = get_logger('wordlist')

BITS_PER_WORD = 13
WORDLIST_SIZE = 1 << BITS_PER_WORD

_RESOURCE = "diceware8k.txt"


class WordListError(Exception):
    """The word list is not a valid 8192-entry table."""
    pass


def load_wordlist(text: str) -> Tuple[str, ...]:
    """
    Parse and validate a word list, one word per line.

    Args:
        text: Word list contents

    Returns:
        Tuple of exactly WORDLIST_SIZE distinct words

    Raises:
        WordListError: On a wrong count, duplicates, or malformed entries
    """
    words = tuple(line.strip() for line in text.splitlines() if line.strip())

    if len(words) != WORDLIST_SIZE:
        raise WordListError(
            f"word list has {len(words)} entries, expected {WORDLIST_SIZE}"
        )

    for word in words:
        if any(c.isspace() for c in word) or not word.isprintable():
            raise WordListError(f"invalid word list entry: {word!r}")

    if len(set(words)) != WORDLIST_SIZE:
        raise WordListError("word list contains duplicate entries")

    return words


def _load_bundled() -> Tuple[str, ...]:
    text = resources.files("dicebits.data").joinpath(_RESOURCE).read_text(encoding="utf-8")
    words = load_wordlist(text)
    logger.debug("Loaded %d words from %s", len(words), _RESOURCE)
    return words


WORDLIST = _load_bundled()
