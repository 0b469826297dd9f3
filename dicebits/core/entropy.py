"""
dicebits Entropy - Secure random sources and the bit-level entropy buffer.
"""

import secrets
from typing import Callable

import numpy as np

from dicebits.core.security import secure_zero

# Refills add whole bytes to a 64-bit register: 64 - 8 + 1.
MAX_DRAW_BITS = 57

EntropySource = Callable[[int], np.ndarray]


class EntropySourceError(Exception):
    """The secure random source could not supply the requested bytes."""
    pass


# =============================================================================
# Entropy sources
# =============================================================================

def system_entropy(bytes_needed: int) -> np.ndarray:
    """
    Read bytes from the operating system CSPRNG.

    There is no fallback: if the OS facility fails, no secret can be
    produced.

    Args:
        bytes_needed: Number of bytes to read

    Returns:
        Entropy as a writable numpy uint8 array

    Raises:
        EntropySourceError: If the system source is unavailable or short
    """
    try:
        raw = secrets.token_bytes(bytes_needed)
    except (OSError, NotImplementedError) as e:
        raise EntropySourceError(f"system random source failed: {e}") from e

    if len(raw) != bytes_needed:
        raise EntropySourceError(
            f"system random source returned {len(raw)}/{bytes_needed} bytes"
        )

    return np.frombuffer(raw, dtype=np.uint8).copy()


class ReplayEntropySource:
    """
    Serve a fixed byte string, in order, as if it were random.

    Only for reproducing a known bit stream (tests, diagnostics). Raises
    EntropySourceError once the data is exhausted instead of wrapping.
    """

    def __init__(self, data: bytes):
        self._data = np.frombuffer(bytes(data), dtype=np.uint8)
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def __call__(self, bytes_needed: int) -> np.ndarray:
        if bytes_needed > self.remaining:
            raise EntropySourceError(
                f"replay source exhausted: {bytes_needed} bytes requested, "
                f"{self.remaining} left"
            )
        chunk = self._data[self._offset:self._offset + bytes_needed].copy()
        self._offset += bytes_needed
        return chunk


# =============================================================================
# Entropy buffer
# =============================================================================

class EntropyBuffer:
    """
    Accumulates secure random bits and hands them out in odd-sized draws.

    The low ``available`` bits of the register are unconsumed random data;
    everything above them is zero. A refill reads only the whole bytes
    needed to cover a draw, and the surplus (at most 7 bits) stays buffered
    for the next one.

    Not thread-safe: a buffer belongs to one caller at a time.
    """

    def __init__(self, source: EntropySource = system_entropy):
        self._source = source
        self._bits = 0
        self._have = 0

    @property
    def available(self) -> int:
        """Number of buffered, unconsumed random bits."""
        return self._have

    def _refill(self, need: int) -> None:
        nbytes = (need + 7) // 8
        chunk = self._source(nbytes)
        if len(chunk) != nbytes:
            raise EntropySourceError(
                f"entropy source returned {len(chunk)}/{nbytes} bytes"
            )
        # First byte read lands in the lowest new bit positions.
        for byte in chunk:
            self._bits |= int(byte) << self._have
            self._have += 8
        secure_zero(chunk)

    def draw(self, n: int) -> int:
        """
        Return the next ``n`` random bits as an integer in ``[0, 2**n)``.

        Precondition: ``n <= MAX_DRAW_BITS``. All engine bit widths are well
        below it; it is documented rather than checked.

        Raises:
            EntropySourceError: If the underlying source fails. Fatal.
        """
        if n > self._have:
            self._refill(n - self._have)
        result = self._bits & ((1 << n) - 1)
        self._bits >>= n
        self._have -= n
        return result

    def wipe(self) -> None:
        """Discard all buffered bits."""
        self._bits = 0
        self._have = 0
