"""
dicebits Security - Wiping of random bytes once they have been consumed.
"""

from typing import Union
import numpy as np

Wipeable = Union[np.ndarray, bytearray, memoryview, bytes]


def secure_zero(data: Wipeable) -> bool:
    """
    Overwrite consumed random bytes with zeros (best-effort).

    Python may already hold copies elsewhere (interned bytes, GC moves), so
    this only shortens the lifetime of the copy we own.

    Args:
        data: Writable numpy array, bytearray or memoryview

    Returns:
        True if the buffer was zeroed, False if it is immutable
    """
    if isinstance(data, np.ndarray):
        if not data.flags.writeable:
            return False
        data.fill(0)
        return True
    if isinstance(data, (bytearray, memoryview)):
        if isinstance(data, memoryview) and data.readonly:
            return False
        data[:] = bytes(len(data))
        return True
    return False
