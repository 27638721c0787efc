"""
Bit Vector Helpers

The Feistel cipher permutes individual bits. Blocks and keys are handled as
numpy uint8 arrays holding one bit per element, most significant bit first.
"""

from typing import Sequence

import numpy as np


def to_bits(data: bytes) -> np.ndarray:
    """Unpack bytes into a bit vector, MSB first."""
    return np.unpackbits(np.frombuffer(data, dtype=np.uint8))


def from_bits(bits: np.ndarray) -> bytes:
    """Pack a bit vector (length a multiple of 8) back into bytes."""
    return np.packbits(bits).tobytes()


def bits_to_int(bits: np.ndarray) -> int:
    """Read a bit vector as an unsigned big-endian integer."""
    value = 0
    for bit in bits:
        value = (value << 1) | int(bit)
    return value


def permute(bits: np.ndarray, table: Sequence[int]) -> np.ndarray:
    """
    Reorder bits according to a 1-based permutation table.

    Output position i takes input bit table[i] - 1. The table may select,
    repeat or drop bits, so the output length is len(table).
    """
    return bits[np.asarray(table, dtype=np.intp) - 1]


def rotate_left(bits: np.ndarray, shift: int) -> np.ndarray:
    """Circularly rotate a bit vector left."""
    return np.roll(bits, -shift)
