"""
Feistel Key Schedule

Derives sixteen 48-bit round subkeys from a 64-bit key. PC-1 drops the eight
parity bits and splits the remaining 56 into halves C and D; each round
rotates both halves left and PC-2 selects 48 bits from C||D. The rotation
state carries over from round to round.
"""

import logging
from typing import List

import numpy as np

from ..bits import to_bits, permute, rotate_left
from ..tables import PC1, PC2, SHIFTS

logger = logging.getLogger(__name__)

KEY_SIZE = 8
HALF_BITS = 28


def generate_round_keys(key: bytes) -> List[np.ndarray]:
    """
    Generate the 16 round subkeys.

    Args:
        key: The 8-byte key (parity bits are ignored)

    Returns:
        A list of 16 bit vectors, 48 bits each, in encryption order
    """
    if len(key) != KEY_SIZE:
        raise ValueError(f"Key must be exactly {KEY_SIZE} bytes")

    selected = permute(to_bits(key), PC1)
    c, d = selected[:HALF_BITS], selected[HALF_BITS:]

    round_keys = []
    for shift in SHIFTS:
        c = rotate_left(c, shift)
        d = rotate_left(d, shift)
        round_keys.append(permute(np.concatenate((c, d)), PC2))

    logger.debug("Derived %d Feistel subkeys", len(round_keys))
    return round_keys
