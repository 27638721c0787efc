"""
SPN Key Expansion

Expands a 128-bit key into eleven 128-bit round keys. The key is read as
four 32-bit words w[0..3]; each further word is w[i-4] XOR temp, where temp
is w[i-1], first rotated, substituted and mixed with a round constant when
i is a multiple of four. Round key r is w[4r] .. w[4r+3].
"""

import logging
from typing import List

from .common import rotate_left
from ..tables import SPN_SBOX, RCON

logger = logging.getLogger(__name__)

KEY_SIZE = 16
NUM_ROUNDS = 10
KEY_WORDS = 4
TOTAL_WORDS = 4 * (NUM_ROUNDS + 1)


def rot_word(word: int) -> int:
    """Rotate a 32-bit word left by one byte."""
    return rotate_left(word, 8, 32)


def sub_word(word: int) -> int:
    """Apply the S-box to each byte of a 32-bit word."""
    result = 0
    for shift in (24, 16, 8, 0):
        result |= SPN_SBOX[(word >> shift) & 0xFF] << shift
    return result


def expand_key(key: bytes) -> List[bytes]:
    """
    Expand a 16-byte key into round keys.

    Args:
        key: The 16-byte key

    Returns:
        A list of 11 round keys of 16 bytes each (round 0 through round 10)
    """
    if len(key) != KEY_SIZE:
        raise ValueError(f"Key must be exactly {KEY_SIZE} bytes")

    words = [int.from_bytes(key[i:i + 4], byteorder='big')
             for i in range(0, KEY_SIZE, 4)]

    for i in range(KEY_WORDS, TOTAL_WORDS):
        temp = words[i - 1]
        if i % KEY_WORDS == 0:
            temp = sub_word(rot_word(temp)) ^ (RCON[i // KEY_WORDS] << 24)
        words.append(words[i - KEY_WORDS] ^ temp)

    round_keys = []
    for r in range(NUM_ROUNDS + 1):
        round_key = bytearray()
        for word in words[4 * r:4 * r + 4]:
            round_key.extend(word.to_bytes(4, byteorder='big'))
        round_keys.append(bytes(round_key))

    logger.debug("Expanded key into %d round keys", len(round_keys))
    return round_keys
