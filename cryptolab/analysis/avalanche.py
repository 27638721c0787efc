"""
Avalanche Measurement

Flips each input bit of a block in turn and measures how many output bits
change. A well-diffusing cipher flips about half of them.
"""

import logging
from typing import Any

import numpy as np

from ..bits import to_bits

logger = logging.getLogger(__name__)


def bit_difference(a: bytes, b: bytes) -> int:
    """Count the bits that differ between two equal-length byte strings."""
    if len(a) != len(b):
        raise ValueError("Inputs must have the same length")
    return int(np.count_nonzero(to_bits(a) != to_bits(b)))


def avalanche(cipher: Any, block: bytes, key: bytes) -> float:
    """
    Measure the plaintext avalanche of one block.

    Args:
        cipher: A block cipher (FeistelCipher or SPNCipher)
        block: The reference plaintext block
        key: The raw key bytes

    Returns:
        The mean fraction of output bits flipped per single-bit input flip
    """
    if len(block) != cipher.block_size:
        raise ValueError(f"Block must be exactly {cipher.block_size} bytes")

    round_keys = cipher.key_schedule(key)
    reference = cipher.encrypt_block(block, round_keys)
    total_bits = cipher.block_size * 8

    flipped = 0
    for position in range(total_bits):
        variant = bytearray(block)
        variant[position // 8] ^= 0x80 >> (position % 8)
        flipped += bit_difference(reference, cipher.encrypt_block(bytes(variant), round_keys))

    ratio = flipped / (total_bits * total_bits)
    logger.debug("%s avalanche: %.4f over %d flips", cipher.name, ratio, total_bits)
    return ratio
