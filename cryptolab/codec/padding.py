"""
PKCS#7-style Block Padding

Padding always adds between 1 and block_size bytes, each holding the pad
length. A message that already fills whole blocks gets one full extra block.

Removal is governed by a PaddingPolicy. LENIENT is the historical behaviour:
a trailing byte outside [1, block_size] means "no padding" and the data is
returned untouched. STRICT validates every pad byte and raises instead.
"""

import logging
from enum import Enum

from Cryptodome.Util.Padding import unpad as _pkcs7_unpad

from ..exceptions import PaddingError

logger = logging.getLogger(__name__)


class PaddingPolicy(Enum):
    """How unpad treats malformed padding."""

    LENIENT = 'lenient'
    STRICT = 'strict'


def pad(data: bytes, block_size: int) -> bytes:
    """
    Pad data to a multiple of block_size.

    Args:
        data: Unpadded bytes
        block_size: Block size in bytes (1-255)

    Returns:
        The padded bytes
    """
    if not 0 < block_size < 256:
        raise ValueError("Block size must be between 1 and 255 bytes")
    pad_len = block_size - (len(data) % block_size)
    return data + bytes([pad_len]) * pad_len


def unpad(data: bytes, block_size: int,
          policy: PaddingPolicy = PaddingPolicy.LENIENT) -> bytes:
    """
    Remove padding added by pad().

    Args:
        data: Padded bytes
        block_size: Block size in bytes
        policy: LENIENT passes malformed padding through, STRICT raises

    Returns:
        The unpadded bytes
    """
    if policy is PaddingPolicy.STRICT:
        try:
            return _pkcs7_unpad(data, block_size, style='pkcs7')
        except ValueError as e:
            raise PaddingError(str(e)) from e

    if not data:
        return data

    pad_len = data[-1]
    if 1 <= pad_len <= block_size:
        return data[:-pad_len]

    logger.warning("Trailing byte 0x%02X is not a valid pad length; "
                   "returning data unchanged", pad_len)
    return data
