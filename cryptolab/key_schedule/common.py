"""
Key Schedule Helpers

Word rotation and random key generation shared by both key schedules.
"""

import secrets


def rotate_left(value: int, shift: int, size: int = 32) -> int:
    """
    Rotate a value left by the specified number of bits.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by
        size: The bit size of the value

    Returns:
        The rotated value
    """
    shift %= size
    return ((value << shift) | (value >> (size - shift))) & ((1 << size) - 1)


def generate_key(key_size: int) -> bytes:
    """
    Generate a random key.

    Args:
        key_size: Size of the key in bytes (8 for Feistel, 16 for SPN)

    Returns:
        A random key as bytes
    """
    return secrets.token_bytes(key_size)
