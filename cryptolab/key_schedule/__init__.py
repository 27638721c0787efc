"""
Key Schedule Package

This package implements the key schedules that turn a cipher key into
per-round key material: 48-bit subkeys for the Feistel cipher and 128-bit
round keys for the SPN cipher.
"""

from .common import generate_key
from .feistel_schedule import generate_round_keys
from .spn_schedule import expand_key

__all__ = ['generate_key', 'generate_round_keys', 'expand_key']
