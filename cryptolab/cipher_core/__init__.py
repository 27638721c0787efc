"""
Cipher Core Package

This package implements the block transforms of the two ciphers: the
Feistel network (64-bit block) and the substitution-permutation network
(128-bit block), along with the GF(2^8) arithmetic the latter needs.
"""

from .feistel import FeistelCipher
from .spn import SPNCipher, gmul, xtime

__all__ = ['FeistelCipher', 'SPNCipher', 'gmul', 'xtime']
