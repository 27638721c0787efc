"""
Block Mode Package

This package turns the raw block ciphers into message encryption: key and
ciphertext validation, padding, block splitting and hex encoding.
"""

from .ecb_mode import ECBMode, encrypt, decrypt

__all__ = ['ECBMode', 'encrypt', 'decrypt']
