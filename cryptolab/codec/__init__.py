"""
Codec Package

Conversions between text, bytes and hex, plus block padding, shared by
both block cipher engines.
"""

from .conversions import (TextEncoding, hex_to_bytes, bytes_to_hex,
                          text_to_bytes, bytes_to_text)
from .padding import PaddingPolicy, pad, unpad

__all__ = ['TextEncoding', 'hex_to_bytes', 'bytes_to_hex', 'text_to_bytes',
           'bytes_to_text', 'PaddingPolicy', 'pad', 'unpad']
