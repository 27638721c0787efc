"""
Text, Byte and Hex Conversions

Shared conversions used by both block cipher engines. Hex input is accepted
in either case; hex output is always uppercase.
"""

import re
from enum import Enum

from ..exceptions import FormatError, InvalidCiphertextFormat, InvalidPlaintextFormat

_HEX_RE = re.compile(r'[0-9A-Fa-f]*')


class TextEncoding(Enum):
    """How plaintext characters map to bytes."""

    # One character per byte, code points 0-255
    LATIN1 = 'latin-1'
    # Opt-in multi-byte mode; changes ciphertext for non-ASCII text
    UTF8 = 'utf-8'


def hex_to_bytes(hex_string: str) -> bytes:
    """
    Convert a hex string to bytes, two hex characters per byte.

    Args:
        hex_string: Hex digits, upper or lower case, even length

    Returns:
        The decoded bytes
    """
    if not _HEX_RE.fullmatch(hex_string) or len(hex_string) % 2:
        raise FormatError(f"Not a whole-byte hex string: {hex_string!r}")
    return bytes(int(hex_string[i:i + 2], 16) for i in range(0, len(hex_string), 2))


def bytes_to_hex(data: bytes) -> str:
    """Convert bytes to an uppercase hex string."""
    return ''.join(f'{b:02X}' for b in data)


def text_to_bytes(text: str, encoding: TextEncoding = TextEncoding.LATIN1) -> bytes:
    """
    Convert plaintext to bytes.

    Under LATIN1 each character becomes the single byte of its code point.
    Characters above 0xFF cannot be represented and are rejected.
    """
    try:
        return text.encode(encoding.value)
    except UnicodeEncodeError as e:
        raise InvalidPlaintextFormat(
            f"Character {text[e.start]!r} at position {e.start} cannot be "
            f"encoded as {encoding.value}"
        ) from e


def bytes_to_text(data: bytes, encoding: TextEncoding = TextEncoding.LATIN1) -> str:
    """Convert decrypted bytes back to text."""
    try:
        return data.decode(encoding.value)
    except UnicodeDecodeError as e:
        # Only reachable in UTF8 mode, usually a wrong key
        raise InvalidCiphertextFormat(
            f"Decrypted bytes are not valid {encoding.value}: {e.reason}"
        ) from e
