"""
Electronic Codebook Mode

This module wraps a block cipher into a text-in/hex-out encryption scheme.
The plaintext is padded to whole blocks and every block is transformed
independently with round keys derived once per call; there is no chaining,
no IV and no authentication.
"""

import logging
import re
from typing import Any, Callable, Optional, Sequence

from ..codec.conversions import (TextEncoding, hex_to_bytes, bytes_to_hex,
                                 text_to_bytes, bytes_to_text)
from ..codec.padding import PaddingPolicy, pad, unpad
from ..exceptions import InvalidKeyFormat, InvalidCiphertextFormat

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r'[0-9A-Fa-f]+')


class ECBMode:
    """
    Electronic codebook mode over any block cipher exposing name,
    block_size, key_size, key_schedule(), encrypt_block() and
    decrypt_block().
    """

    def __init__(self,
                 cipher: Any,
                 padding_policy: PaddingPolicy = PaddingPolicy.LENIENT,
                 text_encoding: TextEncoding = TextEncoding.LATIN1):
        """
        Initialize the mode around a block cipher.

        Args:
            cipher: The block cipher instance
            padding_policy: How malformed padding is treated on decryption
            text_encoding: How plaintext characters map to bytes
        """
        self.cipher = cipher
        self.padding_policy = padding_policy
        self.text_encoding = text_encoding

    @property
    def block_size(self) -> int:
        return self.cipher.block_size

    @property
    def key_hex_length(self) -> int:
        return self.cipher.key_size * 2

    def validate_key(self, key: str) -> bytes:
        """
        Check that the key is a hex string of exactly the required length.

        Args:
            key: The hex-encoded key (case-insensitive)

        Returns:
            The key as bytes
        """
        if not isinstance(key, str) or len(key) != self.key_hex_length \
                or not _HEX_RE.fullmatch(key):
            raise InvalidKeyFormat(
                f"Key must be exactly {self.key_hex_length} hexadecimal "
                f"characters ({self.cipher.key_size * 8} bits)"
            )
        return hex_to_bytes(key)

    def _validate_ciphertext(self, ciphertext: str) -> bytes:
        granularity = self.block_size * 2
        if not isinstance(ciphertext, str) or not _HEX_RE.fullmatch(ciphertext) \
                or len(ciphertext) % granularity:
            raise InvalidCiphertextFormat(
                f"Ciphertext must be a hex string with length multiple of {granularity}"
            )
        return hex_to_bytes(ciphertext)

    def _process(self, data: bytes, round_keys: Sequence[Any],
                 transform: Callable[[bytes, Sequence[Any]], bytes]) -> bytes:
        """Apply a block transform to each block of data in turn."""
        bs = self.block_size
        result = bytearray()
        for i in range(0, len(data), bs):
            result.extend(transform(data[i:i + bs], round_keys))
        return bytes(result)

    def encrypt_bytes(self, data: bytes, key: str) -> bytes:
        """
        Pad and encrypt raw bytes.

        Args:
            data: The plaintext bytes
            key: The hex-encoded key

        Returns:
            The ciphertext bytes, a whole number of blocks
        """
        key_bytes = self.validate_key(key)
        round_keys = self.cipher.key_schedule(key_bytes)
        padded = pad(data, self.block_size)
        logger.debug("%s: encrypting %d bytes as %d blocks",
                     self.cipher.name, len(data), len(padded) // self.block_size)
        return self._process(padded, round_keys, self.cipher.encrypt_block)

    def decrypt_bytes(self, data: bytes, key: str) -> bytes:
        """
        Decrypt raw bytes and remove padding.

        Args:
            data: The ciphertext bytes, a whole number of blocks
            key: The hex-encoded key

        Returns:
            The unpadded plaintext bytes
        """
        key_bytes = self.validate_key(key)
        if not data or len(data) % self.block_size:
            raise InvalidCiphertextFormat(
                f"Ciphertext must be a non-empty multiple of {self.block_size} bytes"
            )
        round_keys = self.cipher.key_schedule(key_bytes)
        logger.debug("%s: decrypting %d blocks",
                     self.cipher.name, len(data) // self.block_size)
        padded = self._process(data, round_keys, self.cipher.decrypt_block)
        return unpad(padded, self.block_size, self.padding_policy)

    def encrypt(self, plaintext: str, key: str) -> str:
        """
        Encrypt a text message.

        Args:
            plaintext: The message
            key: The hex-encoded key

        Returns:
            The ciphertext as uppercase hex
        """
        # Key errors take precedence over plaintext errors
        self.validate_key(key)
        data = text_to_bytes(plaintext, self.text_encoding)
        return bytes_to_hex(self.encrypt_bytes(data, key))

    def decrypt(self, ciphertext: str, key: str) -> str:
        """
        Decrypt a hex ciphertext back to text.

        Args:
            ciphertext: The ciphertext as hex (either case)
            key: The hex-encoded key

        Returns:
            The decrypted message
        """
        self.validate_key(key)
        data = self._validate_ciphertext(ciphertext)
        return bytes_to_text(self.decrypt_bytes(data, key), self.text_encoding)


def encrypt(cipher: Any, plaintext: str, key: str,
            text_encoding: Optional[TextEncoding] = None) -> str:
    """
    Encrypt a message with the given block cipher in ECB mode.

    Args:
        cipher: The block cipher instance
        plaintext: The message
        key: The hex-encoded key
        text_encoding: Optional text encoding (Latin-1 if None)

    Returns:
        The ciphertext as uppercase hex
    """
    mode = ECBMode(cipher, text_encoding=text_encoding or TextEncoding.LATIN1)
    return mode.encrypt(plaintext, key)


def decrypt(cipher: Any, ciphertext: str, key: str,
            padding_policy: Optional[PaddingPolicy] = None,
            text_encoding: Optional[TextEncoding] = None) -> str:
    """
    Decrypt a hex ciphertext with the given block cipher in ECB mode.

    Args:
        cipher: The block cipher instance
        ciphertext: The ciphertext as hex
        key: The hex-encoded key
        padding_policy: Optional padding policy (lenient if None)
        text_encoding: Optional text encoding (Latin-1 if None)

    Returns:
        The decrypted message
    """
    mode = ECBMode(cipher,
                   padding_policy=padding_policy or PaddingPolicy.LENIENT,
                   text_encoding=text_encoding or TextEncoding.LATIN1)
    return mode.decrypt(ciphertext, key)
