"""
Cipher Registry

Looks up the block cipher engines by name and carries the educational
metadata shown alongside each one. Every engine honours the same contract:
encrypt(text, key) -> hex and decrypt(hex, key) -> text.
"""

from dataclasses import dataclass
from typing import Dict, List

from .block_mode.ecb_mode import ECBMode
from .cipher_core import FeistelCipher, SPNCipher
from .codec.conversions import TextEncoding, bytes_to_hex
from .codec.padding import PaddingPolicy
from .key_schedule.common import generate_key as _random_key


@dataclass(frozen=True)
class CipherInfo:
    """Descriptive information about a cipher engine."""
    name: str
    title: str
    formula: str
    description: str
    hint: str
    key_hint: str
    category: str
    structure: str
    security: str
    security_level: int


_CIPHERS = {
    'feistel': (FeistelCipher, CipherInfo(
        name='feistel',
        title='Feistel Block Cipher (DES)',
        formula='64-bit block, 56-bit key, 16 Feistel rounds',
        description='Legacy symmetric block cipher using a Feistel network '
                    'with S-boxes and permutations.',
        hint='Processes 64-bit blocks through 16 rounds. Each round uses '
             'expansion, S-box substitution, and permutation. The key is 64 '
             'bits (8 bytes) with 8 parity bits.',
        key_hint='16 hex characters (64-bit key)',
        category='Modern Symmetric',
        structure='Block Cipher (Feistel)',
        security='Legacy',
        security_level=3,
    )),
    'spn': (SPNCipher, CipherInfo(
        name='spn',
        title='SPN Block Cipher (AES-128)',
        formula='128-bit block, 128-bit key, 10 SPN rounds',
        description='Modern symmetric block cipher using SubBytes, ShiftRows, '
                    'MixColumns, and AddRoundKey.',
        hint='A substitution-permutation network. Each round applies byte '
             'substitution, row shifting, column mixing (except the last '
             'round), and key addition.',
        key_hint='32 hex characters (128-bit key)',
        category='Modern Symmetric',
        structure='Block Cipher (SPN)',
        security='Strong',
        security_level=5,
    )),
}

_ALIASES = {
    'des': 'feistel',
    'aes': 'spn',
    'aes128': 'spn',
    'aes-128': 'spn',
}


def _canonical(name: str) -> str:
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in _CIPHERS:
        raise KeyError(f"Unknown cipher '{name}'. Available: {', '.join(available_ciphers())}")
    return key


def available_ciphers() -> List[str]:
    """Canonical names of all registered engines."""
    return sorted(_CIPHERS)


def get_info(name: str) -> CipherInfo:
    """Return the descriptive information for a cipher (aliases accepted)."""
    return _CIPHERS[_canonical(name)][1]


def all_info() -> Dict[str, CipherInfo]:
    return {name: info for name, (_, info) in sorted(_CIPHERS.items())}


def get_engine(name: str,
               padding_policy: PaddingPolicy = PaddingPolicy.LENIENT,
               text_encoding: TextEncoding = TextEncoding.LATIN1) -> ECBMode:
    """
    Build a message encryption engine for a named cipher.

    Args:
        name: 'feistel' or 'spn' (or the aliases 'des' and 'aes')
        padding_policy: How malformed padding is treated on decryption
        text_encoding: How plaintext characters map to bytes

    Returns:
        An ECBMode instance wrapping a fresh cipher
    """
    cipher_cls, _ = _CIPHERS[_canonical(name)]
    return ECBMode(cipher_cls(), padding_policy=padding_policy,
                   text_encoding=text_encoding)


def generate_key(name: str) -> str:
    """Generate a random uppercase hex key of the right length for a cipher."""
    cipher_cls, _ = _CIPHERS[_canonical(name)]
    return bytes_to_hex(_random_key(cipher_cls.key_size))


def feistel_encrypt(plaintext: str, key: str) -> str:
    """Encrypt text with the Feistel cipher; key is 16 hex characters."""
    return get_engine('feistel').encrypt(plaintext, key)


def feistel_decrypt(ciphertext: str, key: str) -> str:
    """Decrypt Feistel ciphertext hex back to text."""
    return get_engine('feistel').decrypt(ciphertext, key)


def spn_encrypt(plaintext: str, key: str) -> str:
    """Encrypt text with the SPN cipher; key is 32 hex characters."""
    return get_engine('spn').encrypt(plaintext, key)


def spn_decrypt(ciphertext: str, key: str) -> str:
    """Decrypt SPN ciphertext hex back to text."""
    return get_engine('spn').decrypt(ciphertext, key)
