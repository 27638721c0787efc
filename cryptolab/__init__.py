"""
cryptolab - Educational Block Cipher Library

This library implements two classic symmetric block ciphers for teaching:
a Feistel network cipher (64-bit block, 16 rounds, DES tables) and a
substitution-permutation network cipher (128-bit block, 10 rounds, AES-128
tables). Both share one contract: encrypt(text, hex_key) returns uppercase
hex and decrypt(hex, hex_key) returns the text.

Key Features:
- Bit-exact Feistel and SPN block transforms with their key schedules
- PKCS#7-style padding with lenient or strict removal
- Electronic codebook message mode with key and ciphertext validation
- S-box metrics and avalanche measurement
- A small command line front-end

Not for protecting real data: no chaining mode, no authentication, no
side-channel hardening.
"""

from .exceptions import (CryptolabError, FormatError, InvalidKeyFormat,
                         InvalidCiphertextFormat, InvalidPlaintextFormat,
                         PaddingError)
from .codec import PaddingPolicy, TextEncoding
from .block_mode import ECBMode
from .cipher_core import FeistelCipher, SPNCipher
from .registry import (get_engine, get_info, available_ciphers, generate_key,
                       feistel_encrypt, feistel_decrypt, spn_encrypt, spn_decrypt)

__version__ = '0.1.0'
__author__ = 'cryptolab contributors'

__all__ = [
    'CryptolabError', 'FormatError', 'InvalidKeyFormat',
    'InvalidCiphertextFormat', 'InvalidPlaintextFormat', 'PaddingError',
    'PaddingPolicy', 'TextEncoding', 'ECBMode', 'FeistelCipher', 'SPNCipher',
    'get_engine', 'get_info', 'available_ciphers', 'generate_key',
    'feistel_encrypt', 'feistel_decrypt', 'spn_encrypt', 'spn_decrypt',
]
