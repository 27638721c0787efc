"""
Error Taxonomy

All errors raised by cryptolab derive from CryptolabError, which is itself
a ValueError so that callers catching ValueError keep working.
"""


class CryptolabError(ValueError):
    """Base class for every error raised by the library."""


class FormatError(CryptolabError):
    """Input text is not in the expected hexadecimal or character format."""


class InvalidKeyFormat(FormatError):
    """The key is not a hex string of the exact length the cipher requires."""


class InvalidCiphertextFormat(FormatError):
    """The ciphertext is not hex, or its length is not a whole number of blocks."""


class InvalidPlaintextFormat(FormatError):
    """The plaintext holds characters the selected text encoding cannot represent."""


class PaddingError(CryptolabError):
    """Padding removal failed under the strict padding policy."""
