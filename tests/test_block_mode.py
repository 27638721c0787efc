import pytest
from Cryptodome.Cipher import AES, DES
from Cryptodome.Util.Padding import pad

from cryptolab.block_mode import ECBMode, decrypt, encrypt
from cryptolab.cipher_core import FeistelCipher, SPNCipher
from cryptolab.codec import PaddingPolicy, TextEncoding, bytes_to_hex
from cryptolab.exceptions import (InvalidCiphertextFormat, InvalidKeyFormat,
                                  InvalidPlaintextFormat, PaddingError)

from .conftest import FEISTEL_KEY, SPN_KEY


def _reference(name, key_hex, plaintext):
    key = bytes.fromhex(key_hex)
    if name == 'feistel':
        cipher, block_size = DES.new(key, DES.MODE_ECB), 8
    else:
        cipher, block_size = AES.new(key, AES.MODE_ECB), 16
    return cipher.encrypt(pad(plaintext.encode('latin-1'), block_size)).hex().upper()


class TestScenarios:

    def test_feistel_hello(self):
        engine = ECBMode(FeistelCipher())
        ciphertext = engine.encrypt('HELLO', FEISTEL_KEY)
        assert ciphertext == _reference('feistel', FEISTEL_KEY, 'HELLO')
        assert len(ciphertext) == 16
        assert engine.decrypt(ciphertext, FEISTEL_KEY) == 'HELLO'

    def test_spn_hello(self):
        engine = ECBMode(SPNCipher())
        ciphertext = engine.encrypt('HELLO', SPN_KEY)
        assert ciphertext == _reference('spn', SPN_KEY, 'HELLO')
        assert len(ciphertext) == 32
        assert engine.decrypt(ciphertext, SPN_KEY) == 'HELLO'

    @pytest.mark.parametrize('plaintext', ['', 'a', 'exactly8', 'The quick brown fox jumps over the lazy dog'])
    def test_matches_reference_with_padding(self, engine_and_key, plaintext):
        engine, key = engine_and_key
        assert engine.encrypt(plaintext, key) == _reference(engine.cipher.name, key, plaintext)


class TestProperties:

    @pytest.mark.parametrize('plaintext', [
        '', 'HELLO', '1234567', '12345678', '0123456789abcdef',
        'Latin-1 é ü ÿ ©', '\x00\x01\x02\x7f\x80\xff',
    ])
    def test_round_trip(self, engine_and_key, plaintext):
        engine, key = engine_and_key
        assert engine.decrypt(engine.encrypt(plaintext, key), key) == plaintext

    def test_deterministic(self, engine_and_key):
        engine, key = engine_and_key
        assert engine.encrypt('same input', key) == engine.encrypt('same input', key)

    def test_output_is_uppercase_hex(self, engine_and_key):
        engine, key = engine_and_key
        ciphertext = engine.encrypt('HELLO', key)
        assert ciphertext == ciphertext.upper()
        int(ciphertext, 16)

    def test_key_case_does_not_matter(self, engine_and_key):
        engine, key = engine_and_key
        assert engine.encrypt('HELLO', key.lower()) == engine.encrypt('HELLO', key.upper())

    def test_lowercase_ciphertext_accepted(self, engine_and_key):
        engine, key = engine_and_key
        assert engine.decrypt(engine.encrypt('HELLO', key).lower(), key) == 'HELLO'

    def test_block_independence(self, engine_and_key):
        engine, key = engine_and_key
        bs = engine.block_size
        first = 'A' * bs + 'B' * bs + 'C' * bs
        second = 'A' * bs + 'X' * bs + 'C' * bs
        a = engine.encrypt(first, key)
        b = engine.encrypt(second, key)
        width = bs * 2
        chunks_a = [a[i:i + width] for i in range(0, len(a), width)]
        chunks_b = [b[i:i + width] for i in range(0, len(b), width)]
        assert len(chunks_a) == len(chunks_b) == 4
        assert chunks_a[0] == chunks_b[0]
        assert chunks_a[1] != chunks_b[1]
        assert chunks_a[2:] == chunks_b[2:]

    def test_identical_blocks_encrypt_identically(self, engine_and_key):
        engine, key = engine_and_key
        ciphertext = engine.encrypt('Z' * engine.block_size * 2, key)
        width = engine.block_size * 2
        assert ciphertext[:width] == ciphertext[width:2 * width]

    @pytest.mark.parametrize('blocks', [0, 1, 3])
    def test_padding_boundary(self, engine_and_key, blocks):
        engine, key = engine_and_key
        bs = engine.block_size
        ciphertext = engine.encrypt('x' * (blocks * bs), key)
        assert len(ciphertext) // 2 == (blocks + 1) * bs

    def test_different_keys_differ(self, engine_and_key):
        engine, key = engine_and_key
        other = 'F' + key[1:] if key[0] != 'F' else '0' + key[1:]
        assert engine.encrypt('HELLO', key) != engine.encrypt('HELLO', other)


class TestValidation:

    @pytest.mark.parametrize('bad_key', ['not-hex', '00', '', 'G' * 16, 'G' * 32])
    def test_encrypt_rejects_bad_key(self, engine_and_key, bad_key):
        engine, _ = engine_and_key
        with pytest.raises(InvalidKeyFormat):
            engine.encrypt('anything', bad_key)

    def test_key_with_trailing_newline_rejected(self, engine_and_key):
        engine, key = engine_and_key
        with pytest.raises(InvalidKeyFormat):
            engine.encrypt('anything', key + '\n')

    def test_key_for_other_engine_rejected(self):
        with pytest.raises(InvalidKeyFormat, match='16 hexadecimal'):
            ECBMode(FeistelCipher()).encrypt('x', SPN_KEY)
        with pytest.raises(InvalidKeyFormat, match='32 hexadecimal'):
            ECBMode(SPNCipher()).encrypt('x', FEISTEL_KEY)

    def test_non_string_key_rejected(self, engine_and_key):
        engine, _ = engine_and_key
        with pytest.raises(InvalidKeyFormat):
            engine.encrypt('x', None)

    @pytest.mark.parametrize('bad', ['zz', 'AB', '', '0123456789ABCDEF0', 'XYZ' * 16])
    def test_decrypt_rejects_bad_ciphertext(self, engine_and_key, bad):
        engine, key = engine_and_key
        with pytest.raises(InvalidCiphertextFormat):
            engine.decrypt(bad, key)

    def test_feistel_ciphertext_granularity_is_one_block(self):
        engine = ECBMode(FeistelCipher())
        # 16 hex characters is a whole Feistel block but half an SPN block
        ciphertext = engine.encrypt('HELLO', FEISTEL_KEY)
        with pytest.raises(InvalidCiphertextFormat):
            ECBMode(SPNCipher()).decrypt(ciphertext, SPN_KEY)

    def test_key_error_takes_precedence(self, engine_and_key):
        engine, _ = engine_and_key
        with pytest.raises(InvalidKeyFormat):
            engine.decrypt('zz', 'bad')

    def test_decrypt_bytes_rejects_partial_block(self, engine_and_key):
        engine, key = engine_and_key
        with pytest.raises(InvalidCiphertextFormat):
            engine.decrypt_bytes(b'\x00' * (engine.block_size + 1), key)

    def test_wide_character_rejected_in_latin1(self, engine_and_key):
        engine, key = engine_and_key
        with pytest.raises(InvalidPlaintextFormat):
            engine.encrypt('snow ☃', key)


class TestPolicies:

    def _encrypt_raw_block(self, engine, key, block):
        cipher = engine.cipher
        round_keys = cipher.key_schedule(bytes.fromhex(key))
        return bytes_to_hex(cipher.encrypt_block(block, round_keys))

    def test_lenient_returns_unpadded_block_unchanged(self, engine_and_key):
        engine, key = engine_and_key
        block = b'A' * (engine.block_size - 1) + b'\x00'
        ciphertext = self._encrypt_raw_block(engine, key, block)
        assert engine.decrypt(ciphertext, key) == block.decode('latin-1')

    def test_strict_raises_on_bad_padding(self, engine_and_key):
        engine, key = engine_and_key
        strict = ECBMode(engine.cipher, padding_policy=PaddingPolicy.STRICT)
        block = b'A' * (engine.block_size - 1) + b'\x00'
        ciphertext = self._encrypt_raw_block(engine, key, block)
        with pytest.raises(PaddingError):
            strict.decrypt(ciphertext, key)

    def test_strict_round_trip(self, engine_and_key):
        engine, key = engine_and_key
        strict = ECBMode(engine.cipher, padding_policy=PaddingPolicy.STRICT)
        assert strict.decrypt(strict.encrypt('HELLO', key), key) == 'HELLO'

    def test_utf8_round_trip(self, engine_and_key):
        engine, key = engine_and_key
        utf8 = ECBMode(engine.cipher, text_encoding=TextEncoding.UTF8)
        text = 'snow ☃ and ünïcode'
        assert utf8.decrypt(utf8.encrypt(text, key), key) == text

    def test_utf8_changes_ciphertext_only_for_non_ascii(self, engine_and_key):
        engine, key = engine_and_key
        utf8 = ECBMode(engine.cipher, text_encoding=TextEncoding.UTF8)
        assert utf8.encrypt('HELLO', key) == engine.encrypt('HELLO', key)
        assert utf8.encrypt('é', key) != engine.encrypt('é', key)

    def test_utf8_invalid_bytes(self, engine_and_key):
        engine, key = engine_and_key
        utf8 = ECBMode(engine.cipher, text_encoding=TextEncoding.UTF8)
        pad_len = engine.block_size - 2
        block = b'\xff\xfe' + bytes([pad_len]) * pad_len
        ciphertext = self._encrypt_raw_block(engine, key, block)
        with pytest.raises(InvalidCiphertextFormat):
            utf8.decrypt(ciphertext, key)


def test_module_level_helpers():
    ciphertext = encrypt(FeistelCipher(), 'HELLO', FEISTEL_KEY)
    assert ciphertext == ECBMode(FeistelCipher()).encrypt('HELLO', FEISTEL_KEY)
    assert decrypt(FeistelCipher(), ciphertext, FEISTEL_KEY) == 'HELLO'
    assert decrypt(SPNCipher(), encrypt(SPNCipher(), 'é', SPN_KEY,
                                        text_encoding=TextEncoding.UTF8),
                   SPN_KEY, text_encoding=TextEncoding.UTF8) == 'é'
