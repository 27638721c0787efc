import pytest

from cryptolab.bits import bits_to_int
from cryptolab.key_schedule import expand_key, generate_key, generate_round_keys
from cryptolab.key_schedule.common import rotate_left
from cryptolab.key_schedule.spn_schedule import rot_word, sub_word


def test_rotate_left():
    assert rotate_left(0x80000001, 1) == 0x00000003
    assert rotate_left(0x12345678, 8) == 0x34567812
    assert rotate_left(0b1001, 1, size=4) == 0b0011


def test_generate_key_length():
    assert len(generate_key(8)) == 8
    assert len(generate_key(16)) == 16


class TestFeistelSchedule:

    def test_known_subkeys(self):
        keys = generate_round_keys(bytes.fromhex('133457799BBCDFF1'))
        assert len(keys) == 16
        assert all(len(k) == 48 for k in keys)
        assert bits_to_int(keys[0]) == 0x1B02EFFC7072
        assert bits_to_int(keys[1]) == 0x79AED9DBC9E5
        assert bits_to_int(keys[15]) == 0xCB3D8B0E17F5

    def test_parity_bits_are_ignored(self):
        key = bytes.fromhex('133457799BBCDFF1')
        flipped = bytes(b ^ 0x01 for b in key)
        for a, b in zip(generate_round_keys(key), generate_round_keys(flipped)):
            assert (a == b).all()

    def test_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            generate_round_keys(b'\x00' * 7)


class TestSPNSchedule:

    def test_word_helpers(self):
        assert rot_word(0x09cf4f3c) == 0xcf4f3c09
        assert sub_word(0xcf4f3c09) == 0x8a84eb01

    def test_known_round_keys(self):
        keys = expand_key(bytes.fromhex('2b7e151628aed2a6abf7158809cf4f3c'))
        assert len(keys) == 11
        assert all(len(k) == 16 for k in keys)
        assert keys[0].hex() == '2b7e151628aed2a6abf7158809cf4f3c'
        assert keys[1].hex() == 'a0fafe1788542cb123a339392a6c7605'
        assert keys[10].hex() == 'd014f9a8c9ee2589e13f0cc8b6630ca6'

    def test_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            expand_key(b'\x00' * 15)
