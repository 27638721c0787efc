"""
SPN Block Cipher Implementation

This module provides the core implementation of the SPNCipher, a
Substitution-Permutation Network with a 128-bit block, a 128-bit key and
10 rounds. The state is a 4x4 byte matrix filled column by column; each
round substitutes bytes, shifts rows, mixes columns over GF(2^8) and adds
the round key. The final round skips the column mix.
"""

from typing import List, Sequence

import numpy as np

from ..config import SPN_DEFAULT_PARAMS
from ..key_schedule.spn_schedule import expand_key
from ..tables import SPN_SBOX, SPN_INV_SBOX, MIX_MATRIX, INV_MIX_MATRIX

# x^8 + x^4 + x^3 + x + 1 with the x^8 term dropped
REDUCTION = 0x1B


def xtime(a: int) -> int:
    """Multiply by x (that is, 2) in GF(2^8)."""
    a <<= 1
    if a & 0x100:
        a ^= REDUCTION
    return a & 0xFF


def gmul(a: int, b: int) -> int:
    """
    Multiply two elements of GF(2^8) modulo 0x11B.

    Shift-and-add: for each set bit of b, accumulate the matching doubling
    of a.
    """
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = xtime(a)
        b >>= 1
    return result & 0xFF


class SPNCipher:
    """
    Substitution-Permutation Network block cipher with a 128-bit block,
    a 128-bit key and 10 rounds.
    """

    name = 'spn'
    block_size = SPN_DEFAULT_PARAMS['block_size']
    key_size = SPN_DEFAULT_PARAMS['key_size']
    num_rounds = SPN_DEFAULT_PARAMS['num_rounds']

    def __init__(self):
        self.sbox = np.array(SPN_SBOX, dtype=np.uint8)
        self.inv_sbox = np.array(SPN_INV_SBOX, dtype=np.uint8)

    def key_schedule(self, key: bytes) -> List[bytes]:
        """Expand the key into num_rounds + 1 round keys."""
        return expand_key(key)

    @staticmethod
    def _bytes_to_state(block: bytes) -> np.ndarray:
        """Load 16 bytes into a 4x4 state indexed [row, column], column-major."""
        return np.frombuffer(block, dtype=np.uint8).reshape(4, 4).T.copy()

    @staticmethod
    def _state_to_bytes(state: np.ndarray) -> bytes:
        """Read the state back out column by column."""
        return state.T.tobytes()

    def _substitute_bytes(self, state: np.ndarray, inverse: bool = False) -> np.ndarray:
        """
        Apply the S-box substitution to each byte of the state.

        Args:
            state: The current state
            inverse: Whether to use the inverse S-box (for decryption)

        Returns:
            The state after substitution
        """
        sbox_table = self.inv_sbox if inverse else self.sbox
        return sbox_table[state]

    def _shift_rows(self, state: np.ndarray, inverse: bool = False) -> np.ndarray:
        """Cyclically shift row r left by r positions (right when inverse)."""
        shifted = state.copy()
        for r in range(1, 4):
            shifted[r] = np.roll(state[r], r if inverse else -r)
        return shifted

    def _mix_columns(self, state: np.ndarray, inverse: bool = False) -> np.ndarray:
        """
        Multiply every column by the fixed mix matrix over GF(2^8).

        Args:
            state: The current state
            inverse: Whether to use the inverse matrix (for decryption)

        Returns:
            The state after mixing
        """
        matrix = INV_MIX_MATRIX if inverse else MIX_MATRIX
        mixed = np.empty_like(state)
        for c in range(4):
            column = [int(b) for b in state[:, c]]
            for r in range(4):
                value = 0
                for coeff, b in zip(matrix[r], column):
                    value ^= gmul(b, coeff)
                mixed[r, c] = value
        return mixed

    def _add_round_key(self, state: np.ndarray, round_key: bytes) -> np.ndarray:
        """XOR the state with the round key."""
        return state ^ self._bytes_to_state(round_key)

    def _check_block(self, block: bytes, round_keys: Sequence[bytes]) -> None:
        if len(block) != self.block_size:
            raise ValueError(f"Block must be exactly {self.block_size} bytes")
        if len(round_keys) != self.num_rounds + 1:
            raise ValueError(f"Expected {self.num_rounds + 1} round keys, "
                             f"got {len(round_keys)}")

    def encrypt_block(self, plaintext: bytes, round_keys: Sequence[bytes]) -> bytes:
        """
        Encrypt a single 16-byte block.

        Args:
            plaintext: The plaintext block
            round_keys: Round keys from key_schedule()

        Returns:
            The encrypted ciphertext block
        """
        self._check_block(plaintext, round_keys)

        state = self._add_round_key(self._bytes_to_state(plaintext), round_keys[0])

        for r in range(1, self.num_rounds):
            state = self._substitute_bytes(state)
            state = self._shift_rows(state)
            state = self._mix_columns(state)
            state = self._add_round_key(state, round_keys[r])

        # Final round (no column mix)
        state = self._substitute_bytes(state)
        state = self._shift_rows(state)
        state = self._add_round_key(state, round_keys[self.num_rounds])

        return self._state_to_bytes(state)

    def decrypt_block(self, ciphertext: bytes, round_keys: Sequence[bytes]) -> bytes:
        """
        Decrypt a single 16-byte block.

        Args:
            ciphertext: The ciphertext block
            round_keys: Round keys from key_schedule(), in encryption order

        Returns:
            The decrypted plaintext block
        """
        self._check_block(ciphertext, round_keys)

        state = self._add_round_key(self._bytes_to_state(ciphertext),
                                    round_keys[self.num_rounds])

        for r in range(self.num_rounds - 1, 0, -1):
            state = self._shift_rows(state, inverse=True)
            state = self._substitute_bytes(state, inverse=True)
            state = self._add_round_key(state, round_keys[r])
            state = self._mix_columns(state, inverse=True)

        state = self._shift_rows(state, inverse=True)
        state = self._substitute_bytes(state, inverse=True)
        state = self._add_round_key(state, round_keys[0])

        return self._state_to_bytes(state)
