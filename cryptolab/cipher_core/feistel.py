"""
Feistel Block Cipher Implementation

A 16-round Feistel network over 64-bit blocks with a 64-bit key (56
effective bits). Each round swaps the halves and XORs the left half with
F(right, subkey), where F expands, mixes in the subkey, substitutes through
eight 6-to-4 bit S-boxes and permutes. Decryption runs the same network
with the subkeys reversed.
"""

from typing import List, Sequence

import numpy as np

from ..bits import to_bits, from_bits, permute
from ..key_schedule.feistel_schedule import generate_round_keys
from ..config import FEISTEL_DEFAULT_PARAMS
from ..tables import IP, FP, E, P, FEISTEL_SBOXES

HALF_BITS = 32
_COLUMN_WEIGHTS = np.array([8, 4, 2, 1])


class FeistelCipher:
    """
    Feistel network block cipher with a 64-bit block, a 64-bit key and
    16 rounds.
    """

    name = 'feistel'
    block_size = FEISTEL_DEFAULT_PARAMS['block_size']
    key_size = FEISTEL_DEFAULT_PARAMS['key_size']
    num_rounds = FEISTEL_DEFAULT_PARAMS['num_rounds']

    def __init__(self):
        # Shape (8, 4, 16): box, row, column
        self.sboxes = np.array(FEISTEL_SBOXES, dtype=np.uint8)
        self._box_index = np.arange(len(FEISTEL_SBOXES))

    def key_schedule(self, key: bytes) -> List[np.ndarray]:
        """Derive the 16 round subkeys, in encryption order."""
        return generate_round_keys(key)

    def _substitute(self, bits: np.ndarray) -> np.ndarray:
        """
        Run 48 bits through the eight S-boxes, producing 32 bits.

        In each 6-bit group the outer bits select the row and the middle
        four bits select the column.
        """
        groups = bits.reshape(8, 6)
        rows = groups[:, 0] * 2 + groups[:, 5]
        cols = groups[:, 1:5] @ _COLUMN_WEIGHTS
        values = self.sboxes[self._box_index, rows, cols]
        return np.unpackbits(values[:, None], axis=1)[:, 4:].reshape(-1)

    def _round_function(self, right: np.ndarray, subkey: np.ndarray) -> np.ndarray:
        """F(R, K): expand, XOR with the subkey, substitute, permute."""
        return permute(self._substitute(permute(right, E) ^ subkey), P)

    def process_block(self, block: bytes, round_keys: Sequence[np.ndarray]) -> bytes:
        """
        Run one 8-byte block through the Feistel network.

        Args:
            block: The input block
            round_keys: Subkeys in the order they are applied

        Returns:
            The output block
        """
        if len(block) != self.block_size:
            raise ValueError(f"Block must be exactly {self.block_size} bytes")
        if len(round_keys) != self.num_rounds:
            raise ValueError(f"Expected {self.num_rounds} round keys, got {len(round_keys)}")

        bits = permute(to_bits(block), IP)
        left, right = bits[:HALF_BITS], bits[HALF_BITS:]

        for subkey in round_keys:
            left, right = right, left ^ self._round_function(right, subkey)

        # Halves are swapped back before the final permutation
        return from_bits(permute(np.concatenate((right, left)), FP))

    def encrypt_block(self, plaintext: bytes, round_keys: Sequence[np.ndarray]) -> bytes:
        return self.process_block(plaintext, round_keys)

    def decrypt_block(self, ciphertext: bytes, round_keys: Sequence[np.ndarray]) -> bytes:
        return self.process_block(ciphertext, list(reversed(round_keys)))
