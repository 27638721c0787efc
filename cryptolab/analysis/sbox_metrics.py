"""
S-box Evaluation

This module measures the cryptographic quality of substitution boxes,
focusing on differential uniformity and linear bias. It works for any
n-bit to m-bit lookup table, so it covers both the 8-bit SPN S-box and the
6-to-4 bit Feistel S-boxes.
"""

import logging
from typing import Dict, List, Sequence

import numpy as np

from ..tables import FEISTEL_SBOXES

logger = logging.getLogger(__name__)


def _dimensions(sbox: Sequence[int]) -> tuple:
    size = len(sbox)
    if size < 2 or size & (size - 1):
        raise ValueError("S-box length must be a power of two")
    in_bits = (size - 1).bit_length()
    out_bits = max(int(max(sbox)).bit_length(), 1)
    return in_bits, out_bits


def _parity_table(bits: int) -> np.ndarray:
    values = np.arange(1 << bits)
    parity = np.zeros(1 << bits, dtype=np.int32)
    for i in range(bits):
        parity ^= (values >> i) & 1
    return parity


def calculate_differential_uniformity(sbox: Sequence[int]) -> int:
    """
    Calculate the differential uniformity of an S-box.

    Lower values indicate better resistance to differential cryptanalysis.

    Args:
        sbox: The S-box to evaluate

    Returns:
        The largest entry of the difference distribution table over
        non-zero input differences
    """
    in_bits, out_bits = _dimensions(sbox)
    table = np.asarray(sbox, dtype=np.int64)
    xs = np.arange(1 << in_bits)

    ddt = np.zeros((1 << in_bits, 1 << out_bits), dtype=np.int32)
    for dx in range(1, 1 << in_bits):
        dy = table ^ table[xs ^ dx]
        ddt[dx] = np.bincount(dy, minlength=1 << out_bits)

    return int(ddt[1:, :].max())


def calculate_linear_bias(sbox: Sequence[int]) -> float:
    """
    Calculate the linear bias of an S-box.

    Lower values indicate better resistance to linear cryptanalysis.

    Args:
        sbox: The S-box to evaluate

    Returns:
        The largest absolute linear approximation table entry over
        non-zero masks, normalised to [0, 1]
    """
    in_bits, out_bits = _dimensions(sbox)
    table = np.asarray(sbox, dtype=np.int64)
    xs = np.arange(1 << in_bits)
    parity_in = _parity_table(in_bits)
    parity_out = _parity_table(out_bits)

    # (-1)^(a.x) for every input mask a and input x, and likewise for outputs
    signs_in = 1 - 2 * parity_in[np.bitwise_and.outer(np.arange(1 << in_bits), xs)]
    signs_out = 1 - 2 * parity_out[np.bitwise_and.outer(np.arange(1 << out_bits), table)]

    # Walsh correlation is twice the LAT entry
    lat = (signs_in @ signs_out.T) // 2
    max_bias = int(np.abs(lat[1:, 1:]).max())

    return max_bias / (1 << (in_bits - 1))


def calculate_nonlinearity(sbox: Sequence[int]) -> int:
    """Distance to the nearest affine function, 2^(n-1) minus the max LAT entry."""
    in_bits, _ = _dimensions(sbox)
    half = 1 << (in_bits - 1)
    return half - int(round(calculate_linear_bias(sbox) * half))


def evaluate_sbox(sbox: Sequence[int]) -> Dict[str, float]:
    """
    Evaluate an S-box for cryptographic properties.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A dictionary of scores (lower is better for differential and linear)
    """
    diff_score = calculate_differential_uniformity(sbox)
    linear_score = calculate_linear_bias(sbox)

    return {
        'differential': diff_score,
        'linear': linear_score,
        'nonlinearity': calculate_nonlinearity(sbox),
        'bijective': len(set(sbox)) == len(sbox),
    }


def feistel_sbox_as_table(index: int) -> List[int]:
    """
    Flatten one 4x16 Feistel S-box into a 64-entry lookup table.

    Entry x is the output for the raw 6-bit input x, with the outer bits of x
    selecting the row and the middle four bits the column.

    Args:
        index: S-box number, 0 to 7

    Returns:
        A list of 64 four-bit outputs
    """
    box = FEISTEL_SBOXES[index]
    return [box[((x >> 4) & 0b10) | (x & 1)][(x >> 1) & 0xF] for x in range(64)]


if __name__ == "__main__":
    from ..tables import SPN_SBOX

    metrics = evaluate_sbox(SPN_SBOX)
    print(f"Differential uniformity: {metrics['differential']}")
    print(f"Linear bias: {metrics['linear']}")
    print(f"Nonlinearity: {metrics['nonlinearity']}")
