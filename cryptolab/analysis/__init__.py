"""
Analysis Package

This package measures the confusion and diffusion properties of the
ciphers: differential and linear quality of the S-boxes, and the avalanche
behaviour of the full block transforms.
"""

from .sbox_metrics import (evaluate_sbox, calculate_differential_uniformity,
                           calculate_linear_bias, feistel_sbox_as_table)
from .avalanche import avalanche, bit_difference

__all__ = ['evaluate_sbox', 'calculate_differential_uniformity',
           'calculate_linear_bias', 'feistel_sbox_as_table',
           'avalanche', 'bit_difference']
