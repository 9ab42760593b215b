"""
Metrics Module
==============

This module contains functions for quantifying each sampling scenario:
- Sample and reconstruction error (how well samples track the reference)
- Apparent (aliased) frequency
- Signal-to-quantization-noise ratio and ENOB
"""

from .reconstruction_error import (
    compute_sample_error,
    compute_reconstruction_error
)
from .aliasing import compute_apparent_frequency_hz
from .quantization_noise import (
    compute_theoretical_sqnr_db,
    compute_measured_sqnr_db,
    compute_effective_number_of_bits
)

__all__ = [
    "compute_sample_error",
    "compute_reconstruction_error",
    "compute_apparent_frequency_hz",
    "compute_theoretical_sqnr_db",
    "compute_measured_sqnr_db",
    "compute_effective_number_of_bits"
]
