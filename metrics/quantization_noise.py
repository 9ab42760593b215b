"""
Quantization Noise
==================

Signal-to-quantization-noise ratio (SQNR) of the sampled trace.

For an ideal N-bit converter driven by a full-scale sine wave:

    SQNR (dB) = 6.02 * N + 1.76

Where:
- 6.02 dB comes from the fact that each bit doubles the number of
  quantization levels, improving SQNR by 20*log10(2) ≈ 6.02 dB
- 1.76 dB is the correction for the power of a full-scale sine wave

A decaying sine spends most of its time below full scale, so the
measured value is lower than the theoretical one. The gap is expected.
"""

import numpy as np


def compute_theoretical_sqnr_db(bit_depth: int) -> float:
    """
    Ideal SQNR of an N-bit quantizer for a full-scale sine.

    Example:
        16 bits → 6.02 * 16 + 1.76 ≈ 98.1 dB
    """
    return 6.02 * bit_depth + 1.76


def compute_measured_sqnr_db(
    exact_signal: np.ndarray,
    quantized_signal: np.ndarray
) -> float:
    """
    Measure SQNR from exact and quantized samples.

    Args:
        exact_signal: Closed-form values before quantization.
        quantized_signal: The same samples after quantization.

    Returns:
        float: SQNR in dB. ``inf`` if the quantization error is zero,
            ``-inf`` if the signal itself has zero power.
    """
    signal_power: float = float(np.mean(np.square(exact_signal)))
    noise_power: float = float(np.mean(np.square(quantized_signal - exact_signal)))

    if noise_power == 0.0:
        return float("inf")
    if signal_power == 0.0:
        return float("-inf")

    return 10.0 * np.log10(signal_power / noise_power)


def compute_effective_number_of_bits(signal_to_noise_ratio_db: float) -> float:
    """
    Compute ENOB from an SQNR value.

    Formula:  ENOB = (SQNR - 1.76) / 6.02
    """
    return (signal_to_noise_ratio_db - 1.76) / 6.02
