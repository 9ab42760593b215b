"""
Aliasing Metrics
================

A tone at frequency f, sampled at fs, yields exactly the same samples as
a tone at f - n * fs for any integer n. The lowest such frequency is the
one the samples "appear" to carry:

    f_apparent = |f - fs * round(f / fs)|

Examples (10 Hz tone):
    fs = 8 Hz   → 2 Hz   (severe aliasing)
    fs = 12 Hz  → 2 Hz   (aliasing)
    fs = 24 Hz  → 10 Hz  (just above Nyquist, correct frequency)
    fs = 240 Hz → 10 Hz
"""

import numpy as np

from errors import InvalidParameterError


def compute_apparent_frequency_hz(
    signal_frequency_hz: float,
    sampling_rate_hz: float
) -> float:
    """
    Return the frequency the sampled tone appears to have.

    Args:
        signal_frequency_hz: True tone frequency in Hz.
        sampling_rate_hz: Sampling rate in Hz, > 0.

    Returns:
        float: Apparent frequency in [0, fs / 2].
    """
    if sampling_rate_hz <= 0:
        raise InvalidParameterError(
            f"Sampling rate must be positive. Received: {sampling_rate_hz} Hz"
        )

    nearest_multiple: float = np.floor(signal_frequency_hz / sampling_rate_hz + 0.5)
    return float(abs(signal_frequency_hz - sampling_rate_hz * nearest_multiple))
