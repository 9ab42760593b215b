"""
Reconstruction Error
====================

This module measures how closely the sampled trace of a scenario follows
the continuous reference curve.

Two measures are provided:

1. Sample error: mean |quantized - exact| at the sampling instants.
   This isolates the quantization error, since every sample is an exact
   evaluation of the closed form before quantization.

2. Reconstruction error: the samples are joined by straight lines (the
   same connecting line the comparison chart draws) and compared with
   the reference curve at every fine time instant inside the sampled
   span. Aliasing shows up here: a 10 Hz tone sampled at 8 Hz joins
   into a 2 Hz zig-zag and lands far from the reference, while 240 Hz
   sampling tracks it to within a few thousandths.
"""

import numpy as np

from signals.signal_container import SignalContainer


def compute_sample_error(container: SignalContainer) -> float:
    """
    Mean absolute quantization error at the sampling instants.

    Args:
        container: One synthesized scenario.

    Returns:
        float: Mean |quantized - exact| over all samples.
    """
    quantization_error: np.ndarray = container.sampled_trace.get_quantization_error()
    return float(np.mean(np.abs(quantization_error)))


def compute_reconstruction_error(container: SignalContainer) -> float:
    """
    Mean absolute difference between the line-joined samples and the
    continuous reference curve.

    Process:
    1. Keep the reference instants inside [first sample, last sample]
    2. Linearly interpolate the quantized samples onto those instants
    3. Average the absolute difference from the reference amplitudes

    Args:
        container: One synthesized scenario.

    Returns:
        float: Mean absolute reconstruction error.
    """
    continuous_time: np.ndarray = container.continuous_trace.time_axis_seconds
    continuous_amplitudes: np.ndarray = container.continuous_trace.amplitudes
    sample_time: np.ndarray = container.sampled_trace.time_axis_seconds
    sample_amplitudes: np.ndarray = container.sampled_trace.amplitudes

    # ===== STEP 1: RESTRICT TO THE SAMPLED SPAN =====
    # Beyond the last sample there is nothing to reconstruct from
    in_span_mask: np.ndarray = continuous_time <= sample_time[-1]
    reference_time: np.ndarray = continuous_time[in_span_mask]
    reference_amplitudes: np.ndarray = continuous_amplitudes[in_span_mask]

    # ===== STEP 2: LINEAR RECONSTRUCTION =====
    reconstructed_amplitudes: np.ndarray = np.interp(
        reference_time, sample_time, sample_amplitudes
    )

    # ===== STEP 3: MEAN ABSOLUTE ERROR =====
    return float(np.mean(np.abs(reconstructed_amplitudes - reference_amplitudes)))
