"""
Signal Container
================

This module provides the data classes that carry the traces of one
sampling scenario from the signal generator to the metrics and the
comparison plotter.

The signal flow for one scenario is:
[SignalParameters] → [Continuous reference trace]
                   → [Sampled instants] → [Quantized sample trace]

All arrays are made read-only when a trace is created, so a trace can
be handed to several consumers without any of them altering it.
"""

import numpy as np
from dataclasses import dataclass

from .signal_parameters import SignalParameters


def _freeze_array(values: np.ndarray) -> np.ndarray:
    """Return a read-only float64 copy of ``values``."""
    frozen: np.ndarray = np.array(values, dtype=np.float64, copy=True)
    frozen.flags.writeable = False
    return frozen


@dataclass(frozen=True)
class ContinuousTrace:
    """
    Densely evaluated reference curve.

    Attributes:
        time_axis_seconds: Uniform fine time grid covering [0, duration].
        amplitudes: Closed-form signal value at each time instant.
    """
    time_axis_seconds: np.ndarray
    amplitudes: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "time_axis_seconds", _freeze_array(self.time_axis_seconds))
        object.__setattr__(self, "amplitudes", _freeze_array(self.amplitudes))

        if len(self.amplitudes) != len(self.time_axis_seconds):
            raise ValueError("Continuous trace length mismatch")

    def get_number_of_points(self) -> int:
        """Return the number of points in the trace."""
        return len(self.time_axis_seconds)

    def get_time_step_seconds(self) -> float:
        """Return the spacing of the fine time grid."""
        return float(self.time_axis_seconds[1] - self.time_axis_seconds[0])


@dataclass(frozen=True)
class SampledTrace:
    """
    Discretely sampled and quantized curve.

    Attributes:
        time_axis_seconds: Sampling instants k / sampling_rate.
        exact_amplitudes: Closed-form signal value at each instant,
            before quantization.
        amplitudes: Quantized sample values (what a digital system stores).
    """
    time_axis_seconds: np.ndarray
    exact_amplitudes: np.ndarray
    amplitudes: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "time_axis_seconds", _freeze_array(self.time_axis_seconds))
        object.__setattr__(self, "exact_amplitudes", _freeze_array(self.exact_amplitudes))
        object.__setattr__(self, "amplitudes", _freeze_array(self.amplitudes))

        expected_length: int = len(self.time_axis_seconds)
        if len(self.exact_amplitudes) != expected_length:
            raise ValueError("Exact sample length mismatch")
        if len(self.amplitudes) != expected_length:
            raise ValueError("Quantized sample length mismatch")

    def get_number_of_samples(self) -> int:
        """Return the number of samples in the trace."""
        return len(self.time_axis_seconds)

    def get_quantization_error(self) -> np.ndarray:
        """Return quantized minus exact amplitude for every sample."""
        return self.amplitudes - self.exact_amplitudes


@dataclass(frozen=True)
class SignalContainer:
    """
    One scenario of the comparison: parameters plus both traces.

    Attributes:
        parameters: The SignalParameters the traces were generated from.
        continuous_trace: Fine reference curve over [0, duration].
        sampled_trace: Quantized samples over [0, duration).
        duration_seconds: Length of the time window.
    """
    parameters: SignalParameters
    continuous_trace: ContinuousTrace
    sampled_trace: SampledTrace
    duration_seconds: float

    def validate(self) -> bool:
        """Validate that both traces cover the same time window."""
        continuous_time: np.ndarray = self.continuous_trace.time_axis_seconds
        sample_time: np.ndarray = self.sampled_trace.time_axis_seconds

        if continuous_time[0] != 0.0 or sample_time[0] != 0.0:
            raise ValueError("Traces must start at t = 0")

        if continuous_time[-1] != self.duration_seconds:
            raise ValueError("Continuous trace must end at the duration")

        if sample_time[-1] >= self.duration_seconds:
            raise ValueError("Sampled trace must end before the duration")

        return True
