"""
Decaying Sine Generator
=======================

This module generates the two traces shown in every cell of the
sampling comparison chart:

1. A continuous reference curve, evaluated on a fine time grid
2. A sampled curve, evaluated at the sampling instants and quantized
   to the scenario's bit depth

Both traces come from the same closed form:

    x(t) = exp(-decay_rate * t) * sin(2 * π * f * t)

The sampled trace is an exact evaluation at t = k / fs. It is never
interpolated from the continuous trace, so its values do not depend
on the resolution of the reference curve.

Sampling Convention:
    Sample instants cover the half-open window [0, duration). A sample
    landing exactly on t = duration is excluded, so 1 second at 8 Hz
    gives exactly 8 samples (k = 0..7).
"""

import math
import numbers
import numpy as np
from typing import Union

from errors import InvalidParameterError
from quantization.uniform_quantizer import UniformQuantizer

from .signal_container import ContinuousTrace, SampledTrace, SignalContainer
from .signal_parameters import SignalParameters


DEFAULT_DECAY_RATE_PER_SECOND: float = 0.5
DEFAULT_FINE_RESOLUTION_POINTS_PER_SECOND: int = 1000

# Minimum number of reference points between two consecutive samples
INTERPOLATION_FACTOR: int = 20

# Absorbs float error in duration * rate (e.g. 0.3 * 10 = 3.0000000000000004)
SAMPLE_BOUNDARY_TOLERANCE: float = 1e-9


def evaluate_decaying_sine(
    time_seconds: Union[float, np.ndarray],
    signal_frequency_hz: float,
    decay_rate_per_second: float
) -> Union[float, np.ndarray]:
    """
    Evaluate the exponentially decaying sine at the given instants.

    Formula:
        x(t) = exp(-decay_rate * t) * sin(2 * π * f * t)

    Args:
        time_seconds: A time instant or an array of instants.
        signal_frequency_hz: Frequency of the sine in Hertz.
        decay_rate_per_second: Exponential decay constant (0 = no decay).

    Returns:
        The signal value(s), same shape as ``time_seconds``.
    """
    angular_frequency_radians_per_second: float = 2.0 * np.pi * signal_frequency_hz
    envelope = np.exp(-decay_rate_per_second * time_seconds)
    return envelope * np.sin(angular_frequency_radians_per_second * time_seconds)


class DecayingSineGenerator:
    """
    Produces the continuous and sampled traces for one scenario.

    The decay rate and the fine resolution are shared by all scenarios,
    so only frequency, sampling rate and bit depth vary across the
    comparison.

    Attributes:
        decay_rate_per_second (float): Envelope decay constant.
            Larger values make the tone die out faster.

        fine_resolution_points_per_second (int): Minimum density of the
            continuous reference curve. For fast sampling rates the
            density is raised to INTERPOLATION_FACTOR points per sample
            interval so the reference always stays finer than the samples.
    """

    def __init__(
        self,
        decay_rate_per_second: float = DEFAULT_DECAY_RATE_PER_SECOND,
        fine_resolution_points_per_second: int = DEFAULT_FINE_RESOLUTION_POINTS_PER_SECOND
    ) -> None:
        """
        Initialize the generator.

        Args:
            decay_rate_per_second: Envelope decay constant, >= 0.
            fine_resolution_points_per_second: Reference curve density, > 0.

        Raises:
            InvalidParameterError: If either value is out of range.
        """
        # ===== INPUT VALIDATION =====
        if (
            not isinstance(decay_rate_per_second, numbers.Real)
            or not math.isfinite(decay_rate_per_second)
            or decay_rate_per_second < 0
        ):
            raise InvalidParameterError(
                f"Decay rate must be a finite non-negative number. "
                f"Received: {decay_rate_per_second!r}"
            )

        if (
            not isinstance(fine_resolution_points_per_second, numbers.Integral)
            or fine_resolution_points_per_second <= 0
        ):
            raise InvalidParameterError(
                f"Fine resolution must be a positive integer. "
                f"Received: {fine_resolution_points_per_second!r}"
            )

        # ===== STORE PARAMETERS =====
        self.decay_rate_per_second: float = float(decay_rate_per_second)
        self.fine_resolution_points_per_second: int = int(fine_resolution_points_per_second)

    def synthesize(
        self,
        parameters: SignalParameters,
        duration_seconds: float
    ) -> SignalContainer:
        """
        Generate the continuous and sampled traces for one scenario.

        Args:
            parameters: The scenario's SignalParameters.
            duration_seconds: Length of the time window, > 0.

        Returns:
            SignalContainer: Parameters plus both immutable traces.

        Raises:
            InvalidParameterError: If the parameters or the duration are
                out of range. Raised before anything is computed.
        """
        # ===== INPUT VALIDATION =====
        parameters.validate()

        if (
            not isinstance(duration_seconds, numbers.Real)
            or isinstance(duration_seconds, bool)
            or not math.isfinite(duration_seconds)
            or duration_seconds <= 0
        ):
            raise InvalidParameterError(
                f"Duration must be a positive finite number. "
                f"Received: {duration_seconds!r} s"
            )

        duration_seconds = float(duration_seconds)

        continuous_trace: ContinuousTrace = self._generate_continuous_trace(
            parameters, duration_seconds
        )
        sampled_trace: SampledTrace = self._generate_sampled_trace(
            parameters, duration_seconds
        )

        return SignalContainer(
            parameters=parameters,
            continuous_trace=continuous_trace,
            sampled_trace=sampled_trace,
            duration_seconds=duration_seconds
        )

    def get_points_per_second(self, sampling_rate_hz: int) -> int:
        """Return the reference curve density used for a given sampling rate."""
        return max(
            self.fine_resolution_points_per_second,
            INTERPOLATION_FACTOR * int(sampling_rate_hz)
        )

    def _generate_continuous_trace(
        self,
        parameters: SignalParameters,
        duration_seconds: float
    ) -> ContinuousTrace:
        """
        Evaluate the closed form on a uniform grid over [0, duration].

        Both endpoints are included; np.linspace places the last point
        exactly on ``duration_seconds``.
        """
        points_per_second: int = self.get_points_per_second(parameters.sampling_rate_hz)
        number_of_points: int = max(2, int(round(points_per_second * duration_seconds)) + 1)

        time_axis_seconds: np.ndarray = np.linspace(0.0, duration_seconds, number_of_points)
        amplitudes: np.ndarray = evaluate_decaying_sine(
            time_axis_seconds,
            parameters.signal_frequency_hz,
            self.decay_rate_per_second
        )

        return ContinuousTrace(time_axis_seconds=time_axis_seconds, amplitudes=amplitudes)

    def _generate_sampled_trace(
        self,
        parameters: SignalParameters,
        duration_seconds: float
    ) -> SampledTrace:
        """
        Evaluate the closed form at t = k / fs over [0, duration) and quantize.
        """
        sampling_rate_hz: int = int(parameters.sampling_rate_hz)

        # Step 1: Count the instants inside the half-open window
        number_of_samples: int = max(
            1,
            int(np.ceil(duration_seconds * sampling_rate_hz - SAMPLE_BOUNDARY_TOLERANCE))
        )

        # Step 2: Exact sampling instants
        time_axis_seconds: np.ndarray = np.arange(number_of_samples) / sampling_rate_hz

        # Step 3: Exact closed-form values (no interpolation)
        exact_amplitudes: np.ndarray = evaluate_decaying_sine(
            time_axis_seconds,
            parameters.signal_frequency_hz,
            self.decay_rate_per_second
        )

        # Step 4: Quantize to the scenario's bit depth
        quantizer: UniformQuantizer = UniformQuantizer(parameters.bit_depth)
        quantized_amplitudes: np.ndarray = quantizer.quantize(exact_amplitudes)

        return SampledTrace(
            time_axis_seconds=time_axis_seconds,
            exact_amplitudes=exact_amplitudes,
            amplitudes=quantized_amplitudes
        )


def synthesize(
    parameters: SignalParameters,
    duration_seconds: float
) -> SignalContainer:
    """Synthesize one scenario with the default decay rate and resolution."""
    return DecayingSineGenerator().synthesize(parameters, duration_seconds)
