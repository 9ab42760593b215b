"""
Signal Parameters
=================

This module provides the immutable parameter record for one sampling
scenario of the comparison chart.

A scenario is fully described by:
- The frequency of the notional input tone (Hz)
- The sampling rate of the digital system (samples per second)
- The bit depth of each stored sample (2^bit_depth quantization levels)

The Nyquist ratio shown in the chart annotations is derived from the
first two values and is never stored on its own, so it cannot drift out
of sync with them.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict

from errors import InvalidParameterError


MINIMUM_BIT_DEPTH: int = 1
MAXIMUM_BIT_DEPTH: int = 32


@dataclass(frozen=True)
class SignalParameters:
    """
    Parameter set for one sampling scenario.

    Attributes:
        name: Display label, used as the subplot title.
        signal_frequency_hz: Frequency of the input tone in Hertz.
        sampling_rate_hz: Samples per second of the digital system.
        bit_depth: Number of quantization bits per sample (1 to 32).

    Example:
        SignalParameters("Severe Aliasing", 10.0, 8, 16).nyquist_ratio == 0.4
    """
    name: str
    signal_frequency_hz: float
    sampling_rate_hz: int
    bit_depth: int

    def __post_init__(self) -> None:
        """Reject invalid parameter sets at construction time."""
        self.validate()

    def validate(self) -> bool:
        """
        Check every field against its documented range.

        Returns:
            bool: True when the parameter set is valid.

        Raises:
            InvalidParameterError: If any field is out of range.
        """
        # ===== SIGNAL FREQUENCY =====
        if (
            not isinstance(self.signal_frequency_hz, numbers.Real)
            or isinstance(self.signal_frequency_hz, bool)
            or not math.isfinite(self.signal_frequency_hz)
            or self.signal_frequency_hz <= 0
        ):
            raise InvalidParameterError(
                f"Signal frequency must be a positive finite number. "
                f"Received: {self.signal_frequency_hz!r} Hz"
            )

        # ===== SAMPLING RATE =====
        if (
            not isinstance(self.sampling_rate_hz, numbers.Integral)
            or isinstance(self.sampling_rate_hz, bool)
            or self.sampling_rate_hz <= 0
        ):
            raise InvalidParameterError(
                f"Sampling rate must be a positive integer. "
                f"Received: {self.sampling_rate_hz!r} Hz"
            )

        # ===== BIT DEPTH =====
        if (
            not isinstance(self.bit_depth, numbers.Integral)
            or isinstance(self.bit_depth, bool)
            or self.bit_depth < MINIMUM_BIT_DEPTH
            or self.bit_depth > MAXIMUM_BIT_DEPTH
        ):
            raise InvalidParameterError(
                f"Bit depth must be between {MINIMUM_BIT_DEPTH} and "
                f"{MAXIMUM_BIT_DEPTH} bits. Received: {self.bit_depth!r} bits"
            )

        return True

    @property
    def nyquist_ratio(self) -> float:
        """Sampling rate divided by twice the signal frequency (>= 1 means no aliasing)."""
        return self.sampling_rate_hz / (2.0 * self.signal_frequency_hz)

    @property
    def nyquist_frequency_hz(self) -> float:
        """Half the sampling rate."""
        return self.sampling_rate_hz / 2.0

    @property
    def number_of_quantization_levels(self) -> int:
        return 2 ** self.bit_depth

    @property
    def is_aliased(self) -> bool:
        """True when the tone sits at or above the Nyquist frequency."""
        return self.signal_frequency_hz >= self.nyquist_frequency_hz

    def get_summary_dict(self) -> Dict[str, Any]:
        """Return a dictionary summary of the parameters."""
        return {
            "name": self.name,
            "signal_frequency_hz": self.signal_frequency_hz,
            "sampling_rate_hz": self.sampling_rate_hz,
            "bit_depth": self.bit_depth,
            "nyquist_ratio": self.nyquist_ratio,
            "nyquist_frequency_hz": self.nyquist_frequency_hz,
            "is_aliased": self.is_aliased
        }
