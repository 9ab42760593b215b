"""
Comparison Scenarios
====================

The four fixed scenarios of the sampling comparison chart. All of them
use a 10 Hz tone and 16-bit samples, so only the sampling rate changes
from cell to cell:

    Severe Aliasing    8 Hz   (Nyquist ratio 0.40)
    Aliasing          12 Hz   (Nyquist ratio 0.60)
    Near Nyquist      24 Hz   (Nyquist ratio 1.20)
    Hi Resolution    240 Hz   (Nyquist ratio 12.00)
"""

from dataclasses import dataclass
from typing import Tuple

from signals.signal_parameters import SignalParameters


@dataclass(frozen=True)
class ScenarioDefinition:
    """Display name and signal settings for one grid cell."""
    name: str
    signal_frequency_hz: float
    sampling_rate_hz: int
    bit_depth: int

    def to_signal_parameters(self) -> SignalParameters:
        """Build the validated SignalParameters for this scenario."""
        return SignalParameters(
            name=self.name,
            signal_frequency_hz=self.signal_frequency_hz,
            sampling_rate_hz=self.sampling_rate_hz,
            bit_depth=self.bit_depth
        )


DEFAULT_SIGNAL_FREQUENCY_HZ: float = 10.0
DEFAULT_BIT_DEPTH: int = 16

DEFAULT_SCENARIOS: Tuple[ScenarioDefinition, ...] = (
    ScenarioDefinition("Severe Aliasing", DEFAULT_SIGNAL_FREQUENCY_HZ, 8, DEFAULT_BIT_DEPTH),
    ScenarioDefinition("Aliasing", DEFAULT_SIGNAL_FREQUENCY_HZ, 12, DEFAULT_BIT_DEPTH),
    ScenarioDefinition("Near Nyquist", DEFAULT_SIGNAL_FREQUENCY_HZ, 24, DEFAULT_BIT_DEPTH),
    ScenarioDefinition("Hi Resolution", DEFAULT_SIGNAL_FREQUENCY_HZ, 240, DEFAULT_BIT_DEPTH),
)
