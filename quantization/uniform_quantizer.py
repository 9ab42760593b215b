"""
Uniform Quantizer
=================

This module provides the amplitude quantizer that models the finite
word length of a digital audio sample.

An N-bit system can store 2^N distinct amplitude values. Here those
levels are spread evenly over the full-scale range [-1, 1], with both
end points included:

    level[i] = i / (2^N - 1) * 2 - 1,    i = 0 .. 2^N - 1

Quantization maps each amplitude to the nearest level. The largest
possible error is half a step:

    |quantized - a| <= 1 / (2^N - 1)

Rounding Rule:
    Ties are rounded half away from zero. The scaled value
    (a + 1) / 2 * (2^N - 1) is never negative, so this is the same as
    floor(x + 0.5).
"""

import numbers
import numpy as np
from typing import Tuple, Union

from errors import InvalidParameterError


class UniformQuantizer:
    """
    Uniform quantizer over [-1, 1] with 2^bit_depth levels.

    Quantization Process:
    1. Clip the input to [-1, 1]
    2. Map [-1, 1] to [0, N-1] where N = number of levels
    3. Round half away from zero to the nearest integer index
    4. Map the index back to [-1, 1]

    The clip in step 1 does nothing for a decaying sine, which already
    stays inside [-1, 1].

    Attributes:
        bit_depth (int): Number of bits per sample (1 to 32).
        number_of_levels (int): 2^bit_depth.
        step_size (float): Distance between adjacent levels.
    """

    def __init__(self, bit_depth: int) -> None:
        """
        Initialize the quantizer.

        Args:
            bit_depth: Number of bits per sample. 16 bits gives 65,536 levels.

        Raises:
            InvalidParameterError: If bit_depth is not an integer in [1, 32].
        """
        if (
            not isinstance(bit_depth, numbers.Integral)
            or isinstance(bit_depth, bool)
            or bit_depth < 1
            or bit_depth > 32
        ):
            raise InvalidParameterError(
                f"Bit depth must be between 1 and 32 bits. "
                f"Received: {bit_depth!r} bits"
            )

        self.bit_depth: int = int(bit_depth)
        self.number_of_levels: int = 2 ** self.bit_depth

        # (levels - 1) intervals so that both -1 and +1 are levels
        self.maximum_level_index: int = self.number_of_levels - 1
        self.step_size: float = 2.0 / self.maximum_level_index

    def get_level_indices(self, values: Union[float, np.ndarray]) -> np.ndarray:
        """
        Return the index (0 .. 2^N - 1) of the nearest level for each value.

        Args:
            values: Amplitude or array of amplitudes.

        Returns:
            np.ndarray: Integer level indices as int64.
        """
        clipped_values: np.ndarray = np.clip(np.asarray(values, dtype=np.float64), -1.0, 1.0)

        scaled_values: np.ndarray = (clipped_values + 1.0) / 2.0 * self.maximum_level_index

        # Round half away from zero (scaled values are >= 0)
        level_indices: np.ndarray = np.floor(scaled_values + 0.5)
        level_indices = np.clip(level_indices, 0, self.maximum_level_index)

        return level_indices.astype(np.int64)

    def quantize(self, values: Union[float, np.ndarray]) -> np.ndarray:
        """
        Quantize amplitudes to the nearest of the 2^N levels.

        Args:
            values: Amplitude or array of amplitudes, ideally in [-1, 1].

        Returns:
            np.ndarray: Quantized amplitudes in [-1, 1], float64.
        """
        level_indices: np.ndarray = self.get_level_indices(values)
        return level_indices / self.maximum_level_index * 2.0 - 1.0

    def quantize_value(self, input_value: float) -> float:
        """Quantize a single amplitude."""
        return float(self.quantize(input_value))

    def get_number_of_levels(self) -> int:
        """Return the number of quantization levels."""
        return self.number_of_levels

    def get_output_range(self) -> Tuple[float, float]:
        """Return the (min, max) output values."""
        return (-1.0, 1.0)

    def get_maximum_error(self) -> float:
        """Return the worst-case quantization error (half a step)."""
        return self.step_size / 2.0
