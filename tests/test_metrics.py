import numpy as np
import pytest

from errors import InvalidParameterError
from metrics.aliasing import compute_apparent_frequency_hz
from metrics.quantization_noise import (
    compute_effective_number_of_bits,
    compute_measured_sqnr_db,
    compute_theoretical_sqnr_db,
)
from metrics.reconstruction_error import (
    compute_reconstruction_error,
    compute_sample_error,
)


def test_high_rate_tracks_reference_closely(generator, hi_resolution_parameters):
    container = generator.synthesize(hi_resolution_parameters, 1.0)

    assert compute_reconstruction_error(container) < 0.01


def test_low_rate_shows_aliasing(generator, severe_aliasing_parameters):
    container = generator.synthesize(severe_aliasing_parameters, 1.0)

    assert compute_reconstruction_error(container) > 0.3


def test_highest_rate_has_lowest_reconstruction_error(default_containers):
    errors = [compute_reconstruction_error(container) for container in default_containers]

    # Hi Resolution is the last scenario
    assert errors[3] == min(errors)
    assert errors[0] > 10 * errors[3]


def test_sample_error_is_quantization_only(default_containers):
    for container in default_containers:
        assert compute_sample_error(container) <= 1.0 / (2 ** 16 - 1)


@pytest.mark.parametrize(
    "sampling_rate_hz, expected_hz",
    [(8, 2.0), (12, 2.0), (24, 10.0), (240, 10.0)],
)
def test_apparent_frequency(sampling_rate_hz, expected_hz):
    assert compute_apparent_frequency_hz(10.0, sampling_rate_hz) == pytest.approx(expected_hz)


def test_apparent_frequency_never_exceeds_nyquist():
    for sampling_rate_hz in range(1, 60):
        apparent = compute_apparent_frequency_hz(10.0, sampling_rate_hz)
        assert 0.0 <= apparent <= sampling_rate_hz / 2.0 + 1e-12


def test_apparent_frequency_rejects_non_positive_rate():
    with pytest.raises(InvalidParameterError):
        compute_apparent_frequency_hz(10.0, 0)


def test_theoretical_sqnr():
    assert compute_theoretical_sqnr_db(16) == pytest.approx(98.08)
    assert compute_effective_number_of_bits(98.08) == pytest.approx(16.0)


def test_measured_sqnr_of_sixteen_bit_samples(generator, hi_resolution_parameters):
    sampled = generator.synthesize(hi_resolution_parameters, 1.0).sampled_trace
    sqnr_db = compute_measured_sqnr_db(sampled.exact_amplitudes, sampled.amplitudes)

    # below the full-scale figure because the tone decays
    assert 80.0 < sqnr_db < 105.0


def test_measured_sqnr_edge_cases():
    values = np.array([0.5, -0.5, 0.25])

    assert compute_measured_sqnr_db(values, values) == float("inf")
    assert compute_measured_sqnr_db(np.zeros(3), values) == float("-inf")
