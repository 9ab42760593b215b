import matplotlib

matplotlib.use("Agg")

import pytest

from signals.decaying_sine_generator import DecayingSineGenerator
from signals.signal_parameters import SignalParameters
from simulation.scenarios import DEFAULT_SCENARIOS


@pytest.fixture
def generator():
    return DecayingSineGenerator()


@pytest.fixture
def severe_aliasing_parameters():
    return SignalParameters("Severe Aliasing", 10.0, 8, 16)


@pytest.fixture
def hi_resolution_parameters():
    return SignalParameters("Hi Resolution", 10.0, 240, 16)


@pytest.fixture
def default_containers(generator):
    return [
        generator.synthesize(scenario.to_signal_parameters(), 1.0)
        for scenario in DEFAULT_SCENARIOS
    ]
