"""
Signals Module
==============

This module contains the signal model of the sampling comparison:
scenario parameters, the decaying-sine generator and the traces it
produces.
"""

from .signal_parameters import SignalParameters
from .signal_container import ContinuousTrace, SampledTrace, SignalContainer
from .decaying_sine_generator import (
    DecayingSineGenerator,
    evaluate_decaying_sine,
    synthesize
)

__all__ = [
    "SignalParameters",
    "ContinuousTrace",
    "SampledTrace",
    "SignalContainer",
    "DecayingSineGenerator",
    "evaluate_decaying_sine",
    "synthesize"
]
