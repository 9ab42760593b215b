"""
Simulation Module
=================

This module provides the orchestration layer that turns the scenario
list into synthesized traces, metrics and the exported comparison chart.
"""

from .scenarios import ScenarioDefinition, DEFAULT_SCENARIOS
from .comparison_runner import (
    ComparisonConfiguration,
    ComparisonResults,
    ComparisonRunner,
    ScenarioMetrics
)

__all__ = [
    "ScenarioDefinition",
    "DEFAULT_SCENARIOS",
    "ComparisonConfiguration",
    "ComparisonResults",
    "ComparisonRunner",
    "ScenarioMetrics"
]
