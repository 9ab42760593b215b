"""
Comparison Runner
=================

This module provides the orchestration for the sampling comparison.

The ComparisonRunner handles:
1. Building SignalParameters from the scenario list
2. Synthesizing the continuous and sampled traces
3. Computing per-scenario metrics
4. Rendering the comparison chart

This is the main entry point for producing the chart programmatically.
"""

import math
import numpy as np
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from errors import InvalidParameterError
from metrics.aliasing import compute_apparent_frequency_hz
from metrics.quantization_noise import (
    compute_effective_number_of_bits,
    compute_measured_sqnr_db,
    compute_theoretical_sqnr_db
)
from metrics.reconstruction_error import (
    compute_reconstruction_error,
    compute_sample_error
)
from signals.decaying_sine_generator import (
    DEFAULT_DECAY_RATE_PER_SECOND,
    DEFAULT_FINE_RESOLUTION_POINTS_PER_SECOND,
    DecayingSineGenerator
)
from signals.signal_container import SignalContainer
from signals.signal_parameters import SignalParameters
from visualization.comparison_plotter import ComparisonPlotter, GridConfiguration

from .scenarios import DEFAULT_SCENARIOS, ScenarioDefinition


DEFAULT_OUTPUT_PATH: str = "export/digital_audio_comparison.png"
DEFAULT_DURATION_SECONDS: float = 2.0


@dataclass
class ComparisonConfiguration:
    """
    Configuration for one run of the sampling comparison.

    Attributes:
        scenarios: One ScenarioDefinition per grid cell, row-major.
        duration_seconds: Time window shown in every cell.
        output_path: Where the PNG is written.
        grid_configuration: Layout of the figure.
        decay_rate_per_second: Envelope decay shared by all scenarios.
        fine_resolution_points_per_second: Reference curve density.
    """
    scenarios: Sequence[ScenarioDefinition] = DEFAULT_SCENARIOS
    duration_seconds: float = DEFAULT_DURATION_SECONDS
    output_path: str = DEFAULT_OUTPUT_PATH
    grid_configuration: GridConfiguration = field(default_factory=GridConfiguration)
    decay_rate_per_second: float = DEFAULT_DECAY_RATE_PER_SECOND
    fine_resolution_points_per_second: int = DEFAULT_FINE_RESOLUTION_POINTS_PER_SECOND

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        self.scenarios = tuple(self.scenarios)
        self._validate()

    def _validate(self) -> None:
        """Validate configuration parameters."""
        # Check scenario count against the grid
        expected_cells: int = self.grid_configuration.get_number_of_cells()
        if len(self.scenarios) != expected_cells:
            raise InvalidParameterError(
                f"Expected {expected_cells} scenarios for a "
                f"{self.grid_configuration.rows}x{self.grid_configuration.columns} grid. "
                f"Received: {len(self.scenarios)}"
            )

        # Check duration
        if (
            isinstance(self.duration_seconds, bool)
            or not isinstance(self.duration_seconds, (int, float))
            or not math.isfinite(self.duration_seconds)
            or self.duration_seconds <= 0
        ):
            raise InvalidParameterError(
                f"Duration must be a positive finite number. "
                f"Received: {self.duration_seconds!r} s"
            )

        # Warn when a cell cannot show a full period of its tone
        for scenario in self.scenarios:
            if isinstance(scenario.signal_frequency_hz, (int, float)) and scenario.signal_frequency_hz > 0:
                period_seconds: float = 1.0 / scenario.signal_frequency_hz
                if self.duration_seconds < period_seconds:
                    print(
                        f"WARNING: Duration ({self.duration_seconds} s) is shorter than "
                        f"one period of '{scenario.name}' ({period_seconds:.3f} s)."
                    )

    def build_signal_parameters(self) -> List[SignalParameters]:
        """Return validated SignalParameters for every scenario."""
        return [scenario.to_signal_parameters() for scenario in self.scenarios]

    def get_summary_dict(self) -> Dict[str, Any]:
        """Return a dictionary summary of the configuration."""
        return {
            "scenarios": [scenario.name for scenario in self.scenarios],
            "duration_seconds": self.duration_seconds,
            "output_path": self.output_path,
            "decay_rate_per_second": self.decay_rate_per_second,
            "fine_resolution_points_per_second": self.fine_resolution_points_per_second
        }


@dataclass
class ScenarioMetrics:
    """
    Metrics for one synthesized scenario.

    Attributes:
        sample_error: Mean |quantized - exact| at the sampling instants.
        reconstruction_error: Mean |line-joined samples - reference|.
        apparent_frequency_hz: Frequency the samples appear to carry.
        measured_sqnr_db: SQNR of the quantized samples.
        theoretical_sqnr_db: 6.02 * bits + 1.76.
        effective_number_of_bits: ENOB from the measured SQNR.
    """
    sample_error: float = 0.0
    reconstruction_error: float = 0.0
    apparent_frequency_hz: float = 0.0
    measured_sqnr_db: float = 0.0
    theoretical_sqnr_db: float = 0.0
    effective_number_of_bits: float = 0.0

    @classmethod
    def from_container(cls, container: SignalContainer) -> "ScenarioMetrics":
        """Compute all metrics for one scenario."""
        parameters: SignalParameters = container.parameters
        measured_sqnr_db: float = compute_measured_sqnr_db(
            container.sampled_trace.exact_amplitudes,
            container.sampled_trace.amplitudes
        )

        return cls(
            sample_error=compute_sample_error(container),
            reconstruction_error=compute_reconstruction_error(container),
            apparent_frequency_hz=compute_apparent_frequency_hz(
                parameters.signal_frequency_hz, parameters.sampling_rate_hz
            ),
            measured_sqnr_db=measured_sqnr_db,
            theoretical_sqnr_db=compute_theoretical_sqnr_db(parameters.bit_depth),
            effective_number_of_bits=compute_effective_number_of_bits(measured_sqnr_db)
        )


@dataclass
class ComparisonResults:
    """
    Container for all comparison results.

    Attributes:
        configuration: The ComparisonConfiguration used for this run.
        containers: One SignalContainer per scenario, in grid order.
        metrics: One ScenarioMetrics per scenario, in grid order.
        output_path: Path of the exported PNG, once rendered.
    """
    configuration: ComparisonConfiguration
    containers: List[SignalContainer]
    metrics: List[ScenarioMetrics]
    output_path: Optional[Path] = None

    def print_summary(self) -> None:
        """
        Print a formatted summary of every scenario.

        Aliased scenarios are flagged so the chart can be read against
        the numbers.
        """
        print("\n" + "=" * 70)
        print("SAMPLING COMPARISON SUMMARY")
        print("=" * 70)

        print("\n--- Configuration ---")
        print(f"  Duration:                {self.configuration.duration_seconds:.2f} s")
        print(f"  Decay Rate:              {self.configuration.decay_rate_per_second:.2f} 1/s")
        print(f"  Scenarios:               {len(self.containers)}")

        for container, scenario_metrics in zip(self.containers, self.metrics):
            parameters: SignalParameters = container.parameters
            print(f"\n--- {parameters.name} ---")
            print(f"  Signal Frequency:        {parameters.signal_frequency_hz:.1f} Hz")
            print(f"  Sampling Rate:           {parameters.sampling_rate_hz} Hz")
            print(f"  Bit Depth:               {parameters.bit_depth} bits")
            print(f"  Nyquist Ratio:           {parameters.nyquist_ratio:.2f}")
            print(f"  Samples:                 {container.sampled_trace.get_number_of_samples()}")
            print(f"  Apparent Frequency:      {scenario_metrics.apparent_frequency_hz:.1f} Hz")
            print(f"  Reconstruction Error:    {scenario_metrics.reconstruction_error:.4f}")
            print(f"  Sample Error:            {scenario_metrics.sample_error:.2e}")
            print(f"  SQNR (measured):         {scenario_metrics.measured_sqnr_db:.1f} dB")
            print(f"  SQNR (theoretical):      {scenario_metrics.theoretical_sqnr_db:.1f} dB")

            if parameters.is_aliased:
                print("  Status:                  ALIASED (sampling rate below 2x signal)")
            else:
                print("  Status:                  OK")

        if self.output_path is not None:
            print("\n--- Output ---")
            print(f"  Figure:                  {self.output_path}")

        print("\n" + "=" * 70)

    def get_metrics_dict(self) -> Dict[str, Dict[str, float]]:
        """
        Return all metrics keyed by scenario name.

        Useful for programmatic access or export to files.
        """
        return {
            container.parameters.name: {
                "sample_error": scenario_metrics.sample_error,
                "reconstruction_error": scenario_metrics.reconstruction_error,
                "apparent_frequency_hz": scenario_metrics.apparent_frequency_hz,
                "measured_sqnr_db": scenario_metrics.measured_sqnr_db,
                "theoretical_sqnr_db": scenario_metrics.theoretical_sqnr_db,
                "effective_number_of_bits": scenario_metrics.effective_number_of_bits,
                "nyquist_ratio": container.parameters.nyquist_ratio
            }
            for container, scenario_metrics in zip(self.containers, self.metrics)
        }


class ComparisonRunner:
    """
    Orchestrates the sampling comparison.

    Usage:
        runner = ComparisonRunner(ComparisonConfiguration())
        results = runner.run()
        runner.render(results)
        results.print_summary()

    Attributes:
        configuration: The ComparisonConfiguration for this runner.
        signal_generator: The DecayingSineGenerator shared by all scenarios.
    """

    def __init__(self, configuration: ComparisonConfiguration) -> None:
        """
        Initialize the runner with a configuration.

        Args:
            configuration: ComparisonConfiguration with all parameters.
        """
        self.configuration: ComparisonConfiguration = configuration

        self.signal_generator: DecayingSineGenerator = DecayingSineGenerator(
            decay_rate_per_second=configuration.decay_rate_per_second,
            fine_resolution_points_per_second=configuration.fine_resolution_points_per_second
        )

    def run(self, verbose: bool = True) -> ComparisonResults:
        """
        Synthesize every scenario and compute its metrics.

        All parameter sets are validated before any trace is generated.

        Args:
            verbose: If True, print progress messages.

        Returns:
            ComparisonResults with containers and metrics.

        Raises:
            InvalidParameterError: If a scenario or the duration is invalid.
        """
        config = self.configuration

        if verbose:
            print("\n" + "-" * 50)
            print(f"Running sampling comparison: {len(config.scenarios)} scenarios, "
                  f"{config.duration_seconds:.2f} s")
            print("-" * 50)

        # ===== STEP 1: BUILD PARAMETERS =====
        if verbose:
            print("  [1/3] Validating scenario parameters...")

        parameter_sets: List[SignalParameters] = config.build_signal_parameters()

        # ===== STEP 2: SYNTHESIZE TRACES =====
        if verbose:
            print("  [2/3] Synthesizing continuous and sampled traces...")

        containers: List[SignalContainer] = [
            self.signal_generator.synthesize(parameters, config.duration_seconds)
            for parameters in parameter_sets
        ]

        # ===== STEP 3: CALCULATE METRICS =====
        if verbose:
            print("  [3/3] Calculating metrics...")

        metrics: List[ScenarioMetrics] = [
            ScenarioMetrics.from_container(container) for container in containers
        ]

        if verbose:
            reconstruction_errors: np.ndarray = np.array(
                [scenario_metrics.reconstruction_error for scenario_metrics in metrics]
            )
            print(f"  Synthesis complete! Reconstruction error "
                  f"{reconstruction_errors.min():.4f} .. {reconstruction_errors.max():.4f}")

        return ComparisonResults(
            configuration=config,
            containers=containers,
            metrics=metrics
        )

    def render(self, results: ComparisonResults, verbose: bool = True) -> Path:
        """
        Export the comparison chart for a finished run.

        Args:
            results: Output of run().
            verbose: If True, print the written path.

        Returns:
            Path: The written PNG.

        Raises:
            RenderError: If the image cannot be produced or written.
        """
        output_path: Path = ComparisonPlotter.render(
            results.containers,
            self.configuration.grid_configuration,
            self.configuration.output_path
        )
        results.output_path = output_path

        if verbose:
            print(f"Figure saved to: {output_path}")

        return output_path
