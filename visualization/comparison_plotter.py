"""
Comparison Plotter
==================

This module draws the sampling comparison chart: one subplot per
scenario, arranged on a grid (2 x 2 by default), exported as a PNG.

Each subplot shows:
1. The continuous reference curve (smooth translucent line)
2. The quantized samples (markers) joined by the reconstruction line
3. Grid guides at fixed amplitude and time intervals
4. A boxed annotation with Nyquist ratio, signal frequency, sampling
   rate, bit depth and apparent frequency

The PNG is written to a temporary file next to the target and then
moved into place, so a failed export never leaves a truncated image.
"""

import os
import tempfile
import numpy as np
import matplotlib.pyplot as plt
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Tuple, Union

from matplotlib.ticker import MultipleLocator

from errors import RenderError
from metrics.aliasing import compute_apparent_frequency_hz
from signals.signal_container import SignalContainer
from signals.signal_parameters import SignalParameters


@dataclass(frozen=True)
class GridConfiguration:
    """
    Layout of the comparison figure.

    Attributes:
        rows: Number of subplot rows.
        columns: Number of subplot columns.
        figure_size_inches: (width, height) of the figure.
        dots_per_inch: Export resolution. 12 x 8 in at 150 dpi gives
            a 1800 x 1200 pixel image.
        time_axis_label: x-axis label of every subplot.
        amplitude_axis_label: y-axis label of every subplot.
        amplitude_limits: y-axis range.
        amplitude_guide_interval: Spacing of horizontal grid guides.
        time_guide_interval_seconds: Spacing of vertical grid guides.
        show_layout_guides: Draw figure-coordinate guide labels
            (x: 0.0 .. 1.0, y: 0.0 .. 1.0) around the grid.
        figure_title: Title above the whole grid.
    """
    rows: int = 2
    columns: int = 2
    figure_size_inches: Tuple[float, float] = (12.0, 8.0)
    dots_per_inch: int = 150
    time_axis_label: str = "Time (s)"
    amplitude_axis_label: str = "Amplitude"
    amplitude_limits: Tuple[float, float] = (-1.2, 1.2)
    amplitude_guide_interval: float = 0.5
    time_guide_interval_seconds: float = 0.25
    show_layout_guides: bool = True
    figure_title: str = "Digital Audio Sampling: Aliasing vs. High-Fidelity Reconstruction"

    def get_number_of_cells(self) -> int:
        """Return rows * columns."""
        return self.rows * self.columns


def generate_annotation_text(parameters: SignalParameters) -> str:
    """Summary box text for one scenario."""
    apparent_frequency_hz: float = compute_apparent_frequency_hz(
        parameters.signal_frequency_hz, parameters.sampling_rate_hz
    )
    return (
        f"Nyquist Ratio: {parameters.nyquist_ratio:.2f}\n"
        f"Signal: {parameters.signal_frequency_hz:.1f}Hz\n"
        f"Sampling: {parameters.sampling_rate_hz}Hz\n"
        f"Bit Depth: {parameters.bit_depth}-bit\n"
        f"Apparent: {apparent_frequency_hz:.1f}Hz"
    )


class ComparisonPlotter:
    """
    Renders the sampling comparison chart.

    All methods are static to allow easy use without instantiation.
    """

    CONTINUOUS_LINE_COLOR: Tuple[float, ...] = (0.67, 0.67, 0.67, 0.5)
    RECONSTRUCTION_LINE_COLOR: Tuple[float, ...] = (0.12, 0.47, 0.71, 1.0)
    SAMPLE_MARKER_COLOR: Tuple[float, ...] = (1.0, 0.0, 0.0, 0.7)
    LAYOUT_GUIDE_COLOR: str = "#999999"

    @staticmethod
    def render(
        scenarios: Sequence[SignalContainer],
        grid_configuration: GridConfiguration,
        output_path: Union[str, Path]
    ) -> Path:
        """
        Draw all scenarios on one grid and export it as a PNG.

        Args:
            scenarios: One SignalContainer per grid cell, in row-major order.
            grid_configuration: Layout of the figure.
            output_path: Target PNG path. Its directory must exist.
                Any existing file is replaced.

        Returns:
            Path: The written file.

        Raises:
            RenderError: If the scenario count does not match the grid,
                the directory is missing or not writable, or the backend
                cannot produce the image.
        """
        output_path = Path(output_path)

        # ===== INPUT VALIDATION =====
        expected_cells: int = grid_configuration.get_number_of_cells()
        if len(scenarios) != expected_cells:
            raise RenderError(
                f"Grid has {expected_cells} cells but {len(scenarios)} "
                f"scenarios were supplied."
            )

        output_directory: Path = output_path.parent
        if not output_directory.is_dir():
            raise RenderError(f"Output directory does not exist: {output_directory}")
        if not os.access(output_directory, os.W_OK):
            raise RenderError(f"Output directory is not writable: {output_directory}")

        # ===== DRAW =====
        try:
            fig, axes = plt.subplots(
                grid_configuration.rows,
                grid_configuration.columns,
                figsize=grid_configuration.figure_size_inches,
                squeeze=False
            )
        except Exception as e:
            raise RenderError(f"Could not create figure: {e}") from e

        try:
            fig.suptitle(grid_configuration.figure_title, fontsize=13, fontweight='bold')

            for container, ax in zip(scenarios, axes.flat):
                ComparisonPlotter._draw_scenario(ax, container, grid_configuration)

            fig.tight_layout(rect=(0.03, 0.03, 1.0, 0.96))

            if grid_configuration.show_layout_guides:
                ComparisonPlotter._draw_layout_guides(fig)

            ComparisonPlotter._export_png(fig, output_path, grid_configuration.dots_per_inch)
        except RenderError:
            raise
        except Exception as e:
            raise RenderError(f"Could not draw comparison figure: {e}") from e
        finally:
            plt.close(fig)

        return output_path

    @staticmethod
    def _draw_scenario(
        ax: plt.Axes,
        container: SignalContainer,
        grid_configuration: GridConfiguration
    ) -> None:
        """Draw one cell: reference, samples, guides and annotation."""
        parameters: SignalParameters = container.parameters
        continuous = container.continuous_trace
        sampled = container.sampled_trace

        # ===== Reference curve =====
        ax.plot(
            continuous.time_axis_seconds, continuous.amplitudes,
            color=ComparisonPlotter.CONTINUOUS_LINE_COLOR,
            linewidth=1.0, label='Original Signal'
        )

        # ===== Samples and reconstruction =====
        ax.plot(
            sampled.time_axis_seconds, sampled.amplitudes,
            color=ComparisonPlotter.RECONSTRUCTION_LINE_COLOR, linewidth=1.0,
            marker='o', markersize=4,
            markerfacecolor=ComparisonPlotter.SAMPLE_MARKER_COLOR,
            markeredgecolor=ComparisonPlotter.SAMPLE_MARKER_COLOR,
            label='Sampled & Reconstructed'
        )

        # ===== Axes and guides =====
        ax.set_title(parameters.name, fontsize=11)
        ax.set_xlabel(grid_configuration.time_axis_label, fontsize=9)
        ax.set_ylabel(grid_configuration.amplitude_axis_label, fontsize=9)
        ax.set_xlim(0.0, container.duration_seconds)
        ax.set_ylim(*grid_configuration.amplitude_limits)
        ax.tick_params(labelsize=8)

        ax.xaxis.set_major_locator(
            MultipleLocator(grid_configuration.time_guide_interval_seconds)
        )
        ax.yaxis.set_major_locator(
            MultipleLocator(grid_configuration.amplitude_guide_interval)
        )
        ax.grid(True, alpha=0.3)
        ax.axhline(y=0, color='k', linewidth=0.5)

        # ===== Summary box =====
        ax.text(
            0.98, 0.95, generate_annotation_text(parameters),
            transform=ax.transAxes, fontsize=8,
            horizontalalignment='right', verticalalignment='top',
            fontfamily='monospace',
            bbox=dict(boxstyle='square', facecolor='white', edgecolor='#333333', alpha=0.9)
        )

    @staticmethod
    def _draw_layout_guides(fig: plt.Figure) -> None:
        """Label figure coordinates 0.0 .. 1.0 along the bottom and left edges."""
        guide_positions: np.ndarray = np.linspace(0.0, 1.0, 11)

        for position in guide_positions:
            fig.text(
                position, 0.0, f"x: {position:.1f}",
                fontsize=6, color=ComparisonPlotter.LAYOUT_GUIDE_COLOR,
                horizontalalignment='center', verticalalignment='bottom'
            )
            fig.text(
                0.0, position, f"y: {position:.1f}",
                fontsize=6, color=ComparisonPlotter.LAYOUT_GUIDE_COLOR,
                horizontalalignment='left', verticalalignment='center'
            )

    @staticmethod
    def _export_png(fig: plt.Figure, output_path: Path, dots_per_inch: int) -> None:
        """
        Write the figure to ``output_path`` atomically.

        The image goes to a temporary file in the same directory and is
        then renamed over the target. The temporary file is removed on
        any failure.
        """
        try:
            file_descriptor, temporary_name = tempfile.mkstemp(
                prefix=f".{output_path.stem}-", suffix=".png", dir=output_path.parent
            )
        except OSError as e:
            raise RenderError(f"Could not create temporary file in {output_path.parent}: {e}") from e

        os.close(file_descriptor)
        temporary_path: Path = Path(temporary_name)

        try:
            fig.savefig(temporary_path, format='png', dpi=dots_per_inch)
            os.replace(temporary_path, output_path)
        except Exception as e:
            temporary_path.unlink(missing_ok=True)
            raise RenderError(f"Could not write {output_path}: {e}") from e
