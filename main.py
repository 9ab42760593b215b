"""
Digital Audio Sampling Comparison - Main Entry Point
====================================================

This is the main entry point for rendering the sampling comparison chart.

The workflow is:
1. Build the four fixed scenarios (10 Hz tone, 16-bit, 8/12/24/240 Hz)
2. Synthesize the continuous reference and the quantized samples
3. Calculate reconstruction and quantization metrics
4. Render the 2x2 comparison grid to export/digital_audio_comparison.png

Usage:
    python main.py
    python main.py --output out/chart.png --quiet

Or import and use programmatically:
    from main import run_comparison

Exit codes:
    0  The image was written
    1  Invalid parameters, or the image could not be rendered or written
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from errors import InvalidParameterError, RenderError
from simulation.comparison_runner import (
    DEFAULT_OUTPUT_PATH,
    ComparisonConfiguration,
    ComparisonResults,
    ComparisonRunner
)


def run_comparison(
    output_path: str = DEFAULT_OUTPUT_PATH,
    verbose: bool = True
) -> ComparisonResults:
    """
    Run the full sampling comparison and export the chart.

    Args:
        output_path: Where to write the PNG. Its directory must exist.
        verbose: If True, print progress and the summary.

    Returns:
        ComparisonResults with traces, metrics and the written path.

    Raises:
        InvalidParameterError: If a scenario is invalid.
        RenderError: If the chart cannot be produced or written.
    """
    configuration: ComparisonConfiguration = ComparisonConfiguration(
        output_path=output_path
    )
    runner: ComparisonRunner = ComparisonRunner(configuration)

    results: ComparisonResults = runner.run(verbose=verbose)
    runner.render(results, verbose=verbose)

    if verbose:
        results.print_summary()

    return results


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="digital-audio-comparison",
        description=(
            "Render a 2x2 comparison of a 10 Hz decaying tone sampled at "
            "8, 12, 24 and 240 Hz, illustrating aliasing versus "
            "high-fidelity reconstruction."
        ),
    )
    parser.add_argument(
        "--output",
        metavar="FILE",
        default=DEFAULT_OUTPUT_PATH,
        help=f"PNG output path (default: {DEFAULT_OUTPUT_PATH}). Overwritten if present.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output and the summary.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point. Returns the process exit code."""
    args = parse_args(argv)
    output_path = Path(args.output)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"ERROR: Could not create output directory: {e}", file=sys.stderr)
        return 1

    try:
        run_comparison(output_path=str(output_path), verbose=not args.quiet)
    except InvalidParameterError as e:
        print(f"ERROR: Invalid parameter: {e}", file=sys.stderr)
        return 1
    except RenderError as e:
        print(f"ERROR: Rendering failed: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
