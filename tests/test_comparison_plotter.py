import os
import struct

import pytest

from errors import RenderError
from signals.signal_parameters import SignalParameters
from visualization.comparison_plotter import (
    ComparisonPlotter,
    GridConfiguration,
    generate_annotation_text,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _png_size(path):
    data = path.read_bytes()
    assert data[:8] == PNG_SIGNATURE
    return struct.unpack(">II", data[16:24])


def test_render_writes_png(default_containers, tmp_path):
    output_path = tmp_path / "digital_audio_comparison.png"

    written = ComparisonPlotter.render(default_containers, GridConfiguration(), output_path)

    assert written == output_path
    assert output_path.stat().st_size > 0
    assert _png_size(output_path) == (1800, 1200)
    assert os.listdir(tmp_path) == ["digital_audio_comparison.png"]


def test_render_without_layout_guides(default_containers, tmp_path):
    output_path = tmp_path / "plain.png"
    grid_configuration = GridConfiguration(
        show_layout_guides=False, figure_size_inches=(6.0, 4.0), dots_per_inch=100
    )

    ComparisonPlotter.render(default_containers, grid_configuration, str(output_path))

    assert _png_size(output_path) == (600, 400)


def test_render_overwrites_existing_file(default_containers, tmp_path):
    output_path = tmp_path / "chart.png"
    output_path.write_bytes(b"stale")

    ComparisonPlotter.render(default_containers, GridConfiguration(dots_per_inch=50), output_path)

    assert output_path.read_bytes()[:8] == PNG_SIGNATURE


def test_missing_directory_is_a_render_error(default_containers, tmp_path):
    output_path = tmp_path / "missing" / "chart.png"

    with pytest.raises(RenderError):
        ComparisonPlotter.render(default_containers, GridConfiguration(), output_path)

    assert not output_path.parent.exists()


@pytest.mark.skipif(
    hasattr(os, "geteuid") and os.geteuid() == 0,
    reason="root ignores directory permissions",
)
def test_read_only_directory_is_a_render_error(default_containers, tmp_path):
    read_only = tmp_path / "read_only"
    read_only.mkdir()
    read_only.chmod(0o500)
    try:
        with pytest.raises(RenderError):
            ComparisonPlotter.render(
                default_containers, GridConfiguration(), read_only / "chart.png"
            )
    finally:
        read_only.chmod(0o700)


def test_wrong_scenario_count_is_a_render_error(default_containers, tmp_path):
    with pytest.raises(RenderError):
        ComparisonPlotter.render(
            default_containers[:3], GridConfiguration(), tmp_path / "chart.png"
        )

    assert os.listdir(tmp_path) == []


def test_backend_failure_leaves_no_output(default_containers, tmp_path):
    # Agg refuses images of 2^16 pixels or more per side
    oversized = GridConfiguration(figure_size_inches=(1000.0, 1000.0), dots_per_inch=100)

    with pytest.raises(RenderError) as excinfo:
        ComparisonPlotter.render(default_containers, oversized, tmp_path / "chart.png")

    assert excinfo.value.__cause__ is not None
    assert os.listdir(tmp_path) == []


def test_annotation_text():
    text = generate_annotation_text(SignalParameters("Severe Aliasing", 10.0, 8, 16))

    assert "Nyquist Ratio: 0.40" in text
    assert "Signal: 10.0Hz" in text
    assert "Sampling: 8Hz" in text
    assert "Bit Depth: 16-bit" in text
    assert "Apparent: 2.0Hz" in text
