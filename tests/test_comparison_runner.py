import pytest

from errors import InvalidParameterError
from simulation.comparison_runner import (
    DEFAULT_OUTPUT_PATH,
    ComparisonConfiguration,
    ComparisonRunner,
)
from simulation.scenarios import DEFAULT_SCENARIOS, ScenarioDefinition
from visualization.comparison_plotter import GridConfiguration


def test_default_scenarios():
    assert [scenario.name for scenario in DEFAULT_SCENARIOS] == [
        "Severe Aliasing", "Aliasing", "Near Nyquist", "Hi Resolution"
    ]
    assert [scenario.sampling_rate_hz for scenario in DEFAULT_SCENARIOS] == [8, 12, 24, 240]
    assert {scenario.signal_frequency_hz for scenario in DEFAULT_SCENARIOS} == {10.0}
    assert {scenario.bit_depth for scenario in DEFAULT_SCENARIOS} == {16}


def test_default_configuration():
    configuration = ComparisonConfiguration()

    assert configuration.duration_seconds == 2.0
    assert configuration.output_path == DEFAULT_OUTPUT_PATH
    assert len(configuration.build_signal_parameters()) == 4
    assert configuration.get_summary_dict()["scenarios"][0] == "Severe Aliasing"


def test_scenario_count_must_match_grid():
    with pytest.raises(InvalidParameterError):
        ComparisonConfiguration(scenarios=DEFAULT_SCENARIOS[:3])


def test_other_grid_shapes_are_allowed():
    configuration = ComparisonConfiguration(
        scenarios=DEFAULT_SCENARIOS[:2],
        grid_configuration=GridConfiguration(rows=1, columns=2),
    )

    assert len(configuration.scenarios) == 2


@pytest.mark.parametrize("duration_seconds", [0, -2.0, float("nan")])
def test_invalid_duration(duration_seconds):
    with pytest.raises(InvalidParameterError):
        ComparisonConfiguration(duration_seconds=duration_seconds)


def test_short_duration_warns(capsys):
    ComparisonConfiguration(duration_seconds=0.05)

    assert "WARNING" in capsys.readouterr().out


def test_run_synthesizes_every_scenario():
    results = ComparisonRunner(ComparisonConfiguration(duration_seconds=1.0)).run(verbose=False)

    assert len(results.containers) == 4
    assert len(results.metrics) == 4
    assert results.containers[0].sampled_trace.get_number_of_samples() == 8
    assert results.metrics[0].reconstruction_error > 0.3
    assert results.metrics[3].reconstruction_error < 0.01
    assert results.metrics[0].apparent_frequency_hz == pytest.approx(2.0)

    metrics = results.get_metrics_dict()
    assert set(metrics) == {"Severe Aliasing", "Aliasing", "Near Nyquist", "Hi Resolution"}
    assert metrics["Hi Resolution"]["nyquist_ratio"] == pytest.approx(12.0)


def test_invalid_scenario_fails_before_synthesis():
    scenarios = DEFAULT_SCENARIOS[:3] + (ScenarioDefinition("Broken", 10.0, 240, 0),)
    runner = ComparisonRunner(ComparisonConfiguration(scenarios=scenarios))

    with pytest.raises(InvalidParameterError):
        runner.run(verbose=False)


def test_verbose_run_reports_progress(capsys):
    ComparisonRunner(ComparisonConfiguration(duration_seconds=1.0)).run(verbose=True)

    out = capsys.readouterr().out
    assert "[1/3]" in out
    assert "[3/3]" in out


def test_render_and_summary(tmp_path, capsys):
    output_path = tmp_path / "chart.png"
    configuration = ComparisonConfiguration(
        duration_seconds=1.0,
        output_path=str(output_path),
        grid_configuration=GridConfiguration(dots_per_inch=50),
    )
    runner = ComparisonRunner(configuration)

    results = runner.run(verbose=False)
    written = runner.render(results, verbose=False)
    results.print_summary()

    assert written == output_path
    assert results.output_path == output_path
    assert output_path.read_bytes()[:4] == b"\x89PNG"

    out = capsys.readouterr().out
    assert "SAMPLING COMPARISON SUMMARY" in out
    assert "ALIASED" in out
    assert str(output_path) in out
