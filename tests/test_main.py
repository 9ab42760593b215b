import main as cli
from errors import InvalidParameterError, RenderError
from visualization.comparison_plotter import ComparisonPlotter

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def test_main_writes_chart(tmp_path):
    output_path = tmp_path / "export" / "digital_audio_comparison.png"

    assert cli.main(["--output", str(output_path), "--quiet"]) == 0
    assert output_path.read_bytes()[:8] == PNG_SIGNATURE


def test_default_output_path():
    args = cli.parse_args([])

    assert args.output == "export/digital_audio_comparison.png"
    assert args.quiet is False


def test_main_verbose_prints_summary(tmp_path, capsys):
    assert cli.main(["--output", str(tmp_path / "chart.png")]) == 0

    assert "SAMPLING COMPARISON SUMMARY" in capsys.readouterr().out


def test_unusable_output_directory_exits_non_zero(tmp_path, capsys):
    blocker = tmp_path / "not_a_directory"
    blocker.write_text("")

    assert cli.main(["--output", str(blocker / "chart.png"), "--quiet"]) == 1
    assert "ERROR" in capsys.readouterr().err


def test_render_error_exits_non_zero(tmp_path, monkeypatch, capsys):
    def failing_render(scenarios, grid_configuration, output_path):
        raise RenderError("backend unavailable")

    monkeypatch.setattr(ComparisonPlotter, "render", staticmethod(failing_render))

    assert cli.main(["--output", str(tmp_path / "chart.png"), "--quiet"]) == 1
    assert "backend unavailable" in capsys.readouterr().err
    assert not (tmp_path / "chart.png").exists()


def test_invalid_parameter_exits_non_zero(tmp_path, monkeypatch, capsys):
    def failing_run(output_path, verbose):
        raise InvalidParameterError("bit depth out of range")

    monkeypatch.setattr(cli, "run_comparison", failing_run)

    assert cli.main(["--output", str(tmp_path / "chart.png"), "--quiet"]) == 1
    assert "Invalid parameter" in capsys.readouterr().err
