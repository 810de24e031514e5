"""
Тесты для интерфейса командной строки.
"""

import textwrap
from unittest.mock import patch

import pytest

from subtitle_frequency import cli

from .fixtures.sample_subtitles import SCENARIO_ANALYSES
from .utils.fake_analyzer import FakeAnalyzerModel


@pytest.fixture
def cli_config(temp_directory):
    cfg_path = temp_directory / "config.yaml"
    cfg_path.write_text(textwrap.dedent(
        """
        pipeline:
          show_progress: false
        """
    ).strip(), encoding="utf-8")
    return cfg_path


@patch("subtitle_frequency.pipeline.ModelFactory.create_and_load_or_fail")
def test_main_writes_report(mock_create, corpus_dir, temp_directory, cli_config, capsys):
    mock_create.return_value = FakeAnalyzerModel(analyses=SCENARIO_ANALYSES)
    output = temp_directory / "freq.txt"

    code = cli.main(["-c", str(cli_config), "-i", str(corpus_dir), "-o", str(output), "--top", "2"])

    assert code == 0
    assert output.read_text(encoding="utf-8").splitlines()[:2] == ["だ 3", "猫 3"]
    out = capsys.readouterr().out
    assert "Топ 2 слов" in out
    assert "だ: 3" in out


@patch("subtitle_frequency.pipeline.ModelFactory.create_and_load_or_fail")
def test_main_analyzer_failure(mock_create, corpus_dir, temp_directory, cli_config):
    mock_create.side_effect = RuntimeError("Не удалось загрузить анализатор")
    output = temp_directory / "freq.txt"

    code = cli.main(["-c", str(cli_config), "-i", str(corpus_dir), "-o", str(output)])

    assert code == 1
    assert not output.exists()


@patch("subtitle_frequency.pipeline.ModelFactory.create_and_load_or_fail")
def test_main_missing_input(mock_create, temp_directory, cli_config):
    mock_create.return_value = FakeAnalyzerModel()

    code = cli.main(["-c", str(cli_config), "-i", str(temp_directory / "nope"),
                     "-o", str(temp_directory / "freq.txt")])

    assert code == 1


def test_arguments_applied_to_config(cli_config):
    from subtitle_frequency.config import Config

    cfg = Config(config_path=str(cli_config))
    args = cli.build_parser().parse_args([
        "--analyzer", "sudachi", "--on-error", "skip", "--export", "csv", "--export", "csv",
        "--model", "m.jppmdl", "--no-progress",
    ])

    cli.apply_arguments(cfg, args)

    assert cfg.get_analyzer_type() == "sudachi"
    assert cfg.get_error_policy() == "skip"
    assert cfg.get_extra_formats() == ["csv"]
    assert cfg.get('analyzer.jumanpp.model') == "m.jppmdl"
    assert cfg.is_progress_enabled() is False
