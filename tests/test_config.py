import os
import textwrap

from subtitle_frequency.config import Config
from subtitle_frequency.models.base_model import BeamSettings
from subtitle_frequency.models.model_factory import ModelFactory


def test_config_defaults_when_missing_file(tmp_path):
    """
    Проверяет, что при отсутствии config.yaml подставляются дефолтные значения.
    """
    cwd = os.getcwd()
    try:
        os.chdir(tmp_path)
        cfg = Config(config_path=str(tmp_path / "config.yaml"))
        assert cfg.get_corpus_root() == "srt"
        assert cfg.get_output_file() == "output.txt"
        assert cfg.get_analyzer_type() == "jumanpp"
        assert ModelFactory.beam_settings(cfg.get_analyzer_config()) == BeamSettings(5, 6, 1, 5)
        assert cfg.get_error_policy() == "fail"
        assert cfg.get_extra_formats() == []
    finally:
        os.chdir(cwd)


def test_config_overrides_from_yaml(tmp_path):
    """
    Проверяет, что значения из YAML перекрывают дефолты, не затирая соседние ключи.
    """
    yaml_text = textwrap.dedent(
        """
        corpus:
          root_dir: "anime"
        analyzer:
          type: "sudachi"
          jumanpp:
            beam: 3
        report:
          extra_formats: ["xlsx", "pdf"]
        """
    ).strip()
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(yaml_text, encoding="utf-8")

    cfg = Config(config_path=str(cfg_path))

    assert cfg.get_corpus_root() == "anime"
    assert cfg.get_analyzer_type() == "sudachi"
    beam = ModelFactory.beam_settings(cfg.get_analyzer_config())
    assert beam.beam == 3
    # Глобальный луч не задан в YAML и остаётся дефолтным
    assert beam.global_left == 6
    # Неизвестный формат отброшен валидацией
    assert cfg.get_extra_formats() == ["xlsx"]


def test_config_env_overrides(tmp_path, monkeypatch):
    """
    Проверяет переопределения через SUBTITLE_FREQUENCY_<СЕКЦИЯ>__<КЛЮЧ>.
    """
    monkeypatch.setenv("SUBTITLE_FREQUENCY_PIPELINE__ERROR_POLICY", "skip")
    monkeypatch.setenv("SUBTITLE_FREQUENCY_ANALYZER__JUMANPP__GLOBAL_BEAM__RIGHT", "8")
    monkeypatch.setenv("SUBTITLE_FREQUENCY_CORPUS__STRIP_MARKUP", "false")

    cfg = Config(config_path=str(tmp_path / "nonexistent.yaml"))

    assert cfg.get_error_policy() == "skip"
    assert ModelFactory.beam_settings(cfg.get_analyzer_config()).global_right == 8
    assert cfg.is_markup_stripping_enabled() is False


def test_config_validation(tmp_path):
    """
    Некорректные значения луча и политики ошибок заменяются допустимыми.
    """
    yaml_text = textwrap.dedent(
        """
        analyzer:
          jumanpp:
            beam: 0
            global_beam:
              left: "wide"
        pipeline:
          error_policy: "retry"
        """
    ).strip()
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(yaml_text, encoding="utf-8")

    cfg = Config(config_path=str(cfg_path))

    beam = ModelFactory.beam_settings(cfg.get_analyzer_config())
    assert beam.beam == 1
    assert beam.global_left == 6
    assert cfg.get_error_policy() == "fail"


def test_config_profile(tmp_path, monkeypatch):
    """
    SUBTITLE_FREQUENCY_ENV=testing выбирает config.test.yaml рядом с config.yaml.
    """
    (tmp_path / "config.yaml").write_text("report:\n  output_file: main.txt\n", encoding="utf-8")
    (tmp_path / "config.test.yaml").write_text("report:\n  output_file: test.txt\n", encoding="utf-8")
    monkeypatch.setenv("SUBTITLE_FREQUENCY_ENV", "testing")

    cfg = Config(config_path=str(tmp_path / "config.yaml"))

    assert cfg.get_output_file() == "test.txt"
