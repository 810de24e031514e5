import sys
from pathlib import Path
from typing import Dict

import pytest

# Пакет лежит в src/, добавляем путь для запуска без установки
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from .fixtures.sample_subtitles import (  # noqa: E402
    SAMPLE_SRT,
    SAMPLE_SRT_MULTILINE,
    SAMPLE_VTT,
    SAMPLE_MALFORMED,
    SCENARIO_ANALYSES,
)
from .utils.fake_analyzer import FakeAnalyzerModel  # noqa: E402


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_subtitles() -> Dict[str, str]:
    """Наборы субтитров для тестирования."""
    return {
        "srt": SAMPLE_SRT,
        "multiline": SAMPLE_SRT_MULTILINE,
        "vtt": SAMPLE_VTT,
        "malformed": SAMPLE_MALFORMED,
    }


@pytest.fixture
def fake_model() -> FakeAnalyzerModel:
    """Фейковый анализатор с разбором реплик из сценария."""
    return FakeAnalyzerModel(analyses=SCENARIO_ANALYSES)


@pytest.fixture
def corpus_dir(tmp_path: Path, sample_subtitles) -> Path:
    """Папка с субтитрами: один файл в корне, один во вложенной папке без расширения."""
    root = tmp_path / "srt"
    (root / "season1").mkdir(parents=True)
    (root / "episode01.srt").write_text(sample_subtitles["srt"], encoding="utf-8")
    (root / "season1" / "episode02").write_text(
        "1\n00:00:01,000 --> 00:00:02,000\n猫が好きです。\n", encoding="utf-8"
    )
    return root


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")
