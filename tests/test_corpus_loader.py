"""
Тесты для компонента CorpusLoader.
"""

import pytest

from subtitle_frequency.components.corpus_loader import CorpusLoader
from subtitle_frequency.subtitle_parser import SubtitleParseError


class TestCorpusLoader:
    """Тесты для CorpusLoader."""

    def test_loads_all_files_recursively(self, corpus_dir):
        """Все файлы, включая вложенные и без расширения, читаются как субтитры."""
        loader = CorpusLoader()
        captions = loader.load_all(corpus_dir)

        assert captions == ["これは猫です。", "猫が好きです。", "猫が好きです。"]
        assert loader.files_loaded == 2
        assert loader.skipped_files == []

    def test_only_text_is_kept(self, corpus_dir):
        """Номера и тайминги в результат не попадают."""
        captions = CorpusLoader().load_all(corpus_dir)

        assert all("-->" not in caption for caption in captions)
        assert all(not caption.isdigit() for caption in captions)

    def test_empty_directory(self, temp_directory):
        """Пустая папка даёт пустой список без ошибок."""
        loader = CorpusLoader()

        assert loader.load_all(temp_directory) == []
        assert loader.files_loaded == 0

    def test_missing_directory_raises(self, temp_directory):
        with pytest.raises(FileNotFoundError):
            CorpusLoader().load_all(temp_directory / "nope")

    def test_file_instead_of_directory_raises(self, temp_directory):
        path = temp_directory / "file.srt"
        path.write_text("", encoding="utf-8")

        with pytest.raises(NotADirectoryError):
            CorpusLoader().load_all(path)

    def test_malformed_file_is_fatal_by_default(self, corpus_dir, sample_subtitles):
        """Политика fail: ошибка разбора одного файла прерывает загрузку."""
        (corpus_dir / "broken.srt").write_text(sample_subtitles["malformed"], encoding="utf-8")

        with pytest.raises(SubtitleParseError):
            CorpusLoader().load_all(corpus_dir)

    def test_malformed_file_is_skipped_with_skip_policy(self, corpus_dir, sample_subtitles):
        """Политика skip: битый файл пропускается целиком, остальные читаются."""
        broken = corpus_dir / "broken.srt"
        broken.write_text(sample_subtitles["malformed"], encoding="utf-8")

        loader = CorpusLoader(error_policy="skip")
        captions = loader.load_all(corpus_dir)

        assert "正しい" not in captions
        assert captions == ["これは猫です。", "猫が好きです。", "猫が好きです。"]
        assert loader.skipped_files == [broken]
        assert loader.files_loaded == 2

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValueError):
            CorpusLoader(error_policy="retry")
