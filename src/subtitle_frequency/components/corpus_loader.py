"""
Компонент для загрузки реплик из папки с субтитрами.

Рекурсивно обходит папку, считает каждый обычный файл файлом субтитров
(независимо от расширения) и собирает тексты реплик в один список.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional, Union

from ..interfaces.components import CorpusLoaderInterface
from ..subtitle_parser import SubtitleParseError, SubtitleParser

logger = logging.getLogger(__name__)


class CorpusLoader(CorpusLoaderInterface):
    """Загрузчик корпуса субтитров."""

    def __init__(self, parser: Optional[SubtitleParser] = None, error_policy: str = "fail"):
        """
        Args:
            parser: Парсер субтитров
            error_policy: fail — ошибка разбора файла прерывает запуск,
                skip — файл пропускается с предупреждением
        """
        if error_policy not in ("fail", "skip"):
            raise ValueError(f"Неизвестная политика ошибок: {error_policy}")
        self.parser = parser or SubtitleParser()
        self.error_policy = error_policy
        self.files_loaded = 0
        self.skipped_files: List[Path] = []

    def iter_files(self, root_dir: Union[str, Path]) -> Iterator[Path]:
        """Обходит папку рекурсивно (имена внутри папки — по алфавиту)."""
        root = Path(root_dir)
        if not root.exists():
            raise FileNotFoundError(f"Папка с субтитрами не найдена: {root}")
        if not root.is_dir():
            raise NotADirectoryError(f"Ожидалась папка с субтитрами: {root}")

        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for name in sorted(filenames):
                path = Path(dirpath) / name
                if path.is_file():
                    yield path

    def load_all(self, root_dir: Union[str, Path]) -> List[str]:
        """
        Возвращает тексты всех реплик всех файлов подряд.

        Args:
            root_dir: Корневая папка с субтитрами

        Returns:
            Список текстов реплик в порядке обхода

        Raises:
            SubtitleParseError: при ошибке разбора файла и политике fail
        """
        captions: List[str] = []
        self.files_loaded = 0
        self.skipped_files = []

        for path in self.iter_files(root_dir):
            try:
                items = self.parser.parse_file(path)
            except SubtitleParseError as e:
                if self.error_policy == "fail":
                    raise
                logger.warning(f"Файл пропущен: {e}")
                self.skipped_files.append(path)
                continue
            captions.extend(item.text for item in items)
            self.files_loaded += 1
            logger.debug(f"Загружен {path}: {len(items)} реплик")

        logger.info(
            f"Загружено реплик: {len(captions)} из {self.files_loaded} файлов"
            + (f", пропущено файлов: {len(self.skipped_files)}" if self.skipped_files else "")
        )
        return captions
