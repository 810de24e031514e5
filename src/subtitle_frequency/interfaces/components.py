"""
Абстрактные интерфейсы для компонентов пайплайна частотного анализа.

Определяет контракты, которые должны реализовывать все компоненты:
загрузчик корпуса, токенизатор, фильтр стоп-слов, агрегатор частот
и генератор отчёта.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Counter, Dict, List, NamedTuple, Optional, Sequence, Union


# Слово (базовая форма) → количество вхождений
FrequencyTable = Counter[str]


class RankedEntry(NamedTuple):
    """Строка итогового рейтинга: слово и его частота."""
    word: str
    count: int


@dataclass
class PipelineResult:
    """Результат полного прогона пайплайна."""
    entries: List[RankedEntry]
    files_loaded: int
    files_skipped: int
    captions_processed: int
    captions_skipped: int
    tokens_seen: int
    stopwords_skipped: int
    processing_time: float
    report_path: Optional[Path] = None
    exported_files: Dict[str, Path] = field(default_factory=dict)

    @property
    def unique_words(self) -> int:
        return len(self.entries)

    @property
    def total_words(self) -> int:
        """Количество учтённых (не стоп-слов) токенов."""
        return sum(entry.count for entry in self.entries)


class StopwordFilterInterface(ABC):
    """Интерфейс фильтра знаков препинания и символов."""

    @abstractmethod
    def is_stopword(self, token: str) -> bool:
        """Проверяет, является ли токен «шумом»."""
        pass


class CorpusLoaderInterface(ABC):
    """Интерфейс загрузки реплик из папки с субтитрами."""

    @abstractmethod
    def load_all(self, root_dir: Union[str, Path]) -> List[str]:
        """Возвращает тексты всех реплик всех файлов подряд."""
        pass


class TokenizerInterface(ABC):
    """Интерфейс морфологической токенизации реплики."""

    @abstractmethod
    def tokenize(self, caption: str) -> List[str]:
        """Разбивает реплику на слова в базовой форме."""
        pass


class FrequencyAggregatorInterface(ABC):
    """Интерфейс подсчёта частот."""

    @abstractmethod
    def accumulate(self, table: FrequencyTable, tokens: Sequence[str]) -> None:
        """Добавляет токены реплики в таблицу частот."""
        pass


class RankedReporterInterface(ABC):
    """Интерфейс построения и записи рейтинга."""

    @abstractmethod
    def render(self, table: FrequencyTable) -> List[RankedEntry]:
        """Сортирует таблицу частот в рейтинг."""
        pass

    @abstractmethod
    def write_report(self, entries: Sequence[RankedEntry], filepath: Union[str, Path]) -> Path:
        """Записывает рейтинг строками «слово количество»."""
        pass
