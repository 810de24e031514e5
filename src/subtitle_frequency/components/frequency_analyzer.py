"""
Компонент для подсчёта частотности слов.

Отвечает за пополнение таблицы частот токенами реплик, отсев
стоп-слов и ведение статистики по прогону.
"""

from typing import Dict, List, Optional, Sequence, Tuple
from ..interfaces.components import FrequencyAggregatorInterface, FrequencyTable, StopwordFilterInterface
from .stopwords import StopwordFilter


class FrequencyAggregator(FrequencyAggregatorInterface):
    """Агрегатор частот по базовым формам."""

    def __init__(self, stopword_filter: Optional[StopwordFilterInterface] = None):
        """
        Инициализирует агрегатор.

        Args:
            stopword_filter: Фильтр знаков препинания (по умолчанию стандартный набор)
        """
        self.stopword_filter = stopword_filter or StopwordFilter()
        self._captions = 0
        self._tokens_seen = 0
        self._stopwords_skipped = 0
        self._last_table: Optional[FrequencyTable] = None

    def accumulate(self, table: FrequencyTable, tokens: Sequence[str]) -> None:
        """
        Добавляет токены одной реплики в таблицу частот.

        Токен используется как ключ без изменений (без смены регистра и обрезки).

        Args:
            table: Таблица частот (Counter), изменяется на месте
            tokens: Токены реплики в порядке следования
        """
        self._captions += 1
        self._last_table = table
        words = []
        for token in tokens:
            self._tokens_seen += 1
            if self.stopword_filter.is_stopword(token):
                self._stopwords_skipped += 1
                continue
            words.append(token)
        table.update(words)

    def get_most_frequent(self, table: FrequencyTable, n: int = 10) -> List[Tuple[str, int]]:
        """
        Возвращает n самых частых слов (при равенстве — по алфавиту).

        Args:
            table: Таблица частот
            n: Количество слов для возврата

        Returns:
            Список кортежей (слово, частота)
        """
        if not table or n <= 0:
            return []
        return sorted(table.items(), key=lambda item: (-item[1], item[0]))[:n]

    def get_word_frequency(self, table: FrequencyTable, word: str) -> int:
        """Возвращает частоту конкретного слова."""
        return table.get(word, 0)

    def get_frequency_statistics(self) -> Dict[str, float]:
        """
        Возвращает статистику по всем обработанным репликам.

        Returns:
            Словарь со статистикой
        """
        table = self._last_table or {}
        counted = sum(table.values())
        return {
            'captions': self._captions,
            'tokens_seen': self._tokens_seen,
            'stopwords_skipped': self._stopwords_skipped,
            'counted_words': counted,
            'unique_words': len(table),
            'avg_tokens_per_caption': self._tokens_seen / self._captions if self._captions > 0 else 0.0,
        }

    def reset_statistics(self) -> None:
        """Сбрасывает статистику (таблица частот принадлежит вызывающему)."""
        self._captions = 0
        self._tokens_seen = 0
        self._stopwords_skipped = 0
        self._last_table = None
