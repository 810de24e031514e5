"""
Компонент для фильтрации знаков препинания и символов.

Отсекает токены, целиком совпадающие с одним из знаков: скобки,
вопросительные/восклицательные знаки, многоточия, тире, кавычки
и полноширинная пунктуация. Сравнение — точное по строке.
"""

from typing import FrozenSet, Iterable, Optional
from ..interfaces.components import StopwordFilterInterface


DEFAULT_STOPWORDS: FrozenSet[str] = frozenset({
    "(", ")",
    "　",       # полноширинный пробел
    "（", "）",
    "？", "！", "?", "!",
    "…",
    "･",
    "”", "“",
    "～",
    "―",
    "、", "。",
})


class StopwordFilter(StopwordFilterInterface):
    """Фильтр «шумовых» токенов."""

    def __init__(self, extra: Optional[Iterable[str]] = None):
        """
        Args:
            extra: Дополнительные токены, которые нужно исключать из подсчёта
        """
        words = set(DEFAULT_STOPWORDS)
        if extra:
            words.update(extra)
        self._stopwords: FrozenSet[str] = frozenset(words)

    @property
    def stopwords(self) -> FrozenSet[str]:
        return self._stopwords

    def is_stopword(self, token: str) -> bool:
        """
        Проверяет, является ли токен знаком препинания/символом.

        Токен, содержащий знак вместе с другими символами, не отсекается.

        Args:
            token: Токен (базовая форма) от анализатора

        Returns:
            True если токен нужно исключить из подсчёта
        """
        return token in self._stopwords
