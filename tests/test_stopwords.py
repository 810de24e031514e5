"""
Тесты для компонента StopwordFilter.
"""

import pytest

from subtitle_frequency.components.stopwords import StopwordFilter, DEFAULT_STOPWORDS


class TestStopwordFilter:
    """Тесты для StopwordFilter."""

    @pytest.mark.parametrize("token", ["(", ")", "　", "（", "）", "？", "！", "…", "!", "･",
                                       "”", "“", "?", "～", "―", "、", "。"])
    def test_punctuation_is_stopword(self, token):
        """Каждый знак из набора отсекается."""
        assert StopwordFilter().is_stopword(token) is True

    def test_words_are_not_stopwords(self):
        """Обычные слова проходят фильтр."""
        stopword_filter = StopwordFilter()
        for word in ["猫", "だ", "好き", "これ", "a"]:
            assert stopword_filter.is_stopword(word) is False

    def test_exact_match_only(self):
        """Токен, содержащий знак вместе с другими символами, не отсекается."""
        stopword_filter = StopwordFilter()
        assert stopword_filter.is_stopword("？！") is False
        assert stopword_filter.is_stopword("猫。") is False
        assert stopword_filter.is_stopword("……") is False
        assert stopword_filter.is_stopword("") is False

    def test_repeated_calls_are_stable(self):
        """Фильтр — чистая функция: повторные вызовы дают тот же результат."""
        stopword_filter = StopwordFilter()
        for token in ["猫", "。", "？！", "("]:
            first = stopword_filter.is_stopword(token)
            assert all(stopword_filter.is_stopword(token) == first for _ in range(5))

    def test_extra_stopwords(self):
        """Дополнительные токены из конфигурации добавляются к стандартному набору."""
        stopword_filter = StopwordFilter(extra=["「", "」"])
        assert stopword_filter.is_stopword("「") is True
        assert stopword_filter.is_stopword("。") is True
        assert DEFAULT_STOPWORDS < stopword_filter.stopwords
