import time
from collections import Counter

import pytest

from subtitle_frequency.components.exporter import RankedReporter
from subtitle_frequency.components.frequency_analyzer import FrequencyAggregator


@pytest.mark.performance
def test_accumulate_basic_performance():
    """Проверяет, что подсчёт и сортировка достаточно быстры на большом потоке токенов."""
    aggregator = FrequencyAggregator()
    tokens = [f"語{i % 5000}" for i in range(2000)] + ["。", "、"]
    table = Counter()

    start = time.perf_counter()
    for _ in range(100):
        aggregator.accumulate(table, tokens)
    entries = RankedReporter().render(table)
    duration = time.perf_counter() - start

    assert len(entries) == 2000
    # Базовый грубый порог, чтобы ловить регрессии
    assert duration < 2.0, f"Слишком медленно: {duration:.3f}s"
