"""
Компоненты пайплайна частотного анализа субтитров.

Каждый компонент отвечает за одну конкретную задачу:
- StopwordFilter - отсев знаков препинания и символов
- CorpusLoader - загрузка реплик из папки с субтитрами
- MorphTokenizer - разбиение реплик на слова в базовой форме
- FrequencyAggregator - подсчёт частотности
- RankedReporter - сортировка и экспорт рейтинга
"""

from .stopwords import StopwordFilter, DEFAULT_STOPWORDS
from .corpus_loader import CorpusLoader
from .tokenizer import MorphTokenizer
from .frequency_analyzer import FrequencyAggregator
from .exporter import RankedReporter

__all__ = [
    'StopwordFilter',
    'DEFAULT_STOPWORDS',
    'CorpusLoader',
    'MorphTokenizer',
    'FrequencyAggregator',
    'RankedReporter',
]
