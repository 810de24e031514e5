"""
Интерфейсы для компонентов частотного анализа субтитров.

Определяет абстрактные базовые классы для всех компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .components import (
    FrequencyTable,
    RankedEntry,
    PipelineResult,
    StopwordFilterInterface,
    CorpusLoaderInterface,
    TokenizerInterface,
    FrequencyAggregatorInterface,
    RankedReporterInterface,
)

__all__ = [
    'FrequencyTable',
    'RankedEntry',
    'PipelineResult',
    'StopwordFilterInterface',
    'CorpusLoaderInterface',
    'TokenizerInterface',
    'FrequencyAggregatorInterface',
    'RankedReporterInterface',
]
