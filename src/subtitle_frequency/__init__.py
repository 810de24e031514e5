"""
Subtitle Frequency - частотный список слов по японским субтитрам

Этот модуль предоставляет инструменты для:
- Чтения реплик из файлов субтитров (.srt, WebVTT)
- Морфологического разбора реплик (Juman++, Sudachi)
- Подсчёта частот слов в базовой форме
- Создания отчёта и экспорта в CSV/Excel/JSON
"""

__version__ = "0.1.0"
__author__ = "Sergey"

from .pipeline import FrequencyPipeline
from .subtitle_parser import SubtitleParser
from . import cli

__all__ = [
    "FrequencyPipeline",
    "SubtitleParser",
    "cli",
]
