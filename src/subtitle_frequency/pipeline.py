"""
Пайплайн частотного анализа субтитров.

Связывает компоненты в одну последовательную цепочку:
загрузка реплик → токенизация → подсчёт частот → рейтинг и отчёт.
Таблица частот создаётся здесь и передаётся компонентам явно.
"""

import logging
import sys
import time
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, TextIO, Union

from .components.corpus_loader import CorpusLoader
from .components.exporter import RankedReporter
from .components.frequency_analyzer import FrequencyAggregator
from .components.stopwords import StopwordFilter
from .components.tokenizer import MorphTokenizer
from .config import Config, config as app_config
from .interfaces.components import FrequencyTable, PipelineResult
from .models.base_model import BaseAnalyzerModel, CaptionAnalysisError
from .models.model_factory import ModelFactory
from .subtitle_parser import SubtitleParser

logger = logging.getLogger(__name__)


class ConsoleProgress:
    """Счётчик обработанных слов, перерисовываемый в одной строке."""

    def __init__(self, stream: Optional[TextIO] = None, every: int = 100):
        self.stream = stream or sys.stdout
        self.every = max(1, every)
        self.count = 0

    def __call__(self, token: str) -> None:
        self.count += 1
        if self.count % self.every == 0:
            self._draw()

    def _draw(self) -> None:
        self.stream.write(f"\rОбработано слов: {self.count}")
        self.stream.flush()

    def finish(self) -> None:
        if self.count:
            self._draw()
            self.stream.write("\n")
            self.stream.flush()


class FrequencyPipeline:
    """Последовательный пайплайн: субтитры → рейтинг слов."""

    def __init__(self, model: BaseAnalyzerModel,
                 loader: Optional[CorpusLoader] = None,
                 aggregator: Optional[FrequencyAggregator] = None,
                 reporter: Optional[RankedReporter] = None,
                 error_policy: str = "fail",
                 extra_formats: Sequence[str] = (),
                 progress: Optional[ConsoleProgress] = None):
        """
        Args:
            model: Загруженный морфологический анализатор
            loader: Загрузчик корпуса
            aggregator: Агрегатор частот
            reporter: Генератор отчёта
            error_policy: fail или skip для ошибок разбора реплик
            extra_formats: Дополнительные форматы экспорта (csv, xlsx, json)
            progress: Счётчик прогресса в консоли
        """
        if error_policy not in ("fail", "skip"):
            raise ValueError(f"Неизвестная политика ошибок: {error_policy}")
        self.error_policy = error_policy
        self.loader = loader or CorpusLoader(error_policy=error_policy)
        self.progress = progress
        self.tokenizer = MorphTokenizer(model, on_token=progress)
        self.aggregator = aggregator or FrequencyAggregator()
        self.reporter = reporter or RankedReporter()
        self.extra_formats = list(extra_formats)
        self.captions_skipped = 0

    @classmethod
    def from_config(cls, cfg: Optional[Config] = None,
                    show_progress: Optional[bool] = None) -> "FrequencyPipeline":
        """
        Собирает пайплайн по конфигурации.

        Raises:
            RuntimeError: если анализатор не удалось загрузить
        """
        cfg = cfg or app_config
        model = ModelFactory.create_and_load_or_fail(cfg.get_analyzer_config())
        policy = cfg.get_error_policy()
        parser = SubtitleParser(
            encoding=cfg.get_corpus_encoding(),
            strip_markup=cfg.is_markup_stripping_enabled(),
        )
        if show_progress is None:
            show_progress = cfg.is_progress_enabled()
        return cls(
            model=model,
            loader=CorpusLoader(parser=parser, error_policy=policy),
            aggregator=FrequencyAggregator(StopwordFilter(cfg.get_extra_stopwords())),
            error_policy=policy,
            extra_formats=cfg.get_extra_formats(),
            progress=ConsoleProgress() if show_progress else None,
        )

    def build_table(self, captions: Iterable[str]) -> FrequencyTable:
        """
        Токенизирует реплики по одной и наполняет таблицу частот.

        Args:
            captions: Тексты реплик в порядке корпуса

        Returns:
            Итоговая таблица частот

        Raises:
            CaptionAnalysisError: при отказе анализатора и политике fail
        """
        table: FrequencyTable = Counter()
        self.captions_skipped = 0
        for caption in captions:
            try:
                tokens = self.tokenizer.tokenize(caption)
            except CaptionAnalysisError as e:
                if self.error_policy == "fail":
                    raise
                logger.warning(f"Реплика пропущена: {e}")
                self.captions_skipped += 1
                continue
            self.aggregator.accumulate(table, tokens)
        if self.progress is not None:
            self.progress.finish()
        return table

    def run(self, root_dir: Union[str, Path], output_path: Union[str, Path]) -> PipelineResult:
        """
        Полный прогон: папка с субтитрами → файл отчёта.

        Отчёт записывается только после обработки всего корпуса.

        Args:
            root_dir: Корневая папка с субтитрами
            output_path: Путь к файлу отчёта

        Returns:
            Результат прогона со статистикой
        """
        start = time.time()
        self.aggregator.reset_statistics()

        captions: List[str] = self.loader.load_all(root_dir)
        table = self.build_table(captions)
        entries = self.reporter.render(table)

        logger.info(f"Запись результатов в {output_path}")
        report_path = self.reporter.write_report(entries, output_path)

        stats = self.aggregator.get_frequency_statistics()
        result = PipelineResult(
            entries=entries,
            files_loaded=self.loader.files_loaded,
            files_skipped=len(self.loader.skipped_files),
            captions_processed=int(stats['captions']),
            captions_skipped=self.captions_skipped,
            tokens_seen=int(stats['tokens_seen']),
            stopwords_skipped=int(stats['stopwords_skipped']),
            processing_time=time.time() - start,
            report_path=report_path,
        )

        if self.extra_formats:
            metadata = {
                'files_loaded': result.files_loaded,
                'files_skipped': result.files_skipped,
                'captions_processed': result.captions_processed,
                'captions_skipped': result.captions_skipped,
                'tokens_seen': result.tokens_seen,
                'stopwords_skipped': result.stopwords_skipped,
                'total_words': result.total_words,
                'processing_time': round(result.processing_time, 2),
            }
            result.exported_files = self.reporter.export_formats(
                entries, report_path, self.extra_formats, metadata)

        return result
