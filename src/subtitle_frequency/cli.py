#!/usr/bin/env python3
"""
Интерфейс командной строки для Subtitle Frequency

Строит частотный список слов по папке с японскими субтитрами:
1. Загрузка реплик из всех файлов папки (рекурсивно)
2. Морфологический разбор реплик (Juman++ или Sudachi)
3. Подсчёт частот базовых форм и запись отчёта «слово количество»
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import Config, EXPORT_FORMATS, ANALYZER_TYPES, ERROR_POLICIES
from .models.base_model import CaptionAnalysisError
from .pipeline import FrequencyPipeline
from .subtitle_parser import SubtitleParseError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Subtitle Frequency - частотный список слов по японским субтитрам",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python -m subtitle_frequency.cli                          # srt/ → output.txt
  python -m subtitle_frequency.cli -i anime/ -o freq.txt    # свои пути
  python -m subtitle_frequency.cli --analyzer sudachi       # Sudachi вместо Juman++
  python -m subtitle_frequency.cli --on-error skip --export xlsx --top 20
        """
    )
    parser.add_argument('-i', '--input', help='Папка с субтитрами (по умолчанию из config.yaml)')
    parser.add_argument('-o', '--output', help='Файл отчёта (по умолчанию output.txt)')
    parser.add_argument('-c', '--config', help='Путь к config.yaml')
    parser.add_argument('--analyzer', choices=ANALYZER_TYPES, help='Морфологический анализатор')
    parser.add_argument('--model', help='Путь к модели Juman++ (jumandic.jppmdl)')
    parser.add_argument('--on-error', choices=ERROR_POLICIES,
                        help='Что делать с неразбираемыми файлами и репликами')
    parser.add_argument('--export', action='append', choices=EXPORT_FORMATS, default=None,
                        help='Дополнительный формат экспорта (можно указать несколько раз)')
    parser.add_argument('--top', type=int, default=0, help='Показать N самых частых слов')
    parser.add_argument('--no-progress', action='store_true', help='Не показывать счётчик слов')
    return parser


def apply_arguments(cfg: Config, args: argparse.Namespace) -> None:
    """Переносит аргументы командной строки в конфигурацию."""
    if args.input:
        cfg.set('corpus.root_dir', args.input)
    if args.output:
        cfg.set('report.output_file', args.output)
    if args.analyzer:
        cfg.set('analyzer.type', args.analyzer)
    if args.model:
        cfg.set('analyzer.jumanpp.model', args.model)
    if args.on_error:
        cfg.set('pipeline.error_policy', args.on_error)
    if args.export:
        cfg.set('report.extra_formats', list(dict.fromkeys(args.export)))
    if args.no_progress:
        cfg.set('pipeline.show_progress', False)


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    args = build_parser().parse_args(argv)

    if args.config:
        cfg = Config(config_path=args.config)
    else:
        from .config import config as cfg

    if os.environ.get('SUBTITLE_FREQUENCY_DEBUG') == '1':
        cfg.set('logging.console_level', 'DEBUG')
    cfg._configure_logging_if_needed(force=True)

    apply_arguments(cfg, args)

    print("🎌 Subtitle Frequency - частотный анализ японских субтитров")
    print("=" * 50)

    root_dir = cfg.get_corpus_root()
    output_file = cfg.get_output_file()

    try:
        print(f"🔧 Загрузка анализатора ({cfg.get_analyzer_type()})...")
        pipeline = FrequencyPipeline.from_config(cfg)

        print(f"📄 Обработка субтитров из {root_dir}...")
        result = pipeline.run(root_dir, output_file)
    except (RuntimeError, SubtitleParseError, CaptionAnalysisError, OSError) as e:
        logger.error(f"Запуск прерван: {e}")
        print(f"❌ Ошибка: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\n👋 Работа прервана пользователем")
        return 1

    print(f"\n📊 Результаты анализа:")
    print(f"   Обработано файлов: {result.files_loaded}")
    if result.files_skipped:
        print(f"   Пропущено файлов: {result.files_skipped}")
    print(f"   Реплик: {result.captions_processed}")
    if result.captions_skipped:
        print(f"   Пропущено реплик: {result.captions_skipped}")
    print(f"   Найдено слов: {result.total_words}")
    print(f"   Уникальных слов: {result.unique_words}")
    print(f"   Время обработки: {result.processing_time:.2f} сек")

    if args.top > 0 and result.entries:
        print(f"\n🏆 Топ {args.top} слов:")
        for entry in result.entries[:args.top]:
            print(f"   • {entry.word}: {entry.count}")

    print(f"\n✅ Результаты записаны в: {result.report_path}")
    for fmt, path in result.exported_files.items():
        print(f"   {fmt}: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
