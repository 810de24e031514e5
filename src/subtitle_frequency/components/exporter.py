"""
Компонент для построения и экспорта частотного рейтинга.

Отвечает за сортировку таблицы частот и запись отчёта «слово количество»,
а также за дополнительный экспорт: CSV, Excel, JSON с метаданными.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

import pandas as pd

from ..interfaces.components import FrequencyTable, RankedEntry, RankedReporterInterface

logger = logging.getLogger(__name__)

COLUMNS = ['Слово', 'Частота']


class RankedReporter(RankedReporterInterface):
    """Генератор частотного отчёта."""

    def render(self, table: FrequencyTable) -> List[RankedEntry]:
        """
        Сортирует таблицу частот.

        Порядок: по убыванию частоты, при равной частоте — по возрастанию
        слова (сравнение по кодовым точкам).

        Args:
            table: Итоговая таблица частот

        Returns:
            Рейтинг без повторов слов
        """
        return [
            RankedEntry(word, count)
            for word, count in sorted(table.items(), key=lambda item: (-item[1], item[0]))
        ]

    def format_lines(self, entries: Iterable[RankedEntry]) -> List[str]:
        return [f"{entry.word} {entry.count}\n" for entry in entries]

    def write_report(self, entries: Sequence[RankedEntry], filepath: Union[str, Path]) -> Path:
        """
        Записывает рейтинг в текстовый файл, перезаписывая предыдущий отчёт.

        Пустой рейтинг даёт пустой файл.

        Args:
            entries: Отсортированный рейтинг
            filepath: Путь к файлу отчёта

        Returns:
            Путь к записанному файлу
        """
        filepath = Path(filepath)
        if filepath.parent and not filepath.parent.exists():
            filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, 'w', encoding='utf-8', newline='\n') as report_file:
            report_file.writelines(self.format_lines(entries))
        logger.info(f"Отчёт сохранён: {filepath} ({len(entries)} слов)")
        return filepath

    @staticmethod
    def read_report(filepath: Union[str, Path]) -> List[RankedEntry]:
        """Читает отчёт обратно: каждая строка делится по последнему пробелу."""
        entries = []
        with open(filepath, 'r', encoding='utf-8') as report_file:
            for line in report_file:
                word, count = line.rstrip('\n').rsplit(' ', 1)
                entries.append(RankedEntry(word, int(count)))
        return entries

    def _to_dataframe(self, entries: Sequence[RankedEntry]) -> pd.DataFrame:
        return pd.DataFrame([(e.word, e.count) for e in entries], columns=COLUMNS)

    def export_to_csv(self, entries: Sequence[RankedEntry], filepath: Union[str, Path]) -> Path:
        """
        Экспортирует рейтинг в CSV.

        Args:
            entries: Отсортированный рейтинг
            filepath: Путь для сохранения файла
        """
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix('.csv')
        self._to_dataframe(entries).to_csv(filepath, index=False, encoding='utf-8')
        logger.info(f"Рейтинг экспортирован в CSV: {filepath}")
        return filepath

    def export_to_excel(self, entries: Sequence[RankedEntry], filepath: Union[str, Path],
                        metadata: Optional[Dict[str, Any]] = None) -> Path:
        """
        Экспортирует рейтинг в Excel: лист частот и лист статистики.

        Args:
            entries: Отсортированный рейтинг
            filepath: Путь для сохранения файла
            metadata: Статистика прогона для второго листа
        """
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix('.xlsx')

        with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
            self._to_dataframe(entries).to_excel(writer, sheet_name='Частотность', index=False)

            stats = dict(metadata or {})
            stats.setdefault('Уникальных слов', len(entries))
            stats.setdefault('Дата анализа', datetime.now().strftime('%Y-%m-%d %H:%M:%S'))
            stats_df = pd.DataFrame({
                'Параметр': list(stats.keys()),
                'Значение': [str(v) for v in stats.values()],
            })
            stats_df.to_excel(writer, sheet_name='Статистика', index=False)

        logger.info(f"Рейтинг экспортирован в Excel: {filepath}")
        return filepath

    def export_to_json(self, entries: Sequence[RankedEntry], filepath: Union[str, Path],
                       metadata: Optional[Dict[str, Any]] = None) -> Path:
        """
        Экспортирует рейтинг в JSON с метаданными.

        Args:
            entries: Отсортированный рейтинг
            filepath: Путь для сохранения файла
            metadata: Статистика прогона
        """
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix('.json')

        json_data = {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'unique_words': len(entries),
                **(metadata or {}),
            },
            'words': [{'word': e.word, 'count': e.count} for e in entries],
        }
        with open(filepath, 'w', encoding='utf-8') as jsonfile:
            json.dump(json_data, jsonfile, ensure_ascii=False, indent=2)

        logger.info(f"Рейтинг экспортирован в JSON: {filepath}")
        return filepath

    def export_formats(self, entries: Sequence[RankedEntry], report_path: Union[str, Path],
                       formats: Iterable[str], metadata: Optional[Dict[str, Any]] = None) -> Dict[str, Path]:
        """
        Экспортирует рейтинг в дополнительные форматы рядом с основным отчётом.

        Ошибка одного формата не прерывает экспорт остальных.

        Args:
            entries: Отсортированный рейтинг
            report_path: Путь к основному отчёту (берётся имя без расширения)
            formats: Форматы: csv, xlsx, json
            metadata: Статистика прогона

        Returns:
            Словарь {формат: путь}
        """
        report_path = Path(report_path)
        exported: Dict[str, Path] = {}
        for fmt in formats:
            target = report_path.with_suffix(f'.{fmt}')
            try:
                if fmt == 'csv':
                    exported[fmt] = self.export_to_csv(entries, target)
                elif fmt == 'xlsx':
                    exported[fmt] = self.export_to_excel(entries, target, metadata)
                elif fmt == 'json':
                    exported[fmt] = self.export_to_json(entries, target, metadata)
                else:
                    logger.warning(f"Неизвестный формат экспорта: {fmt}")
            except (OSError, ValueError) as e:
                logger.error(f"Ошибка экспорта в {fmt}: {e}")
        return exported
