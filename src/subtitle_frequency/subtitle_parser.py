"""
Модуль для чтения файлов субтитров

Содержит функции для:
- Разбора блоков SubRip (.srt), включая файлы с заголовком WebVTT
- Извлечения текста реплик
- Удаления разметки (<i>, <font>, {\\an8}) из текста
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from bs4 import BeautifulSoup


TIMING_PATTERN = re.compile(
    r"^\s*(?P<start>(?:\d{1,2}:)?\d{1,2}:\d{2}[,.]\d{1,3})"
    r"\s*-->\s*"
    r"(?P<end>(?:\d{1,2}:)?\d{1,2}:\d{2}[,.]\d{1,3})"
)
ASS_OVERRIDE_PATTERN = re.compile(r"\{\\[^}]*\}")

# Служебные блоки WebVTT, не содержащие реплик
VTT_SERVICE_BLOCKS = ("NOTE", "STYLE", "REGION")


class SubtitleParseError(ValueError):
    """Файл не удаётся разобрать как субтитры."""

    def __init__(self, path: Union[str, Path], message: str, line: Optional[int] = None):
        self.path = Path(path)
        self.line = line
        location = f"{self.path}:{line}" if line is not None else str(self.path)
        super().__init__(f"{location}: {message}")


@dataclass(frozen=True)
class SubtitleItem:
    """Одна реплика субтитров."""
    index: int
    start_ms: int
    end_ms: int
    text: str


def parse_timestamp(value: str) -> int:
    """
    Переводит метку времени в миллисекунды

    Args:
        value: Метка вида HH:MM:SS,mmm или MM:SS.mmm

    Returns:
        Время в миллисекундах
    """
    clock, millis = re.split(r"[,.]", value.strip())
    parts = [int(p) for p in clock.split(":")]
    while len(parts) < 3:
        parts.insert(0, 0)
    hours, minutes, seconds = parts
    return ((hours * 60 + minutes) * 60 + seconds) * 1000 + int(millis.ljust(3, "0"))


class SubtitleParser:
    """Класс для чтения файлов субтитров"""

    def __init__(self, encoding: str = "utf-8-sig", strip_markup: bool = True) -> None:
        self.encoding = encoding
        self.strip_markup = strip_markup

    def parse_file(self, path: Union[str, Path]) -> List[SubtitleItem]:
        """
        Читает файл и возвращает реплики в порядке следования

        Args:
            path: Путь к файлу субтитров

        Returns:
            Список реплик

        Raises:
            SubtitleParseError: если файл не читается или нарушен формат
        """
        path = Path(path)
        try:
            content = path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise SubtitleParseError(path, f"не удалось декодировать как {self.encoding}: {e.reason}") from e
        except OSError as e:
            raise SubtitleParseError(path, f"не удалось прочитать файл: {e}") from e
        return self.parse_text(content, source=path)

    def parse_text(self, content: str, source: Union[str, Path] = "<string>") -> List[SubtitleItem]:
        """Разбирает содержимое файла субтитров."""
        items: List[SubtitleItem] = []
        block: List[str] = []
        block_start = 1
        is_first_block = True

        lines = content.splitlines()
        for lineno, raw in enumerate(lines + [""], start=1):
            line = raw.rstrip()
            if line.strip():
                if not block:
                    block_start = lineno
                block.append(line)
                continue
            if not block:
                continue
            if is_first_block and block[0].lstrip().startswith("WEBVTT"):
                pass
            elif block[0].split(" ", 1)[0] in VTT_SERVICE_BLOCKS:
                pass
            else:
                items.append(self._parse_block(block, block_start, len(items) + 1, source))
            is_first_block = False
            block = []

        return items

    def _parse_block(self, block: List[str], block_start: int, position: int,
                     source: Union[str, Path]) -> SubtitleItem:
        # Блок: [номер или идентификатор], тайминг, строки текста
        if TIMING_PATTERN.match(block[0]):
            index, timing_offset = position, 0
        elif len(block) > 1 and TIMING_PATTERN.match(block[1]):
            first = block[0].strip()
            index = int(first) if first.isdigit() else position
            timing_offset = 1
        else:
            raise SubtitleParseError(source, f"ожидалась строка тайминга, получено: {block[0]!r}", block_start)

        timing = TIMING_PATTERN.match(block[timing_offset])
        start_ms = parse_timestamp(timing.group("start"))
        end_ms = parse_timestamp(timing.group("end"))
        if end_ms < start_ms:
            raise SubtitleParseError(source, "время окончания реплики раньше начала", block_start + timing_offset)

        text = "\n".join(line.strip() for line in block[timing_offset + 1:])
        if self.strip_markup:
            text = self.clean_text(text)
        return SubtitleItem(index=index, start_ms=start_ms, end_ms=end_ms, text=text)

    def remove_markup_tags(self, text: str) -> str:
        """
        Удаляет HTML теги из текста используя BeautifulSoup

        Args:
            text: Текст реплики

        Returns:
            Текст без тегов
        """
        if not text:
            return ""
        if '<' in text and '>' in text:
            soup = BeautifulSoup(text, "html.parser")
            return soup.get_text()
        return text

    def clean_text(self, text: str) -> str:
        """Удаляет теги и блоки стилей ASS ({\\an8}) из реплики."""
        cleaned = ASS_OVERRIDE_PATTERN.sub("", text)
        cleaned = self.remove_markup_tags(cleaned)
        return cleaned.strip()
