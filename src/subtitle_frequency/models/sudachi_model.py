"""
Обёртка над SudachiPy, реализующая интерфейс BaseAnalyzerModel.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Optional

from sudachipy import dictionary, tokenizer

from .base_model import BaseAnalyzerModel, BeamSettings, CaptionAnalysisError, PathNode

logger = logging.getLogger(__name__)

SPLIT_MODES = {
    "A": tokenizer.Tokenizer.SplitMode.A,
    "B": tokenizer.Tokenizer.SplitMode.B,
    "C": tokenizer.Tokenizer.SplitMode.C,
}


class SudachiModel(BaseAnalyzerModel):
    """Sudachi в унифицированном интерфейсе.

    Sudachi строит решётку и выбирает лучший путь сам; параметры луча
    сохраняются только для информации.
    """

    def __init__(self, dict_name: str = "core", split_mode: str = "C",
                 beam: Optional[BeamSettings] = None) -> None:
        mode = split_mode.upper()
        if mode not in SPLIT_MODES:
            raise ValueError(f"Неизвестный режим разбиения Sudachi: {split_mode} (ожидается A, B или C)")
        self.dict_name = dict_name
        self.split_mode = mode
        self.beam = beam or BeamSettings()
        self._tokenizer = None

    def load(self) -> None:
        if self._tokenizer is not None:
            return
        try:
            dic = dictionary.Dictionary(dict=self.dict_name)
            # В новых версиях SudachiPy create() объявлен устаревшим
            make_tokenizer = getattr(dic, "tokenizer", None) or dic.create
            self._tokenizer = make_tokenizer()
        except Exception as e:
            raise RuntimeError(
                f"Не удалось загрузить словарь Sudachi '{self.dict_name}'. "
                f"Установите словарь: pip install sudachidict_{self.dict_name}"
            ) from e
        logger.info(f"Sudachi загружен: dict={self.dict_name}, mode={self.split_mode}")

    @staticmethod
    def is_whitespace(morpheme) -> bool:
        """Пробелы и переводы строк Sudachi выдаёт отдельными морфемами (POS 空白)."""
        if not morpheme.surface().strip():
            return True
        return morpheme.part_of_speech()[0] == "空白"

    def best_path(self, text: str) -> Iterator[PathNode]:
        if self._tokenizer is None:
            self.load()
        # Строки разбираются по отдельности, пробельные морфемы выбрасываются;
        # границы считаются по поверхностным формам оставшихся узлов.
        position = 0
        for line in text.split("\n"):
            if not line.strip():
                continue
            try:
                morphemes = self._tokenizer.tokenize(line, SPLIT_MODES[self.split_mode])
            except Exception as e:
                raise CaptionAnalysisError(f"Sudachi не смог разобрать реплику {line!r}: {e}") from e
            for m in morphemes:
                if self.is_whitespace(m):
                    continue
                surface = m.surface()
                yield PathNode(
                    surface=surface,
                    base_form=m.dictionary_form() or None,
                    begin=position,
                    end=position + len(surface),
                )
                position += len(surface)

    def unload(self) -> None:
        self._tokenizer = None

    def get_model_info(self) -> Dict[str, Any]:
        return {
            "name": self.dict_name,
            "type": "sudachi",
            "loaded": self._tokenizer is not None,
            "split_mode": self.split_mode,
        }
