"""
Обёртка над Juman++ (через rhoknp), реализующая интерфейс BaseAnalyzerModel.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional

from rhoknp import Jumanpp

from .base_model import BaseAnalyzerModel, BeamSettings, CaptionAnalysisError, PathNode

logger = logging.getLogger(__name__)


class JumanppModel(BaseAnalyzerModel):
    """Juman++ с фиксированными параметрами луча."""

    def __init__(self, model_path: Optional[str] = None, executable: str = "jumanpp",
                 beam: Optional[BeamSettings] = None) -> None:
        self.model_path = model_path
        self.executable = executable
        self.beam = beam or BeamSettings()
        self._jumanpp: Optional[Jumanpp] = None

    def build_options(self) -> List[str]:
        """Аргументы командной строки jumanpp."""
        options = []
        if self.model_path:
            options.append(f"--model={self.model_path}")
        options += [
            f"--beam={self.beam.beam}",
            f"--global-beam={self.beam.global_left}",
            f"--global-beam-check={self.beam.global_check}",
            f"--global-beam-right={self.beam.global_right}",
        ]
        return options

    def load(self) -> None:
        if self._jumanpp is not None:
            return
        options = self.build_options()
        try:
            self._jumanpp = Jumanpp(executable=self.executable, options=options)
        except Exception as e:
            raise RuntimeError(
                f"Не удалось запустить Juman++ '{self.executable}' с параметрами {options}. "
                f"Проверьте установку jumanpp и путь к модели"
            ) from e
        logger.info(f"Juman++ загружен: {self.executable} {' '.join(options)}")

    def best_path(self, text: str) -> Iterator[PathNode]:
        if self._jumanpp is None:
            self.load()
        # Границы считаются по поверхностным формам, строки реплики идут встык.
        # Juman++ воспринимает перевод строки как конец предложения.
        position = 0
        for line in text.split("\n"):
            if not line.strip():
                continue
            try:
                sentence = self._jumanpp.apply_to_sentence(line)
            except Exception as e:
                raise CaptionAnalysisError(f"Juman++ не смог разобрать реплику {line!r}: {e}") from e
            for morpheme in sentence.morphemes:
                surface = morpheme.text
                yield PathNode(
                    surface=surface,
                    base_form=morpheme.lemma or None,
                    begin=position,
                    end=position + len(surface),
                )
                position += len(surface)

    def unload(self) -> None:
        self._jumanpp = None

    def get_model_info(self) -> Dict[str, Any]:
        return {
            "name": self.model_path or "default",
            "type": "jumanpp",
            "loaded": self._jumanpp is not None,
            "options": self.build_options(),
        }
