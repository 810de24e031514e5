"""
Базовые интерфейсы и структуры данных для морфологических анализаторов.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional


class CaptionAnalysisError(RuntimeError):
    """Анализатор не смог обработать реплику (длина, кодировка, сбой процесса)."""


@dataclass(frozen=True)
class PathNode:
    """Узел лучшего пути решётки анализа.

    begin/end — границы узла в символах анализируемого текста.
    base_form равен None, если базовую форму узла получить не удалось.
    """
    surface: str
    base_form: Optional[str]
    begin: int
    end: int


@dataclass(frozen=True)
class BeamSettings:
    """Параметры поиска: локальный луч и глобальный луч (left, check, right)."""
    beam: int = 5
    global_left: int = 6
    global_check: int = 1
    global_right: int = 5


class BaseAnalyzerModel(ABC):
    """Базовый интерфейс морфологического анализатора."""

    @abstractmethod
    def load(self) -> None:
        """Загружает модель/словарь в память."""
        pass

    @abstractmethod
    def best_path(self, text: str) -> Iterator[PathNode]:
        """Анализирует текст и возвращает узлы лучшего пути (top-1) по порядку.

        Raises:
            CaptionAnalysisError: если анализатор отверг текст
        """
        pass

    @abstractmethod
    def unload(self) -> None:
        """Выгружает модель из памяти (если применимо)."""
        pass

    @abstractmethod
    def get_model_info(self) -> Dict[str, Any]:
        """Возвращает информацию о модели (имя, тип, параметры)."""
        pass
