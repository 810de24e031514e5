from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Set, Tuple, Union

from subtitle_frequency.models.base_model import BaseAnalyzerModel, CaptionAnalysisError, PathNode


class FakeAnalyzerModel(BaseAnalyzerModel):
    """Фейковый анализатор для тестов.

    Для известных реплик возвращает заданный разбор, для остальных —
    по одному узлу на символ (без пробелов). Позволяет имитировать отказ
    анализатора и «битые» узлы.
    """

    def __init__(self,
                 analyses: Optional[Dict[str, Sequence[Union[str, Tuple[str, Optional[str]]]]]] = None,
                 fail_on: Optional[Iterable[str]] = None,
                 raw_paths: Optional[Dict[str, List[PathNode]]] = None) -> None:
        self.analyses = dict(analyses or {})
        self.fail_on: Set[str] = set(fail_on or [])
        self.raw_paths = dict(raw_paths or {})
        self.loaded = False
        self.calls: List[str] = []

    def load(self) -> None:
        self.loaded = True

    def best_path(self, text: str) -> Iterator[PathNode]:
        self.calls.append(text)
        if text in self.fail_on:
            raise CaptionAnalysisError(f"отказ анализатора: {text!r}")
        if text in self.raw_paths:
            return iter(self.raw_paths[text])
        parts = self.analyses.get(text)
        if parts is None:
            parts = [ch for ch in text if not ch.isspace()]
        return iter(self._to_nodes(parts))

    @staticmethod
    def _to_nodes(parts) -> List[PathNode]:
        nodes = []
        position = 0
        for part in parts:
            if isinstance(part, tuple):
                surface, base_form = part
            else:
                surface, base_form = part, part
            nodes.append(PathNode(surface=surface, base_form=base_form,
                                  begin=position, end=position + len(surface)))
            position += len(surface)
        return nodes

    def unload(self) -> None:
        self.loaded = False

    def get_model_info(self) -> Dict[str, Any]:
        return {"name": "fake", "type": "fake", "loaded": self.loaded}
