"""
Компонент для морфологической токенизации японских реплик.

Отвечает за проход по лучшему пути анализатора и извлечение
базовых форм слов. Анализатор создаётся один раз и переиспользуется
для всех реплик запуска.
"""

import logging
from typing import Callable, List, Optional

from ..interfaces.components import TokenizerInterface
from ..models.base_model import BaseAnalyzerModel

logger = logging.getLogger(__name__)


class MorphTokenizer(TokenizerInterface):
    """Адаптер морфологического анализатора."""

    def __init__(self, model: BaseAnalyzerModel,
                 on_token: Optional[Callable[[str], None]] = None):
        """
        Инициализирует токенизатор.

        Args:
            model: Загруженный анализатор (Juman++, Sudachi)
            on_token: Вызывается для каждого извлечённого токена (счётчик прогресса)
        """
        self.model = model
        self.on_token = on_token
        self.words_parsed = 0
        self.partial_captions = 0

    def tokenize(self, caption: str) -> List[str]:
        """
        Разбивает реплику на слова в базовой форме.

        Идёт по границам лучшего пути: на каждой границе должен найтись
        ровно один узел с базовой формой. Если узел не разрешается,
        разбор реплики прекращается, уже извлечённые токены сохраняются.

        Args:
            caption: Текст реплики

        Returns:
            Список базовых форм в порядке следования

        Raises:
            CaptionAnalysisError: если анализатор отверг реплику целиком
        """
        if not caption or not caption.strip():
            return []

        tokens: List[str] = []
        boundary = None
        for node in self.model.best_path(caption):
            if boundary is not None and node.begin != boundary:
                logger.debug(
                    f"Разрыв пути на границе {boundary} (узел начинается с {node.begin}), "
                    f"реплика {caption!r} обрезана после {len(tokens)} токенов"
                )
                self.partial_captions += 1
                break
            if not node.base_form:
                logger.debug(
                    f"Нет базовой формы для узла {node.surface!r} на границе {node.begin}, "
                    f"реплика {caption!r} обрезана после {len(tokens)} токенов"
                )
                self.partial_captions += 1
                break
            tokens.append(node.base_form)
            boundary = node.end
            self.words_parsed += 1
            if self.on_token is not None:
                self.on_token(node.base_form)

        return tokens
