"""
Фабрика для создания морфологических анализаторов по конфигурации.
"""

from __future__ import annotations

from typing import Optional, Dict, Any

from .base_model import BaseAnalyzerModel, BeamSettings


class ModelFactory:
    """Создаёт анализаторы на основе конфигурации."""

    @staticmethod
    def beam_settings(model_cfg: Dict[str, Any]) -> BeamSettings:
        jumanpp_cfg = model_cfg.get("jumanpp") or {}
        global_beam = jumanpp_cfg.get("global_beam") or {}
        return BeamSettings(
            beam=int(jumanpp_cfg.get("beam", 5)),
            global_left=int(global_beam.get("left", 6)),
            global_check=int(global_beam.get("check", 1)),
            global_right=int(global_beam.get("right", 5)),
        )

    @staticmethod
    def create(model_cfg: Dict[str, Any]) -> Optional[BaseAnalyzerModel]:
        """Создаёт анализатор из словаря настроек (раздел analyzer).

        Ожидаемый формат:
        {
          "type": "jumanpp",
          "jumanpp": {"executable": "jumanpp", "model": "...", "beam": 5,
                      "global_beam": {"left": 6, "check": 1, "right": 5}},
          "sudachi": {"dict": "core", "split_mode": "C"},
        }
        """
        if not model_cfg:
            return None
        model_type = (model_cfg.get("type") or "").lower()
        beam = ModelFactory.beam_settings(model_cfg)
        if model_type == "jumanpp":
            from .jumanpp_model import JumanppModel
            jumanpp_cfg = model_cfg.get("jumanpp") or {}
            return JumanppModel(
                model_path=jumanpp_cfg.get("model") or None,
                executable=jumanpp_cfg.get("executable") or "jumanpp",
                beam=beam,
            )
        if model_type == "sudachi":
            from .sudachi_model import SudachiModel
            sudachi_cfg = model_cfg.get("sudachi") or {}
            return SudachiModel(
                dict_name=sudachi_cfg.get("dict") or "core",
                split_mode=str(sudachi_cfg.get("split_mode") or "C"),
                beam=beam,
            )
        return None

    @staticmethod
    def create_and_load_or_fail(model_cfg: Dict[str, Any]) -> BaseAnalyzerModel:
        """Создаёт и загружает анализатор или выбрасывает ошибку (Fail Fast).

        Args:
            model_cfg: Конфигурация анализатора

        Returns:
            Загруженный анализатор

        Raises:
            RuntimeError: если анализатор не может быть создан или загружен
        """
        try:
            model = ModelFactory.create(model_cfg)
        except ValueError as e:
            raise RuntimeError(f"Некорректная конфигурация анализатора: {e}") from e
        if model is None:
            raise RuntimeError("Некорректная конфигурация анализатора: отсутствует или неизвестный тип")
        try:
            model.load()
            return model
        except Exception as e:
            raise RuntimeError(f"Не удалось загрузить анализатор: {e}") from e
