from .base_model import BaseAnalyzerModel, BeamSettings, CaptionAnalysisError, PathNode
from .model_factory import ModelFactory

__all__ = [
    "BaseAnalyzerModel",
    "BeamSettings",
    "CaptionAnalysisError",
    "PathNode",
    "ModelFactory",
]
