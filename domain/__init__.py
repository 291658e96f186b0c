"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- evaluation: ConfusionMatrix, the Classifier interface and progress sinks
"""

from domain.evaluation import Classifier, ConfusionMatrix

__all__ = [
    "Classifier",
    "ConfusionMatrix",
]
