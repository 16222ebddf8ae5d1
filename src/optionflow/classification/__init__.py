"""
Classification Submodule

Exports the deterministic spread taxonomy engine.
"""

from .base import ClassificationContext, StrategyClassifier
from .registry import ClassifierChain, classify

__all__ = ["ClassifierChain", "ClassificationContext", "StrategyClassifier", "classify"]
