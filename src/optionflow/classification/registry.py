"""
Classifier Registry

Manages the explicit chain of spread classifiers.
"""

from typing import Optional

from optionflow.models.spread import SpreadName
from optionflow.models.trade import OptionTrade

from .base import ClassificationContext, StrategyClassifier
from .classifiers.butterfly import ButterflyClassifier
from .classifiers.condor import CondorClassifier
from .classifiers.ladder import LadderClassifier
from .classifiers.pair import PairClassifier
from .classifiers.single_option import SingleOptionClassifier
from .classifiers.stock_combo import StockPairClassifier, StockSingleClassifier


class ClassifierChain:
    """Executes classifiers in explicit priority order."""

    def __init__(self):
        # Stock-combined shapes take precedence over the plain option shapes
        self._chain: list[StrategyClassifier] = [
            StockSingleClassifier(),
            SingleOptionClassifier(),
            StockPairClassifier(),
            PairClassifier(),
            ButterflyClassifier(),
            CondorClassifier(),
            LadderClassifier(),
        ]

    def classify(self, legs: list[OptionTrade]) -> SpreadName:
        """
        Classifies legs using the chain. First match wins.
        """
        if not legs:
            return SpreadName.UNRECOGNIZED

        ctx = ClassificationContext.from_legs(legs)

        for classifier in self._chain:
            if classifier.can_classify(legs, ctx):
                return classifier.classify(legs, ctx)

        return SpreadName.UNRECOGNIZED


_CHAIN: Optional[ClassifierChain] = None


def classify(legs: list[OptionTrade]) -> SpreadName:
    """Map a leg-set to its taxonomy name. Never raises for shape reasons."""
    global _CHAIN
    if _CHAIN is None:
        _CHAIN = ClassifierChain()
    return _CHAIN.classify(list(legs))
