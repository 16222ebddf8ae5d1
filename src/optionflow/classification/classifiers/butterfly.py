"""
Butterfly Classifier
"""

from optionflow.models.spread import SpreadName
from optionflow.models.trade import OptionTrade

from ..base import ClassificationContext, StrategyClassifier


class ButterflyClassifier(StrategyClassifier):
    """Identifies three-leg structures by their size pattern."""

    def can_classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> bool:
        return ctx.leg_count == 3

    def classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> SpreadName:
        if not ctx.same_action and ctx.distinct_sizes == 2:
            return SpreadName.BUTTERFLY
        if not ctx.same_action and not ctx.same_amount and ctx.distinct_sizes == 3:
            return SpreadName.UNBALANCED_BUTTERFLY
        if ctx.same_action and ctx.same_type:
            return SpreadName.LADDER
        return SpreadName.UNRECOGNIZED
