"""
Ladder Classifier
"""

from optionflow.models.spread import SpreadName
from optionflow.models.trade import OptionTrade

from ..base import ClassificationContext, StrategyClassifier


class LadderClassifier(StrategyClassifier):
    """Five or more legs only have a name when they all share side and kind."""

    def can_classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> bool:
        return ctx.leg_count > 4

    def classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> SpreadName:
        if ctx.same_action and ctx.same_type:
            return SpreadName.LADDER
        return SpreadName.UNRECOGNIZED
