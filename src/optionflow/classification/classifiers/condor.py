"""
Condor Classifier
"""

from optionflow.models.spread import SpreadName
from optionflow.models.trade import OptionTrade

from ..base import ClassificationContext, StrategyClassifier


class CondorClassifier(StrategyClassifier):
    """Identifies Iron Condors, Iron Butterflies and Boxes."""

    def can_classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> bool:
        return ctx.leg_count == 4

    def classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> SpreadName:
        if ctx.all_different_strikes and not ctx.same_action and ctx.same_date and not ctx.same_type:
            return SpreadName.IRON_CONDOR

        if not (ctx.same_date and not ctx.same_action):
            return SpreadName.UNRECOGNIZED

        inner_call = ctx.find(OptionTrade.is_call_sell)
        inner_put = ctx.find(OptionTrade.is_put_sell)
        if inner_call is None or inner_put is None:
            return SpreadName.UNRECOGNIZED

        if inner_call.strike == inner_put.strike:
            return SpreadName.IRON_BUTTERFLY
        if ctx.distinct_strikes == 2:
            return SpreadName.BOX
        return SpreadName.UNRECOGNIZED
