"""
Single Option Classifier
"""

from optionflow.models.spread import SpreadName
from optionflow.models.trade import OptionTrade, OptionType, OrderAction

from ..base import ClassificationContext, StrategyClassifier

_NAMES = {
    (OptionType.CALL, OrderAction.BOUGHT): SpreadName.LONG_CALL,
    (OptionType.CALL, OrderAction.SOLD): SpreadName.SHORT_CALL,
    (OptionType.PUT, OrderAction.BOUGHT): SpreadName.LONG_PUT,
    (OptionType.PUT, OrderAction.SOLD): SpreadName.SHORT_PUT,
}


class SingleOptionClassifier(StrategyClassifier):
    """Identifies a lone long or short option printed under a multi-leg code."""

    def can_classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> bool:
        return ctx.leg_count == 1 and not ctx.with_stock

    def classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> SpreadName:
        leg = legs[0]
        return _NAMES.get((leg.option_type, leg.order_action), SpreadName.UNRECOGNIZED)
