"""
Stock Combination Classifiers

Option legs whose condition code reports an implied stock print alongside.
"""

from optionflow.models.spread import SpreadName
from optionflow.models.trade import OptionTrade

from ..base import ClassificationContext, StrategyClassifier


class StockSingleClassifier(StrategyClassifier):
    """One option leg traded against stock."""

    def can_classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> bool:
        return ctx.leg_count == 1 and ctx.with_stock

    def classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> SpreadName:
        leg = legs[0]
        if leg.is_call_sell():
            return SpreadName.COVERED_CALL
        if leg.is_put_sell():
            return SpreadName.COVERED_PUT
        if leg.is_put_buy():
            return SpreadName.SYNTHETIC_CALL
        if leg.is_call_buy():
            return SpreadName.SYNTHETIC_PUT
        return SpreadName.UNRECOGNIZED_WITH_STOCK


class StockPairClassifier(StrategyClassifier):
    """Two option legs traded against stock: conversions, reversals, collars."""

    def can_classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> bool:
        return ctx.leg_count == 2 and ctx.with_stock

    def classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> SpreadName:
        if ctx.has_pair(OptionTrade.is_call_sell, OptionTrade.is_put_buy):
            return SpreadName.CONVERSION if ctx.same_strike else SpreadName.COLLAR
        if ctx.has_pair(OptionTrade.is_put_sell, OptionTrade.is_call_buy):
            return SpreadName.REVERSAL if ctx.same_strike else SpreadName.COLLAR
        if all(leg.is_call_sell() for leg in legs):
            return SpreadName.COVERED_CALL
        if all(leg.is_put_sell() for leg in legs):
            return SpreadName.COVERED_PUT
        if ctx.has_pair(OptionTrade.is_put_buy, OptionTrade.is_put_sell):
            return SpreadName.SYNTHETIC_CALL
        if ctx.has_pair(OptionTrade.is_call_buy, OptionTrade.is_call_sell):
            return SpreadName.SYNTHETIC_PUT
        return SpreadName.UNRECOGNIZED_WITH_STOCK
