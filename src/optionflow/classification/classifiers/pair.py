"""
Two-Leg Classifier
"""

from optionflow.models.spread import SpreadName
from optionflow.models.trade import OptionTrade

from ..base import ClassificationContext, StrategyClassifier


class PairClassifier(StrategyClassifier):
    """Identifies verticals, calendars, straddles, strangles and their relatives."""

    def can_classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> bool:
        return ctx.leg_count == 2 and not ctx.with_stock

    def classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> SpreadName:
        strike, date, action, kind = ctx.same_strike, ctx.same_date, ctx.same_action, ctx.same_type

        # Evaluated in order, so Vertical shadows RiskReversal.
        if not strike and date and not action:
            return SpreadName.VERTICAL
        if strike and not date and not action:
            return SpreadName.CALENDAR
        if strike and date and action and not kind:
            return SpreadName.STRADDLE
        if not strike and date and action and not kind:
            return SpreadName.STRANGLE
        if not strike and date and not action and not kind:
            return SpreadName.RISK_REVERSAL
        if not strike and not date and not action:
            return SpreadName.DIAGONAL
        if action and kind:
            return SpreadName.LADDER
        return SpreadName.UNRECOGNIZED
