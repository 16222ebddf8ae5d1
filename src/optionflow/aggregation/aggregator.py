"""
Spread Aggregator

Every total is a signed sum over the legs: bought legs add, sold legs subtract,
legs with an unknown side contribute nothing and poison the spread.
"""

from dataclasses import dataclass
from datetime import date

from optionflow.models.spread import SpreadType
from optionflow.models.trade import Expectation, OptionTrade, OrderAction

from .sequence import sequence_trail


@dataclass(frozen=True)
class LegTotals:
    """Intermediate fold of a leg-set, before any stock adjustment."""

    net_value: float
    expiration_date: date
    dte: int
    net_iv: float
    delta_when_opened: float
    current_delta: float
    opening_trade: bool
    poisoned: bool
    summary: str
    leg_count: int
    sequence_numbers: str


def fold_legs(legs: list[OptionTrade]) -> LegTotals:
    if not legs:
        raise ValueError("Cannot aggregate an empty leg-set")

    return LegTotals(
        net_value=sum(leg.amount_paid() for leg in legs),
        expiration_date=max(leg.expiry for leg in legs),
        dte=max(leg.dte for leg in legs),
        net_iv=sum(leg.net_iv() for leg in legs),
        delta_when_opened=sum(leg.net_delta() for leg in legs),
        current_delta=sum(leg.net_current_delta() for leg in legs),
        opening_trade=any(leg.is_opening for leg in legs),
        poisoned=any(leg.order_action is OrderAction.UNKNOWN for leg in legs),
        summary="".join(leg.describe() for leg in legs),
        leg_count=len(legs),
        sequence_numbers=sequence_trail(legs),
    )


def spread_type_for(net_value: float) -> SpreadType:
    return SpreadType.DEBIT if net_value > 0 else SpreadType.CREDIT


def expectation_for(delta: float) -> Expectation:
    if delta > 0:
        return Expectation.BULLISH
    if delta < 0:
        return Expectation.BEARISH
    return Expectation.NEUTRAL
