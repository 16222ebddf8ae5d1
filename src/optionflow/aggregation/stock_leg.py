"""
Stock-Leg Adjuster

Condition codes in the stock-option family report the option legs only; the
equity leg that traded alongside them is implied and added here.
"""

from dataclasses import replace

from optionflow.models.spread import SpreadName
from optionflow.models.trade import CONTRACT_MULTIPLIER, OptionTrade, OptionType

from .aggregator import LegTotals

LONG_STOCK = frozenset({SpreadName.COVERED_CALL, SpreadName.CONVERSION, SpreadName.SYNTHETIC_CALL})
SHORT_STOCK = frozenset({SpreadName.COVERED_PUT, SpreadName.REVERSAL, SpreadName.SYNTHETIC_PUT})


def total_contracts(legs: list[OptionTrade]) -> int:
    return sum(leg.size for leg in legs)


def share_value(name: SpreadName, legs: list[OptionTrade]) -> float:
    """Signed dollar value of the implied shares."""
    shares = CONTRACT_MULTIPLIER * total_contracts(legs)
    if name in LONG_STOCK:
        return shares * legs[0].implied_underlying_ask
    if name in SHORT_STOCK:
        return -shares * legs[0].implied_underlying_bid
    return 0.0


def share_delta(name: SpreadName, legs: list[OptionTrade]) -> float:
    """Signed delta of the implied shares."""
    shares = float(CONTRACT_MULTIPLIER * total_contracts(legs))
    if name in LONG_STOCK:
        return shares
    if name in SHORT_STOCK:
        return -shares
    if name is SpreadName.COLLAR:
        sold = next((leg for leg in legs if leg.is_sell()), None)
        if sold is None:
            return 0.0
        return shares if sold.option_type is OptionType.CALL else -shares
    return 0.0


def stock_clause(name: SpreadName, legs: list[OptionTrade]) -> str:
    first = legs[0]
    shares = CONTRACT_MULTIPLIER * first.size
    if name in LONG_STOCK:
        return f"Bought {shares} shares of stock at {first.implied_underlying_ask}|"
    if name in SHORT_STOCK:
        return f"Shorted {shares} shares of stock at {first.implied_underlying_bid}|"
    return f"Traded {shares} shares of stock at {first.implied_underlying_mid}|"


def adjust_for_stock(totals: LegTotals, name: SpreadName, legs: list[OptionTrade]) -> LegTotals:
    """
    Adds the implied stock leg to `totals` when the first leg's condition
    reports one. Returns `totals` unchanged otherwise.
    """
    if not legs or not legs[0].condition.includes_stock_trade():
        return totals

    delta = share_delta(name, legs)
    return replace(
        totals,
        net_value=totals.net_value + share_value(name, legs),
        delta_when_opened=totals.delta_when_opened + delta,
        current_delta=totals.current_delta + delta,
        summary=totals.summary + stock_clause(name, legs),
        leg_count=totals.leg_count + 1,
    )
