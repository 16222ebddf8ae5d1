"""
Trade Enrichment

Infers the side of a raw print from where it executed against the quote, and
estimates whether it opened or closed a position. The side is a two-stage
pure transformation: quote position -> tentative action -> crossed-market flip.
"""

from dataclasses import replace
from datetime import date

from .models.trade import (
    ExecutionPrice,
    Expectation,
    OptionTrade,
    OptionTradeAt,
    OptionType,
    OrderAction,
    TransactionType,
)

DELTA_SCALE = 100.0

_ASK_SIDE = {OptionTradeAt.ABOVE_ASK, OptionTradeAt.ON_ASK}
_BID_SIDE = {OptionTradeAt.ON_BID, OptionTradeAt.BELOW_BID}


def execution_price(trade_at: OptionTradeAt, price: float, bid: float, ask: float) -> ExecutionPrice:
    """Where the print landed relative to the quote midpoint."""
    if trade_at in _ASK_SIDE:
        return ExecutionPrice.CLOSER_TO_ASK
    if trade_at in _BID_SIDE:
        return ExecutionPrice.CLOSER_TO_BID

    mid = 0.5 * (bid + ask)
    if 0 < price < mid:
        return ExecutionPrice.CLOSER_TO_BID
    if price == mid:
        return ExecutionPrice.EXACT_MID_PRICE
    return ExecutionPrice.CLOSER_TO_ASK


def tentative_action(price_position: ExecutionPrice) -> OrderAction:
    if price_position is ExecutionPrice.CLOSER_TO_BID:
        return OrderAction.SOLD
    if price_position is ExecutionPrice.CLOSER_TO_ASK:
        return OrderAction.BOUGHT
    return OrderAction.UNKNOWN


def flip_on_crossed(action: OrderAction, trade_at: OptionTradeAt) -> OrderAction:
    """On a crossed market the bid sits above the ask, so sides are reversed."""
    if trade_at is OptionTradeAt.CROSSED_MARKET:
        return action.flip()
    return action


def infer_order_action(trade_at: OptionTradeAt, price: float, bid: float, ask: float) -> OrderAction:
    return flip_on_crossed(tentative_action(execution_price(trade_at, price, bid, ask)), trade_at)


def estimate_transaction(
    open_interest: int, size: int, price_position: ExecutionPrice
) -> TransactionType:
    """
    A print larger than the open interest cannot be closing existing contracts,
    so it must be opening. Anything else might be closing.
    """
    if price_position not in (ExecutionPrice.CLOSER_TO_BID, ExecutionPrice.CLOSER_TO_ASK):
        return TransactionType.COULD_NOT_DETERMINE

    sold = price_position is ExecutionPrice.CLOSER_TO_BID
    if open_interest < size:
        return TransactionType.SELL_TO_OPEN if sold else TransactionType.BUY_TO_OPEN
    return TransactionType.MAYBE_SELL_TO_CLOSE if sold else TransactionType.MAYBE_BUY_TO_CLOSE


def leg_expectation(option_type: OptionType, action: OrderAction) -> Expectation:
    if action is OrderAction.UNKNOWN:
        return Expectation.UNKNOWN
    bullish = (option_type is OptionType.CALL) == (action is OrderAction.BOUGHT)
    return Expectation.BULLISH if bullish else Expectation.BEARISH


def enrich_trade(
    trade: OptionTrade, *, open_interest: int, current_delta: float, today: date
) -> OptionTrade:
    """
    Returns a copy of a raw print with side, transaction estimate, live delta
    and DTE filled in. The static delta arrives per share and is scaled to
    per-contract units, so enrich each raw print once.
    """
    position = execution_price(trade.trade_at, trade.price, trade.bid, trade.ask)
    return replace(
        trade,
        order_action=flip_on_crossed(tentative_action(position), trade.trade_at),
        transaction_estimate=estimate_transaction(open_interest, trade.size, position),
        current_delta=current_delta,
        delta=trade.delta * DELTA_SCALE,
        dte=(trade.expiry - today).days,
    )
