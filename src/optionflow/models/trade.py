"""
Option Trade Domain Model

A single option print, already enriched with an order-action estimate,
an opening/closing estimate and the live delta of the contract.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping

from .conditions import ConditionID
from .exchanges import Exchange

if TYPE_CHECKING:
    from .spread import OptionSpread

CONTRACT_MULTIPLIER = 100
TIMESTAMP_FORMAT = "%H:%M:%S.%f"


class OptionType(str, Enum):
    CALL = "Call"
    PUT = "Put"


class OrderAction(str, Enum):
    BOUGHT = "Bought"
    SOLD = "Sold"
    UNKNOWN = "Unknown"

    def flip(self) -> "OrderAction":
        if self is OrderAction.BOUGHT:
            return OrderAction.SOLD
        if self is OrderAction.SOLD:
            return OrderAction.BOUGHT
        return OrderAction.UNKNOWN


class TransactionType(str, Enum):
    """Best guess at whether a print opened or closed a position."""

    BUY_TO_OPEN = "BuyToOpen"
    SELL_TO_OPEN = "SellToOpen"
    MAYBE_BUY_TO_CLOSE = "MaybeBuyToClose"
    MAYBE_SELL_TO_CLOSE = "MaybeSellToClose"
    COULD_NOT_DETERMINE = "CouldNotDetermine"
    UNCALCULATED = "Uncalculated"

    @property
    def is_opening(self) -> bool:
        return self in (TransactionType.BUY_TO_OPEN, TransactionType.SELL_TO_OPEN)


class ExecutionPrice(str, Enum):
    CLOSER_TO_BID = "CloserToBid"
    CLOSER_TO_ASK = "CloserToAsk"
    EXACT_MID_PRICE = "ExactMidPrice"
    UNKNOWN = "Unknown"


class OptionTradeAt(str, Enum):
    """Where the print landed relative to the quoted market."""

    ABOVE_ASK = "Above Ask"
    ON_ASK = "On Ask"
    MID_MARKET = "Mid Market"
    ON_BID = "On Bid"
    BELOW_BID = "Below Bid"
    CROSSED_MARKET = "Crossed Market"
    NO_MARKET = "No Market"


class Expectation(str, Enum):
    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class OptionTrade:
    """
    Represents one option trade print.

    Sign conventions: every signed helper below is positive for a bought
    contract, negative for a sold one and zero when the side is unknown.
    """

    root: str
    strike: float
    expiry: date
    option_type: OptionType
    size: int
    condition: ConditionID
    exchange: Exchange
    seq_no: int
    exchange_seq_no: int
    timestamp: str
    order_action: OrderAction = OrderAction.UNKNOWN
    dte: int = 0
    price: float = 0.0
    bid: float = 0.0
    ask: float = 0.0
    trade_at: OptionTradeAt = OptionTradeAt.NO_MARKET
    implied_underlying_bid: float = 0.0
    implied_underlying_ask: float = 0.0
    implied_underlying_mid: float = 0.0
    iv: float = 0.0
    delta: float = 0.0
    current_delta: float = 0.0
    transaction_estimate: TransactionType = TransactionType.UNCALCULATED

    @property
    def executed_at(self) -> time:
        return datetime.strptime(self.timestamp, TIMESTAMP_FORMAT).time()

    @property
    def sort_key(self) -> tuple[time, int]:
        return (self.executed_at, self.seq_no)

    @property
    def notional_value(self) -> float:
        return round(self.price * CONTRACT_MULTIPLIER * self.size, 2)

    @property
    def is_opening(self) -> bool:
        return self.transaction_estimate.is_opening

    @property
    def _sign(self) -> int:
        if self.order_action is OrderAction.BOUGHT:
            return 1
        if self.order_action is OrderAction.SOLD:
            return -1
        return 0

    def amount_paid(self) -> float:
        return self._sign * self.notional_value

    def net_iv(self) -> float:
        return self._sign * self.iv

    def net_delta(self) -> float:
        return self._sign * self.delta * self.size

    def net_current_delta(self) -> float:
        return self._sign * self.current_delta * self.size

    def is_call(self) -> bool:
        return self.option_type is OptionType.CALL

    def is_put(self) -> bool:
        return self.option_type is OptionType.PUT

    def is_buy(self) -> bool:
        return self.order_action is OrderAction.BOUGHT

    def is_sell(self) -> bool:
        return self.order_action is OrderAction.SOLD

    def is_call_buy(self) -> bool:
        return self.is_buy() and self.is_call()

    def is_put_buy(self) -> bool:
        return self.is_buy() and self.is_put()

    def is_call_sell(self) -> bool:
        return self.is_sell() and self.is_call()

    def is_put_sell(self) -> bool:
        return self.is_sell() and self.is_put()

    def describe(self) -> str:
        """One summary clause, e.g. ``Bought 10 of the 450.0 2024-01-19 Call|``."""
        return (
            f"{self.order_action.value} {self.size} of the {self.strike} "
            f"{self.expiry.isoformat()} {self.option_type.value}|"
        )

    def expectation(self) -> Expectation:
        from optionflow.enrichment import leg_expectation

        return leg_expectation(self.option_type, self.order_action)

    def to_spread(self) -> "OptionSpread":
        """Project a standalone print onto a one-leg spread."""
        from .spread import OptionSpread, SpreadName, SpreadType

        names = {
            (OptionType.CALL, OrderAction.BOUGHT): SpreadName.LONG_CALL,
            (OptionType.CALL, OrderAction.SOLD): SpreadName.SHORT_CALL,
            (OptionType.PUT, OrderAction.BOUGHT): SpreadName.LONG_PUT,
            (OptionType.PUT, OrderAction.SOLD): SpreadName.SHORT_PUT,
        }
        if self.is_buy():
            spread_type = SpreadType.DEBIT
        elif self.is_sell():
            spread_type = SpreadType.CREDIT
        else:
            spread_type = SpreadType.UNKNOWN

        return OptionSpread(
            symbol=self.root,
            spread_name=names.get((self.option_type, self.order_action), SpreadName.UNRECOGNIZED),
            spread_type=spread_type,
            net_value=self.notional_value,
            expiration_date=self.expiry,
            dte=self.dte,
            net_iv=self.net_iv(),
            delta_when_opened=self.net_delta(),
            current_delta=self.net_current_delta(),
            expectation=self.expectation(),
            timestamp=self.timestamp,
            condition=self.condition,
            exchange=self.exchange,
            leg_count=1,
            summary=self.describe(),
            opening_trade=self.is_opening,
            sequence_numbers=f"seq no {self.seq_no}- ex seq no {self.exchange_seq_no}",
        )

    @classmethod
    def from_row(cls, row: Mapping[str, Any], *, index: int | None = None) -> "OptionTrade":
        """
        Factory method to create an OptionTrade from an upstream trade record.

        A record without a side gets one inferred from where it printed against
        the quote, unless the quote was unavailable.
        """
        from optionflow import trade_parser as tp
        from optionflow.enrichment import infer_order_action

        price = tp.parse_float(row, "option_trade_price", index=index)
        bid = tp.parse_float(row, "option_bid", index=index)
        ask = tp.parse_float(row, "option_ask", index=index)
        trade_at = tp.parse_enum(
            row, "option_trade_at", OptionTradeAt, index=index, default=OptionTradeAt.NO_MARKET
        )
        order_action = tp.parse_enum(
            row, "order_action", OrderAction, index=index, default=OrderAction.UNKNOWN
        )
        if order_action is OrderAction.UNKNOWN and trade_at is not OptionTradeAt.NO_MARKET:
            order_action = infer_order_action(trade_at, price, bid, ask)

        return cls(
            root=tp.parse_str(row, "root", index=index),
            strike=tp.parse_float(row, "strike", index=index, required=True),
            expiry=tp.parse_date(row, "expiry", index=index),
            option_type=tp.parse_option_type(row, "option_type", index=index),
            size=tp.parse_int(row, "option_trade_size", index=index, required=True),
            condition=tp.parse_enum(row, "condition_id", ConditionID, index=index),
            exchange=tp.parse_enum(row, "exchange_id", Exchange, index=index),
            seq_no=tp.parse_int(row, "seq_no", index=index, required=True),
            exchange_seq_no=tp.parse_int(row, "exchange_seq_no", index=index, required=True),
            timestamp=tp.parse_timestamp(row, "timestamp", index=index),
            order_action=order_action,
            dte=tp.parse_int(row, "dte", index=index),
            price=price,
            bid=bid,
            ask=ask,
            trade_at=trade_at,
            implied_underlying_bid=tp.parse_float(row, "implied_underlying_bid", index=index),
            implied_underlying_ask=tp.parse_float(row, "implied_underlying_ask", index=index),
            implied_underlying_mid=tp.parse_float(row, "implied_underlying_mid", index=index),
            iv=tp.parse_float(row, "iv", index=index),
            delta=tp.parse_float(row, "delta", index=index),
            current_delta=tp.parse_float(row, "current_delta", index=index),
            transaction_estimate=tp.parse_enum(
                row,
                "transaction_estimate",
                TransactionType,
                index=index,
                default=TransactionType.UNCALCULATED,
            ),
        )
