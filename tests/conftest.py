"""
Shared pytest fixtures for test suite.
"""

from datetime import date

import pytest

from optionflow.models.conditions import ConditionID
from optionflow.models.exchanges import Exchange
from optionflow.models.trade import OptionTrade, OptionType, OrderAction, TransactionType

EXPIRY = date(2024, 1, 19)
LATER_EXPIRY = date(2024, 2, 16)


def _trade(**overrides) -> OptionTrade:
    fields = {
        "root": "SPY",
        "strike": 450.0,
        "expiry": EXPIRY,
        "option_type": OptionType.CALL,
        "size": 10,
        "condition": ConditionID.MULT_LEG_AUTO_EX,
        "exchange": Exchange.CBOE,
        "seq_no": 1,
        "exchange_seq_no": 100,
        "timestamp": "10:15:30.123",
        "order_action": OrderAction.BOUGHT,
        "dte": 30,
        "price": 2.5,
        "bid": 2.4,
        "ask": 2.6,
        "implied_underlying_bid": 449.9,
        "implied_underlying_ask": 450.1,
        "implied_underlying_mid": 450.0,
        "iv": 0.2,
        "delta": 50.0,
        "current_delta": 0.5,
        "transaction_estimate": TransactionType.BUY_TO_OPEN,
    }
    fields.update(overrides)
    return OptionTrade(**fields)


@pytest.fixture
def make_trade():
    """Returns a factory building an OptionTrade with sensible defaults."""
    return _trade


@pytest.fixture
def make_legs():
    """
    Returns a factory for one coordinated execution.

    Each positional dict overrides one leg; legs share timestamp, exchange,
    condition and size and get consecutive sequence numbers starting at `seq`.
    """

    def _create(*leg_overrides, seq: int = 1, exchange_seq: int = 100, **shared):
        legs = []
        for offset, overrides in enumerate(leg_overrides):
            fields = {"seq_no": seq + offset, "exchange_seq_no": exchange_seq + offset}
            fields.update(shared)
            fields.update(overrides)
            legs.append(_trade(**fields))
        return legs

    return _create


@pytest.fixture
def trade_record():
    """A raw upstream trade record as found in a trades JSON export."""
    return {
        "root": "SPY",
        "strike": 450.0,
        "expiry": "2024-01-19",
        "option_type": "C",
        "option_trade_size": 10,
        "condition_id": 119,
        "exchange_id": 5,
        "seq_no": 1,
        "exchange_seq_no": 100,
        "timestamp": "10:15:30.123",
        "option_trade_price": 2.5,
        "option_bid": 2.4,
        "option_ask": 2.6,
        "option_trade_at": "On Ask",
        "implied_underlying_bid": 449.9,
        "implied_underlying_ask": 450.1,
        "implied_underlying_mid": 450.0,
        "iv": 0.2,
        "delta": 50.0,
        "current_delta": 0.5,
        "order_action": "Bought",
        "transaction_estimate": "BuyToOpen",
        "dte": 30,
    }
