"""
Tests for batch-level flow signals.
"""

import pytest

from optionflow.flow_summary import (
    SPREAD_COLUMNS,
    dealer_delta,
    naive_dealer_delta,
    spreads_to_frame,
    summarize_flow,
)
from optionflow.models.trade import Expectation, OptionType, OrderAction, TransactionType


@pytest.fixture
def batch(make_trade):
    """Two large prints (one opening, one closing) and a small opening one."""
    return [
        make_trade(size=1000, price=2.5, current_delta=0.5, seq_no=1),
        make_trade(
            option_type=OptionType.PUT,
            size=2000,
            price=1.0,
            delta=-40.0,
            current_delta=-0.4,
            transaction_estimate=TransactionType.MAYBE_BUY_TO_CLOSE,
            seq_no=2,
        ),
        make_trade(size=1, seq_no=3),
    ]


def test_dealer_delta_counts_opening_prints_only(make_trade):
    assert dealer_delta(make_trade(size=10, current_delta=0.5)) == pytest.approx(-5.0)
    closing = make_trade(transaction_estimate=TransactionType.MAYBE_SELL_TO_CLOSE)
    assert dealer_delta(closing) == 0.0


def test_naive_dealer_delta_skips_unknown_side(make_trade):
    assert naive_dealer_delta(make_trade(size=10, delta=50.0)) == pytest.approx(-500.0)
    assert naive_dealer_delta(make_trade(order_action=OrderAction.UNKNOWN)) == 0.0


class TestSummarizeFlow:
    def test_large_trader_totals(self, batch):
        spreads = [trade.to_spread() for trade in batch]
        summary = summarize_flow(batch, spreads, threshold=100_000)

        assert summary.large_trade_count == 2
        assert summary.large_trader_net_value == pytest.approx(450_000.0)
        assert summary.large_trader_absolute_value == pytest.approx(450_000.0)
        assert summary.large_trader_delta == pytest.approx(-300.0)

    def test_opening_totals_drive_expectation(self, batch):
        spreads = [trade.to_spread() for trade in batch]
        summary = summarize_flow(batch, spreads, threshold=100_000)

        # The closing put carries more delta but is excluded from opening totals
        assert summary.large_trader_opening_delta == pytest.approx(500.0)
        assert summary.large_trader_opening_net_value == pytest.approx(250_000.0)
        assert summary.large_trader_expectation is Expectation.BULLISH

    def test_dealer_deltas_use_every_print(self, batch):
        summary = summarize_flow(batch, [trade.to_spread() for trade in batch], threshold=100_000)
        assert summary.dealer_delta == pytest.approx(-500.5)
        assert summary.naive_dealer_delta == pytest.approx(29_950.0)

    def test_strategy_counts(self, batch):
        summary = summarize_flow(batch, [trade.to_spread() for trade in batch])
        assert summary.strategy_counts == {"Long Call": 2, "Long Put": 1}

    def test_threshold_is_strict(self, make_trade):
        trade = make_trade(size=400, price=2.5)
        summary = summarize_flow([trade], [trade.to_spread()], threshold=100_000)
        assert summary.large_trade_count == 0
        assert summary.large_trader_expectation is Expectation.NEUTRAL

    def test_empty_batch(self):
        summary = summarize_flow([], [])
        assert summary.large_trade_count == 0
        assert summary.dealer_delta == 0
        assert summary.strategy_counts == {}
        assert summary.to_dict()["large_trader_expectation"] == "Neutral"


def test_spreads_to_frame_empty_has_numeric_columns():
    df = spreads_to_frame([])
    assert list(df.columns) == SPREAD_COLUMNS
    assert df.empty
    assert df["net_value"].dtype.kind == "f"
    assert df["opening_trade"].dtype == bool
