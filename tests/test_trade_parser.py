"""
Tests for reading trade batches from JSON exports.
"""

import json
from datetime import date

import pytest

from optionflow.errors import TradeParseError
from optionflow.models.conditions import ConditionID
from optionflow.models.exchanges import Exchange
from optionflow.models.trade import (
    OptionTradeAt,
    OptionType,
    OrderAction,
    TransactionType,
)
from optionflow.trade_parser import TradeParser, parse_enum


def _write(tmp_path, payload, name="trades.json"):
    path = tmp_path / name
    path.write_text(json.dumps(payload))
    return str(path)


# ============================================================================
# Document shapes
# ============================================================================


def test_parses_bare_array(tmp_path, trade_record):
    trades = TradeParser.parse(_write(tmp_path, [trade_record]))

    assert len(trades) == 1
    trade = trades[0]
    assert trade.root == "SPY"
    assert trade.expiry == date(2024, 1, 19)
    assert trade.option_type is OptionType.CALL
    assert trade.condition is ConditionID.MULT_LEG_AUTO_EX
    assert trade.exchange is Exchange.CBOE
    assert trade.trade_at is OptionTradeAt.ON_ASK
    assert trade.order_action is OrderAction.BOUGHT
    assert trade.transaction_estimate is TransactionType.BUY_TO_OPEN
    assert trade.notional_value == pytest.approx(2500.0)


def test_parses_trades_envelope(tmp_path, trade_record):
    trades = TradeParser.parse(_write(tmp_path, {"trades": [trade_record, trade_record]}))
    assert len(trades) == 2


def test_rejects_object_without_trades(tmp_path):
    with pytest.raises(TradeParseError):
        TradeParser.parse(_write(tmp_path, {"data": []}))


def test_missing_file_raises(tmp_path, capsys):
    with pytest.raises(FileNotFoundError):
        TradeParser.parse(str(tmp_path / "absent.json"))
    assert "File not found" in capsys.readouterr().err


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{")
    with pytest.raises(json.JSONDecodeError):
        TradeParser.parse(str(path))


# ============================================================================
# Record validation
# ============================================================================


def test_optional_fields_default(tmp_path, trade_record):
    for key in ("order_action", "transaction_estimate", "option_trade_at", "current_delta"):
        del trade_record[key]
    trade_record["option_bid"] = None

    trade = TradeParser.parse(_write(tmp_path, [trade_record]))[0]

    assert trade.order_action is OrderAction.UNKNOWN
    assert trade.transaction_estimate is TransactionType.UNCALCULATED
    assert trade.trade_at is OptionTradeAt.NO_MARKET
    assert trade.current_delta == 0.0
    assert trade.bid == 0.0


@pytest.mark.parametrize(
    "field, value",
    [
        ("condition_id", 4),
        ("exchange_id", "abc"),
        ("option_type", "X"),
        ("timestamp", "10:15"),
        ("expiry", "01/19/2024"),
        ("option_trade_size", "ten"),
    ],
)
def test_bad_values_name_row_and_field(tmp_path, trade_record, field, value):
    trade_record[field] = value
    with pytest.raises(TradeParseError) as exc_info:
        TradeParser.parse(_write(tmp_path, [trade_record]))
    assert exc_info.value.index == 0
    assert exc_info.value.field == field


def test_missing_required_field(tmp_path, trade_record):
    del trade_record["seq_no"]
    with pytest.raises(TradeParseError, match="row 1, field 'seq_no'"):
        TradeParser.parse(_write(tmp_path, [dict(trade_record, seq_no=1), trade_record]))


def test_non_object_record(tmp_path):
    with pytest.raises(TradeParseError, match="row 0"):
        TradeParser.parse(_write(tmp_path, ["not a trade"]))


class TestParseEnum:
    def test_numeric_string_code(self):
        assert parse_enum({"c": "119"}, "c", ConditionID) is ConditionID.MULT_LEG_AUTO_EX

    def test_member_name_fallback(self):
        row = {"a": "crossed market", "t": "sell_to_open"}
        assert parse_enum(row, "a", OptionTradeAt) is OptionTradeAt.CROSSED_MARKET
        assert parse_enum(row, "t", TransactionType) is TransactionType.SELL_TO_OPEN

    def test_default_when_absent(self):
        assert parse_enum({}, "x", OrderAction, default=OrderAction.UNKNOWN) is OrderAction.UNKNOWN

    def test_required_when_no_default(self):
        with pytest.raises(TradeParseError, match="missing"):
            parse_enum({}, "x", OrderAction)


class TestSideInference:
    def test_missing_side_is_inferred_from_quote(self, tmp_path, trade_record):
        del trade_record["order_action"]
        trade_record.update(option_trade_at="On Bid", option_trade_price=2.4)

        trade = TradeParser.parse(_write(tmp_path, [trade_record]))[0]
        assert trade.order_action is OrderAction.SOLD

    def test_crossed_market_flips_inferred_side(self, tmp_path, trade_record):
        trade_record.update(
            order_action="Unknown",
            option_trade_at="Crossed Market",
            option_bid=3.0,
            option_ask=1.0,
            option_trade_price=2.5,
        )
        trade = TradeParser.parse(_write(tmp_path, [trade_record]))[0]
        assert trade.order_action is OrderAction.SOLD

    def test_explicit_side_wins(self, tmp_path, trade_record):
        trade_record.update(order_action="Sold", option_trade_at="On Ask")
        trade = TradeParser.parse(_write(tmp_path, [trade_record]))[0]
        assert trade.order_action is OrderAction.SOLD

    def test_no_market_stays_unknown(self, tmp_path, trade_record):
        del trade_record["order_action"]
        trade_record["option_trade_at"] = "No Market"
        trade = TradeParser.parse(_write(tmp_path, [trade_record]))[0]
        assert trade.order_action is OrderAction.UNKNOWN
