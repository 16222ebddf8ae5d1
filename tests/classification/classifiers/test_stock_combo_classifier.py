"""
Unit tests for the stock-combined classifiers.
"""

import pytest

from optionflow.classification.base import ClassificationContext
from optionflow.classification.classifiers.stock_combo import (
    StockPairClassifier,
    StockSingleClassifier,
)
from optionflow.models.conditions import ConditionID
from optionflow.models.spread import SpreadName
from optionflow.models.trade import OptionType, OrderAction

CALL, PUT = OptionType.CALL, OptionType.PUT
BOUGHT, SOLD, UNKNOWN = OrderAction.BOUGHT, OrderAction.SOLD, OrderAction.UNKNOWN


def leg(option_type, action, strike=450.0):
    return {"option_type": option_type, "order_action": action, "strike": strike}


@pytest.fixture
def stock_legs(make_legs):
    def _create(*overrides):
        return make_legs(*overrides, condition=ConditionID.STK_OPT_CROSS)

    return _create


class TestStockSingleClassifier:
    @pytest.mark.parametrize(
        "option_type, action, expected",
        [
            (CALL, SOLD, SpreadName.COVERED_CALL),
            (PUT, SOLD, SpreadName.COVERED_PUT),
            (PUT, BOUGHT, SpreadName.SYNTHETIC_CALL),
            (CALL, BOUGHT, SpreadName.SYNTHETIC_PUT),
            (CALL, UNKNOWN, SpreadName.UNRECOGNIZED_WITH_STOCK),
        ],
    )
    def test_names_leg_against_stock(self, stock_legs, option_type, action, expected):
        legs = stock_legs(leg(option_type, action))
        ctx = ClassificationContext.from_legs(legs)
        classifier = StockSingleClassifier()
        assert classifier.can_classify(legs, ctx) is True
        assert classifier.classify(legs, ctx) is expected

    def test_declines_plain_multi_leg_code(self, make_legs):
        legs = make_legs(leg(CALL, SOLD))
        ctx = ClassificationContext.from_legs(legs)
        assert StockSingleClassifier().can_classify(legs, ctx) is False


class TestStockPairClassifier:
    @pytest.mark.parametrize(
        "first, second, expected",
        [
            (leg(CALL, SOLD), leg(PUT, BOUGHT), SpreadName.CONVERSION),
            (leg(PUT, BOUGHT), leg(CALL, SOLD), SpreadName.CONVERSION),
            (leg(CALL, SOLD, 460.0), leg(PUT, BOUGHT, 440.0), SpreadName.COLLAR),
            (leg(PUT, SOLD), leg(CALL, BOUGHT), SpreadName.REVERSAL),
            (leg(CALL, BOUGHT), leg(PUT, SOLD), SpreadName.REVERSAL),
            (leg(PUT, SOLD, 440.0), leg(CALL, BOUGHT, 460.0), SpreadName.COLLAR),
            (leg(CALL, SOLD), leg(CALL, SOLD, 460.0), SpreadName.COVERED_CALL),
            (leg(PUT, SOLD), leg(PUT, SOLD, 440.0), SpreadName.COVERED_PUT),
            (leg(PUT, BOUGHT), leg(PUT, SOLD, 440.0), SpreadName.SYNTHETIC_CALL),
            (leg(CALL, SOLD, 460.0), leg(CALL, BOUGHT), SpreadName.SYNTHETIC_PUT),
            (leg(CALL, BOUGHT), leg(CALL, BOUGHT, 460.0), SpreadName.UNRECOGNIZED_WITH_STOCK),
        ],
    )
    def test_names_pair_against_stock(self, stock_legs, first, second, expected):
        legs = stock_legs(first, second)
        ctx = ClassificationContext.from_legs(legs)
        classifier = StockPairClassifier()
        assert classifier.can_classify(legs, ctx) is True
        assert classifier.classify(legs, ctx) is expected

    def test_declines_three_legs(self, stock_legs):
        legs = stock_legs(leg(CALL, SOLD), leg(PUT, BOUGHT), leg(PUT, SOLD))
        ctx = ClassificationContext.from_legs(legs)
        assert StockPairClassifier().can_classify(legs, ctx) is False
