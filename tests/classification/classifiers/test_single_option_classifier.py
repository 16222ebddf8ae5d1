"""
Unit tests for SingleOptionClassifier.
"""

import pytest

from optionflow.classification.base import ClassificationContext
from optionflow.classification.classifiers.single_option import SingleOptionClassifier
from optionflow.models.conditions import ConditionID
from optionflow.models.spread import SpreadName
from optionflow.models.trade import OptionType, OrderAction


@pytest.mark.parametrize(
    "option_type, action, expected",
    [
        (OptionType.CALL, OrderAction.BOUGHT, SpreadName.LONG_CALL),
        (OptionType.CALL, OrderAction.SOLD, SpreadName.SHORT_CALL),
        (OptionType.PUT, OrderAction.BOUGHT, SpreadName.LONG_PUT),
        (OptionType.PUT, OrderAction.SOLD, SpreadName.SHORT_PUT),
        (OptionType.CALL, OrderAction.UNKNOWN, SpreadName.UNRECOGNIZED),
        (OptionType.PUT, OrderAction.UNKNOWN, SpreadName.UNRECOGNIZED),
    ],
)
def test_names_single_leg(make_legs, option_type, action, expected):
    legs = make_legs({"option_type": option_type, "order_action": action})
    ctx = ClassificationContext.from_legs(legs)
    classifier = SingleOptionClassifier()
    assert classifier.can_classify(legs, ctx) is True
    assert classifier.classify(legs, ctx) is expected


def test_declines_stock_combined_leg(make_legs):
    legs = make_legs({"condition": ConditionID.STK_OPT_AUCT})
    ctx = ClassificationContext.from_legs(legs)
    assert SingleOptionClassifier().can_classify(legs, ctx) is False


def test_declines_two_legs(make_legs):
    legs = make_legs({}, {"strike": 455.0})
    ctx = ClassificationContext.from_legs(legs)
    assert SingleOptionClassifier().can_classify(legs, ctx) is False
