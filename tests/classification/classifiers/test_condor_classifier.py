"""
Unit tests for CondorClassifier.
"""

from datetime import date

from optionflow.classification.base import ClassificationContext
from optionflow.classification.classifiers.condor import CondorClassifier
from optionflow.models.spread import SpreadName
from optionflow.models.trade import OptionType, OrderAction

CALL, PUT = OptionType.CALL, OptionType.PUT
BOUGHT, SOLD = OrderAction.BOUGHT, OrderAction.SOLD
LATER_EXPIRY = date(2024, 2, 16)


def leg(option_type, action, strike, **extra):
    return {"option_type": option_type, "order_action": action, "strike": strike, **extra}


def classify_four(make_legs, *overrides):
    legs = make_legs(*overrides)
    ctx = ClassificationContext.from_legs(legs)
    classifier = CondorClassifier()
    assert classifier.can_classify(legs, ctx) is True
    return classifier.classify(legs, ctx)


def test_iron_condor(make_legs):
    result = classify_four(
        make_legs,
        leg(PUT, BOUGHT, 430.0),
        leg(PUT, SOLD, 440.0),
        leg(CALL, SOLD, 460.0),
        leg(CALL, BOUGHT, 470.0),
    )
    assert result is SpreadName.IRON_CONDOR


def test_iron_butterfly(make_legs):
    result = classify_four(
        make_legs,
        leg(PUT, BOUGHT, 440.0),
        leg(PUT, SOLD, 450.0),
        leg(CALL, SOLD, 450.0),
        leg(CALL, BOUGHT, 460.0),
    )
    assert result is SpreadName.IRON_BUTTERFLY


def test_box(make_legs):
    result = classify_four(
        make_legs,
        leg(CALL, BOUGHT, 440.0),
        leg(CALL, SOLD, 460.0),
        leg(PUT, BOUGHT, 460.0),
        leg(PUT, SOLD, 440.0),
    )
    assert result is SpreadName.BOX


def test_missing_sold_put_is_unrecognized(make_legs):
    result = classify_four(
        make_legs,
        leg(CALL, BOUGHT, 440.0),
        leg(CALL, SOLD, 450.0),
        leg(CALL, SOLD, 460.0),
        leg(CALL, BOUGHT, 440.0),
    )
    assert result is SpreadName.UNRECOGNIZED


def test_sold_call_and_put_with_three_strikes_is_unrecognized(make_legs):
    result = classify_four(
        make_legs,
        leg(CALL, SOLD, 450.0),
        leg(PUT, SOLD, 440.0),
        leg(CALL, BOUGHT, 450.0),
        leg(PUT, BOUGHT, 430.0),
    )
    assert result is SpreadName.UNRECOGNIZED


def test_mixed_expiries_is_unrecognized(make_legs):
    result = classify_four(
        make_legs,
        leg(PUT, BOUGHT, 430.0),
        leg(PUT, SOLD, 440.0),
        leg(CALL, SOLD, 460.0),
        leg(CALL, BOUGHT, 470.0, expiry=LATER_EXPIRY),
    )
    assert result is SpreadName.UNRECOGNIZED
