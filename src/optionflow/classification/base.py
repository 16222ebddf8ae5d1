"""
Classification Base

Defines the context and base classes for spread identification.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from optionflow.models.spread import SpreadName
from optionflow.models.trade import OptionTrade

LegPredicate = Callable[[OptionTrade], bool]


@dataclass(frozen=True)
class ClassificationContext:
    """
    Leg-set shape predicates, computed once per leg-set.

    The `same_*` flags compare every leg to the first one;
    `all_different_strikes` requires every strike to be unique.
    """

    legs: list[OptionTrade]

    same_date: bool
    same_strike: bool
    all_different_strikes: bool
    same_action: bool
    same_amount: bool
    all_call: bool
    all_put: bool
    with_stock: bool

    distinct_sizes: int
    distinct_strikes: int

    @property
    def leg_count(self) -> int:
        return len(self.legs)

    @property
    def same_type(self) -> bool:
        return self.all_call or self.all_put

    @classmethod
    def from_legs(cls, legs: list[OptionTrade]) -> "ClassificationContext":
        """Factory method to build context from a leg-set."""
        legs = list(legs)
        if not legs:
            return cls(
                legs=[],
                same_date=False,
                same_strike=False,
                all_different_strikes=False,
                same_action=False,
                same_amount=False,
                all_call=False,
                all_put=False,
                with_stock=False,
                distinct_sizes=0,
                distinct_strikes=0,
            )

        first = legs[0]
        others = legs[1:]
        return cls(
            legs=legs,
            same_date=all(leg.expiry == first.expiry for leg in others),
            same_strike=all(leg.strike == first.strike for leg in others),
            all_different_strikes=len({leg.strike for leg in legs}) == len(legs),
            same_action=all(leg.order_action == first.order_action for leg in others),
            same_amount=all(leg.size == first.size for leg in others),
            all_call=all(leg.is_call() for leg in legs),
            all_put=all(leg.is_put() for leg in legs),
            with_stock=first.condition.includes_stock_trade(),
            distinct_sizes=len({leg.size for leg in legs}),
            distinct_strikes=len({leg.strike for leg in legs}),
        )

    def find(self, predicate: LegPredicate) -> OptionTrade | None:
        """First leg matching `predicate`, in leg-set order."""
        return next((leg for leg in self.legs if predicate(leg)), None)

    def has_pair(self, first: LegPredicate, second: LegPredicate) -> bool:
        """True when one leg matches `first` and a different leg matches `second`."""
        for i, leg in enumerate(self.legs):
            if not first(leg):
                continue
            if any(second(other) for j, other in enumerate(self.legs) if j != i):
                return True
        return False


class StrategyClassifier(ABC):
    """Abstract base class for all spread identifiers."""

    @abstractmethod
    def can_classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> bool:
        """Returns True if this classifier can handle the given legs."""
        pass

    @abstractmethod
    def classify(self, legs: list[OptionTrade], ctx: ClassificationContext) -> SpreadName:
        """Returns the spread name."""
        pass
