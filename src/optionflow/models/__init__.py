"""
Optionflow Domain Models

Export core domain objects for external consumption.
"""

from typing import TYPE_CHECKING

__all__ = ["OptionTrade", "OptionSpread", "ConditionID", "Exchange"]


if TYPE_CHECKING:
    from .conditions import ConditionID
    from .exchanges import Exchange
    from .spread import OptionSpread
    from .trade import OptionTrade


def __getattr__(name: str) -> type:
    if name == "OptionTrade":
        from .trade import OptionTrade

        return OptionTrade
    if name == "OptionSpread":
        from .spread import OptionSpread

        return OptionSpread
    if name == "ConditionID":
        from .conditions import ConditionID

        return ConditionID
    if name == "Exchange":
        from .exchanges import Exchange

        return Exchange
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
