"""
Option Spread Domain Model

A reconstructed single- or multi-leg strategy. Spreads own copies of the
derived numbers and text only; the trades they were built from are not kept.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from .conditions import ConditionID
from .exchanges import Exchange
from .trade import Expectation


class SpreadType(str, Enum):
    CREDIT = "Credit"
    DEBIT = "Debit"
    UNKNOWN = "Unknown"


class SpreadName(str, Enum):
    # 1 leg
    COVERED_CALL = "Covered Call"
    COVERED_PUT = "Covered Put"
    LONG_CALL = "Long Call"
    SHORT_CALL = "Short Call"
    LONG_PUT = "Long Put"
    SHORT_PUT = "Short Put"
    # 2 legs
    VERTICAL = "Vertical"
    STRADDLE = "Straddle"
    STRANGLE = "Strangle"
    CALENDAR = "Calendar"
    DIAGONAL = "Diagonal"
    RISK_REVERSAL = "Risk Reversal"
    LADDER = "Ladder"
    SYNTHETIC_CALL = "Synthetic Call"
    SYNTHETIC_PUT = "Synthetic Put"
    COLLAR = "Collar"
    # 3 legs
    BUTTERFLY = "Butterfly"
    UNBALANCED_BUTTERFLY = "Unbalanced Butterfly"
    # 4 legs
    IRON_CONDOR = "Iron Condor"
    IRON_BUTTERFLY = "Iron Butterfly"
    BOX = "Box"
    # with stock
    CONVERSION = "Conversion"
    REVERSAL = "Reversal"
    UNRECOGNIZED = "Unrecognized"
    UNRECOGNIZED_WITH_STOCK = "Unrecognized With Stock"


@dataclass(frozen=True)
class OptionSpread:
    """Aggregate economics and taxonomy label for one reconstructed execution."""

    symbol: str
    spread_name: SpreadName
    spread_type: SpreadType
    net_value: float
    expiration_date: date
    dte: int
    net_iv: float
    delta_when_opened: float
    current_delta: float
    expectation: Expectation
    timestamp: str
    condition: ConditionID
    exchange: Exchange
    leg_count: int
    summary: str
    opening_trade: bool
    sequence_numbers: str

    def to_dict(self) -> dict[str, Any]:
        """Serializes the spread for the JSON report."""
        return {
            "symbol": self.symbol,
            "spread_name": self.spread_name.value,
            "spread_type": self.spread_type.value,
            "net_value": self.net_value,
            "expiration_date": self.expiration_date.isoformat(),
            "dte": self.dte,
            "net_iv": self.net_iv,
            "delta_when_opened": self.delta_when_opened,
            "current_delta": self.current_delta,
            "expectation": self.expectation.value,
            "timestamp": self.timestamp,
            "condition": self.condition.label,
            "exchange": self.exchange.label,
            "leg_count": self.leg_count,
            "summary": self.summary,
            "opening_trade": self.opening_trade,
            "sequence_numbers": self.sequence_numbers,
        }
