"""
Flow Summary

Batch-level positioning signals derived from the assembled spreads: dealer
delta from the raw prints and the "large trader" totals over spreads whose
premium exceeds a dollar threshold.
"""

import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from typing import Any

import pandas as pd

from .aggregation import expectation_for
from .models.spread import OptionSpread
from .models.trade import Expectation, OptionTrade, OrderAction

logger = logging.getLogger(__name__)

DEFAULT_LARGE_TRADE_THRESHOLD = 10_000_000.0

SPREAD_COLUMNS = [
    "symbol",
    "spread_name",
    "spread_type",
    "net_value",
    "expiration_date",
    "dte",
    "net_iv",
    "delta_when_opened",
    "current_delta",
    "expectation",
    "timestamp",
    "leg_count",
    "opening_trade",
]


@dataclass(frozen=True)
class FlowSummary:
    dealer_delta: float
    naive_dealer_delta: float
    large_trader_delta: float
    large_trader_net_value: float
    large_trader_absolute_value: float
    large_trader_opening_delta: float
    large_trader_opening_net_value: float
    large_trader_opening_absolute_value: float
    large_trader_expectation: Expectation
    large_trade_count: int
    strategy_counts: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["large_trader_expectation"] = self.large_trader_expectation.value
        return payload


def dealer_delta(trade: OptionTrade) -> float:
    """Dealers take the other side of opening prints only."""
    if trade.is_opening:
        return -trade.size * trade.current_delta
    return 0.0


def naive_dealer_delta(trade: OptionTrade) -> float:
    """Assumes dealers took the other side of every print with a known side."""
    if trade.order_action is OrderAction.UNKNOWN:
        return 0.0
    return -trade.size * trade.delta


def spreads_to_frame(spreads: Iterable[OptionSpread]) -> pd.DataFrame:
    rows = []
    for spread in spreads:
        row = spread.to_dict()
        rows.append({column: row[column] for column in SPREAD_COLUMNS})
    df = pd.DataFrame(rows, columns=SPREAD_COLUMNS)
    # Empty frames default to object dtype
    return df.astype(
        {
            "net_value": float,
            "net_iv": float,
            "delta_when_opened": float,
            "current_delta": float,
            "dte": int,
            "leg_count": int,
            "opening_trade": bool,
        }
    )


def summarize_flow(
    trades: Iterable[OptionTrade],
    spreads: Iterable[OptionSpread],
    *,
    threshold: float = DEFAULT_LARGE_TRADE_THRESHOLD,
) -> FlowSummary:
    trades = list(trades)
    df = spreads_to_frame(spreads)

    large = df[df["net_value"].abs() > threshold]
    opening = large[large["opening_trade"]]
    opening_delta = float(opening["current_delta"].sum())

    if not large.empty:
        logger.info(
            "%d spreads above $%s, net value %.2f", len(large), f"{threshold:,.0f}", large["net_value"].sum()
        )

    counts = df["spread_name"].value_counts()
    return FlowSummary(
        dealer_delta=sum(dealer_delta(trade) for trade in trades),
        naive_dealer_delta=sum(naive_dealer_delta(trade) for trade in trades),
        large_trader_delta=float(large["current_delta"].sum()),
        large_trader_net_value=float(large["net_value"].sum()),
        large_trader_absolute_value=float(large["net_value"].abs().sum()),
        large_trader_opening_delta=opening_delta,
        large_trader_opening_net_value=float(opening["net_value"].sum()),
        large_trader_opening_absolute_value=float(opening["net_value"].abs().sum()),
        large_trader_expectation=expectation_for(opening_delta),
        large_trade_count=int(len(large)),
        strategy_counts={str(name): int(count) for name, count in counts.items()},
    )
