"""
Spread Assembly

Runs one batch of trades for a single underlying through grouping,
classification and aggregation, then merges the multi-leg results with the
single-leg projections.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from .aggregation import adjust_for_stock, expectation_for, fold_legs, spread_type_for
from .classification import classify
from .grouping import group_legs
from .models.spread import OptionSpread, SpreadType
from .models.trade import OptionTrade

logger = logging.getLogger(__name__)


def build_spread(legs: list[OptionTrade]) -> Optional[OptionSpread]:
    """Classify and fold one leg-set. Returns None when the spread is poisoned."""
    name = classify(legs)
    totals = adjust_for_stock(fold_legs(legs), name, legs)

    if totals.poisoned:
        logger.debug(
            "Dropping poisoned %s at %s: %s", name.value, legs[0].timestamp, totals.summary
        )
        return None

    first = legs[0]
    return OptionSpread(
        symbol=first.root,
        spread_name=name,
        spread_type=spread_type_for(totals.net_value),
        net_value=totals.net_value,
        expiration_date=totals.expiration_date,
        dte=totals.dte,
        net_iv=totals.net_iv,
        delta_when_opened=totals.delta_when_opened,
        current_delta=totals.current_delta,
        expectation=expectation_for(totals.delta_when_opened),
        timestamp=first.timestamp,
        condition=first.condition,
        exchange=first.exchange,
        leg_count=totals.leg_count,
        summary=totals.summary,
        opening_trade=totals.opening_trade,
        sequence_numbers=totals.sequence_numbers,
    )


def get_spreads(trades: Iterable[OptionTrade]) -> list[OptionSpread]:
    """Reconstruct and classify the multi-leg spreads of one batch."""
    spreads = []
    for legs in group_legs(trades).values():
        spread = build_spread(legs)
        if spread is not None:
            spreads.append(spread)
    return spreads


def single_leg_spreads(trades: Iterable[OptionTrade]) -> list[OptionSpread]:
    """Project every non-multi-leg print onto a one-leg spread, in execution order."""
    singles = [trade for trade in trades if not trade.condition.is_multi_leg()]
    singles.sort(key=lambda trade: trade.sort_key)

    spreads = []
    for trade in singles:
        spread = trade.to_spread()
        if spread.spread_type is SpreadType.UNKNOWN:
            logger.debug("Dropping single leg with unknown side: seq no %d", trade.seq_no)
            continue
        spreads.append(spread)
    return spreads


def dedupe_spreads(spreads: Iterable[OptionSpread]) -> list[OptionSpread]:
    """Remove structurally identical spreads, keeping first-seen order."""
    return list(dict.fromkeys(spreads))


def assemble_spreads(trades: Iterable[OptionTrade]) -> list[OptionSpread]:
    """All spreads of one batch: multi-leg first, then single legs, deduplicated."""
    trades = list(trades)
    multi = get_spreads(trades)
    singles = single_leg_spreads(trades)

    spreads = dedupe_spreads(multi + singles)
    if len(spreads) < len(multi) + len(singles):
        logger.debug("Removed %d duplicate spreads", len(multi) + len(singles) - len(spreads))
    return spreads
