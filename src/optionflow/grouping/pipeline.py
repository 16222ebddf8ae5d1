"""
Grouping Pipeline (Template Method)

Defines the sequence for turning a batch of multi-leg prints into leg-sets.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from optionflow.models.conditions import ConditionID
from optionflow.models.exchanges import Exchange
from optionflow.models.trade import OptionTrade

logger = logging.getLogger(__name__)


class LegKey(NamedTuple):
    """Coarse identity of one execution; `split_size` is set by the size fallback."""

    timestamp: str
    exchange: Exchange
    condition: ConditionID
    size: int
    split_size: Optional[int] = None

    @classmethod
    def for_trade(cls, trade: OptionTrade) -> "LegKey":
        return cls(trade.timestamp, trade.exchange, trade.condition, trade.size)


@dataclass
class GroupingContext:
    """Shared state for the grouping pipeline."""

    trades: list[OptionTrade]
    candidates: list[tuple[int, OptionTrade]] = field(default_factory=list)
    leg_sets: dict[LegKey, list[OptionTrade]] = field(default_factory=dict)
    used_indices: set[int] = field(default_factory=set)


class GroupingPipeline:
    """
    Template Method implementation for leg grouping.
    """

    def group(self, trades: Iterable[OptionTrade]) -> dict[LegKey, list[OptionTrade]]:
        """
        The Template Method: Defines the grouping algorithm skeleton.
        """
        ctx = GroupingContext(list(trades))

        self._select_candidates(ctx)
        self._collect_leg_sets(ctx)

        logger.debug(
            "Grouped %d multi-leg prints into %d leg-sets", len(ctx.candidates), len(ctx.leg_sets)
        )
        return ctx.leg_sets

    def _select_candidates(self, ctx: GroupingContext) -> None:
        """Step 1: Keep multi-leg prints in execution order."""
        from .steps.select import select_candidates

        ctx.candidates = select_candidates(ctx.trades)

    def _collect_leg_sets(self, ctx: GroupingContext) -> None:
        """Step 2-5: Bucket by key, verify sequence continuity, fall back to size splits."""
        from .steps.bucket import collect_bucket
        from .steps.consecutive import consecutive_order
        from .steps.split import split_by_size

        for idx, trade in ctx.candidates:
            if idx in ctx.used_indices:
                continue

            key = LegKey.for_trade(trade)
            bucket = collect_bucket(ctx.candidates, key, ctx.used_indices)
            ordered = consecutive_order(bucket)

            if ordered is not None:
                if key not in ctx.leg_sets:
                    ctx.leg_sets[key] = ordered
            else:
                logger.debug(
                    "Leg-set %s is not sequential by seq_no or exchange_seq_no; splitting by size",
                    key,
                )
                split_by_size(key, bucket, ctx.leg_sets)


def group_legs(trades: Iterable[OptionTrade]) -> dict[LegKey, list[OptionTrade]]:
    """Partition the multi-leg prints of one batch into leg-sets."""
    return GroupingPipeline().group(trades)
