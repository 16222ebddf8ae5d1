"""
Key Bucket Collection Step
"""

from typing import TYPE_CHECKING

from optionflow.models.trade import OptionTrade

if TYPE_CHECKING:
    from ..pipeline import LegKey


def collect_bucket(
    candidates: list[tuple[int, OptionTrade]], key: "LegKey", used_indices: set[int]
) -> list[OptionTrade]:
    """Claims every unassigned candidate that shares `key`."""
    bucket: list[tuple[int, OptionTrade]] = []
    for idx, trade in candidates:
        if idx in used_indices:
            continue
        if (trade.timestamp, trade.exchange, trade.condition, trade.size) == key[:4]:
            bucket.append((idx, trade))

    used_indices.update(idx for idx, _ in bucket)
    bucket.sort(key=lambda item: item[1].executed_at)
    return [trade for _, trade in bucket]
