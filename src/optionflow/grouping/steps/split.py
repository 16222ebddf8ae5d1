"""
Size Fallback Step
"""

from typing import TYPE_CHECKING

from optionflow.models.trade import OptionTrade

if TYPE_CHECKING:
    from ..pipeline import LegKey


def split_by_size(
    key: "LegKey", bucket: list[OptionTrade], leg_sets: dict["LegKey", list[OptionTrade]]
) -> None:
    """
    Re-partitions a non-sequential bucket into same-size sub-collections.

    Each sub-collection is registered under `key` extended with its size and
    kept in exchange sequence order. Keys already registered are skipped.
    """
    for trade in bucket:
        split_key = key._replace(split_size=trade.size)
        if split_key in leg_sets:
            continue
        same_size = [leg for leg in bucket if leg.size == trade.size]
        leg_sets[split_key] = sorted(same_size, key=lambda leg: leg.exchange_seq_no)
