"""
Sequence Continuity Step

Legs of one coordinated execution are printed back to back, so their sequence
numbers step by exactly one.
"""

from collections.abc import Sequence
from typing import Optional

from optionflow.models.trade import OptionTrade


def is_consecutive(numbers: Sequence[int]) -> bool:
    """True when every adjacent pair differs by exactly one."""
    return all(b - a == 1 for a, b in zip(numbers, numbers[1:]))


def consecutive_order(legs: list[OptionTrade]) -> Optional[list[OptionTrade]]:
    """
    Returns the legs in the first ordering that proves them consecutive.

    Global sequence numbers are tried first, then exchange-local ones.
    Returns None when neither ordering is consecutive.
    """
    by_seq = sorted(legs, key=lambda leg: leg.seq_no)
    if is_consecutive([leg.seq_no for leg in by_seq]):
        return by_seq

    by_exchange_seq = sorted(legs, key=lambda leg: leg.exchange_seq_no)
    if is_consecutive([leg.exchange_seq_no for leg in by_exchange_seq]):
        return by_exchange_seq

    return None
