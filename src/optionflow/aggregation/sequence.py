"""
Sequence Number Trail
"""

from optionflow.grouping.steps.consecutive import is_consecutive
from optionflow.models.trade import OptionTrade


def sequence_trail(legs: list[OptionTrade]) -> str:
    """
    Formats the sequence numbers that tie a leg-set together.

    Uses the global trail ("seq no 1-2-3-") when the legs are consecutive by
    global sequence number, otherwise the exchange trail ("ex seq no 100-101-").
    """
    by_seq = sorted(legs, key=lambda leg: leg.seq_no)
    if is_consecutive([leg.seq_no for leg in by_seq]):
        return "seq no " + "".join(f"{leg.seq_no}-" for leg in by_seq)

    by_exchange_seq = sorted(legs, key=lambda leg: leg.exchange_seq_no)
    return "ex seq no " + "".join(f"{leg.exchange_seq_no}-" for leg in by_exchange_seq)
