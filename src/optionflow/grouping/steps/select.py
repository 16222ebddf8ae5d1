"""
Candidate Selection Step
"""

from optionflow.models.trade import OptionTrade


def select_candidates(trades: list[OptionTrade]) -> list[tuple[int, OptionTrade]]:
    """Returns (scan index, trade) pairs of multi-leg prints, sorted by execution time."""
    candidates = [(idx, trade) for idx, trade in enumerate(trades) if trade.condition.is_multi_leg()]
    # sorted() is stable, so ties stay in scan order
    return sorted(candidates, key=lambda item: item[1].executed_at)
