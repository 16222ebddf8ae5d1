"""
Aggregation Submodule

Folds a classified leg-set into the numbers and text of one spread.
"""

from .aggregator import LegTotals, expectation_for, fold_legs, spread_type_for
from .sequence import sequence_trail
from .stock_leg import adjust_for_stock

__all__ = [
    "LegTotals",
    "adjust_for_stock",
    "expectation_for",
    "fold_legs",
    "sequence_trail",
    "spread_type_for",
]
