"""
Leg Grouping Submodule

Partitions multi-leg trade prints into the leg-sets of coordinated executions.
"""

from .pipeline import GroupingContext, GroupingPipeline, LegKey, group_legs

__all__ = ["GroupingContext", "GroupingPipeline", "LegKey", "group_legs"]
