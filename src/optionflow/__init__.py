"""
Optionflow Spread Reconstruction Engine
"""

from .assembly import assemble_spreads, get_spreads
from .classification import classify
from .grouping import group_legs

__all__ = ["assemble_spreads", "classify", "get_spreads", "group_legs"]

__version__ = "0.1.0"
