"""
Pydantic Models for IV Screening

- Numeric binning parameters
- Per-bin records and per-variable summaries
"""

from .params import BinningConfig, SplitCriterion
from .results import BinRecord, VariableSummary, Strength

__all__ = [
    # Parameters
    'BinningConfig',
    'SplitCriterion',

    # Results
    'BinRecord',
    'VariableSummary',
    'Strength',
]
