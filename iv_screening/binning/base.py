"""
Base Binner Class

Common interface for the numeric and categorical binners.
"""

import pandas as pd
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..models import BinRecord
from ..validators import validate_outcome_column

OutcomeTotals = Tuple[int, int]


class BaseBinner(ABC):
    """
    Abstract base class for per-variable binners.

    A binner partitions one variable's observations into bins and reports
    outcome counts and WoE statistics per bin. It reads the DataFrame and
    never modifies it.
    """

    @abstractmethod
    def bin(
        self,
        df: pd.DataFrame,
        variable: str,
        outcome_column: str,
        totals: Optional[OutcomeTotals] = None
    ) -> List[BinRecord]:
        """
        Bin one variable.

        Args:
            df: Input DataFrame
            variable: Column to bin
            outcome_column: Binary 0/1 outcome column
            totals: Dataset-wide (total_0, total_1) from an outcome column
                that is already validated; computed here when omitted

        Returns:
            Ordered BinRecords for the variable
        """
        pass

    @staticmethod
    def _outcome(
        df: pd.DataFrame,
        outcome_column: str,
        totals: Optional[OutcomeTotals] = None
    ) -> Tuple[pd.Series, int, int]:
        """Return the outcome as int Series plus the dataset-wide totals."""
        if totals is None:
            totals = validate_outcome_column(df, outcome_column)
        total_0, total_1 = totals
        return df[outcome_column].astype(int), total_0, total_1

    @staticmethod
    def _count_outcomes(keys: pd.Series, y: pd.Series) -> pd.DataFrame:
        """Count outcome 0 and 1 per key, keeping only keys that occur."""
        frame = pd.DataFrame({'key': keys.array, 'y': y.to_numpy()})
        counts = frame.groupby('key', observed=True, sort=False)['y'].agg(outcome_1='sum', population='count')
        counts['outcome_0'] = counts['population'] - counts['outcome_1']
        return counts[['outcome_0', 'outcome_1']]
