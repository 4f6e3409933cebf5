"""
Categorical Binner

One bin per distinct category. Missing values form their own bin.
"""

import pandas as pd
from typing import List, Optional

from .base import BaseBinner, OutcomeTotals
from ..logger import get_logger
from ..models import BinRecord
from ..woe import build_bin_records

logger = get_logger(__name__)

MISSING_LABEL = 'NA'
# Used for the missing-value bin when a real category already reads 'NA'
MISSING_FALLBACK_LABEL = '<NA>'


class CategoricalBinner(BaseBinner):
    """
    Binner for character, categorical and boolean variables.

    Bins follow the category order of a pandas Categorical column, otherwise
    the sorted text of the values. The missing-value bin comes last and is
    never merged with a category, even one whose text is ``'NA'``.
    """

    def bin(
        self,
        df: pd.DataFrame,
        variable: str,
        outcome_column: str,
        totals: Optional[OutcomeTotals] = None
    ) -> List[BinRecord]:
        y, total_0, total_1 = self._outcome(df, outcome_column, totals)
        x = df[variable]

        missing = x.isna()
        keys = x[~missing].astype(object).map(str)
        counts = self._count_outcomes(keys, y[~missing])

        if isinstance(x.dtype, pd.CategoricalDtype):
            order = [str(category) for category in x.cat.categories]
        else:
            order = sorted(set(keys))

        bins = [
            (label, counts.at[label, 'outcome_0'], counts.at[label, 'outcome_1'])
            for label in order
            if label in counts.index
        ]

        n_missing = int(missing.sum())
        if n_missing > 0:
            missing_label = MISSING_LABEL
            if MISSING_LABEL in counts.index:
                missing_label = MISSING_FALLBACK_LABEL
                logger.warning(
                    f"Variable '{variable}' has a category '{MISSING_LABEL}', "
                    f"missing values are binned as '{MISSING_FALLBACK_LABEL}'"
                )
            missing_1 = int(y[missing].sum())
            bins.append((missing_label, n_missing - missing_1, missing_1))

        return build_bin_records(variable, bins, total_0, total_1)
