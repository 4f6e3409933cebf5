"""
Numeric Binner

Splits a continuous variable into intervals with a single-feature decision
tree and reports outcome counts and WoE statistics per interval.
"""

import numpy as np
import pandas as pd
from sklearn.tree import DecisionTreeClassifier, _tree
from typing import Dict, List, Optional, Union

from .base import BaseBinner, OutcomeTotals
from ..logger import get_logger
from ..models import BinningConfig, BinRecord
from ..woe import build_bin_records

logger = get_logger(__name__)

# Trees fit on float32, larger magnitudes only go to the outer bins
FIT_LIMIT = float(np.finfo(np.float32).max)


def root_impurity(y: np.ndarray, criterion: str = 'gini') -> float:
    """
    Impurity of a binary outcome vector before any split.

    Example:
        >>> root_impurity(np.array([0, 0, 1, 1]))
        0.5
    """
    if len(y) == 0:
        return 0.0
    p = float(np.mean(y))
    if p in (0.0, 1.0):
        return 0.0
    if criterion == 'entropy':
        return float(-(p * np.log2(p) + (1 - p) * np.log2(1 - p)))
    return 2.0 * p * (1.0 - p)


def interval_label(left: float, right: float) -> str:
    """
    Text label of a right-closed interval.

    Example:
        >>> interval_label(-np.inf, 11.5)
        '(-inf, 11.5]'
    """
    return str(pd.Interval(float(left), float(right), closed='right'))


class NumericBinner(BaseBinner):
    """
    Decision-tree binner for numeric variables.

    Fits sklearn's DecisionTreeClassifier on the variable alone, collects the
    split thresholds of every internal node and cuts the variable into
    right-closed intervals ``(-inf, t1], (t1, t2], ..., (tk, inf]``. Missing
    values are excluded from the bins. Infinite values take no part in the
    fit and land in the first or last interval.

    Example:
        >>> binner = NumericBinner(BinningConfig(cp=0.001, min_bucket=10))
        >>> records = binner.bin(df, 'duration', 'gb')
        >>> [r.bin_label for r in records]
        ['(-inf, 11.5]', '(11.5, 33.0]', '(33.0, inf]']
    """

    def __init__(self, config: Union[BinningConfig, Dict, None] = None):
        self.config = BinningConfig.coerce(config)

    def find_split_points(self, x: np.ndarray, y: np.ndarray) -> List[float]:
        """
        Fit the tree and return its split thresholds in ascending order.

        Args:
            x: Non-missing variable values
            y: Matching binary outcomes

        Returns:
            Sorted unique thresholds (empty when the tree does not split)
        """
        fit_mask = np.abs(x) <= FIT_LIMIT
        x, y = x[fit_mask], y[fit_mask]
        if len(np.unique(x)) < 2 or len(np.unique(y)) < 2:
            return []

        params = self.config.to_sklearn_params(
            root_impurity=root_impurity(y, self.config.get_criterion())
        )
        tree_model = DecisionTreeClassifier(**params)
        tree_model.fit(x.reshape(-1, 1), y)

        tree = tree_model.tree_
        thresholds = {
            float(tree.threshold[node])
            for node in range(tree.node_count)
            if tree.feature[node] != _tree.TREE_UNDEFINED
        }
        return sorted(thresholds)

    def bin(
        self,
        df: pd.DataFrame,
        variable: str,
        outcome_column: str,
        totals: Optional[OutcomeTotals] = None
    ) -> List[BinRecord]:
        y, total_0, total_1 = self._outcome(df, outcome_column, totals)
        x = df[variable]

        valid = x.notna()
        n_missing = int((~valid).sum())
        if n_missing > 0:
            logger.warning(
                f"Variable '{variable}': {n_missing} missing values excluded from numeric bins"
            )

        x_valid = x[valid].astype(float)
        y_valid = y[valid]
        if len(x_valid) == 0:
            logger.warning(f"Variable '{variable}' has no non-missing values, no bins created")
            return []

        n_outer = int((x_valid.abs() > FIT_LIMIT).sum())
        if n_outer > 0:
            logger.warning(
                f"Variable '{variable}': {n_outer} infinite or out-of-range values "
                "assigned to the outer bins without taking part in the fit"
            )

        thresholds = self.find_split_points(x_valid.to_numpy(), y_valid.to_numpy())
        logger.debug(f"Variable '{variable}': split points {thresholds}")

        # Bin i holds values in (edges[i], edges[i + 1]]
        edges = [-np.inf] + thresholds + [np.inf]
        codes = pd.Series(
            np.searchsorted(thresholds, x_valid.to_numpy(), side='left'),
            index=x_valid.index
        )
        counts = self._count_outcomes(codes, y_valid).sort_index()

        return build_bin_records(
            variable,
            (
                (interval_label(edges[code], edges[code + 1]), row.outcome_0, row.outcome_1)
                for code, row in counts.iterrows()
            ),
            total_0,
            total_1
        )
