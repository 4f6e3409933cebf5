"""
Weight of Evidence Formulas

Pure helper functions shared by the numeric and categorical binners.
"""

import math
from typing import Dict, Iterable, List, Tuple

from .models import BinRecord


def bin_statistics(
    outcome_0: int,
    outcome_1: int,
    total_0: int,
    total_1: int
) -> Dict[str, float]:
    """
    Calculate WoE statistics for one bin.

    WoE = ln(pct_1 / pct_0) and miv = (pct_1 - pct_0) * WoE, where the
    shares are taken against the dataset-wide outcome totals. A bin with no
    observations of one class gets woe = miv = 0.

    Args:
        outcome_0: Outcome-0 observations in the bin
        outcome_1: Outcome-1 observations in the bin
        total_0: Outcome-0 observations in the dataset
        total_1: Outcome-1 observations in the dataset

    Returns:
        Dict with pct_0, pct_1, woe and miv

    Example:
        >>> stats = bin_statistics(30, 10, 60, 60)
        >>> round(stats['woe'], 4), round(stats['miv'], 4)
        (-1.0986, 0.3662)
    """
    pct_0 = outcome_0 / total_0 if total_0 > 0 else 0.0
    pct_1 = outcome_1 / total_1 if total_1 > 0 else 0.0

    if pct_0 == 0.0 or pct_1 == 0.0:
        woe = 0.0
        miv = 0.0
    else:
        woe = math.log(pct_1 / pct_0)
        miv = (pct_1 - pct_0) * woe

    return {'pct_0': pct_0, 'pct_1': pct_1, 'woe': woe, 'miv': miv}


def build_bin_records(
    variable: str,
    bins: Iterable[Tuple[str, int, int]],
    total_0: int,
    total_1: int
) -> List[BinRecord]:
    """
    Turn (label, outcome_0, outcome_1) triples into BinRecords.

    Args:
        variable: Variable name
        bins: Ordered (bin_label, outcome_0, outcome_1) triples
        total_0: Outcome-0 observations in the dataset
        total_1: Outcome-1 observations in the dataset

    Returns:
        BinRecords in the given order
    """
    records = []
    for label, n_0, n_1 in bins:
        stats = bin_statistics(int(n_0), int(n_1), total_0, total_1)
        records.append(BinRecord(
            variable=variable,
            bin_label=label,
            outcome_0=int(n_0),
            outcome_1=int(n_1),
            **stats
        ))
    return records
