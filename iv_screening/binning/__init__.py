"""
Per-variable binners.

- NumericBinner: decision-tree intervals for numeric variables
- CategoricalBinner: one bin per category for everything else
"""

from .base import BaseBinner
from .numeric import NumericBinner, root_impurity
from .categorical import CategoricalBinner, MISSING_LABEL, MISSING_FALLBACK_LABEL

__all__ = [
    'BaseBinner',
    'NumericBinner',
    'CategoricalBinner',
    'MISSING_LABEL',
    'MISSING_FALLBACK_LABEL',
    'root_impurity',
]
