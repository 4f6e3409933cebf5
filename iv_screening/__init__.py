"""
IV Screening

Information Value and Weight of Evidence for ranking the predictive power
of variables against a binary outcome.
"""

from .engine import (
    compute_iv,
    bin_variables,
    summarize_bins,
    classify_strength,
    records_to_frame,
    summaries_to_frame,
)
from .binning import NumericBinner, CategoricalBinner
from .models import BinningConfig, BinRecord, VariableSummary, Strength
from .config import IVScreeningConfig, LoggingConfig
from .data_loaders import load_german_credit
from .validators import (
    varlist,
    IVValidationError,
    MissingColumnError,
    UnknownVariableError,
    EmptyVariableListError,
    InvalidOutcomeError,
)

__version__ = '0.1.0'

__all__ = [
    'compute_iv',
    'bin_variables',
    'summarize_bins',
    'classify_strength',
    'records_to_frame',
    'summaries_to_frame',
    'NumericBinner',
    'CategoricalBinner',
    'BinningConfig',
    'BinRecord',
    'VariableSummary',
    'Strength',
    'IVScreeningConfig',
    'LoggingConfig',
    'load_german_credit',
    'varlist',
    'IVValidationError',
    'MissingColumnError',
    'UnknownVariableError',
    'EmptyVariableListError',
    'InvalidOutcomeError',
]
