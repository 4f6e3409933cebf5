"""
Information Value Engine

Dispatches every requested variable to the numeric or categorical binner,
collects the per-bin records and, in summary mode, reduces them to one
ranked row per variable with a strength label.
"""

import pandas as pd
from collections import OrderedDict
from typing import Dict, List, Optional, Sequence, Union

from .binning import CategoricalBinner, NumericBinner
from .logger import get_logger
from .models import BinningConfig, BinRecord, Strength, VariableSummary
from .validators import (
    is_numeric_variable,
    resolve_variables,
    validate_dataset,
    validate_outcome_column,
)

logger = get_logger(__name__)

DETAIL_COLUMNS = ['variable', 'bin_label', 'outcome_0', 'outcome_1', 'miv', 'pct_0', 'pct_1', 'woe']
SUMMARY_COLUMNS = ['Variable', 'InformationValue', 'Bins', 'ZeroBins', 'Strength']

# Lower bounds, checked strongest first; anything below the last is VERY_WEAK
STRENGTH_THRESHOLDS = [
    (1.0, Strength.SUSPICIOUS),
    (0.5, Strength.VERY_STRONG),
    (0.2, Strength.STRONG),
    (0.1, Strength.AVERAGE),
    (0.02, Strength.WEAK),
]


def classify_strength(information_value: float) -> Strength:
    """
    Map an Information Value to its strength tier.

    Lower bounds are inclusive, so 0.5 is "Very strong" and not "Strong".
    Negative and NaN values fall through to "Very weak".

    Example:
        >>> classify_strength(0.5).value
        'Very strong'
        >>> classify_strength(0.019).value
        'Very weak'
    """
    for lower_bound, strength in STRENGTH_THRESHOLDS:
        if information_value >= lower_bound:
            return strength
    return Strength.VERY_WEAK


def bin_variables(
    df: pd.DataFrame,
    outcome_column: str,
    variables: Optional[Sequence[str]] = None,
    binning_config: Union[BinningConfig, Dict, None] = None,
    verbose: bool = False
) -> List[BinRecord]:
    """
    Bin every requested variable and concatenate the records.

    Inputs are validated once, before any binning starts. Records keep the order
    of the variables and, within a variable, the order of its bins. An error
    raised by a binner stops the whole run.

    Args:
        df: Input DataFrame (not modified)
        outcome_column: Binary 0/1 outcome column
        variables: Columns to screen (default: all except the outcome)
        binning_config: Numeric binner settings (default: BinningConfig())
        verbose: Log which binner handles each variable

    Returns:
        BinRecords for all variables

    Raises:
        MissingColumnError: Outcome column not in df
        InvalidOutcomeError: Outcome not coded 0/1
        UnknownVariableError: A requested variable not in df
        EmptyVariableListError: Nothing left to screen
    """
    trace = logger.info if verbose else logger.debug

    validate_dataset(df)
    totals = validate_outcome_column(df, outcome_column)
    resolved = resolve_variables(df, outcome_column, variables)

    numeric_binner = NumericBinner(binning_config)
    categorical_binner = CategoricalBinner()

    trace(f"Started processing of data frame: {df.shape[0]:,} rows, {len(resolved)} variables")

    records: List[BinRecord] = []
    for variable in resolved:
        if is_numeric_variable(df[variable]):
            trace(f"Calling NumericBinner for variable: {variable}")
            variable_records = numeric_binner.bin(df, variable, outcome_column, totals)
        else:
            trace(f"Calling CategoricalBinner for variable: {variable}")
            variable_records = categorical_binner.bin(df, variable, outcome_column, totals)
        records.extend(variable_records)

    return records


def summarize_bins(records: Sequence[BinRecord]) -> List[VariableSummary]:
    """
    Reduce per-bin records to one summary per variable.

    Information Value is the sum of the bins' miv, zero bins are bins
    without observations of one outcome class. The result is sorted by
    Information Value descending; ties keep first-appearance order.

    Args:
        records: BinRecords as returned by bin_variables

    Returns:
        VariableSummary rows, strongest first
    """
    groups: 'OrderedDict[str, List[BinRecord]]' = OrderedDict()
    for record in records:
        groups.setdefault(record.variable, []).append(record)

    summaries = []
    for variable, bins in groups.items():
        information_value = sum(record.miv for record in bins)
        summaries.append(VariableSummary(
            variable=variable,
            information_value=information_value,
            bins=len(bins),
            zero_bins=sum(1 for record in bins if record.is_zero_bin),
            strength=classify_strength(information_value),
        ))

    return sorted(summaries, key=lambda summary: summary.information_value, reverse=True)


def records_to_frame(records: Sequence[BinRecord]) -> pd.DataFrame:
    """Detail table, one row per bin."""
    rows = [record.model_dump() for record in records]
    return pd.DataFrame(rows, columns=DETAIL_COLUMNS)


def summaries_to_frame(summaries: Sequence[VariableSummary]) -> pd.DataFrame:
    """Summary table with an ordered categorical Strength column."""
    frame = pd.DataFrame(
        [
            {
                'Variable': summary.variable,
                'InformationValue': summary.information_value,
                'Bins': summary.bins,
                'ZeroBins': summary.zero_bins,
                'Strength': Strength(summary.strength).value,
            }
            for summary in summaries
        ],
        columns=SUMMARY_COLUMNS
    )
    frame['Strength'] = pd.Categorical(
        frame['Strength'],
        categories=[strength.value for strength in Strength],
        ordered=True
    )
    return frame


def compute_iv(
    df: pd.DataFrame,
    outcome_column: str,
    summary: bool = False,
    variables: Optional[Sequence[str]] = None,
    verbose: bool = False,
    binning_config: Union[BinningConfig, Dict, None] = None
) -> pd.DataFrame:
    """
    Calculate Information Value for the variables of a DataFrame.

    Numeric columns are binned with a decision tree, all other columns bin
    one category per value.

    Args:
        df: DataFrame with the outcome and at least one predictor
        outcome_column: Binary 0/1 outcome column
        summary: Return one row per variable instead of one row per bin
        variables: Columns to screen (default: all except the outcome)
        verbose: Log progress details
        binning_config: Numeric binner settings, BinningConfig or dict

    Returns:
        summary=False: columns variable, bin_label, outcome_0, outcome_1,
        miv, pct_0, pct_1, woe.
        summary=True: columns Variable, InformationValue, Bins, ZeroBins,
        Strength, sorted by InformationValue descending.

    Example:
        >>> compute_iv(german_data, 'gb')
        >>> compute_iv(german_data, 'gb', summary=True)
        >>> compute_iv(german_data, 'gb', variables=['duration', 'age'],
        ...            binning_config=BinningConfig(cp=0.001, min_bucket=10))
        >>> compute_iv(german_data, 'gb', variables=varlist(german_data, 'numeric', exclude=['gb']))
    """
    records = bin_variables(
        df,
        outcome_column,
        variables=variables,
        binning_config=binning_config,
        verbose=verbose
    )

    if not summary:
        return records_to_frame(records)

    if verbose:
        logger.info("Preparing summary")
    return summaries_to_frame(summarize_bins(records))
