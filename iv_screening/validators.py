"""
Input Validation for IV Screening

Provides the error taxonomy and the checks run before any binning happens:
- DataFrame shape checks
- Outcome column presence and binary coding
- Variable list resolution
- Variable type introspection (numeric vs. categorical)

All errors include actionable guidance for fixing issues.
"""

import pandas as pd
from pandas.api import types as ptypes
from typing import List, Optional, Sequence, Tuple
from .logger import get_logger

logger = get_logger(__name__)


class IVValidationError(Exception):
    """
    Base exception for IV screening input errors.

    Attributes:
        message: Human-readable error description
        field: Field or parameter that failed validation
        expected: Expected value or condition
        actual: Actual value that caused the error
        fix: Suggested fix for the issue
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
        fix: Optional[str] = None
    ):
        self.message = message
        self.field = field
        self.expected = expected
        self.actual = actual
        self.fix = fix

        parts = [f"[VALIDATION ERROR] {message}"]
        if field:
            parts.append(f"  Field: {field}")
        if expected:
            parts.append(f"  Expected: {expected}")
        if actual:
            parts.append(f"  Actual: {actual}")
        if fix:
            parts.append(f"  Fix: {fix}")

        super().__init__("\n".join(parts))


class MissingColumnError(IVValidationError):
    """Outcome column is not present in the DataFrame."""


class UnknownVariableError(IVValidationError):
    """A requested variable is not present in the DataFrame."""


class EmptyVariableListError(IVValidationError):
    """No variables are left to screen."""


class InvalidOutcomeError(IVValidationError):
    """Outcome column is not coded as binary 0/1."""


def _preview(names: Sequence[str], limit: int = 10) -> str:
    shown = ", ".join(repr(n) for n in list(names)[:limit])
    if len(names) > limit:
        shown += f", ... ({len(names) - limit} more)"
    return shown


def validate_dataset(df: pd.DataFrame) -> None:
    """
    Check that the dataset is a non-empty DataFrame.

    A DataFrame holding only the outcome column passes here and is rejected
    later by resolve_variables.

    Raises:
        IVValidationError: If any check fails
    """
    if not isinstance(df, pd.DataFrame):
        raise IVValidationError(
            "Dataset must be a pandas DataFrame",
            field="df",
            expected="pandas.DataFrame",
            actual=type(df).__name__,
            fix="Convert first: df = pd.DataFrame(data)"
        )

    if len(df) == 0:
        raise IVValidationError(
            "Dataset has no rows",
            field="df",
            expected="At least 1 row",
            actual="0 rows",
            fix="Check that the data was loaded correctly"
        )


def validate_outcome_column(df: pd.DataFrame, outcome_column: str) -> Tuple[int, int]:
    """
    Validate the outcome column and return the dataset-wide outcome totals.

    Args:
        df: Input DataFrame
        outcome_column: Name of the binary outcome column

    Returns:
        Tuple of (total_0, total_1)

    Raises:
        MissingColumnError: If the column is absent
        InvalidOutcomeError: If the column has missing or non 0/1 values

    Example:
        >>> df = pd.DataFrame({'x': [1, 2, 3], 'gb': [0, 1, 1]})
        >>> validate_outcome_column(df, 'gb')
        (1, 2)
    """
    if outcome_column not in df.columns:
        raise MissingColumnError(
            f"Outcome column '{outcome_column}' not found in DataFrame",
            field="outcome_column",
            expected=f"One of: {_preview(list(df.columns))}",
            actual=repr(outcome_column),
            fix="Check spelling or pass the correct outcome column name"
        )

    y = df[outcome_column]

    n_missing = int(y.isna().sum())
    if n_missing > 0:
        raise InvalidOutcomeError(
            f"Outcome column '{outcome_column}' contains missing values",
            field=outcome_column,
            expected="No missing values",
            actual=f"{n_missing} missing values",
            fix=f"Drop them first: df = df.dropna(subset=['{outcome_column}'])"
        )

    if ptypes.is_bool_dtype(y):
        y = y.astype(int)

    unique_values = set(pd.unique(y).tolist())
    if not unique_values <= {0, 1}:
        raise InvalidOutcomeError(
            f"Outcome column '{outcome_column}' must be binary (0/1)",
            field=outcome_column,
            expected="Values in {0, 1}",
            actual=f"Values: {sorted(unique_values, key=str)[:10]}",
            fix="Recode the outcome: df[col] = (df[col] == positive_value).astype(int)"
        )

    total_1 = int((y == 1).sum())
    total_0 = int(len(y) - total_1)
    logger.debug(f"Outcome '{outcome_column}': {total_0} x 0, {total_1} x 1")

    return total_0, total_1


def resolve_variables(
    df: pd.DataFrame,
    outcome_column: str,
    variables: Optional[Sequence[str]] = None
) -> List[str]:
    """
    Resolve the list of variables to screen.

    Defaults to every column except the outcome. Explicit names are checked
    up front so that nothing is binned when one of them is wrong.

    Raises:
        UnknownVariableError: If a requested variable is not in the DataFrame
        EmptyVariableListError: If no variables are left

    Example:
        >>> df = pd.DataFrame({'a': [1], 'b': ['x'], 'gb': [0]})
        >>> resolve_variables(df, 'gb')
        ['a', 'b']
    """
    if variables is None:
        resolved = [col for col in df.columns if col != outcome_column]
    else:
        if isinstance(variables, str):
            variables = [variables]
        resolved = list(variables)

        unknown = [var for var in resolved if var not in df.columns]
        if unknown:
            raise UnknownVariableError(
                f"Variables not found in DataFrame: {_preview(unknown)}",
                field="variables",
                expected=f"Column names from: {_preview(list(df.columns))}",
                actual=_preview(unknown),
                fix="Remove the unknown names or check their spelling"
            )

        if outcome_column in resolved:
            raise UnknownVariableError(
                f"Outcome column '{outcome_column}' cannot be screened as a variable",
                field="variables",
                expected="Predictor columns only",
                actual=repr(outcome_column),
                fix=f"Remove '{outcome_column}' from variables"
            )

    if not resolved:
        raise EmptyVariableListError(
            "No variables to screen",
            field="variables",
            expected="At least one predictor column",
            actual=f"Columns: {_preview(list(df.columns))}",
            fix="Pass a DataFrame with predictor columns or a non-empty variables list"
        )

    return resolved


def is_numeric_variable(series: pd.Series) -> bool:
    """
    Decide whether a column goes to the numeric binner.

    Booleans are treated as categories, everything else follows the dtype.
    """
    return ptypes.is_numeric_dtype(series) and not ptypes.is_bool_dtype(series)


def varlist(
    df: pd.DataFrame,
    var_type: str = 'numeric',
    exclude: Optional[Sequence[str]] = None
) -> List[str]:
    """
    List column names of a given type.

    Args:
        df: Input DataFrame
        var_type: 'numeric' or 'character' (anything the categorical binner handles)
        exclude: Column names to leave out, e.g. the outcome

    Returns:
        Column names in DataFrame order

    Example:
        >>> df = pd.DataFrame({'age': [30], 'job': ['a'], 'gb': [0]})
        >>> varlist(df, 'numeric', exclude=['gb'])
        ['age']
    """
    if var_type not in ('numeric', 'character'):
        raise ValueError(f"var_type must be 'numeric' or 'character', got '{var_type}'")

    excluded = set(exclude or [])
    want_numeric = var_type == 'numeric'

    return [
        col for col in df.columns
        if col not in excluded and is_numeric_variable(df[col]) == want_numeric
    ]
