"""
Pydantic Models for IV Screening Results

Per-bin detail rows produced by the binners and per-variable summary rows
produced by the aggregator.
"""

from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


class Strength(str, Enum):
    """Predictive strength tiers, strongest first."""
    SUSPICIOUS = "Suspicious"
    VERY_STRONG = "Very strong"
    STRONG = "Strong"
    AVERAGE = "Average"
    WEAK = "Weak"
    VERY_WEAK = "Very weak"


class BinRecord(BaseModel):
    """
    Outcome counts and WoE statistics for one bin of one variable.

    Shares are taken against the dataset-wide outcome totals, so the
    ``pct_0`` (and ``pct_1``) values of a variable sum to one only when the
    variable has no excluded missing values.

    Example:
        >>> record = BinRecord(
        ...     variable='duration',
        ...     bin_label='(-inf, 11.5]',
        ...     outcome_0=30,
        ...     outcome_1=10,
        ...     pct_0=0.5,
        ...     pct_1=1/6,
        ...     woe=-1.0986,
        ...     miv=0.3662
        ... )
        >>> record.is_zero_bin
        False
    """

    model_config = ConfigDict(frozen=True)

    variable: str = Field(description="Name of the source variable")
    bin_label: str = Field(description="Interval (numeric) or category (categorical)")
    outcome_0: int = Field(ge=0, description="Observations with outcome 0")
    outcome_1: int = Field(ge=0, description="Observations with outcome 1")
    pct_0: float = Field(ge=0.0, description="Share of all outcome-0 observations")
    pct_1: float = Field(ge=0.0, description="Share of all outcome-1 observations")
    woe: float = Field(description="Weight of Evidence, ln(pct_1 / pct_0)")
    miv: float = Field(description="Marginal Information Value contribution")

    @property
    def population(self) -> int:
        return self.outcome_0 + self.outcome_1

    @property
    def is_zero_bin(self) -> bool:
        """True when the bin holds observations of only one outcome class."""
        return self.outcome_0 == 0 or self.outcome_1 == 0


class VariableSummary(BaseModel):
    """Total Information Value and bin diagnostics for one variable."""

    model_config = ConfigDict(frozen=True)

    variable: str
    information_value: float
    bins: int = Field(ge=1)
    zero_bins: int = Field(ge=0)
    strength: Strength
