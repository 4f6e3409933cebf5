"""
Pydantic Model for Numeric Binning Parameters

Decision-tree settings used by the numeric binner. Names follow the
recursive-partitioning vocabulary (complexity parameter, minimum bucket,
minimum split) and are translated to sklearn's DecisionTreeClassifier.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Dict, Optional, Union
from enum import Enum


class SplitCriterion(str, Enum):
    """Allowed split criteria for decision trees."""
    GINI = "gini"
    ENTROPY = "entropy"


class BinningConfig(BaseModel):
    """
    Configuration for the decision-tree numeric binner.

    Example:
        >>> config = BinningConfig(cp=0.001, min_bucket=10)
        >>> config.to_sklearn_params()['min_samples_leaf']
        10
        >>> config.cp = 0.5  # Raises error - immutable
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True, extra='forbid')

    cp: float = Field(
        default=0.01,
        ge=0.0,
        description="Complexity parameter: a split must improve the root impurity by this fraction"
    )

    min_split: int = Field(
        default=20,
        ge=2,
        description="Minimum observations in a node before a split is attempted"
    )

    min_bucket: int = Field(
        default=7,
        ge=1,
        description="Minimum observations in any bin"
    )

    max_depth: int = Field(
        default=30,
        ge=1,
        le=30,
        description="Maximum depth of the tree"
    )

    criterion: SplitCriterion = Field(
        default=SplitCriterion.GINI,
        description="Split quality measure"
    )

    random_state: Optional[int] = Field(
        default=42,
        ge=0,
        description="Random seed for reproducibility"
    )

    @model_validator(mode='after')
    def validate_split_consistency(self):
        """A node smaller than one bucket can never be split."""
        if self.min_split < self.min_bucket:
            raise ValueError(
                f"min_split ({self.min_split}) must be at least "
                f"min_bucket ({self.min_bucket})"
            )
        return self

    @classmethod
    def coerce(cls, config: Union['BinningConfig', Dict, None]) -> 'BinningConfig':
        """Accept a BinningConfig, a dict of its fields, or None for defaults."""
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        if isinstance(config, dict):
            return cls(**config)
        raise TypeError(
            f"binning_config must be a BinningConfig or dict, got {type(config).__name__}"
        )

    def get_criterion(self) -> str:
        return self.criterion.value if isinstance(self.criterion, Enum) else self.criterion

    def to_sklearn_params(self, root_impurity: float = 1.0) -> Dict:
        """
        Translate to sklearn DecisionTreeClassifier parameters.

        cp is relative to the root node, so the cost-complexity pruning
        strength is cp scaled by the root impurity.

        Args:
            root_impurity: Impurity of the outcome before any split

        Returns:
            Dictionary of parameters for DecisionTreeClassifier
        """
        return {
            'max_depth': self.max_depth,
            'min_samples_split': self.min_split,
            'min_samples_leaf': self.min_bucket,
            'criterion': self.get_criterion(),
            'ccp_alpha': self.cp * root_impurity,
            'random_state': self.random_state,
        }

    def get_summary(self) -> str:
        """Human-readable summary of the configuration."""
        criterion = self.get_criterion()
        lines = [
            "Numeric Binning Parameters",
            "=" * 50,
            f"  cp: {self.cp}",
            f"  min_split: {self.min_split}",
            f"  min_bucket: {self.min_bucket}",
            f"  max_depth: {self.max_depth}",
            f"  criterion: {criterion}",
            f"  random_state: {self.random_state}",
        ]
        return "\n".join(lines)
