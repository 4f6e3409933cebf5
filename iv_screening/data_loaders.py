"""
German Credit Dataset Loader

Loads the UCI German Credit dataset as a screening-ready DataFrame: the
20 UCI attributes (numeric ones as numbers, coded ones as text) plus
the binary outcome column ``gb``.

Dataset: Statlog (German Credit Data)
Source: UCI Machine Learning Repository
Size: 1,000 observations
Citation: Hofmann, H. (1994). DOI: 10.24432/C5NC77
"""

import urllib.request
import pandas as pd
from pathlib import Path
from typing import Union

from .logger import get_logger

logger = get_logger(__name__)

GERMAN_CREDIT_URL = (
    "https://archive.ics.uci.edu/ml/machine-learning-databases/statlog/german/german.data"
)

GERMAN_CREDIT_COLUMNS = [
    'ca_status',                  # A1: Status of existing checking account
    'duration',                   # A2: Duration in months
    'credit_history',             # A3: Credit history
    'purpose',                    # A4: Purpose
    'credit_amount',              # A5: Credit amount
    'savings',                    # A6: Savings account/bonds
    'present_employment_since',   # A7: Present employment since
    'installment_rate_income',    # A8: Installment rate in percentage of disposable income
    'status_sex',                 # A9: Personal status and sex
    'other_debtors',              # A10: Other debtors / guarantors
    'present_residence_since',    # A11: Present residence since
    'property',                   # A12: Property
    'age',                        # A13: Age in years
    'other_installment_plans',    # A14: Other installment plans
    'housing',                    # A15: Housing
    'existing_credits',           # A16: Number of existing credits at this bank
    'job',                        # A17: Job
    'liable_maintenance_people',  # A18: People liable to provide maintenance for
    'telephone',                  # A19: Telephone
    'foreign_worker',             # A20: Foreign worker
    'credit_risk',                # Target: 1 = good, 2 = bad
]


class GermanCreditLoader:
    """
    Loader for the UCI German Credit dataset.

    The raw file is downloaded once into ``data_dir`` and read from there
    afterwards.
    """

    def __init__(self, data_dir: Union[str, Path] = "./data"):
        self.data_dir = Path(data_dir)
        self.url = GERMAN_CREDIT_URL
        self.filename = "german_credit.data"

    def load(self) -> pd.DataFrame:
        """
        Load the dataset, downloading it if needed.

        Returns:
            DataFrame with 20 predictors and the outcome ``gb`` (1 = bad, 0 = good)
        """
        filepath = self._get_or_download()
        df = read_german_credit(filepath)
        logger.info(
            f"Loaded German Credit: {len(df):,} rows, {df['gb'].sum():,} bad ({df['gb'].mean():.2%})"
        )
        return df

    def _get_or_download(self) -> Path:
        """Download dataset if not present."""
        filepath = self.data_dir / self.filename

        if filepath.exists():
            logger.debug(f"Using existing file: {filepath}")
            return filepath

        self.data_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Downloading from {self.url}...")
        try:
            urllib.request.urlretrieve(self.url, filepath)
        except OSError as e:
            logger.error(
                f"Error downloading German Credit data: {e}. Download it manually from "
                "https://archive.ics.uci.edu/ml/datasets/statlog+(german+credit+data) "
                f"and save it as {filepath}"
            )
            raise
        logger.info(f"Downloaded to {filepath}")

        return filepath


def read_german_credit(filepath: Union[str, Path]) -> pd.DataFrame:
    """
    Parse a raw ``german.data`` file.

    Args:
        filepath: Path to the space-separated UCI file

    Returns:
        DataFrame with the outcome recoded to ``gb`` (1 = bad, 0 = good)
    """
    df = pd.read_csv(filepath, sep=' ', names=GERMAN_CREDIT_COLUMNS, header=None)
    df['gb'] = (df['credit_risk'] == 2).astype(int)
    return df.drop(columns='credit_risk')


def load_german_credit(data_dir: Union[str, Path] = "./data") -> pd.DataFrame:
    """
    Convenience function to load the German Credit dataset.

    Example:
        >>> german_data = load_german_credit()
        >>> compute_iv(german_data, 'gb', summary=True)
    """
    return GermanCreditLoader(data_dir).load()
