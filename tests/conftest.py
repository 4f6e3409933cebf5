"""
Shared Test Fixtures and Configuration for the IV Screening Test Suite

This module provides reusable fixtures for:
- Synthetic credit DataFrames (numeric, categorical, missing values)
- A hand-built dataset with known bin counts
- Binning configurations
- Temporary CSV files for CLI and config tests
"""

import pytest
import numpy as np
import pandas as pd

from iv_screening.logger import IVLogger
from iv_screening.models import BinningConfig


# ==============================================================================
# PYTEST CONFIGURATION
# ==============================================================================

def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions/classes"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for workflows"
    )
    config.addinivalue_line(
        "markers", "edge_case: Tests for edge cases and boundary conditions"
    )


# ==============================================================================
# RANDOM SEED FIXTURES
# ==============================================================================

@pytest.fixture(scope="session")
def random_seed():
    """Global random seed for reproducible tests."""
    return 42


@pytest.fixture(autouse=True)
def set_random_seed(random_seed):
    """Automatically set random seed before each test."""
    np.random.seed(random_seed)


@pytest.fixture(autouse=True)
def reset_logger_cache():
    """Each test starts from a fresh logger cache."""
    yield
    IVLogger.reset_loggers()


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def credit_df():
    """
    Synthetic credit DataFrame (1000 rows).

    - duration: numeric, strongly related to the outcome
    - age: numeric, weakly related
    - noise: numeric, unrelated
    - housing: categorical, moderately related
    - purpose: categorical, unrelated
    - gb: binary outcome
    """
    n_samples = 1000

    duration = np.random.randint(6, 72, n_samples)
    age = np.random.randint(19, 75, n_samples)
    housing = np.random.choice(['own', 'rent', 'free'], n_samples, p=[0.6, 0.3, 0.1])

    logit = -2.0 + 0.05 * duration - 0.01 * (age - 40) + np.where(housing == 'rent', 0.7, 0.0)
    prob = 1.0 / (1.0 + np.exp(-logit))
    gb = np.random.binomial(1, prob)

    return pd.DataFrame({
        'duration': duration,
        'age': age,
        'noise': np.random.randn(n_samples),
        'housing': housing,
        'purpose': np.random.choice(['car', 'tv', 'business', 'education'], n_samples),
        'gb': gb,
    })


@pytest.fixture
def worked_example_df():
    """
    120 rows with three well-separated duration values.

    Outcome counts per value: 6 -> (30, 10), 24 -> (20, 20), 48 -> (10, 30),
    dataset totals (60, 60). ``duration_band`` holds the same grouping as text.
    """
    blocks = [
        (6, 'short', 30, 10),
        (24, 'medium', 20, 20),
        (48, 'long', 10, 30),
    ]
    rows = []
    for value, band, n_0, n_1 in blocks:
        rows.extend([(value, band, 0)] * n_0)
        rows.extend([(value, band, 1)] * n_1)

    return pd.DataFrame(rows, columns=['duration', 'duration_band', 'gb'])


@pytest.fixture
def zero_bin_df():
    """Categorical variable where category 'C' has only outcome 1."""
    segment = ['A'] * 40 + ['B'] * 40 + ['C'] * 20
    gb = [0] * 30 + [1] * 10 + [0] * 20 + [1] * 20 + [1] * 20
    return pd.DataFrame({'segment': segment, 'gb': gb})


@pytest.fixture
def df_with_missing(credit_df):
    """credit_df with missing values in one numeric and one categorical column."""
    df = credit_df.copy()
    df['duration'] = df['duration'].astype(float)
    df.loc[df.sample(frac=0.1, random_state=1).index, 'duration'] = np.nan
    df['housing'] = df['housing'].astype(object)
    df.loc[df.sample(frac=0.05, random_state=2).index, 'housing'] = None
    return df


@pytest.fixture
def exact_config():
    """Unpruned tree: splits wherever the outcome mix changes."""
    return BinningConfig(cp=0.0, min_bucket=5, min_split=10)


@pytest.fixture
def temp_csv(tmp_path, worked_example_df):
    """worked_example_df written to a CSV file."""
    path = tmp_path / "worked_example.csv"
    worked_example_df.to_csv(path, index=False)
    return path
