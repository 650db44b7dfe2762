"""
Pytest configuration for smith_wilson tests.
"""

import pytest
import numpy as np

from smith_wilson.data import (
    EXAMPLE_ALPHA,
    EXAMPLE_MATURITIES,
    EXAMPLE_RATES,
    EXAMPLE_TARGETS,
    EXAMPLE_UFR,
)


@pytest.fixture
def two_point_data():
    """Two observed rates used for the recorded regression values."""
    return {
        "maturities": np.array([1.0, 3.0]),
        "rates": np.array([0.0024, 0.0034]),
        "ufr": 0.042,
        "alpha": 0.05,
    }


@pytest.fixture
def example_data():
    """Twenty annual observations with UFR 4.2%."""
    return {
        "maturities": EXAMPLE_MATURITIES.copy(),
        "rates": EXAMPLE_RATES.copy(),
        "ufr": EXAMPLE_UFR,
        "alpha": EXAMPLE_ALPHA,
        "targets": EXAMPLE_TARGETS.copy(),
    }


@pytest.fixture
def irregular_data():
    """Unsorted, non-integer maturities including a negative rate."""
    return {
        "maturities": np.array([7.5, 0.5, 2.0, 15.0, 30.0]),
        "rates": np.array([0.021, -0.0015, 0.004, 0.027, 0.029]),
        "ufr": 0.0345,
        "alpha": 0.1,
    }
