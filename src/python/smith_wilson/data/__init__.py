"""
Input data for the Smith-Wilson engine.

- examples: demonstration dataset (20 annual rates, UFR 4.2%)
- loaders: CSV/Parquet observation loading and maturity parsing
"""

from .examples import (
    EXAMPLE_ALPHA,
    EXAMPLE_MATURITIES,
    EXAMPLE_RATES,
    EXAMPLE_TARGETS,
    EXAMPLE_UFR,
)
from .loaders import load_observations, parse_maturities

__all__ = [
    "EXAMPLE_MATURITIES",
    "EXAMPLE_RATES",
    "EXAMPLE_UFR",
    "EXAMPLE_ALPHA",
    "EXAMPLE_TARGETS",
    "load_observations",
    "parse_maturities",
]
