"""
Observation file loading and maturity parsing.

Observed curves are read with pandas from CSV or Parquet exports. Column
names are matched loosely so that typical market-data exports work
without renaming.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

MATURITY_HINTS = ("maturity", "mat", "term", "tenor", "years")
RATE_HINTS = ("rate", "yield", "zero", "spot")


def _find_column(columns: List[str], hints: Tuple[str, ...], exclude: Optional[str] = None) -> Optional[str]:
    for hint in hints:
        for col in columns:
            if col == exclude:
                continue
            if hint in str(col).lower():
                return col
    return None


def load_observations(
    path: Union[str, Path],
    maturity_column: Optional[str] = None,
    rate_column: Optional[str] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Load observed maturities and rates from a CSV or Parquet file.

    Args:
        path: File path (.csv or .parquet)
        maturity_column: Column holding maturities in years (auto-detected if None)
        rate_column: Column holding annually compounded rates (auto-detected if None)

    Returns:
        (maturities, rates) as float arrays, rows with missing values dropped

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the format is unsupported or columns cannot be found
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Observation file not found: {path}")

    if path.suffix == ".csv":
        df = pd.read_csv(path)
    elif path.suffix == ".parquet":
        df = pd.read_parquet(path)
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")

    columns = list(df.columns)
    maturity_column = maturity_column or _find_column(columns, MATURITY_HINTS)
    rate_column = rate_column or _find_column(columns, RATE_HINTS, exclude=maturity_column)

    if maturity_column not in df.columns or rate_column not in df.columns:
        raise ValueError(
            f"Could not identify maturity and rate columns in {path.name} "
            f"(columns: {columns})"
        )

    subset = df[[maturity_column, rate_column]].apply(pd.to_numeric, errors="coerce")
    n_before = len(subset)
    subset = subset.dropna()
    if len(subset) < n_before:
        logger.warning(f"Dropped {n_before - len(subset)} incomplete rows from {path.name}")

    logger.info(
        f"Loaded {len(subset)} observations from {path} "
        f"(maturity='{maturity_column}', rate='{rate_column}')"
    )
    return (
        subset[maturity_column].to_numpy(dtype=float),
        subset[rate_column].to_numpy(dtype=float),
    )


def parse_maturities(spec: str) -> np.ndarray:
    """
    Parse a maturity list such as "1,2,3,5" or a range "1:65" / "0.5:10:0.5".

    Ranges are inclusive of the end point; the default step is 1.

    Raises:
        ValueError: If the text cannot be parsed
    """
    values: List[float] = []
    for part in str(spec).split(","):
        part = part.strip()
        if not part:
            continue
        if ":" in part:
            pieces = [float(p) for p in part.split(":")]
            if len(pieces) == 2:
                start, stop, step = pieces[0], pieces[1], 1.0
            elif len(pieces) == 3:
                start, stop, step = pieces
            else:
                raise ValueError(f"Invalid maturity range: '{part}'")
            if step <= 0:
                raise ValueError(f"Range step must be positive: '{part}'")
            n = int(np.floor((stop - start) / step + 1e-9)) + 1
            values.extend(start + step * np.arange(max(n, 0)))
        else:
            values.append(float(part))

    if not values:
        raise ValueError(f"No maturities in '{spec}'")
    return np.array(values, dtype=float)
