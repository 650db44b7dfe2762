"""
Dense linear solvers for the Smith-Wilson calibration system.

The calibrator only needs one capability: solve ``X b = v`` for a square
real matrix X and report a distinguishable failure when X is singular or
too ill-conditioned to trust. Three interchangeable backends are provided:

- InverseSolver: explicit inverse via ``numpy.linalg.inv`` (textbook form
  b = X^-1 v as written in the EIOPA documentation)
- LUSolver: LU factorisation via ``scipy.linalg.lu_factor`` (default)
- CholeskySolver: Cholesky factorisation via ``scipy.linalg.cho_factor``,
  valid because Q'HQ is symmetric positive definite for distinct maturities

Example:
    >>> solver = get_solver("cholesky", max_condition=1e10)
    >>> b = solver.solve(X, v)
"""

from __future__ import annotations

import abc
import logging
from typing import Callable, Dict, Type, Union

import numpy as np
from scipy import linalg as sla

from ..errors import DimensionMismatchError, InvalidParameterError, SingularSystemError

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONDITION = 1e12

SolverLike = Union["LinearSolver", Callable[[np.ndarray, np.ndarray], np.ndarray]]


class LinearSolver(abc.ABC):
    """
    Abstract dense linear solver.

    Subclasses implement ``_solve``; the public ``solve`` performs the
    shape, finiteness and conditioning checks common to all backends.

    Attributes:
        max_condition: Largest accepted 2-norm condition number
    """

    name = "abstract"

    def __init__(self, max_condition: float = DEFAULT_MAX_CONDITION):
        if max_condition <= 1:
            raise InvalidParameterError(
                f"max_condition must be greater than 1, got {max_condition}"
            )
        self.max_condition = float(max_condition)

    def __call__(self, matrix: np.ndarray, rhs: np.ndarray) -> np.ndarray:
        return self.solve(matrix, rhs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_condition={self.max_condition:g})"

    def solve(self, matrix: np.ndarray, rhs: np.ndarray) -> np.ndarray:
        """
        Solve ``matrix @ x = rhs``.

        Args:
            matrix: Square (n, n) matrix
            rhs: Right-hand side of length n

        Returns:
            Solution vector of length n

        Raises:
            DimensionMismatchError: If shapes are inconsistent
            SingularSystemError: If the matrix is singular, ill-conditioned
                beyond ``max_condition``, or the solution is not finite
        """
        X = np.asarray(matrix, dtype=float)
        v = np.asarray(rhs, dtype=float).reshape(-1)

        if X.ndim != 2 or X.shape[0] != X.shape[1]:
            raise DimensionMismatchError(f"matrix must be square, got shape {X.shape}")
        if X.shape[0] != v.shape[0]:
            raise DimensionMismatchError(
                f"right-hand side length {v.shape[0]} does not match matrix size {X.shape[0]}"
            )
        if not np.all(np.isfinite(X)) or not np.all(np.isfinite(v)):
            raise SingularSystemError("system contains NaN or infinite values")

        cond = self.condition_number(X)
        if not np.isfinite(cond) or cond > self.max_condition:
            raise SingularSystemError(
                f"matrix is singular or ill-conditioned "
                f"(condition number {cond:.3e} > {self.max_condition:.3e})"
            )
        if cond > self.max_condition / 100:
            logger.warning(f"Calibration matrix is close to singular (condition number {cond:.3e})")
        logger.debug(f"{self.name} solve: n={X.shape[0]}, condition number={cond:.3e}")

        try:
            x = self._solve(X, v)
        except (np.linalg.LinAlgError, ValueError) as e:
            raise SingularSystemError(f"{self.name} solve failed: {e}") from e

        if not np.all(np.isfinite(x)):
            raise SingularSystemError(f"{self.name} solve produced non-finite values")
        return x

    @staticmethod
    def condition_number(matrix: np.ndarray) -> float:
        """2-norm condition number of a square matrix."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.linalg.cond(matrix))

    @abc.abstractmethod
    def _solve(self, matrix: np.ndarray, rhs: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class InverseSolver(LinearSolver):
    """Explicit inversion: x = X^-1 v."""

    name = "inverse"

    def _solve(self, matrix: np.ndarray, rhs: np.ndarray) -> np.ndarray:
        return np.linalg.inv(matrix) @ rhs


class LUSolver(LinearSolver):
    """LU factorisation with partial pivoting."""

    name = "lu"

    def _solve(self, matrix: np.ndarray, rhs: np.ndarray) -> np.ndarray:
        lu, piv = sla.lu_factor(matrix, check_finite=False)
        return sla.lu_solve((lu, piv), rhs, check_finite=False)


class CholeskySolver(LinearSolver):
    """Cholesky factorisation; requires a symmetric positive definite matrix."""

    name = "cholesky"

    def _solve(self, matrix: np.ndarray, rhs: np.ndarray) -> np.ndarray:
        if not np.allclose(matrix, matrix.T, rtol=1e-10, atol=0.0):
            raise SingularSystemError("cholesky solver requires a symmetric matrix")
        factor = sla.cho_factor(matrix, lower=True, check_finite=False)
        return sla.cho_solve(factor, rhs, check_finite=False)


SOLVERS: Dict[str, Type[LinearSolver]] = {
    InverseSolver.name: InverseSolver,
    LUSolver.name: LUSolver,
    CholeskySolver.name: CholeskySolver,
}


def get_solver(name: str = "lu", max_condition: float = DEFAULT_MAX_CONDITION) -> LinearSolver:
    """
    Build a solver by name.

    Args:
        name: One of "inverse", "lu", "cholesky" (case-insensitive)
        max_condition: Largest accepted condition number

    Raises:
        InvalidParameterError: For an unknown solver name
    """
    key = str(name).lower()
    if key not in SOLVERS:
        raise InvalidParameterError(
            f"unknown solver '{name}', expected one of {sorted(SOLVERS)}"
        )
    return SOLVERS[key](max_condition=max_condition)
