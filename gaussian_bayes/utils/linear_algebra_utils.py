#!/usr/bin/env python3
"""
Linear algebra utilities for square-root information form conditionals.
Contains the triangular back-substitution kernel, tolerance equality and
diagnostic printing of matrices and vectors.
"""

import logging

import numpy as np
import scipy.linalg as la

from ..errors import DimensionMismatch, SingularSystem

logger = logging.getLogger(__name__)


def as_vector(values) -> np.ndarray:
    """Return a float64 1-D copy of ``values``."""
    vector = np.array(values, dtype=np.float64, copy=True)
    if vector.ndim == 0:
        vector = vector.reshape(1)
    if vector.ndim != 1:
        raise DimensionMismatch(f"Expected a vector, got shape {vector.shape}")
    return vector


def as_matrix(values) -> np.ndarray:
    """Return a float64 2-D copy of ``values``."""
    matrix = np.array(values, dtype=np.float64, copy=True)
    if matrix.ndim != 2:
        raise DimensionMismatch(f"Expected a matrix, got shape {matrix.shape}")
    return matrix


def equal_with_abs_tol(a, b, tol: float = 1e-9) -> bool:
    """
    Element-wise equality within an absolute tolerance.

    Two arrays are equal when their shapes agree and every pair of entries
    differs by at most ``tol``. NaN matches NaN but never a number.

    Args:
        a: First matrix or vector
        b: Second matrix or vector
        tol: Absolute tolerance

    Returns:
        True if the arrays are equal within tolerance
    """
    try:
        a = np.asarray(a, dtype=np.float64)
        b = np.asarray(b, dtype=np.float64)
    except (TypeError, ValueError):
        return False

    if a.shape != b.shape:
        return False

    return bool(np.all(np.isclose(a, b, rtol=0.0, atol=tol, equal_nan=True)))


def backsubstitution(R, rhs, singular_tolerance: float = 1e-12) -> np.ndarray:
    """
    Solve R x = rhs for upper-triangular R.

    Only the upper triangle of R is read. The diagonal is checked for
    vanishing pivots before the solve.

    Args:
        R: Square upper-triangular matrix
        rhs: Right-hand side vector with R.shape[0] entries
        singular_tolerance: Pivots with |R_ii| <= tolerance are rejected

    Returns:
        Solution vector x

    Raises:
        DimensionMismatch: R is not square or rhs has the wrong length
        SingularSystem: R has a zero or near-zero pivot
    """
    R = np.asarray(R, dtype=np.float64)
    rhs = np.asarray(rhs, dtype=np.float64)

    if R.ndim != 2 or R.shape[0] != R.shape[1]:
        raise DimensionMismatch(f"R must be square, got shape {R.shape}")
    if rhs.shape != (R.shape[0],):
        raise DimensionMismatch(
            f"rhs has shape {rhs.shape}, expected ({R.shape[0]},)"
        )
    if R.shape[0] == 0:
        return np.zeros(0)

    pivots = np.abs(np.diag(R))
    singular = np.flatnonzero(pivots <= singular_tolerance)
    if singular.size > 0:
        row = int(singular[0])
        raise SingularSystem(
            f"Singular pivot R[{row},{row}] = {R[row, row]!r} "
            f"(tolerance {singular_tolerance})"
        )

    logger.debug("Back-substituting %dx%d triangular system", R.shape[0], R.shape[1])
    return la.solve_triangular(R, rhs, lower=False)


def print_matrix(matrix, label: str = "", precision: int = 6):
    """Print a matrix in ``label = [...]`` form, non-arrays as their repr."""
    if isinstance(matrix, np.ndarray):
        text = np.array2string(matrix, precision=precision, suppress_small=True)
    else:
        text = repr(matrix)
    print(f"{label} = {text}" if label else text)


def print_vector(vector, label: str = "", precision: int = 6):
    """Print a vector in ``label = [...]`` form."""
    print_matrix(np.asarray(vector).ravel(), label, precision)
