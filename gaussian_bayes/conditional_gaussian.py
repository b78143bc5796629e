#!/usr/bin/env python3
"""
Conditional Gaussian density, the node type of a Gaussian Bayes network.

A conditional Gaussian on variable x with parents y, z, ... is stored in
square-root information form. Its negative log-density is

    || R x - (d - S y - T z - ...) ||^2

where R is upper triangular and S, T, ... are the parent matrices.
"""

import copy
import logging
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

import numpy as np

from .conditional import Conditional
from .config import DEFAULT_CONFIG, SolverConfig
from .errors import DimensionMismatch, MissingParentValue
from .utils.linear_algebra_utils import (
    as_matrix,
    as_vector,
    backsubstitution,
    equal_with_abs_tol,
    print_matrix,
    print_vector
)

logger = logging.getLogger(__name__)


class ConditionalGaussian(Conditional):
    """Gaussian density on one variable conditioned on named parent variables."""

    variant = "gaussian"

    def __init__(self, key: str, d, R, precisions=None,
                 parents: Optional[Mapping[str, np.ndarray]] = None,
                 config: Optional[SolverConfig] = None):
        """
        Create a conditional with zero or more parents.

        Args:
            key: Variable this density is defined on
            d: Right-hand side vector
            R: Upper-triangular square root information matrix
            precisions: Per-row precisions, unit precisions if omitted
            parents: Parent key -> matrix with dim() rows
            config: Numerical tolerances, DEFAULT_CONFIG if omitted

        Raises:
            DimensionMismatch: R, d, precisions or a parent matrix disagree
        """
        super().__init__(key)
        self.config = config or DEFAULT_CONFIG

        self._R = as_matrix(R)
        self._d = as_vector(d)
        n = self._d.shape[0]
        if self._R.shape != (n, n):
            raise DimensionMismatch(
                f"{key}: R has shape {self._R.shape}, expected ({n}, {n})"
            )

        if precisions is None:
            self._precisions = np.ones(n)
        else:
            self._precisions = as_vector(precisions)
            if self._precisions.shape[0] != n:
                raise DimensionMismatch(
                    f"{key}: {self._precisions.shape[0]} precisions for dimension {n}"
                )

        self._parents: Dict[str, np.ndarray] = {}
        for name, matrix in (parents or {}).items():
            matrix = as_matrix(matrix)
            if matrix.shape[0] != n:
                raise DimensionMismatch(
                    f"{key}: parent '{name}' matrix has {matrix.shape[0]} rows, expected {n}"
                )
            self._parents[name] = matrix

        logger.debug("Created conditional on '%s' (dim %d, %d parents)",
                     key, n, len(self._parents))

    @classmethod
    def from_parent(cls, key: str, d, R, name1: str, S, precisions=None,
                    config: Optional[SolverConfig] = None) -> "ConditionalGaussian":
        """Conditional with a single parent: |Rx + Sy - d|."""
        return cls(key, d, R, precisions, {name1: S}, config)

    @classmethod
    def from_parents(cls, key: str, d, R, name1: str, S, name2: str, T,
                     precisions=None,
                     config: Optional[SolverConfig] = None) -> "ConditionalGaussian":
        """Conditional with two parents: |Rx + Sy + Tz - d|."""
        return cls(key, d, R, precisions, {name1: S, name2: T}, config)

    @property
    def R(self) -> np.ndarray:
        return self._R

    @property
    def d(self) -> np.ndarray:
        return self._d

    @property
    def precisions(self) -> np.ndarray:
        return self._precisions

    def get_R(self) -> np.ndarray:
        return self._R

    def get_d(self) -> np.ndarray:
        return self._d

    def get_precisions(self) -> np.ndarray:
        return self._precisions

    def dim(self) -> int:
        """Dimension of the variable."""
        return self._d.shape[0]

    def parents(self) -> List[str]:
        """Keys of all parents, in no particular order."""
        return list(self._parents)

    def nr_parents(self) -> int:
        return len(self._parents)

    def contains(self, key: str) -> bool:
        """Whether ``key`` is among the parents."""
        return key in self._parents

    def parent_matrix(self, key: str) -> np.ndarray:
        return self._parents[key]

    def items(self) -> Iterator[Tuple[str, np.ndarray]]:
        """Iterate over (parent key, matrix) pairs."""
        return iter(self._parents.items())

    def add(self, key: str, S):
        """
        Add a parent, replacing any matrix already stored for ``key``.

        Never raises. Dimensions are not checked here, and a value that is
        not a numeric array is stored as given; both are rejected by
        check_parent() when the conditional is solved or encoded. Not safe
        against concurrent readers.
        """
        if key in self._parents:
            logger.debug("Replacing parent '%s' of '%s'", key, self.key)
        try:
            matrix = np.array(S, dtype=np.float64, copy=True)
        except (TypeError, ValueError):
            logger.warning("Parent '%s' of '%s' is not a numeric array", key, self.key)
            matrix = copy.deepcopy(S)
        self._parents[key] = matrix

    def check_parent(self, key: str) -> np.ndarray:
        """
        Return the matrix of parent ``key`` after checking it has dim() rows.

        Raises:
            KeyError: ``key`` is not a parent
            DimensionMismatch: the stored matrix does not fit this conditional
        """
        A = self._parents[key]
        if not isinstance(A, np.ndarray) or A.ndim != 2 or A.shape[0] != self.dim():
            shape = A.shape if isinstance(A, np.ndarray) else type(A).__name__
            raise DimensionMismatch(
                f"{self.key}: parent '{key}' matrix is {shape}, expected {self.dim()} rows"
            )
        return A

    def solve(self, x) -> np.ndarray:
        """
        Solve for this variable given the values of its parents.

        The precisions are not applied.

        Args:
            x: VectorConfig or mapping holding a value for every parent

        Returns:
            x = R \\ (d - S y - T z - ...)

        Raises:
            MissingParentValue: a parent has no value in ``x``
            DimensionMismatch: a parent value does not fit its matrix
            SingularSystem: R has a vanishing pivot
        """
        rhs = self._d.copy()
        for name in self._parents:
            A = self.check_parent(name)
            try:
                value = x[name]
            except KeyError:
                raise MissingParentValue(name) from None
            value = np.asarray(value, dtype=np.float64)
            if value.shape != (A.shape[1],):
                raise DimensionMismatch(
                    f"{self.key}: value of parent '{name}' has shape {value.shape}, "
                    f"expected ({A.shape[1]},)"
                )
            rhs -= A @ value
        return backsubstitution(self._R, rhs, self.config.singular_tolerance)

    def equals(self, other, tol: Optional[float] = None) -> bool:
        """Equality within an absolute tolerance, for testing."""
        if tol is None:
            tol = self.config.equality_tolerance
        if not super().equals(other, tol):
            return False

        # check if the number of parents is the same
        if len(self._parents) != len(other._parents):
            return False

        if not equal_with_abs_tol(self._R, other._R, tol):
            return False
        if not equal_with_abs_tol(self._d, other._d, tol):
            return False
        if not equal_with_abs_tol(self._precisions, other._precisions, tol):
            return False

        for name, A in self._parents.items():
            B = other._parents.get(name)
            if B is None or not equal_with_abs_tol(A, B, tol):
                return False
        return True

    def print(self, label: str = "ConditionalGaussian"):
        precision = self.config.print_precision
        print(f"{label}:")
        print_matrix(self._R, "R", precision)
        for name, A in self._parents.items():
            print_matrix(A, f"A[{name}]", precision)
        print_vector(self._d, "d", precision)
        print_vector(self._precisions, "precisions", precision)

    def __repr__(self) -> str:
        return (f"ConditionalGaussian(key={self.key!r}, dim={self.dim()}, "
                f"parents={sorted(self._parents)!r})")
