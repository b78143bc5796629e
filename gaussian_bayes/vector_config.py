#!/usr/bin/env python3
"""
Variable assignment: a mapping from variable key to its vector value
"""

from typing import Dict, Iterator, Mapping, Optional

import numpy as np

from .errors import MissingParentValue
from .utils.linear_algebra_utils import as_vector, equal_with_abs_tol, print_vector


class VectorConfig:
    """Values of named vector variables, e.g. the result of back-substitution."""

    def __init__(self, values: Optional[Mapping[str, np.ndarray]] = None):
        self._values: Dict[str, np.ndarray] = {}
        if values is not None:
            for key, value in values.items():
                self.insert(key, value)

    def insert(self, key: str, value) -> "VectorConfig":
        """Insert or overwrite the value of ``key``."""
        self._values[key] = as_vector(value)
        return self

    def __getitem__(self, key: str) -> np.ndarray:
        try:
            return self._values[key]
        except KeyError:
            raise MissingParentValue(key) from None

    def get(self, key: str, default=None):
        return self._values.get(key, default)

    def contains(self, key: str) -> bool:
        return key in self._values

    def __contains__(self, key) -> bool:
        return key in self._values

    def keys(self):
        return self._values.keys()

    def items(self):
        return self._values.items()

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def dim(self) -> int:
        """Total dimension of all stored vectors."""
        return sum(value.shape[0] for value in self._values.values())

    def equals(self, other, tol: float = 1e-9) -> bool:
        if not isinstance(other, VectorConfig):
            return False
        if self._values.keys() != other._values.keys():
            return False
        return all(
            equal_with_abs_tol(value, other._values[key], tol)
            for key, value in self._values.items()
        )

    def print(self, label: str = "VectorConfig"):
        print(f"{label}:")
        for key in sorted(self._values):
            print_vector(self._values[key], key)

    def __repr__(self) -> str:
        values = {key: value.tolist() for key, value in self._values.items()}
        return f"VectorConfig({values!r})"
