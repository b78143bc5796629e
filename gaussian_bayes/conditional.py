#!/usr/bin/env python3
"""
Base class for conditional densities in a Bayes network
"""


class Conditional:
    """
    A conditional density on a single variable, identified by its key.

    Concrete densities set ``variant`` to a tag of their own. Equality first
    compares tags and keys here, so subclasses only compare their own fields
    once the base check has passed.
    """

    variant = "conditional"

    def __init__(self, key: str):
        self._key = key

    @property
    def key(self) -> str:
        """Key of the variable this conditional is defined on."""
        return self._key

    def equals(self, other, tol: float = 1e-9) -> bool:
        """Check that ``other`` is the same kind of conditional on the same key."""
        if not isinstance(other, Conditional):
            return False
        if self.variant != other.variant:
            return False
        return self._key == other._key

    def print(self, label: str = "Conditional"):
        print(f"{label}: key = {self._key}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r})"
