#!/usr/bin/env python3
"""
Exceptions raised by Gaussian Bayes network components.
"""


class GaussianBayesError(Exception):
    """Base class for all errors raised by this package."""


class DimensionMismatch(GaussianBayesError, ValueError):
    """Matrix or vector shapes are inconsistent with each other."""


class MissingParentValue(GaussianBayesError, KeyError):
    """A variable value was requested that the assignment does not hold."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"no value for variable '{self.key}'"


class SingularSystem(GaussianBayesError, ArithmeticError):
    """The triangular factor has a zero or near-zero pivot."""
