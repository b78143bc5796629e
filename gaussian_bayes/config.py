#!/usr/bin/env python3
"""
Numerical configuration shared by conditionals and Bayes networks
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """
    Tolerances and display settings

    Fields:
        singular_tolerance: Pivots with |R_ii| at or below this are singular
        equality_tolerance: Default absolute tolerance used by equals()
        print_precision: Digits shown by diagnostic dumps
    """

    singular_tolerance: float = 1e-12
    equality_tolerance: float = 1e-9
    print_precision: int = 6

    def __post_init__(self) -> None:
        if self.singular_tolerance < 0.0:
            raise ValueError("singular_tolerance must be non-negative")
        if self.equality_tolerance < 0.0:
            raise ValueError("equality_tolerance must be non-negative")
        if self.print_precision <= 0:
            raise ValueError("print_precision must be positive")


DEFAULT_CONFIG = SolverConfig()
