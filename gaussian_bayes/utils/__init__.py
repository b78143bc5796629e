#!/usr/bin/env python3
"""
Utility modules for Gaussian Bayes networks
"""

from .linear_algebra_utils import (
    as_matrix,
    as_vector,
    backsubstitution,
    equal_with_abs_tol,
    print_matrix,
    print_vector
)

__all__ = [
    'as_matrix',
    'as_vector',
    'backsubstitution',
    'equal_with_abs_tol',
    'print_matrix',
    'print_vector'
]
