#!/usr/bin/env python3
"""
Gaussian Bayes network package

Conditional Gaussian densities in square-root information form and the
back-substitution that solves a network of them
"""

from .errors import (
    GaussianBayesError,
    DimensionMismatch,
    MissingParentValue,
    SingularSystem
)
from .config import SolverConfig, DEFAULT_CONFIG
from .conditional import Conditional
from .conditional_gaussian import ConditionalGaussian
from .vector_config import VectorConfig
from .bayes_net import BayesNet
from .utils import backsubstitution, equal_with_abs_tol
from .utils.graph_utils import BayesNetFactory
from .utils.serialization import (
    conditional_to_dict,
    conditional_from_dict,
    save_conditional,
    load_conditional,
    bayes_net_to_dict,
    bayes_net_from_dict,
    save_bayes_net,
    load_bayes_net
)

__all__ = [
    'GaussianBayesError',
    'DimensionMismatch',
    'MissingParentValue',
    'SingularSystem',
    'SolverConfig',
    'DEFAULT_CONFIG',
    'Conditional',
    'ConditionalGaussian',
    'VectorConfig',
    'BayesNet',
    'BayesNetFactory',
    'backsubstitution',
    'equal_with_abs_tol',
    'conditional_to_dict',
    'conditional_from_dict',
    'save_conditional',
    'load_conditional',
    'bayes_net_to_dict',
    'bayes_net_from_dict',
    'save_bayes_net',
    'load_bayes_net'
]
