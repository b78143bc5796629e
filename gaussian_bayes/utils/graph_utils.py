#!/usr/bin/env python3
"""
Construction of example Bayes networks for different topologies
"""

from typing import Optional

import numpy as np

from ..bayes_net import BayesNet
from ..conditional_gaussian import ConditionalGaussian


class BayesNetFactory:
    """Factory class for creating example Gaussian Bayes networks."""

    @staticmethod
    def create_bayes_net(graph_type: str, size: Optional[int] = None, dim: int = 2,
                         seed: Optional[int] = None) -> BayesNet:
        """Create Bayes network based on specified type."""
        if graph_type == "simple_chain":
            return BayesNetFactory.create_simple_chain()
        elif graph_type == "n_chain":
            length = size if size is not None else 5
            return BayesNetFactory.create_n_chain(length, dim=dim, seed=seed)
        else:
            raise ValueError(f"Unknown graph type: {graph_type}")

    @staticmethod
    def create_simple_chain() -> BayesNet:
        """
        Create the two-variable network x|y, y.

        |x + y - 9| and |y - 5| give the solution y = 5, x = 4.
        """
        bayes_net = BayesNet()
        bayes_net.push_back(ConditionalGaussian.from_parent(
            "x", [9.0], [[1.0]], "y", [[1.0]], [1.0]))
        bayes_net.push_back(ConditionalGaussian("y", [5.0], [[1.0]], [1.0]))
        return bayes_net

    @staticmethod
    def create_n_chain(n: int, dim: int = 2, seed: Optional[int] = None) -> BayesNet:
        """
        Create N-variable chain x_0 | x_1 | ... | x_{n-1}.

        Every R is upper triangular with diagonal entries in [1, 2] so the
        chain is always solvable.
        """
        if n < 1:
            raise ValueError("Chain needs at least one variable")

        rng = np.random.default_rng(seed)
        bayes_net = BayesNet()
        for i in range(n):
            R = np.triu(rng.uniform(-0.5, 0.5, size=(dim, dim)), k=1)
            R += np.diag(rng.uniform(1.0, 2.0, size=dim))
            d = rng.normal(size=dim)
            precisions = np.ones(dim)

            if i < n - 1:
                S = rng.normal(scale=0.5, size=(dim, dim))
                conditional = ConditionalGaussian.from_parent(
                    f"x_{i}", d, R, f"x_{i+1}", S, precisions)
            else:
                conditional = ConditionalGaussian(f"x_{i}", d, R, precisions)
            bayes_net.push_back(conditional)
        return bayes_net
