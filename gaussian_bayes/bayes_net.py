#!/usr/bin/env python3
"""
Gaussian Bayes network: conditionals stored in elimination order and the
back-substitution pass that turns them into a solution.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import networkx as nx
import numpy as np

from .config import DEFAULT_CONFIG, SolverConfig
from .conditional_gaussian import ConditionalGaussian
from .vector_config import VectorConfig

logger = logging.getLogger(__name__)


class BayesNet:
    """Chain of conditional Gaussians produced by sequential elimination."""

    def __init__(self, conditionals: Optional[Iterable[ConditionalGaussian]] = None,
                 config: Optional[SolverConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._order: List[str] = []
        self._conditionals: Dict[str, ConditionalGaussian] = {}
        for conditional in conditionals or []:
            self.push_back(conditional)

    def _check_new(self, conditional: ConditionalGaussian):
        if conditional.key in self._conditionals:
            raise ValueError(f"Bayes network already has a conditional on '{conditional.key}'")

    def push_back(self, conditional: ConditionalGaussian):
        """Append a conditional, i.e. a variable eliminated after all others."""
        self._check_new(conditional)
        self._order.append(conditional.key)
        self._conditionals[conditional.key] = conditional

    def push_front(self, conditional: ConditionalGaussian):
        """Prepend a conditional, i.e. a variable eliminated before all others."""
        self._check_new(conditional)
        self._order.insert(0, conditional.key)
        self._conditionals[conditional.key] = conditional

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[ConditionalGaussian]:
        return (self._conditionals[key] for key in self._order)

    def __getitem__(self, key: str) -> ConditionalGaussian:
        return self._conditionals[key]

    def __contains__(self, key) -> bool:
        return key in self._conditionals

    def keys(self) -> List[str]:
        return list(self._order)

    def ordering(self) -> List[str]:
        """Elimination order of the variables."""
        return list(self._order)

    def dim(self) -> int:
        return sum(conditional.dim() for conditional in self)

    def graph(self) -> nx.DiGraph:
        """
        Directed graph with an edge from every parent to its child.

        Parents without a conditional in this network are marked with
        ``external=True``.
        """
        G = nx.DiGraph()
        for key in self._order:
            G.add_node(key, external=False)
        for conditional in self:
            for parent in conditional.parents():
                if parent not in G:
                    G.add_node(parent, external=True)
                G.add_edge(parent, conditional.key)
        return G

    def solve_order(self) -> List[str]:
        """
        Order in which conditionals can be solved, parents before children.

        This is the reverse elimination order whenever that order is valid.

        Raises:
            ValueError: the parent relation contains a cycle
        """
        rank = {key: i for i, key in enumerate(reversed(self._order))}
        G = self.graph()
        try:
            order = list(nx.lexicographical_topological_sort(
                G, key=lambda node: rank.get(node, -1)))
        except nx.NetworkXUnfeasible:
            raise ValueError("Bayes network contains a cycle") from None
        return [key for key in order if key in self._conditionals]

    def optimize(self, initial=None) -> VectorConfig:
        """
        Back-substitution: solve every conditional given its solved parents.

        Args:
            initial: Values of parents that have no conditional in this network

        Returns:
            VectorConfig with a value for every variable

        Raises:
            MissingParentValue: an external parent has no value in ``initial``
            SingularSystem: a conditional has a vanishing pivot
        """
        result = VectorConfig(initial)
        for key in self.solve_order():
            result.insert(key, self._conditionals[key].solve(result))
        logger.debug("Solved %d conditionals", len(self._order))
        return result

    def to_matrix(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Stack the network into one upper-triangular system R x = d.

        Columns follow the elimination order.

        Raises:
            ValueError: a parent has no conditional in this network
        """
        offsets = {}
        n = 0
        for conditional in self:
            offsets[conditional.key] = n
            n += conditional.dim()

        R = np.zeros((n, n))
        d = np.zeros(n)
        for conditional in self:
            i = offsets[conditional.key]
            rows = slice(i, i + conditional.dim())
            R[rows, rows] = conditional.R
            d[rows] = conditional.d
            for parent, A in conditional.items():
                if parent not in offsets:
                    raise ValueError(f"Parent '{parent}' of '{conditional.key}' is not in the network")
                j = offsets[parent]
                R[rows, j:j + A.shape[1]] = A
        return R, d

    def equals(self, other, tol: Optional[float] = None) -> bool:
        if tol is None:
            tol = self.config.equality_tolerance
        if not isinstance(other, BayesNet):
            return False
        if self._order != other._order:
            return False
        return all(self[key].equals(other[key], tol) for key in self._order)

    def print(self, label: str = "BayesNet"):
        print(f"{label}: {len(self)} conditionals")
        for conditional in self:
            conditional.print(f"{label}[{conditional.key}]")
