#!/usr/bin/env python3
"""
Plotting of Gaussian Bayes networks.
Only drawing logic lives here, the algorithms are in separate modules.
"""

from typing import Dict

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from ..bayes_net import BayesNet


def compute_layout(G: nx.DiGraph) -> Dict[str, np.ndarray]:
    """Place nodes in columns by topological generation, parents to the left."""
    positions = {}
    for column, generation in enumerate(nx.topological_generations(G)):
        for row, node in enumerate(sorted(generation)):
            positions[node] = np.array([column, -row], dtype=float)
    return positions


def plot_bayes_net(bayes_net: BayesNet, ax=None, solution=None, title: str = "Gaussian Bayes Network"):
    """
    Draw the parent -> child structure of a Bayes network.

    Args:
        bayes_net: Network to draw
        ax: Matplotlib axes, a new figure is created if omitted
        solution: Optional VectorConfig whose values are added to the labels
        title: Axes title

    Returns:
        The axes drawn on
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 6))

    G = bayes_net.graph()
    positions = compute_layout(G)

    labels = {}
    for node in G.nodes():
        label = node
        if solution is not None and node in solution:
            values = np.array2string(solution[node], precision=2, suppress_small=True)
            label = f"{node}\n{values}"
        labels[node] = label

    # external parents are drawn in grey
    colors = ['lightgrey' if G.nodes[node].get('external') else 'lightblue' for node in G.nodes()]

    nx.draw_networkx_nodes(G, positions, ax=ax, node_color=colors, node_size=1400,
                           edgecolors='navy', linewidths=1.0)
    nx.draw_networkx_edges(G, positions, ax=ax, edge_color='navy', arrows=True,
                           arrowsize=15, node_size=1400)
    nx.draw_networkx_labels(G, positions, labels=labels, ax=ax, font_size=9)

    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.set_axis_off()
    return ax
