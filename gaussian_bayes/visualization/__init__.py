#!/usr/bin/env python3
"""
Visualization modules for Gaussian Bayes networks
"""

from .bayes_net_plot import plot_bayes_net, compute_layout

__all__ = [
    'plot_bayes_net',
    'compute_layout'
]
