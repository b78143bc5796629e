#!/usr/bin/env python3
"""
Encoding and decoding of conditionals and Bayes networks.

A conditional is stored as its key, R, d, precisions and the list of
(parent key, matrix) pairs. Values are written as float64 so that decoding
reproduces the original bit for bit.

The SolverConfig of a conditional is not stored. Decoders take an optional
``config`` that is given to every decoded conditional, DEFAULT_CONFIG when
omitted.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

from ..bayes_net import BayesNet
from ..conditional_gaussian import ConditionalGaussian
from ..config import SolverConfig
from ..errors import DimensionMismatch

logger = logging.getLogger(__name__)

FIELDS = ("key", "R", "d", "precisions", "parents")


def _npz_path(path) -> Path:
    """Path as written by np.savez_compressed, which appends .npz when missing."""
    path = Path(path)
    if path.suffix != ".npz":
        path = path.with_name(path.name + ".npz")
    return path


def _checked_parents(conditional: ConditionalGaussian):
    """(name, matrix) pairs sorted by name, each checked against dim()."""
    return [(name, conditional.check_parent(name)) for name in sorted(conditional.parents())]


def conditional_to_dict(conditional: ConditionalGaussian) -> Dict[str, Any]:
    """
    Encode a conditional as plain Python lists and floats.

    Raises:
        DimensionMismatch: a parent matrix added with add() does not fit
    """
    return {
        "key": conditional.key,
        "R": conditional.R.tolist(),
        "d": conditional.d.tolist(),
        "precisions": conditional.precisions.tolist(),
        "parents": [[name, A.tolist()] for name, A in _checked_parents(conditional)],
    }


def conditional_from_dict(data: Dict[str, Any],
                          config: Optional[SolverConfig] = None) -> ConditionalGaussian:
    """
    Decode a conditional written by conditional_to_dict.

    Raises:
        ValueError: a field is missing
        DimensionMismatch: the stored arrays are inconsistent
    """
    missing = [field for field in FIELDS if field not in data]
    if missing:
        raise ValueError(f"Conditional record is missing fields: {', '.join(missing)}")

    # an empty matrix decodes as shape (0,), keep it two-dimensional
    n = len(data["d"])
    R = np.asarray(data["R"], dtype=np.float64)
    if R.size == 0:
        R = R.reshape(n, n)
    parents = {}
    for name, A in data["parents"]:
        A = np.asarray(A, dtype=np.float64)
        if A.size == 0 and A.ndim < 2:
            A = A.reshape(n, 0)
        if A.ndim != 2 or A.shape[0] != n:
            raise DimensionMismatch(
                f"{data['key']}: parent '{name}' matrix has shape {A.shape}, expected {n} rows"
            )
        parents[name] = A

    return ConditionalGaussian(
        data["key"],
        np.asarray(data["d"], dtype=np.float64),
        R,
        np.asarray(data["precisions"], dtype=np.float64),
        parents,
        config,
    )


def save_conditional(path, conditional: ConditionalGaussian):
    """Write a conditional to a compressed .npz archive, adding the suffix if missing."""
    path = _npz_path(path)
    parents = _checked_parents(conditional)
    arrays = {
        "key": np.array(conditional.key),
        "R": conditional.R,
        "d": conditional.d,
        "precisions": conditional.precisions,
        "parent_names": np.array([name for name, _ in parents], dtype=str),
    }
    for i, (_, A) in enumerate(parents):
        arrays[f"parent_{i}"] = A
    np.savez_compressed(path, **arrays)
    logger.debug("Saved conditional on '%s' to %s", conditional.key, path)


def load_conditional(path, config: Optional[SolverConfig] = None) -> ConditionalGaussian:
    """Read a conditional written by save_conditional, with the same path."""
    path = _npz_path(path)
    with np.load(path, allow_pickle=False) as z:
        names = [str(name) for name in z["parent_names"]]
        parents = {name: np.asarray(z[f"parent_{i}"], dtype=np.float64)
                   for i, name in enumerate(names)}
        conditional = ConditionalGaussian(
            str(z["key"]),
            np.asarray(z["d"], dtype=np.float64),
            np.asarray(z["R"], dtype=np.float64),
            np.asarray(z["precisions"], dtype=np.float64),
            parents,
            config,
        )
    logger.debug("Loaded conditional on '%s' from %s", conditional.key, path)
    return conditional


def bayes_net_to_dict(bayes_net: BayesNet) -> Dict[str, Any]:
    """Encode a Bayes network, conditionals in elimination order."""
    return {"conditionals": [conditional_to_dict(conditional) for conditional in bayes_net]}


def bayes_net_from_dict(data: Dict[str, Any], config: Optional[SolverConfig] = None) -> BayesNet:
    if "conditionals" not in data:
        raise ValueError("Bayes network record is missing field: conditionals")
    return BayesNet(
        (conditional_from_dict(record, config) for record in data["conditionals"]),
        config,
    )


def save_bayes_net(path, bayes_net: BayesNet):
    """Write a Bayes network to a JSON file."""
    path = Path(path)
    with path.open("w") as f:
        json.dump(bayes_net_to_dict(bayes_net), f, indent=2)
    logger.debug("Saved Bayes network with %d conditionals to %s", len(bayes_net), path)


def load_bayes_net(path, config: Optional[SolverConfig] = None) -> BayesNet:
    path = Path(path)
    with path.open() as f:
        bayes_net = bayes_net_from_dict(json.load(f), config)
    logger.debug("Loaded Bayes network with %d conditionals from %s", len(bayes_net), path)
    return bayes_net
