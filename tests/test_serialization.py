import json

import numpy as np
import pytest

from gaussian_bayes.conditional_gaussian import ConditionalGaussian
from gaussian_bayes.config import DEFAULT_CONFIG, SolverConfig
from gaussian_bayes.errors import DimensionMismatch
from gaussian_bayes.utils.graph_utils import BayesNetFactory
from gaussian_bayes.utils.serialization import (
    bayes_net_from_dict,
    bayes_net_to_dict,
    conditional_from_dict,
    conditional_to_dict,
    load_bayes_net,
    load_conditional,
    save_bayes_net,
    save_conditional
)


def _conditional(nr_parents: int) -> ConditionalGaussian:
    rng = np.random.default_rng(nr_parents)
    R = np.triu(rng.normal(size=(3, 3))) + 3.0 * np.eye(3)
    d = rng.normal(size=3)
    precisions = rng.uniform(0.5, 2.0, size=3)
    parents = {f"p{i}": rng.normal(size=(3, i + 1)) for i in range(nr_parents)}
    return ConditionalGaussian("x", d, R, precisions, parents)


@pytest.mark.parametrize("nr_parents", [0, 1, 2, 5])
def test_dict_round_trip_is_exact(nr_parents):
    cg = _conditional(nr_parents)
    assert conditional_from_dict(conditional_to_dict(cg)).equals(cg, 0.0)


@pytest.mark.parametrize("nr_parents", [0, 1, 2, 5])
def test_json_round_trip_is_exact(nr_parents):
    cg = _conditional(nr_parents)
    text = json.dumps(conditional_to_dict(cg))
    assert conditional_from_dict(json.loads(text)).equals(cg, 0.0)


@pytest.mark.parametrize("nr_parents", [0, 1, 2, 5])
def test_npz_round_trip_is_exact(tmp_path, nr_parents):
    cg = _conditional(nr_parents)
    path = tmp_path / "conditional.npz"
    save_conditional(path, cg)
    assert load_conditional(path).equals(cg, 0.0)


def test_npz_round_trip_without_suffix(tmp_path):
    cg = _conditional(2)
    path = tmp_path / "conditional"
    save_conditional(path, cg)
    assert (tmp_path / "conditional.npz").exists()
    assert load_conditional(path).equals(cg, 0.0)
    assert load_conditional(tmp_path / "conditional.npz").equals(cg, 0.0)


def test_encoding_rejects_parent_with_wrong_rows(tmp_path):
    cg = ConditionalGaussian("x", [1.0, 2.0], np.eye(2))
    cg.add("y", np.ones((4, 1)))
    with pytest.raises(DimensionMismatch):
        conditional_to_dict(cg)
    with pytest.raises(DimensionMismatch):
        save_conditional(tmp_path / "bad.npz", cg)


def test_decoding_rejects_parent_with_wrong_rows():
    data = conditional_to_dict(ConditionalGaussian("x", [1.0, 2.0], np.eye(2)))
    data["parents"] = [["y", [[1.0], [2.0], [3.0], [4.0]]]]
    with pytest.raises(DimensionMismatch):
        conditional_from_dict(data)


def test_decoding_keeps_parent_without_columns():
    cg = ConditionalGaussian("x", [1.0, 2.0], np.eye(2), parents={"y": np.zeros((2, 0))})
    decoded = conditional_from_dict(conditional_to_dict(cg))
    assert decoded.parent_matrix("y").shape == (2, 0)
    assert decoded.equals(cg, 0.0)


def test_decoders_apply_given_config(tmp_path):
    config = SolverConfig(singular_tolerance=1e-3, equality_tolerance=1e-2)
    cg = _conditional(1)

    assert conditional_from_dict(conditional_to_dict(cg)).config == DEFAULT_CONFIG
    assert conditional_from_dict(conditional_to_dict(cg), config).config == config

    path = tmp_path / "conditional.npz"
    save_conditional(path, cg)
    assert load_conditional(path, config).config == config

    bayes_net = BayesNetFactory.create_n_chain(2, seed=0)
    decoded = bayes_net_from_dict(bayes_net_to_dict(bayes_net), config)
    assert decoded.config == config
    assert all(conditional.config == config for conditional in decoded)

    net_path = tmp_path / "net.json"
    save_bayes_net(net_path, bayes_net)
    assert load_bayes_net(net_path, config)["x_0"].config == config


def test_dict_fields():
    data = conditional_to_dict(_conditional(2))
    assert set(data) == {"key", "R", "d", "precisions", "parents"}
    assert [name for name, _ in data["parents"]] == ["p0", "p1"]


def test_from_dict_missing_field():
    data = conditional_to_dict(_conditional(1))
    del data["precisions"]
    with pytest.raises(ValueError, match="precisions"):
        conditional_from_dict(data)


def test_bayes_net_round_trip(tmp_path):
    bayes_net = BayesNetFactory.create_n_chain(4, dim=2, seed=3)
    assert bayes_net_from_dict(bayes_net_to_dict(bayes_net)).equals(bayes_net, 0.0)

    path = tmp_path / "net.json"
    save_bayes_net(path, bayes_net)
    loaded = load_bayes_net(path)
    assert loaded.equals(bayes_net, 0.0)
    assert loaded.ordering() == bayes_net.ordering()


def test_bayes_net_from_dict_missing_field():
    with pytest.raises(ValueError):
        bayes_net_from_dict({})
