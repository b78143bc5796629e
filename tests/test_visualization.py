import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from gaussian_bayes.bayes_net import BayesNet  # noqa: E402
from gaussian_bayes.conditional_gaussian import ConditionalGaussian  # noqa: E402
from gaussian_bayes.utils.graph_utils import BayesNetFactory  # noqa: E402
from gaussian_bayes.visualization import compute_layout, plot_bayes_net  # noqa: E402


def test_layout_puts_parents_left_of_children():
    G = BayesNetFactory.create_n_chain(3, seed=0).graph()
    positions = compute_layout(G)
    assert positions["x_2"][0] < positions["x_1"][0] < positions["x_0"][0]


def test_plot_bayes_net_labels_every_node():
    bayes_net = BayesNetFactory.create_simple_chain()
    solution = bayes_net.optimize()
    fig, ax = plt.subplots()
    try:
        returned = plot_bayes_net(bayes_net, ax=ax, solution=solution)
        assert returned is ax
        labels = sorted(text.get_text() for text in ax.texts)
        assert labels == ["x\n[4.]", "y\n[5.]"]
    finally:
        plt.close(fig)


def test_plot_bayes_net_with_external_parent():
    bayes_net = BayesNet([ConditionalGaussian.from_parent("x", [1.0], [[1.0]], "y", [[1.0]])])
    ax = plot_bayes_net(bayes_net)
    try:
        assert len(ax.texts) == 2
    finally:
        plt.close(ax.figure)
