import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from popdyn.errors import DomainError
from popdyn.growth import Ricker
from popdyn.plot import plot_bifurcation, plot_growth_rate, plot_trajectory
from popdyn.simulate import ricker_sweep, simulate
from popdyn.style import set_style


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_plot_trajectory():
    set_style()
    law = Ricker(r=0.5, K=20)
    ax = plot_trajectory(simulate(1, law, 40), label="r=0.5", law=law)
    assert ax.get_xlabel() == "time (steps)"
    assert len(ax.lines) >= 1


def test_plot_bifurcation():
    sweep = ricker_sweep(np.linspace(1.5, 3.6, 20), K=20, n0=1, tmax=200)
    ax = plot_bifurcation(sweep, n_tail=50)
    assert len(ax.collections) == 1
    assert ax.collections[0].get_offsets().shape == (20 * 50, 2)


def test_plot_growth_rate():
    ax = plot_growth_rate(simulate(1, Ricker(r=0.5, K=20), 40), r=0.5, K=20)
    assert ax.get_ylabel() == "ln(N(t+1) / N(t))"


def test_plot_growth_rate_domain_error_draws_nothing():
    fig, ax = plt.subplots()
    with pytest.raises(DomainError):
        plot_growth_rate(np.array([1.0, 0.0, 2.0]), ax=ax)
    assert len(ax.collections) == 0
