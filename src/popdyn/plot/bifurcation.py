import matplotlib.pyplot as plt
import seaborn as sns

from popdyn.simulate import SweepResult
from popdyn.simulate.sweep import PARAM_COL, POPULATION_COL
from popdyn.style import BIFURCATION_COLOR


def plot_bifurcation(
    sweep: SweepResult,
    n_tail: int = 100,
    xlabel: str = "r",
    title: str | None = None,
    ax: plt.Axes | None = None,
) -> plt.Axes:
    """Scatter the last n_tail values of each row against the row's parameter value.

    Example:
    >>> sweep = ricker_sweep(np.linspace(1.5, 3.6, 300), K=20, n0=1, tmax=500)
    >>> plot_bifurcation(sweep, n_tail=100)
    """
    df = sweep.to_dataframe(tail=n_tail)

    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 4))

    sns.scatterplot(data=df, x=PARAM_COL, y=POPULATION_COL, ax=ax, s=2, color=BIFURCATION_COLOR, linewidth=0)

    ax.set_title(title or "bifurcation diagram")
    ax.set_xlabel(xlabel)
    ax.set_ylabel(f"population (last {n_tail} steps)")
    sns.despine(ax=ax)

    return ax
