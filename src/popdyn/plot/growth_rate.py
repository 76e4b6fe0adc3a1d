import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns

from popdyn.analysis import per_capita_growth_rate, theoretical_growth_rate_line
from popdyn.style import TRAJECTORY_COLOR, THEORY_COLOR


def plot_growth_rate(
    trajectory: np.ndarray,
    r: float | None = None,
    K: float | None = None,
    title: str | None = None,
    ax: plt.Axes | None = None,
) -> plt.Axes:
    """Plot the per-capita growth rate against population size.

    Args:
        trajectory (np.ndarray): a trajectory with positive values.
        r (float | None, optional): Ricker growth rate for the theoretical line. Defaults to None.
        K (float | None, optional): Ricker carrying capacity for the theoretical line. Defaults to None.
        title (str | None, optional): alternative title for plot. Defaults to None.
        ax (plt.Axes | None, optional): axis to draw on. Defaults to a new figure.
    """
    # computed before drawing so errors never leave a half drawn plot:
    rates = per_capita_growth_rate(trajectory)
    n = np.asarray(trajectory)[:-1]
    line = None if (r is None or K is None) else theoretical_growth_rate_line(r, K)

    if ax is None:
        fig, ax = plt.subplots(figsize=(4, 4))

    sns.scatterplot(x=n, y=rates, ax=ax, color=TRAJECTORY_COLOR, label="simulation")

    if line is not None:
        intercept, slope = line
        x = np.linspace(0, max(n.max(), K), 100)  # type: ignore
        ax.plot(x, intercept + slope * x, color=THEORY_COLOR, linestyle="--", label="r - (r/K) N")

    ax.axhline(0, color="black", linewidth=0.5)
    ax.set_title(title or "per-capita growth rate")
    ax.set_xlabel("population N(t)")
    ax.set_ylabel("ln(N(t+1) / N(t))")
    ax.legend()
    sns.despine(ax=ax)

    return ax
