import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns

from popdyn.growth import GrowthLaw
from popdyn.numerical import fixed_points
from popdyn.style import TRAJECTORY_COLOR, STABILITIY_TYPE_TO_MARKER_STYLE_KWARGS


def plot_trajectory(
    trajectory: np.ndarray,
    label: str | None = None,
    law: GrowthLaw | None = None,
    title: str | None = None,
    ax: plt.Axes | None = None,
) -> plt.Axes:
    """Plot population against time step.

    Args:
        trajectory (np.ndarray): output of :func:`popdyn.simulate.simulate`.
        label (str | None, optional): legend label. Defaults to None.
        law (GrowthLaw | None, optional): if provided, mark the law's positive fixed points as horizontal lines.
        title (str | None, optional): alternative title for plot. Defaults to None.
        ax (plt.Axes | None, optional): axis to draw on. Defaults to a new figure.

    Example:
    >>> plot_trajectory(simulate(1, Ricker(r=0.5, K=20), 40), law=Ricker(r=0.5, K=20))
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 3))

    t = np.arange(len(trajectory))
    sns.lineplot(x=t, y=trajectory, ax=ax, label=label, color=TRAJECTORY_COLOR, marker="o", markersize=3)

    if law is not None:
        for p in fixed_points(law):
            if p["n"] > 0:
                ax.axhline(p["n"], color="black", linestyle="--", alpha=0.5)
                ax.plot([t[-1]], [p["n"]], **STABILITIY_TYPE_TO_MARKER_STYLE_KWARGS[p["stability"]])

    ax.set_title(title or "population trajectory")
    ax.set_xlabel("time (steps)")
    ax.set_ylabel("population")
    sns.despine(ax=ax)

    return ax
