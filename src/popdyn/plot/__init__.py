from .trajectory import plot_trajectory
from .bifurcation import plot_bifurcation
from .growth_rate import plot_growth_rate

__all__ = ["plot_trajectory", "plot_bifurcation", "plot_growth_rate"]
