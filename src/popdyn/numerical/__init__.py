"""
Modules that perform numerical computations on growth laws and trajectories.
    - :mod:`fixed_points.py` computes fixed points of a growth law and classifies their stability.
    - :mod:`bifurcation.py` contains logic for the long-run behavior of trajectories,
        such as convergence, period detection and attractor values of a parameter sweep.
"""

from .fixed_points import STABLE, SEMI_STABLE, UNSTABLE, fixed_points, classified_fixed_points
from .bifurcation import tail, has_converged, detect_period, attractor_values, periods

__all__ = [
    "STABLE",
    "SEMI_STABLE",
    "UNSTABLE",
    "fixed_points",
    "classified_fixed_points",
    "tail",
    "has_converged",
    "detect_period",
    "attractor_values",
    "periods",
]
