"""
Fixed points of one-dimensional maps and their linear stability.
"""

import numpy as np

from popdyn.growth import GrowthLaw

STABLE = "stable"
SEMI_STABLE = "semi-stable"
UNSTABLE = "unstable"


def classify_multiplier(multiplier: float, eps: float = 1e-12) -> str:
    """
    A fixed point of a map is stable if |f'(n*)| < 1 and unstable if |f'(n*)| > 1.
    """
    m = abs(multiplier)
    if np.isclose(m, 1, rtol=0, atol=eps):
        return SEMI_STABLE
    return STABLE if m < 1 else UNSTABLE


def fixed_points(law: GrowthLaw) -> list[dict]:
    """Fixed points of a growth law.

    Example:
    >>> fixed_points(Ricker(r=0.5, K=20))
    [{'n': 0.0, 'multiplier': 1.648..., 'stability': 'unstable'},
     {'n': 20.0, 'multiplier': 0.5, 'stability': 'stable'}]

    Returns:
        list[dict]: one dict per fixed point with keys ``n``, ``multiplier`` (the derivative
        of the map at the point) and ``stability``.
    """
    points = []
    for n in law.fixed_points():
        multiplier = float(law.derivative(n))
        points.append({"n": float(n), "multiplier": multiplier, "stability": classify_multiplier(multiplier)})
    return points


def classified_fixed_points(law: GrowthLaw) -> dict[str, list[float]]:
    """
    Fixed point values grouped by stability type.
    """
    points_dict: dict[str, list[float]] = {STABLE: [], SEMI_STABLE: [], UNSTABLE: []}
    for p in fixed_points(law):
        points_dict[p["stability"]].append(p["n"])
    return points_dict
