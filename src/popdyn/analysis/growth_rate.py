"""
Per-capita growth rate analysis of a single trajectory.

For the Ricker law ln(N[t+1] / N[t]) = r - (r / K) * N[t], so plotting the per-capita
growth rate against N[t] gives a line with intercept r and slope -r/K.
"""

import numpy as np

from popdyn.errors import DomainError, InvalidParameter


def per_capita_growth_rate(trajectory: np.ndarray) -> np.ndarray:
    """Log-ratio of consecutive population values.

    Args:
        trajectory (np.ndarray): populations at consecutive time steps, length >= 2.

    Returns:
        np.ndarray: read-only array of length len(trajectory) - 1, where element i is
        ln(trajectory[i + 1]) - ln(trajectory[i]).

    Raises:
        InvalidParameter: if the trajectory has fewer than 2 values.
        DomainError: at the first value that is not strictly positive and finite.
    """
    n = _as_trajectory(trajectory)

    out_of_domain = ~(np.isfinite(n) & (n > 0))
    if out_of_domain.any():
        i = int(np.argmax(out_of_domain))
        raise DomainError(i, float(n[i]), f"log undefined for population {n[i]} at index {i}")

    log_n = np.log(n)
    rates = log_n[1:] - log_n[:-1]
    rates.flags.writeable = False
    return rates


def theoretical_growth_rate_line(r: float, K: float) -> tuple[float, float]:
    """
    (intercept, slope) of the Ricker per-capita growth rate as a function of N.
    """
    if K <= 0:
        raise InvalidParameter(f"carrying capacity K must be positive, got {K}")
    return r, -r / K


def fit_growth_rate_line(trajectory: np.ndarray) -> tuple[float, float]:
    """Least-squares line of the per-capita growth rate against the leading population values.

    Example:
    >>> traj = simulate(1, Ricker(r=0.5, K=20), tsteps=40)
    >>> fit_growth_rate_line(traj)  # ~ (0.5, -0.025)

    Returns:
        tuple[float, float]: (intercept, slope)
    """
    n = _as_trajectory(trajectory)
    rates = per_capita_growth_rate(n)
    x = n[:-1]

    if np.ptp(x) == 0:
        raise InvalidParameter("cannot fit a line to a trajectory with a single leading value")

    slope, intercept = np.polyfit(x, rates, deg=1)
    return float(intercept), float(slope)


def _as_trajectory(trajectory: np.ndarray) -> np.ndarray:
    n = np.asarray(trajectory, dtype=np.float64)
    if n.ndim != 1:
        raise InvalidParameter(f"expected a 1d trajectory, got shape {n.shape}")
    if n.shape[0] < 2:
        raise InvalidParameter(f"growth rate requires at least 2 time steps, got {n.shape[0]}")
    return n
