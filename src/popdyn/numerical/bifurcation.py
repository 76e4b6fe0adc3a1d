"""
Long-run behavior of trajectories: convergence, period detection and the
attractor values plotted in a bifurcation diagram.
"""

import numpy as np

from popdyn.errors import InvalidParameter
from popdyn.simulate import SweepResult


def tail(trajectory: np.ndarray, n: int) -> np.ndarray:
    """
    The last n values of a trajectory.
    """
    trajectory = np.asarray(trajectory)
    if n < 1 or n > trajectory.shape[0]:
        raise InvalidParameter(f"tail length must be in [1, {trajectory.shape[0]}], got {n}")
    return trajectory[-n:]


def has_converged(trajectory: np.ndarray, n_tail: int = 10, atol: float = 1e-6) -> bool:
    """
    True if the last n_tail values agree up to atol.
    """
    values = tail(trajectory, n_tail)
    if not np.all(np.isfinite(values)):
        return False
    return bool(np.ptp(values) <= atol)


def detect_period(
    trajectory: np.ndarray,
    max_period: int = 64,
    n_tail: int | None = None,
    atol: float = 1e-6,
) -> int:
    """Detect the period of the orbit at the end of a trajectory.

    A period p is accepted if every value in the tail equals the value p steps later.
    The transient must already be over, so use a long trajectory.

    Args:
        trajectory (np.ndarray): a trajectory, e.g a row of a SweepResult.
        max_period (int, optional): largest period tested. Defaults to 64.
        n_tail (int | None, optional): number of trailing values inspected. Defaults to 2 * max_period + 1, or the whole
            trajectory if shorter.
        atol (float, optional): tolerance for equality of values. Defaults to 1e-6.

    Returns:
        int: the smallest period, or -1 if chaotic or longer than max_period.
    """
    if max_period < 1:
        raise InvalidParameter(f"max_period must be at least 1, got {max_period}")
    trajectory = np.asarray(trajectory)
    if n_tail is None:
        n_tail = min(2 * max_period + 1, trajectory.shape[0])
    values = tail(trajectory, n_tail)
    if not np.all(np.isfinite(values)):
        return -1

    for p in range(1, min(max_period, values.shape[0] - 1) + 1):
        if np.allclose(values[p:], values[:-p], rtol=0, atol=atol):
            return p
    return -1


def attractor_values(sweep: SweepResult, n_tail: int = 100, decimals: int = 6) -> list[np.ndarray]:
    """
    Distinct tail values of every row of a sweep (rounded to decimals), in parameter order.
    A fixed point gives one value, a 2-cycle two values and chaos many.
    """
    return [np.unique(np.round(values, decimals)) for values in sweep.tail(n_tail)]


def periods(sweep: SweepResult, max_period: int = 64, atol: float = 1e-6) -> np.ndarray:
    """
    detect_period for every row of a sweep.
    """
    return np.array([detect_period(row, max_period=max_period, atol=atol) for _, row in sweep])
