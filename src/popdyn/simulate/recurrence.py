"""
Code for computing population trajectories by iterating a growth law.
"""

import numbers

import numpy as np

from popdyn.errors import DomainError, InvalidParameter
from popdyn.growth import GrowthLaw
from popdyn.log import logger


def simulate(n0: float, law: GrowthLaw, tsteps: int) -> np.ndarray:
    """Iterate a growth law starting from n0.

    Args:
        n0 (float): initial population, must be non-negative. A zero population stays zero.
        law (GrowthLaw): the map applied at each time step.
        tsteps (int): length of the trajectory, including the initial value.

    Returns:
        np.ndarray: read-only trajectory of length tsteps, with trajectory[0] == n0
        and trajectory[i + 1] == law(trajectory[i]).

    Raises:
        InvalidParameter: if tsteps < 1, n0 is negative or not finite, or law is not a GrowthLaw.
        DomainError: if the law maps a population to a negative value (possible for Logistic).

    Example:
    >>> simulate(1, Exponential(R=2), tsteps=4)
    array([1., 2., 4., 8.])
    """
    tsteps = validate_tsteps(tsteps)
    n0 = validate_initial_population(n0)
    if not isinstance(law, GrowthLaw):
        raise InvalidParameter(f"law must be a GrowthLaw, got {type(law).__name__}")

    logger.debug(f"simulating {law} from n0={n0} for {tsteps} steps")

    trajectory = np.empty(tsteps, dtype=np.float64)
    trajectory[0] = n0

    n = n0
    for t in range(1, tsteps):
        n = float(law(n))
        if n < 0:
            raise DomainError(t, n, f"{law} produced a negative population {n} at time step {t}")
        trajectory[t] = n

    if not np.all(np.isfinite(trajectory)):
        first = int(np.argmin(np.isfinite(trajectory)))
        logger.warning(f"{law} overflowed at time step {first}, trajectory contains non-finite values")

    trajectory.flags.writeable = False
    return trajectory


def exponential_closed_form(n0: float, R: float, tsteps: int) -> np.ndarray:
    """
    N0 * R^i for i in 0..tsteps-1, the solution of the exponential recurrence.
    """
    tsteps = validate_tsteps(tsteps)
    n0 = validate_initial_population(n0)
    return n0 * np.power(float(R), np.arange(tsteps, dtype=np.float64))


def validate_tsteps(tsteps: int) -> int:
    if isinstance(tsteps, bool) or not isinstance(tsteps, numbers.Integral):
        raise InvalidParameter(f"tsteps must be an integer, got {tsteps!r}")
    if tsteps < 1:
        raise InvalidParameter(f"tsteps must be at least 1, got {tsteps}")
    return int(tsteps)


def validate_initial_population(n0: float) -> float:
    if isinstance(n0, bool) or not isinstance(n0, numbers.Real):
        raise InvalidParameter(f"initial population must be a real number, got {n0!r}")
    n0 = float(n0)
    if not np.isfinite(n0) or n0 < 0:
        raise InvalidParameter(f"initial population must be finite and non-negative, got {n0}")
    return n0
