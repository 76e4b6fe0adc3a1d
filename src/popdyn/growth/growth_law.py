"""
Growth laws map the population at time t to the population at time t+1.

A GrowthLaw is a stateless callable holding its parameters. The simulator only
ever calls ``law(n)``, so new laws are added by subclassing GrowthLaw.
"""

import math
from abc import ABC, abstractmethod

import numpy as np

from popdyn.errors import InvalidParameter


def _finite(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameter(f"{name} must be a real number, got {value!r}") from e
    if not math.isfinite(value):
        raise InvalidParameter(f"{name} must be finite, got {value}")
    return value


def _positive_carrying_capacity(K: float) -> float:
    K = _finite("K", K)
    if K <= 0:
        raise InvalidParameter(f"carrying capacity K must be positive, got {K}")
    return K


class GrowthLaw(ABC):
    """
    Base class for all growth laws.

    Subclasses implement the map itself (:meth:`step`), its derivative and its
    fixed points. Parameters are validated in ``__init__`` so an invalid law can
    never reach the simulator.
    """

    name: str = ""

    def __call__(self, n: float) -> float:
        return self.step(n)

    @abstractmethod
    def step(self, n: float) -> float:
        """
        Population at the next time step given population n.
        """
        raise NotImplementedError

    @abstractmethod
    def derivative(self, n: float) -> float:
        """
        d(step)/dn evaluated at n.
        """
        raise NotImplementedError

    @abstractmethod
    def fixed_points(self) -> list[float]:
        """
        Values n* with step(n*) == n*, in increasing order.
        """
        raise NotImplementedError

    @abstractmethod
    def params(self) -> dict[str, float]:
        raise NotImplementedError

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.params() == other.params()

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(sorted(self.params().items()))))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.params().items())
        return f"{type(self).__name__}({args})"


class Exponential(GrowthLaw):
    """
    Exponential (geometric) growth: N_next = R * N

    Args:
        R (float): finite rate of increase, must be non-negative.
    """

    name = "exponential"

    def __init__(self, R: float) -> None:
        R = _finite("R", R)
        if R < 0:
            raise InvalidParameter(f"finite rate of increase R must be non-negative, got {R}")
        self._R = R

    @property
    def R(self) -> float:
        return self._R

    def step(self, n: float) -> float:
        return self._R * n

    def derivative(self, n: float) -> float:
        return self._R

    def fixed_points(self) -> list[float]:
        # R == 1 makes every value a fixed point, 0 is reported as the representative.
        return [0.0]

    def params(self) -> dict[str, float]:
        return {"R": self._R}


class Ricker(GrowthLaw):
    """
    Ricker density dependence: N_next = N * exp(r * (1 - N / K))

    Args:
        r (float): intrinsic growth rate.
        K (float): carrying capacity, must be positive.
    """

    name = "ricker"

    def __init__(self, r: float, K: float) -> None:
        self._r = _finite("r", r)
        self._K = _positive_carrying_capacity(K)

    @property
    def r(self) -> float:
        return self._r

    @property
    def K(self) -> float:
        return self._K

    def step(self, n: float) -> float:
        # exp(r) overflows for large r, and 0 * inf is nan:
        if n == 0:
            return 0.0
        return n * np.exp(self._r * (1 - n / self._K))

    def derivative(self, n: float) -> float:
        return np.exp(self._r * (1 - n / self._K)) * (1 - self._r * n / self._K)

    def fixed_points(self) -> list[float]:
        if self._r == 0:
            return [0.0]
        return [0.0, self._K]

    def params(self) -> dict[str, float]:
        return {"r": self._r, "K": self._K}


class Logistic(GrowthLaw):
    """
    Discrete logistic growth: N_next = N + r * N * (1 - N / K)

    The population-scaled form of the logistic map x_next = (1 + r) * x * (1 - x),
    with x = r * N / ((1 + r) * K).

    Note:
        For large r, or for N far above K, the next value can be negative.
        The simulator reports this as a DomainError instead of clamping.

    Args:
        r (float): intrinsic growth rate.
        K (float): carrying capacity, must be positive.
    """

    name = "logistic"

    def __init__(self, r: float, K: float) -> None:
        self._r = _finite("r", r)
        self._K = _positive_carrying_capacity(K)

    @property
    def r(self) -> float:
        return self._r

    @property
    def K(self) -> float:
        return self._K

    def step(self, n: float) -> float:
        return n + self._r * n * (1 - n / self._K)

    def derivative(self, n: float) -> float:
        return 1 + self._r - 2 * self._r * n / self._K

    def fixed_points(self) -> list[float]:
        if self._r == 0:
            return [0.0]
        return [0.0, self._K]

    def params(self) -> dict[str, float]:
        return {"r": self._r, "K": self._K}
