"""
Dictionary configuration for single runs and parameter sweeps.

A run config:

    >>> {
    >>>     "initial_population": 1,
    >>>     "growth_law": {"name": "ricker", "r": 0.5, "K": 20},
    >>>     "tsteps": 40,
    >>> }

A sweep config (varies r of the law with a fixed K):

    >>> {
    >>>     "parameter_values": np.linspace(1.5, 3.6, 300),
    >>>     "fixed_K": 20,
    >>>     "initial_population": 1,
    >>>     "tsteps": 500,
    >>> }
"""

from collections.abc import Mapping

import numpy as np
from frozendict import frozendict

from popdyn.errors import InvalidParameter
from popdyn.growth import GROWTH_LAWS, GrowthLaw
from popdyn.simulate import SweepResult, parameter_sweep, simulate

DEFAULT_RUN_CONFIG = frozendict(
    {
        "initial_population": 1.0,
        "growth_law": frozendict({"name": "ricker", "r": 0.5, "K": 20.0}),
        "tsteps": 40,
    }
)

DEFAULT_SWEEP_CONFIG = frozendict(
    {
        "parameter_values": tuple(np.linspace(1.5, 3.6, 300)),
        "fixed_K": 20.0,
        "initial_population": 1.0,
        "tsteps": 500,
        "law": "ricker",
        "n_jobs": 1,
    }
)

# laws a sweep can vary r for:
_SWEEPABLE_LAWS = ("ricker", "logistic")


def law_from_config(config: Mapping) -> GrowthLaw:
    """Construct a growth law from e.g ``{"name": "exponential", "R": 2}``.

    Raises:
        InvalidParameter: on an unknown name, or missing / unexpected parameters.
    """
    config = dict(config)
    name = str(config.pop("name", "")).lower()
    if name not in GROWTH_LAWS:
        raise InvalidParameter(f"unknown growth law {name!r}, expected one of {sorted(GROWTH_LAWS)}")

    try:
        return GROWTH_LAWS[name](**config)
    except TypeError as e:
        raise InvalidParameter(f"invalid parameters for growth law {name!r}: {config}") from e


def run_from_config(config: Mapping = DEFAULT_RUN_CONFIG) -> np.ndarray:
    """
    Simulate a single trajectory from a run config.
    """
    n0, growth_law, tsteps = _require(config, "initial_population", "growth_law", "tsteps")
    return simulate(n0, law_from_config(growth_law), tsteps)


def sweep_from_config(config: Mapping = DEFAULT_SWEEP_CONFIG) -> SweepResult:
    """
    Run a parameter sweep over r with a fixed carrying capacity from a sweep config.
    """
    params, K, n0, tsteps = _require(config, "parameter_values", "fixed_K", "initial_population", "tsteps")

    name = str(config.get("law", "ricker")).lower()
    if name not in _SWEEPABLE_LAWS:
        raise InvalidParameter(f"cannot sweep r of growth law {name!r}, expected one of {_SWEEPABLE_LAWS}")
    law_class = GROWTH_LAWS[name]

    return parameter_sweep(
        params,
        lambda r: law_class(r=r, K=K),  # type: ignore
        n0=n0,
        tmax=tsteps,
        n_jobs=config.get("n_jobs", 1),
    )


def _require(config: Mapping, *keys: str) -> list:
    missing = [k for k in keys if k not in config]
    if missing:
        raise InvalidParameter(f"config is missing keys: {missing}")
    return [config[k] for k in keys]
