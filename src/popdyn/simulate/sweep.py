"""
Parameter sweeps: one trajectory per parameter value, used for bifurcation diagrams.
"""

from collections.abc import Callable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pandas as pd
from tqdm import tqdm

from popdyn.errors import DomainError, InvalidParameter
from popdyn.growth import GrowthLaw, Ricker
from popdyn.log import logger
from popdyn.simulate.recurrence import simulate, validate_initial_population, validate_tsteps

PARAM_COL = "param"
TIME_COL = "t"
POPULATION_COL = "population"


class SweepResult:
    """
    Read-only matrix of trajectories, one row per parameter value.

    Row i holds the trajectory computed with params[i], rows keep the order of the
    input parameter sequence and all rows have the same length.
    """

    def __init__(self, params: np.ndarray, trajectories: np.ndarray) -> None:
        params = np.array(params, dtype=np.float64)
        trajectories = np.array(trajectories, dtype=np.float64)

        if params.ndim != 1 or trajectories.ndim != 2 or trajectories.shape[0] != params.shape[0]:
            raise InvalidParameter(
                f"expected one trajectory row per parameter value, got params {params.shape} "
                f"and trajectories {trajectories.shape}"
            )

        params.flags.writeable = False
        trajectories.flags.writeable = False
        self._params = params
        self._trajectories = trajectories

    @property
    def params(self) -> np.ndarray:
        return self._params

    @property
    def trajectories(self) -> np.ndarray:
        return self._trajectories

    @property
    def shape(self) -> tuple[int, int]:
        return self._trajectories.shape  # type: ignore

    @property
    def tmax(self) -> int:
        return self._trajectories.shape[1]

    def row(self, i: int) -> np.ndarray:
        return self._trajectories[i]

    def tail(self, n: int) -> np.ndarray:
        """
        The last n time steps of every row, shape (len(params), n).
        """
        if n < 1 or n > self.tmax:
            raise InvalidParameter(f"tail length must be in [1, {self.tmax}], got {n}")
        return self._trajectories[:, -n:]

    def to_dataframe(self, tail: int | None = None) -> pd.DataFrame:
        """Long-form table with one line per (parameter, time step).

        Args:
            tail (int | None, optional): keep only the last `tail` time steps of each row. Defaults to all steps.

        Returns:
            pd.DataFrame: columns ``param``, ``t`` and ``population``.
        """
        values = self._trajectories if tail is None else self.tail(tail)
        t = np.arange(self.tmax - values.shape[1], self.tmax)

        return pd.DataFrame(
            {
                PARAM_COL: np.repeat(self._params, values.shape[1]),
                TIME_COL: np.tile(t, values.shape[0]),
                POPULATION_COL: values.ravel(),
            }
        )

    def __len__(self) -> int:
        return self._params.shape[0]

    def __iter__(self) -> Iterator[tuple[float, np.ndarray]]:
        for p, trajectory in zip(self._params, self._trajectories):
            yield float(p), trajectory

    def __repr__(self) -> str:
        return f"SweepResult(n_params={len(self)}, tmax={self.tmax})"


def parameter_sweep(
    params: Sequence[float] | np.ndarray,
    law_factory: Callable[[float], GrowthLaw],
    n0: float,
    tmax: int,
    n_jobs: int = 1,
    verbose: bool = False,
) -> SweepResult:
    """Simulate one trajectory per parameter value.

    All laws are constructed before any trajectory is computed, so an invalid parameter
    value fails the sweep up front. A failure in any row fails the whole sweep.

    Args:
        params (Sequence[float]): ordered parameter values, duplicates are kept.
        law_factory (Callable[[float], GrowthLaw]): builds the growth law for one parameter value,
            e.g ``lambda r: Ricker(r, K=20)``.
        n0 (float): initial population shared by all rows.
        tmax (int): number of time steps per row.
        n_jobs (int, optional): number of threads computing rows. Defaults to 1.
        verbose (bool, optional): show a progress bar. Defaults to False.

    Returns:
        SweepResult: row i is ``simulate(n0, law_factory(params[i]), tmax)``.

    Raises:
        InvalidParameter: on an empty sweep, invalid n0 / tmax, or a parameter value the
            law rejects. The error names the failing parameter and its index.
        DomainError: if a row leaves the domain of the law, with the same parameter details.
    """
    params = np.asarray(params, dtype=np.float64)
    if params.ndim != 1 or params.shape[0] == 0:
        raise InvalidParameter(f"params must be a non-empty 1d sequence, got shape {params.shape}")
    tmax = validate_tsteps(tmax)
    n0 = validate_initial_population(n0)

    laws = []
    for i, p in enumerate(params):
        try:
            laws.append(law_factory(float(p)))
        except InvalidParameter as e:
            raise _with_param(InvalidParameter(f"sweep failed at params[{i}]={p}: {e}"), i, p) from e

    logger.debug(f"sweeping {len(laws)} parameter values, n0={n0}, tmax={tmax}, n_jobs={n_jobs}")

    def _row(i: int) -> np.ndarray:
        try:
            return simulate(n0, laws[i], tmax)
        except DomainError as e:
            err = DomainError(e.index, e.value, f"sweep failed at params[{i}]={params[i]}: {e}")
            raise _with_param(err, i, params[i]) from e

    idxs = range(len(laws))
    if n_jobs > 1:
        # map() yields results in submission order:
        with ThreadPoolExecutor(max_workers=n_jobs) as executor:
            rows = list(tqdm(executor.map(_row, idxs), total=len(laws), disable=not verbose))
    else:
        rows = [_row(i) for i in tqdm(idxs, disable=not verbose)]

    return SweepResult(params=params, trajectories=np.vstack(rows))


def ricker_sweep(
    r_values: Sequence[float] | np.ndarray,
    K: float,
    n0: float,
    tmax: int,
    n_jobs: int = 1,
    verbose: bool = False,
) -> SweepResult:
    """
    Sweep the intrinsic growth rate r of a Ricker law with fixed carrying capacity K.
    """
    return parameter_sweep(r_values, lambda r: Ricker(r=r, K=K), n0=n0, tmax=tmax, n_jobs=n_jobs, verbose=verbose)


def _with_param(err: Exception, i: int, p: float) -> Exception:
    err.param_index = i  # type: ignore
    err.param = float(p)  # type: ignore
    return err
