import numpy as np
import pytest

from popdyn.errors import DomainError, InvalidParameter
from popdyn.growth import Exponential, Logistic, Ricker
from popdyn.simulate import exponential_closed_form, simulate


def test_exponential_doubling():
    trajectory = simulate(1, Exponential(R=2), tsteps=10)
    assert np.array_equal(trajectory, [1, 2, 4, 8, 16, 32, 64, 128, 256, 512])


@pytest.mark.parametrize(
    "R, n0, tsteps",
    [
        (2.0, 1.0, 10),
        (0.5, 100.0, 30),
        (1.0, 7.0, 5),
        (1.07, 3.3, 200),
        (0.0, 5.0, 4),
    ],
)
def test_exponential_matches_closed_form(R, n0, tsteps):
    trajectory = simulate(n0, Exponential(R=R), tsteps)
    assert np.allclose(trajectory, exponential_closed_form(n0, R, tsteps), rtol=1e-12)


def test_trajectory_length_and_initial_value():
    trajectory = simulate(3.5, Ricker(r=1.2, K=10), tsteps=17)
    assert trajectory.shape == (17,)
    assert trajectory[0] == 3.5


def test_single_step_trajectory():
    trajectory = simulate(4, Ricker(r=1.2, K=10), tsteps=1)
    assert np.array_equal(trajectory, [4.0])


def test_ricker_converges_to_carrying_capacity():
    trajectory = simulate(1, Ricker(r=0.5, K=20), tsteps=40)

    # approaches K from below without overshoot:
    assert np.all(np.diff(trajectory) > 0)
    assert np.all(trajectory < 20)
    assert abs(trajectory[-1] - 20) < 1e-3


@pytest.mark.parametrize("r, K, n0", [(0.5, 20, 1), (0.3, 5, 9), (1.2, 100, 3)])
def test_ricker_fixed_point_is_carrying_capacity(r, K, n0):
    trajectory = simulate(n0, Ricker(r=r, K=K), tsteps=300)
    assert np.isclose(trajectory[-1], trajectory[-2])
    assert np.isclose(trajectory[-1], K)


def test_simulation_is_deterministic():
    law = Ricker(r=3.0, K=20)  # chaotic regime
    a = simulate(1, law, 500)
    b = simulate(1, law, 500)
    assert a.tobytes() == b.tobytes()


@pytest.mark.parametrize("law", [Exponential(R=3), Ricker(r=2.5, K=20), Logistic(r=1.5, K=20)])
def test_zero_population_stays_zero(law):
    trajectory = simulate(0, law, tsteps=25)
    assert trajectory.shape == (25,)
    assert np.all(trajectory == 0)


@pytest.mark.parametrize("r", [750.0, 1e4])
def test_zero_population_stays_zero_for_large_growth_rate(r):
    trajectory = simulate(0, Ricker(r=r, K=20), tsteps=4)
    assert np.array_equal(trajectory, [0.0, 0.0, 0.0, 0.0])


def test_trajectory_is_read_only():
    trajectory = simulate(1, Exponential(R=2), 5)
    with pytest.raises(ValueError):
        trajectory[0] = 10


@pytest.mark.parametrize("tsteps", [0, -3, 2.5, "10", True])
def test_invalid_tsteps(tsteps):
    with pytest.raises(InvalidParameter):
        simulate(1, Exponential(R=2), tsteps)


def test_numpy_integer_tsteps():
    assert simulate(1, Exponential(R=2), np.int64(3)).shape == (3,)


@pytest.mark.parametrize("n0", [-1, np.nan, np.inf, "10", True, None])
def test_invalid_initial_population(n0):
    with pytest.raises(InvalidParameter):
        simulate(n0, Exponential(R=2), 5)


def test_zero_carrying_capacity():
    with pytest.raises(InvalidParameter):
        simulate(1, Ricker(r=0.5, K=0), 10)


def test_law_must_be_growth_law():
    with pytest.raises(InvalidParameter):
        simulate(1, lambda n: 2 * n, 10)  # type: ignore


def test_logistic_negative_population():
    # 1 + 3 * 50 * (1 - 50 / 20) < 0
    with pytest.raises(DomainError) as e:
        simulate(50, Logistic(r=3, K=20), 10)
    assert e.value.index == 1
    assert e.value.value < 0


def test_exponential_overflow_is_not_an_error():
    trajectory = simulate(1, Exponential(R=1e10), 100)
    assert np.isinf(trajectory[-1])


def test_numpy_initial_population():
    trajectory = simulate(np.float64(2.5), Exponential(R=2), 3)
    assert np.array_equal(trajectory, [2.5, 5.0, 10.0])
