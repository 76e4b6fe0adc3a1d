import numpy as np
import pytest

from popdyn.analysis import fit_growth_rate_line, per_capita_growth_rate, theoretical_growth_rate_line
from popdyn.errors import DomainError, InvalidParameter
from popdyn.growth import Exponential, Ricker
from popdyn.simulate import simulate


def test_exponential_growth_rate_is_constant():
    trajectory = simulate(1, Exponential(R=2), 10)
    rates = per_capita_growth_rate(trajectory)

    assert rates.shape == (9,)
    assert np.allclose(rates, np.log(2))


def test_length_and_order():
    trajectory = np.array([1.0, 2.0, 1.0, 4.0])
    rates = per_capita_growth_rate(trajectory)
    assert np.allclose(rates, [np.log(2), -np.log(2), np.log(4)])


@pytest.mark.parametrize("r, K", [(0.5, 20), (1.8, 20), (2.9, 50)])
def test_growth_rate_reconstructs_trajectory(r, K):
    trajectory = simulate(1, Ricker(r=r, K=K), 200)
    rates = per_capita_growth_rate(trajectory)

    assert np.allclose(np.exp(rates) * trajectory[:-1], trajectory[1:], rtol=1e-12)


def test_ricker_growth_rate_lies_on_theoretical_line():
    r, K = 0.5, 20
    trajectory = simulate(1, Ricker(r=r, K=K), 40)
    rates = per_capita_growth_rate(trajectory)

    intercept, slope = theoretical_growth_rate_line(r, K)
    assert np.allclose(rates, intercept + slope * trajectory[:-1], atol=1e-12)


def test_fit_recovers_ricker_parameters():
    r, K = 2.2, 20
    trajectory = simulate(1, Ricker(r=r, K=K), 100)

    intercept, slope = fit_growth_rate_line(trajectory)
    assert np.isclose(intercept, r, atol=1e-8)
    assert np.isclose(slope, -r / K, atol=1e-8)


def test_fit_constant_trajectory():
    with pytest.raises(InvalidParameter):
        fit_growth_rate_line(np.array([20.0, 20.0, 20.0]))


def test_zero_value_raises_domain_error():
    trajectory = np.array([1.0, 2.0, 0.0, 3.0])
    with pytest.raises(DomainError) as e:
        per_capita_growth_rate(trajectory)

    assert e.value.index == 2
    assert e.value.value == 0.0


def test_negative_value_raises_domain_error():
    with pytest.raises(DomainError) as e:
        per_capita_growth_rate([-1.0, 2.0])
    assert e.value.index == 0


def test_zero_trajectory_raises_domain_error():
    trajectory = simulate(0, Ricker(r=0.5, K=20), 5)
    with pytest.raises(DomainError) as e:
        per_capita_growth_rate(trajectory)
    assert e.value.index == 0


@pytest.mark.parametrize("trajectory", [[], [1.0]])
def test_too_short(trajectory):
    with pytest.raises(InvalidParameter):
        per_capita_growth_rate(np.array(trajectory))


def test_theoretical_line():
    assert theoretical_growth_rate_line(0.5, 20) == (0.5, -0.025)
    with pytest.raises(InvalidParameter):
        theoretical_growth_rate_line(0.5, 0)
