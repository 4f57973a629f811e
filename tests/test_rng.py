import math

import pytest

from power_pong.constants import SEED_STRIDE, SEED_WRAP
from power_pong.rng import advance_seed, bernoulli, gaussian, next_uniform


def test_next_uniform_is_one_lcg_step():
    assert next_uniform(1) == pytest.approx(1103527590 / 2147483647)


def test_next_uniform_stays_in_unit_interval():
    for seed in range(0, 5000, 7):
        assert 0.0 <= next_uniform(seed) <= 1.0


def test_draws_are_pure_functions_of_the_seed():
    assert next_uniform(670) == next_uniform(670)
    assert gaussian(670, 50, 200) == gaussian(670, 50, 200)


def test_gaussian_is_finite():
    for seed in range(1000):
        assert math.isfinite(gaussian(seed, 250, 300))


def test_gaussian_without_spread_is_the_mean():
    assert gaussian(12345, 0, 42.0) == 42.0


def test_gaussian_scales_with_variance():
    base = gaussian(99, 1, 0)
    assert gaussian(99, 30, 0) == pytest.approx(base * 30)


def test_bernoulli_edges():
    assert bernoulli(7, 1.1)
    assert not bernoulli(7, 0.0)


def test_advance_seed_steps_by_fixed_stride():
    assert advance_seed(1) == 1 + SEED_STRIDE


def test_advance_seed_wraps():
    assert advance_seed(SEED_WRAP - 1) == SEED_STRIDE - 1
