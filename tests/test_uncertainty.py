import numpy as np
import pytest
from scipy.stats import norm, uniform

from tesystems.exceptions import ValidationError
from tesystems.uncertainty import (
    DistributedValue,
    FixedValue,
    MixtureValue,
    UncertainValue,
    get_rng,
    sample_initial_condition,
)


def test_fixed_value_always_returns_value():
    """A number is wrapped as a FixedValue and sampled unchanged."""
    rng = np.random.default_rng(0)
    v = UncertainValue(2.5)

    assert isinstance(v, FixedValue)
    assert v.sample(rng) == 2.5
    assert np.array_equal(v.sample(rng, size=4), np.full(4, 2.5))


def test_distribution_is_sampled_within_support():
    """A frozen scipy distribution becomes a DistributedValue."""
    rng = np.random.default_rng(1)
    v = UncertainValue(uniform(2.0, 1.0))

    assert isinstance(v, DistributedValue)
    draws = v.sample(rng, size=500)
    assert draws.shape == (500,)
    assert np.all((draws >= 2.0) & (draws <= 3.0))
    assert isinstance(v.sample(rng), float)


def test_uncertain_value_passthrough():
    """Wrapping an uncertain value again returns the same object."""
    v = UncertainValue(norm(0, 1))
    assert UncertainValue(v) is v


def test_mixture_respects_weights():
    """Components are chosen in proportion to their weights."""
    rng = np.random.default_rng(2)
    v = UncertainValue([0.0, 1.0], [70, 30])

    assert isinstance(v, MixtureValue)
    assert np.allclose(v.weights, [0.7, 0.3])

    scalar_draws = np.array([v.sample(rng) for _ in range(5000)])
    assert abs(scalar_draws.mean() - 0.3) < 0.03

    array_draws = v.sample(rng, size=5000)
    assert set(np.unique(array_draws)) <= {0.0, 1.0}
    assert abs(array_draws.mean() - 0.3) < 0.03


def test_mixture_of_distributions():
    """Mixture components may be distributions over disjoint intervals."""
    rng = np.random.default_rng(3)
    v = UncertainValue([uniform(5.7, 0.25), uniform(6.05, 0.25)], [70, 30])
    draws = v.sample(rng, size=2000)

    in_first = (draws >= 5.7) & (draws <= 5.95)
    in_second = (draws >= 6.05) & (draws <= 6.3)
    assert np.all(in_first | in_second)
    assert 0.6 < in_first.mean() < 0.8


@pytest.mark.parametrize("components, weights", [
    ([1.0, 2.0], [1.0]),
    ([1.0, 2.0], [1.0, -1.0]),
    ([1.0, 2.0], [0.0, 0.0]),
    ([], []),
])
def test_invalid_mixture_weights(components, weights):
    with pytest.raises(ValidationError):
        UncertainValue(components, weights)


@pytest.mark.parametrize("spec", ["abc", None, [1.0, 2.0], {"a": 1}])
def test_uninterpretable_spec_raises(spec):
    """Anything that is not a number, distribution or uncertain value fails."""
    with pytest.raises(ValidationError):
        UncertainValue(spec)


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        UncertainValue("abc")


def test_get_rng_reproducible():
    """Integer seeds give identical streams; generators pass through."""
    assert get_rng(5).random() == get_rng(5).random()
    rng = np.random.default_rng(0)
    assert get_rng(rng) is rng


def test_initial_condition_scalar_broadcast():
    ui = sample_initial_condition(0.3, np.random.default_rng(0))
    assert np.array_equal(ui, np.full(6, 0.3))

    ui_0d = sample_initial_condition(np.array(0.3), np.random.default_rng(0))
    assert np.array_equal(ui_0d, np.full(6, 0.3))


def test_initial_condition_fixed_vector_unchanged():
    values = [0.1, 0.2, 0.3, 0.4, 0.5, 0.6]
    ui = sample_initial_condition(values, np.random.default_rng(0))
    assert np.array_equal(ui, np.array(values))

    ui_arr = sample_initial_condition(np.array(values), np.random.default_rng(0))
    assert np.array_equal(ui_arr, np.array(values))


def test_initial_condition_from_distribution():
    """A distribution is sampled once per component."""
    ui = sample_initial_condition(uniform(0, 1), np.random.default_rng(0))
    assert ui.shape == (6,)
    assert np.all((ui >= 0) & (ui <= 1))
    assert len(np.unique(ui)) == 6


def test_initial_condition_per_component():
    """A list mixing numbers and distributions is sampled component-wise."""
    spec = [0.5, uniform(10, 1), UncertainValue([1.0, 2.0], [1, 1]), 0.0, norm(0, 1), -1]
    ui = sample_initial_condition(spec, np.random.default_rng(4))

    assert ui.shape == (6,)
    assert ui[0] == 0.5
    assert 10 <= ui[1] <= 11
    assert ui[2] in (1.0, 2.0)
    assert ui[3] == 0.0
    assert ui[5] == -1.0


@pytest.mark.parametrize("spec", [
    [0.1] * 5,
    [0.1] * 7,
    "abcdef",
    [[0.1, 0.2]] * 6,
    {"x": 1},
    np.array("abc"),
    np.array(None),
])
def test_initial_condition_malformed(spec):
    with pytest.raises(ValidationError):
        sample_initial_condition(spec, np.random.default_rng(0))
