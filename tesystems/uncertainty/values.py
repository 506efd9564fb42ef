"""
Uncertain parameter values.

A model parameter can be given as a fixed number, a probability distribution
or a weighted mixture of either. Every representation is wrapped in an
uncertain value that exposes a single ``sample(rng)`` operation, so code that
draws parameters never needs to know which form the user supplied.

Distributions are frozen ``scipy.stats`` objects (anything with an ``rvs``
method accepting ``size`` and ``random_state``).
"""

import numbers

import numpy as np
from typing import Any, Optional, Sequence, Union

from ..exceptions import ValidationError


def is_distribution(x: Any) -> bool:
    """True if ``x`` behaves like a frozen scipy.stats distribution."""
    return callable(getattr(x, 'rvs', None))


def is_real_number(x: Any) -> bool:
    """True for Python and numpy real scalars (booleans excluded)."""
    return isinstance(x, numbers.Real) and not isinstance(x, (bool, np.bool_))


def get_rng(rng: Union[None, int, np.random.Generator] = None) -> np.random.Generator:
    """
    Normalize a seed or generator into a ``numpy.random.Generator``.

    Parameters
    ----------
    rng : None, int or np.random.Generator
        ``None`` draws fresh OS entropy, an integer seeds a new generator,
        and an existing generator is returned unchanged.

    Returns
    -------
    np.random.Generator
    """
    return np.random.default_rng(rng)


class AbstractUncertainValue:
    """Base class for parameter specifications that can be sampled."""

    def sample(self, rng: np.random.Generator,
               size: Optional[int] = None) -> Union[float, np.ndarray]:
        """Draw one value (``size=None``) or an array of ``size`` values."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FixedValue(AbstractUncertainValue):
    """A parameter known exactly."""

    def __init__(self, value: float):
        if not is_real_number(value):
            raise ValidationError(f"FixedValue needs a real number, got {value!r}")
        self.value = float(value)

    def sample(self, rng: np.random.Generator,
               size: Optional[int] = None) -> Union[float, np.ndarray]:
        if size is None:
            return self.value
        return np.full(size, self.value, dtype=float)

    def __repr__(self) -> str:
        return f"FixedValue({self.value!r})"


class DistributedValue(AbstractUncertainValue):
    """A parameter drawn from a single probability distribution."""

    def __init__(self, distribution: Any):
        if not is_distribution(distribution):
            raise ValidationError(
                f"DistributedValue needs an object with an `rvs` method, got {distribution!r}")
        self.distribution = distribution

    def sample(self, rng: np.random.Generator,
               size: Optional[int] = None) -> Union[float, np.ndarray]:
        if size is None:
            return float(self.distribution.rvs(random_state=rng))
        draws = self.distribution.rvs(size=size, random_state=rng)
        return np.asarray(draws, dtype=float).reshape(size)

    def __repr__(self) -> str:
        dist = self.distribution
        name = getattr(getattr(dist, 'dist', None), 'name', type(dist).__name__)
        args = getattr(dist, 'args', ())
        return f"DistributedValue({name}{tuple(args)})"


class MixtureValue(AbstractUncertainValue):
    """
    A weighted population of uncertain values.

    Sampling first picks a component with probability proportional to its
    weight and then samples that component. Weights need not sum to one;
    ``[70, 30]`` means a 70 % / 30 % split.

    Parameters
    ----------
    components : sequence
        Numbers, distributions or uncertain values
    weights : sequence of float
        One non-negative weight per component, not all zero
    """

    def __init__(self, components: Sequence[Any], weights: Sequence[float]):
        components = list(components)
        weights = np.asarray(weights, dtype=float)

        if len(components) == 0:
            raise ValidationError("MixtureValue needs at least one component")
        if weights.ndim != 1 or len(weights) != len(components):
            raise ValidationError(
                f"Got {len(components)} components but {weights.size} weights")
        if not np.all(np.isfinite(weights)) or np.any(weights < 0):
            raise ValidationError("Mixture weights must be finite and non-negative")
        total = weights.sum()
        if total <= 0:
            raise ValidationError("Mixture weights must not all be zero")

        self.components = [UncertainValue(c) for c in components]
        self.weights = weights / total

    def sample(self, rng: np.random.Generator,
               size: Optional[int] = None) -> Union[float, np.ndarray]:
        if size is None:
            k = rng.choice(len(self.components), p=self.weights)
            return self.components[k].sample(rng)

        picks = rng.choice(len(self.components), size=size, p=self.weights)
        out = np.empty(size, dtype=float)
        for k, component in enumerate(self.components):
            mask = picks == k
            n_k = int(mask.sum())
            if n_k:
                out[mask] = component.sample(rng, size=n_k)
        return out

    def __repr__(self) -> str:
        parts = ", ".join(f"{c!r}: {w:.3g}" for c, w in zip(self.components, self.weights))
        return f"MixtureValue({parts})"


# Factory function for easy access
def UncertainValue(x: Any, weights: Optional[Sequence[float]] = None) -> AbstractUncertainValue:
    """
    Wrap a parameter specification as an uncertain value.

    Parameters
    ----------
    x : number, distribution, uncertain value, or sequence of these
        - number: exactly known value
        - distribution: frozen scipy.stats distribution
        - uncertain value: returned unchanged
        - sequence (with ``weights``): mixture of the given components
    weights : sequence of float or None
        Mixture weights; required when ``x`` is a sequence

    Returns
    -------
    AbstractUncertainValue

    Examples
    --------
    >>> from scipy.stats import uniform
    >>> a1 = UncertainValue([uniform(5.7, 0.25), uniform(6.05, 0.25)], [70, 30])
    >>> a1.sample(np.random.default_rng(0))  # doctest: +SKIP
    """
    if weights is not None:
        if is_real_number(x) or is_distribution(x) or isinstance(x, (str, bytes)):
            raise ValidationError("Weights are only meaningful for a sequence of components")
        return MixtureValue(x, weights)

    if isinstance(x, AbstractUncertainValue):
        return x
    if is_real_number(x):
        return FixedValue(x)
    if is_distribution(x):
        return DistributedValue(x)

    raise ValidationError(
        f"Cannot interpret {x!r} as an uncertain value. Expected a number, "
        "a distribution, an uncertain value, or components with weights.")
