"""
Unidirectionally coupled Rössler-Lorenz system.

A 6D model made of a Rössler subsystem (x1, x2, x3) and a Lorenz subsystem
(y1, y2, y3). The second Rössler component forces the second Lorenz
component through the term ``c_xy * x2**2``; there is no coupling in the
other direction, which makes the system a ground truth for directional
causality estimators.

References
----------
Krakovská, A., et al. (2018). Comparison of six methods for the detection
of causality in a bivariate time series. Physical Review E, 97(4), 042207.
"""

from dataclasses import dataclass, field, replace, asdict

import numpy as np
from typing import Any, Dict, Tuple

from ..exceptions import ValidationError
from .base import ContinuousSystemModel


def eom_rossler_lorenz_unidir(u: np.ndarray, p: 'RosslerLorenzUnidir', t: float) -> np.ndarray:
    """
    Vector field of the Rössler-Lorenz system.

    .. math::

        \\dot x_1 &= -a_1 (x_2 + x_3) \\\\
        \\dot x_2 &= a_1 (x_1 + a_2 x_2) \\\\
        \\dot x_3 &= a_1 (a_2 + x_3 (x_1 - a_3)) \\\\
        \\dot y_1 &= b_1 (y_2 - y_1) \\\\
        \\dot y_2 &= b_2 y_1 - y_2 - y_1 y_3 + c_{xy} x_2^2 \\\\
        \\dot y_3 &= y_1 y_2 - b_3 y_3

    Parameters
    ----------
    u : array-like, shape (6,)
        State ``(x1, x2, x3, y1, y2, y3)``
    p : RosslerLorenzUnidir
        Parameter record
    t : float
        Time (unused, the system is autonomous)

    Returns
    -------
    np.ndarray, shape (6,)
        Time derivative of the state
    """
    x1, x2, x3, y1, y2, y3 = u

    dx1 = -p.a1 * (x2 + x3)
    dx2 = p.a1 * (x1 + p.a2 * x2)
    dx3 = p.a1 * (p.a2 + x3 * (x1 - p.a3))
    dy1 = p.b1 * (-y1 + y2)
    dy2 = p.b2 * y1 - y2 - y1 * y3 + p.c_xy * (x2 ** 2)
    dy3 = y1 * y2 - p.b3 * y3

    return np.array([dx1, dx2, dx3, dy1, dy2, dy3])


def _random_initial_condition() -> Tuple[float, ...]:
    return tuple(float(v) for v in np.random.default_rng().random(6))


@dataclass(frozen=True)
class RosslerLorenzUnidir(ContinuousSystemModel):
    """
    Rössler system unidirectionally driving a Lorenz system.

    The record is immutable; use :meth:`with_params` to derive a model with
    different parameters.

    Parameters
    ----------
    ui : sequence of 6 float
        Initial condition. Defaults to 6 uniform draws on [0, 1).
    dt : float, default 0.05
        Time step
    c_xy : float, default 1.0
        Coupling strength from x2 to y2 (``c_xy >= 0`` for the usual setup)
    a1, a2, a3 : float, default 6, 0.2, 5.7
        Rössler subsystem constants
    b1, b2, b3 : float, default 10, 28, 8/3
        Lorenz subsystem constants
    observational_noise_level : float, default 0.5
        Measurement noise added by :meth:`trajectory`, as a percentage of
        each variable's empirical standard deviation. With a value of 30,
        noise with standard deviation 0.3*std(variable) is added.

    Raises
    ------
    ValidationError
        If ``ui`` does not have exactly 6 components, or the noise level
        is negative.
    """

    ui: Tuple[float, ...] = field(default_factory=_random_initial_condition)
    dt: float = 0.05
    c_xy: float = 1.0
    a1: float = 6.0
    a2: float = 0.2
    a3: float = 5.7
    b1: float = 10.0
    b2: float = 28.0
    b3: float = 8 / 3
    observational_noise_level: float = 0.5

    dim = 6
    eom = staticmethod(eom_rossler_lorenz_unidir)

    def __post_init__(self):
        object.__setattr__(self, 'ui', self._check_initial_condition(self.ui))
        for name in ('dt', 'c_xy', 'a1', 'a2', 'a3', 'b1', 'b2', 'b3',
                     'observational_noise_level'):
            object.__setattr__(self, name, float(getattr(self, name)))
        if not self.observational_noise_level >= 0:
            raise ValidationError(
                f"observational_noise_level must be non-negative, got {self.observational_noise_level}")

    def with_params(self, **changes: Any) -> 'RosslerLorenzUnidir':
        """Return a new model with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Parameters as a plain dictionary."""
        return asdict(self)

    @classmethod
    def random(cls, **kwargs):
        """
        Search for a model with randomised parameters and a well-behaved orbit.

        Keyword arguments are those of
        :func:`tesystems.search.rand_rossler_lorenz_unidir`.

        Returns
        -------
        SearchResult
        """
        from ..search.random_models import rand_rossler_lorenz_unidir

        return rand_rossler_lorenz_unidir(**kwargs)
