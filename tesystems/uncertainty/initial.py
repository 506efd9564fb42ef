"""
Initial-condition specifications for randomized model construction.
"""

import numpy as np
from typing import Any

from ..exceptions import ValidationError
from .values import AbstractUncertainValue, UncertainValue, is_distribution, is_real_number


def sample_initial_condition(ui: Any,
                             rng: np.random.Generator,
                             n: int = 6) -> np.ndarray:
    """
    Draw a concrete initial condition from a specification.

    Parameters
    ----------
    ui : number, distribution, uncertain value, or sequence of length n
        - number: broadcast to all n components
        - distribution or uncertain value: sampled n times independently
        - sequence of n numbers: used as is
        - sequence of n numbers/distributions/uncertain values: each
          component sampled on its own
    rng : np.random.Generator
        Random generator used for all draws
    n : int, default 6
        Dimension of the state vector

    Returns
    -------
    np.ndarray, shape (n,)
        Initial condition

    Raises
    ------
    ValidationError
        If ``ui`` matches none of the shapes above.
    """
    if is_real_number(ui):
        return np.full(n, float(ui))

    if is_distribution(ui) or isinstance(ui, AbstractUncertainValue):
        return np.asarray(UncertainValue(ui).sample(rng, size=n), dtype=float)

    if isinstance(ui, np.ndarray) and ui.ndim == 0:
        if not np.issubdtype(ui.dtype, np.number) or np.issubdtype(ui.dtype, np.complexfloating):
            raise ValidationError(f"Initial condition `ui` not specified correctly: {ui!r}")
        return np.full(n, float(ui))

    if isinstance(ui, (str, bytes, dict)) or not hasattr(ui, '__len__'):
        raise ValidationError(f"Initial condition `ui` not specified correctly: {ui!r}")

    components = list(ui)
    if len(components) != n:
        raise ValidationError(
            f"Initial condition `ui` must have {n} components, got {len(components)}")

    if all(is_real_number(c) for c in components):
        return np.array(components, dtype=float)

    try:
        specs = [UncertainValue(c) for c in components]
    except ValidationError as e:
        raise ValidationError(f"Initial condition `ui` not specified correctly: {e}") from e

    return np.array([s.sample(rng) for s in specs], dtype=float)
