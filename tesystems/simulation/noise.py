"""
Observational noise for simulated trajectories.
"""

import numpy as np

from ..exceptions import ValidationError


def add_observational_noise(x: np.ndarray,
                            percent: float,
                            rng: np.random.Generator) -> np.ndarray:
    """
    Add Gaussian measurement noise scaled to each column's spread.

    Parameters
    ----------
    x : np.ndarray, shape (N, D)
        Clean trajectory, one column per variable
    percent : float
        Noise standard deviation as a percentage of the column's sample
        standard deviation (``percent=30`` adds noise with std 0.3*std(x[:, j]))
    rng : np.random.Generator
        Random generator for the noise draw

    Returns
    -------
    np.ndarray, shape (N, D)
        Noisy copy of ``x``; the input is left untouched
    """
    x = np.array(x, dtype=float)
    if percent < 0:
        raise ValidationError(f"Noise level must be non-negative, got {percent}")
    if percent == 0 or x.size == 0:
        return x

    squeeze = x.ndim == 1
    if squeeze:
        x = x[:, None]

    # Scale from the clean data, ddof=1 like the sample std
    ddof = 1 if x.shape[0] > 1 else 0
    scale = (percent / 100.0) * np.std(x, axis=0, ddof=ddof)
    noisy = x + rng.normal(size=x.shape) * scale

    return noisy[:, 0] if squeeze else noisy
