"""
Numerical health screening of simulated trajectories.

A randomly parameterized chaotic system may blow up, collapse onto a fixed
point, or wander near the origin. These checks reject such orbits before
they are used as benchmark data.
"""

from dataclasses import dataclass

import numpy as np
from typing import Dict, Optional, Tuple

from ..exceptions import ValidationError

# Empirically chosen thresholds
DEFAULT_MAX_ABS = 1e10
DEFAULT_ZERO_TOLERANCES = (1e-10, 1e-12)
DEFAULT_MAX_ZERO_FRACTION = 0.1


@dataclass
class AcceptanceCriteria:
    """
    Thresholds for accepting a trajectory.

    Parameters
    ----------
    max_abs : float, default 1e10
        Every entry must be strictly smaller than this in magnitude
    zero_tolerances : tuple of float, default (1e-10, 1e-12)
        For each tolerance, the number of entries with ``|x| < tol`` must
        stay below the zero limit
    max_zero_fraction : float, default 0.1
        Zero limit as a fraction of the number of entries. The same limit
        applies to entries that are exactly zero.
    """
    max_abs: float = DEFAULT_MAX_ABS
    zero_tolerances: Tuple[float, ...] = DEFAULT_ZERO_TOLERANCES
    max_zero_fraction: float = DEFAULT_MAX_ZERO_FRACTION

    def __post_init__(self):
        if not self.max_abs > 0:
            raise ValidationError("max_abs must be positive.")
        self.zero_tolerances = tuple(float(tol) for tol in self.zero_tolerances)
        if any(tol < 0 for tol in self.zero_tolerances):
            raise ValidationError("zero_tolerances must be non-negative.")
        if not (0.0 < self.max_zero_fraction <= 1.0):
            raise ValidationError("max_zero_fraction must be in (0, 1].")


def trajectory_diagnostics(pts: np.ndarray,
                           criteria: Optional[AcceptanceCriteria] = None) -> Dict:
    """
    Compute the quantities used to accept or reject a trajectory.

    Parameters
    ----------
    pts : np.ndarray, shape (N, D)
        Trajectory to screen
    criteria : AcceptanceCriteria or None
        Thresholds; defaults to ``AcceptanceCriteria()``

    Returns
    -------
    dict
        - 'all_finite': no NaN or infinite entries
        - 'max_abs': largest finite magnitude (inf if none is finite)
        - 'n_exact_zero': entries exactly equal to zero
        - 'n_below_<tol>': entries with magnitude below each tolerance
        - 'zero_limit': maximum allowed count (exclusive)
        - 'accepted': overall verdict
    """
    if criteria is None:
        criteria = AcceptanceCriteria()

    M = np.asarray(pts, dtype=float)
    finite = np.isfinite(M)
    all_finite = bool(M.size > 0 and finite.all())
    max_abs = float(np.abs(M[finite]).max()) if finite.any() else np.inf

    zero_limit = criteria.max_zero_fraction * M.size
    result = {
        'all_finite': all_finite,
        'max_abs': max_abs,
        'n_exact_zero': int(np.count_nonzero(M == 0)),
        'zero_limit': zero_limit,
    }

    abs_M = np.abs(M)
    zero_counts = [result['n_exact_zero']]
    for tol in criteria.zero_tolerances:
        n_below = int(np.count_nonzero(abs_M < tol))
        result[f'n_below_{tol:g}'] = n_below
        zero_counts.append(n_below)

    result['accepted'] = (all_finite
                          and max_abs < criteria.max_abs
                          and all(n < zero_limit for n in zero_counts))

    return result


def is_well_behaved(pts: np.ndarray,
                    criteria: Optional[AcceptanceCriteria] = None) -> bool:
    """
    Check whether a trajectory passes the acceptance test.

    A trajectory is accepted if every entry is finite, every entry is below
    ``criteria.max_abs`` in magnitude, and fewer than
    ``criteria.max_zero_fraction`` of the entries are zero or near zero.
    """
    return bool(trajectory_diagnostics(pts, criteria)['accepted'])
