"""
Numerical simulation of continuous-time system models.

This module provides ODE integration back-ends and observational noise
injection for sampled trajectories.
"""

from .integration import (
    integrate,
    get_integrator,
    DEFAULT_RTOL,
    DEFAULT_ATOL,
)

from .noise import (
    add_observational_noise,
)

__all__ = [
    # Integration
    'integrate',
    'get_integrator',
    'DEFAULT_RTOL',
    'DEFAULT_ATOL',
    # Noise
    'add_observational_noise',
]
