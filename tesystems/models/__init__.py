"""
Continuous-time system models with known causal structure.
"""

from .base import (
    ContinuousSystemModel,
)

from .rossler_lorenz import (
    RosslerLorenzUnidir,
    eom_rossler_lorenz_unidir,
)

__all__ = [
    'ContinuousSystemModel',
    'RosslerLorenzUnidir',
    'eom_rossler_lorenz_unidir',
]
