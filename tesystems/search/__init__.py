"""
Randomized search for well-behaved benchmark models.

This module screens simulated orbits for numerical pathologies and draws
model parameters from uncertain specifications until an orbit passes.
"""

from .acceptance import (
    AcceptanceCriteria,
    trajectory_diagnostics,
    is_well_behaved,
    DEFAULT_MAX_ABS,
    DEFAULT_ZERO_TOLERANCES,
    DEFAULT_MAX_ZERO_FRACTION,
)

from .random_models import (
    SearchResult,
    rand_rossler_lorenz_unidir,
    generate_model_ensemble,
)

__all__ = [
    # Acceptance
    'AcceptanceCriteria',
    'trajectory_diagnostics',
    'is_well_behaved',
    'DEFAULT_MAX_ABS',
    'DEFAULT_ZERO_TOLERANCES',
    'DEFAULT_MAX_ZERO_FRACTION',
    # Search
    'SearchResult',
    'rand_rossler_lorenz_unidir',
    'generate_model_ensemble',
]
