"""
Uncertain parameter specifications.

Parameters can be fixed numbers, scipy.stats distributions, or weighted
mixtures of both; all are sampled through a common interface with an
explicit random generator.
"""

from .values import (
    AbstractUncertainValue,
    FixedValue,
    DistributedValue,
    MixtureValue,
    UncertainValue,
    is_distribution,
    is_real_number,
    get_rng,
)

from .initial import (
    sample_initial_condition,
)

__all__ = [
    # Values
    'AbstractUncertainValue',
    'FixedValue',
    'DistributedValue',
    'MixtureValue',
    'UncertainValue',
    'is_distribution',
    'is_real_number',
    'get_rng',
    # Initial conditions
    'sample_initial_condition',
]
