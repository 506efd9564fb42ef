"""
Test data generation for causality estimator validation.

This module provides Rössler-Lorenz orbits as dataframes together with the
ground-truth causal network of the system.
"""

from .generators import (
    RL_VARIABLES,
    make_rossler_lorenz_dataframe,
    get_ground_truth_network,
)

__all__ = [
    'RL_VARIABLES',
    'make_rossler_lorenz_dataframe',
    'get_ground_truth_network',
]
