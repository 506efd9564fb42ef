"""
TEsystems: synthetic dynamical systems for benchmarking causality estimators.

This package provides standardized tools for:
- Defining continuous-time systems with known causal structure
- Sampling trajectories with observational noise
- Drawing model parameters from uncertain specifications
- Searching randomized parameter spaces for well-behaved orbits
"""

__version__ = "0.1.0"

# Import main modules for convenient access
from . import uncertainty
from . import simulation
from . import models
from . import search
from . import testdata

from .exceptions import ValidationError, IntegrationError

# Import key functions for direct access
from .uncertainty import (
    UncertainValue,
    sample_initial_condition,
)

from .simulation import (
    integrate,
    add_observational_noise,
)

from .models import (
    RosslerLorenzUnidir,
    eom_rossler_lorenz_unidir,
)

from .search import (
    AcceptanceCriteria,
    is_well_behaved,
    SearchResult,
    rand_rossler_lorenz_unidir,
    generate_model_ensemble,
)

from .testdata import (
    make_rossler_lorenz_dataframe,
    get_ground_truth_network,
)

__all__ = [
    'uncertainty',
    'simulation',
    'models',
    'search',
    'testdata',
    # Errors
    'ValidationError',
    'IntegrationError',
    # Uncertainty
    'UncertainValue',
    'sample_initial_condition',
    # Simulation
    'integrate',
    'add_observational_noise',
    # Models
    'RosslerLorenzUnidir',
    'eom_rossler_lorenz_unidir',
    # Search
    'AcceptanceCriteria',
    'is_well_behaved',
    'SearchResult',
    'rand_rossler_lorenz_unidir',
    'generate_model_ensemble',
    # Test data
    'make_rossler_lorenz_dataframe',
    'get_ground_truth_network',
]
