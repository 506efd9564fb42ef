"""
Benchmark data with known ground truth for causality estimators.
"""

import numpy as np
import pandas as pd
from typing import Optional, Union

from ..models import RosslerLorenzUnidir
from ..search import rand_rossler_lorenz_unidir
from ..uncertainty import get_rng

RL_VARIABLES = ['x1', 'x2', 'x3', 'y1', 'y2', 'y3']


def make_rossler_lorenz_dataframe(model: Optional[RosslerLorenzUnidir] = None,
                                  npts: int = 1000,
                                  sample_dt: int = 1,
                                  Ttr: float = 1000,
                                  rng: Union[None, int, np.random.Generator] = None,
                                  **search_kwargs) -> pd.DataFrame:
    """
    Sample a Rössler-Lorenz orbit into a dataframe.

    Parameters
    ----------
    model : RosslerLorenzUnidir or None
        Model to simulate. If None, a model with randomised parameters is
        searched first using ``search_kwargs``.
    npts : int, default 1000
        Number of time points
    sample_dt : int, default 1
        Keep every ``sample_dt``-th integration sample
    Ttr : float, default 1000
        Transient length in units of dt
    rng : None, int or np.random.Generator
        Random seed or generator for the parameter search and the
        observational noise
    **search_kwargs
        Passed to ``rand_rossler_lorenz_unidir`` when ``model`` is None

    Returns
    -------
    pd.DataFrame
        Columns 'time', 'x1', 'x2', 'x3', 'y1', 'y2', 'y3'

    Notes
    -----
    Ground truth: the Rössler variables drive the Lorenz variables through
    x2 -> y2 only; nothing flows from Lorenz to Rössler.
    See :func:`get_ground_truth_network`.
    """
    rng = get_rng(rng)

    if model is None:
        result = rand_rossler_lorenz_unidir(rng=rng, **search_kwargs)
        if not result.found:
            raise ValueError(f"No well-behaved model found in {result.n_tries} tries. "
                             "Widen the parameter ranges or raise n_maxtries.")
        model = result.model

    pts = model.trajectory(npts, sample_dt=sample_dt, Ttr=Ttr, rng=rng)
    time = Ttr * model.dt + model.dt * sample_dt * np.arange(npts)

    df = pd.DataFrame(pts, columns=RL_VARIABLES)
    df.insert(0, 'time', time)

    return df


def get_ground_truth_network() -> pd.DataFrame:
    """
    Get the direct causal links of the Rössler-Lorenz system.

    Returns
    -------
    pd.DataFrame
        Adjacency matrix where rows=drivers, columns=targets.
        Value of 1 indicates a variable appearing in the target's equation
        of motion, 0 indicates no direct link. Self-loops are omitted.

    Notes
    -----
    Direct links:
    - Rössler: x2 -> x1, x3 -> x1, x1 -> x2, x1 -> x3
    - Lorenz: y2 -> y1, y1 -> y2, y3 -> y2, y1 -> y3, y2 -> y3
    - Coupling: x2 -> y2 (the only cross-subsystem edge)
    """
    edges = [
        ('x2', 'x1'), ('x3', 'x1'),
        ('x1', 'x2'),
        ('x1', 'x3'),
        ('y2', 'y1'),
        ('y1', 'y2'), ('y3', 'y2'), ('x2', 'y2'),
        ('y1', 'y3'), ('y2', 'y3'),
    ]

    n_vars = len(RL_VARIABLES)
    adjacency = np.zeros((n_vars, n_vars), dtype=int)
    var_idx = {var: i for i, var in enumerate(RL_VARIABLES)}

    for driver, target in edges:
        adjacency[var_idx[driver], var_idx[target]] = 1

    return pd.DataFrame(adjacency, index=RL_VARIABLES, columns=RL_VARIABLES)
