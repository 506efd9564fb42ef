"""
Randomized search for well-behaved Rössler-Lorenz models.

Parameters are drawn from fixed values, distributions or weighted mixtures,
a short orbit of each candidate is simulated, and the first candidate whose
orbit passes the acceptance test is returned. Failing to find one within
the retry bound is a normal outcome reported through ``SearchResult``.
"""

from dataclasses import dataclass

import numpy as np
from typing import Any, List, Optional, Union
from scipy.stats import uniform
from tqdm import tqdm

from ..exceptions import IntegrationError, ValidationError
from ..models import RosslerLorenzUnidir
from ..uncertainty import UncertainValue, get_rng, sample_initial_condition
from .acceptance import AcceptanceCriteria, is_well_behaved

# Orbit length used to screen candidates
SEARCH_NPTS = 1000
SEARCH_TTR = 1000

# Default parameter priors
DEFAULT_A1 = UncertainValue([uniform(5.7, 0.25), uniform(6.05, 0.25)], [70, 30])
DEFAULT_A2 = uniform(0.18, 0.04)
DEFAULT_A3 = uniform(5.5, 0.4)
DEFAULT_B1 = uniform(9.5, 1.0)
DEFAULT_B2 = uniform(27, 2)
DEFAULT_B3 = uniform(7.5 / 3, 1 / 3)
DEFAULT_UI = uniform(0, 1)


@dataclass
class SearchResult:
    """
    Outcome of a model search.

    Attributes
    ----------
    model : RosslerLorenzUnidir or None
        Accepted model, or None if the retry bound was exhausted
    n_tries : int
        Number of candidates simulated
    """
    model: Optional[RosslerLorenzUnidir]
    n_tries: int

    @property
    def found(self) -> bool:
        return self.model is not None

    def __bool__(self) -> bool:
        return self.found


def rand_rossler_lorenz_unidir(*,
                               c_xy: Any = 0.5,
                               a1: Any = DEFAULT_A1,
                               a2: Any = DEFAULT_A2,
                               a3: Any = DEFAULT_A3,
                               b1: Any = DEFAULT_B1,
                               b2: Any = DEFAULT_B2,
                               b3: Any = DEFAULT_B3,
                               ui: Any = DEFAULT_UI,
                               observational_noise_level: Any = 20,
                               dt: Any = 0.05,
                               n_maxtries: int = 500,
                               npts: int = SEARCH_NPTS,
                               Ttr: float = SEARCH_TTR,
                               method: str = 'rk45',
                               criteria: Optional[AcceptanceCriteria] = None,
                               rng: Union[None, int, np.random.Generator] = None,
                               verbose: bool = False) -> SearchResult:
    """
    Generate a Rössler-Lorenz model with randomised parameters.

    Every scalar parameter may be a number, a frozen scipy.stats
    distribution, or an uncertain value (e.g. a weighted mixture built with
    ``UncertainValue([...], weights)``). On each try all parameters and the
    initial condition are drawn anew, the candidate is simulated without
    noise, and the orbit is screened with :func:`is_well_behaved`. The
    accepted model carries the drawn observational noise level.

    Parameters
    ----------
    c_xy : number, distribution or uncertain value, default 0.5
        Coupling strength
    a1 : default mixture of U(5.7, 5.95) and U(6.05, 6.3), weights 70/30
        Rössler constant a1
    a2 : default U(0.18, 0.22)
        Rössler constant a2
    a3 : default U(5.5, 5.9)
        Rössler constant a3
    b1 : default U(9.5, 10.5)
        Lorenz constant b1
    b2 : default U(27, 29)
        Lorenz constant b2
    b3 : default U(7.5/3, 8.5/3)
        Lorenz constant b3
    ui : default U(0, 1)
        Initial condition: a number (broadcast to 6 components), a
        distribution (sampled 6 times), 6 numbers, or 6 numbers /
        distributions / uncertain values sampled per component
    observational_noise_level : default 20
        Noise level of the returned model, in percent of each variable's std
    dt : default 0.05
        Time step
    n_maxtries : int, default 500
        Retry bound; at most ``n_maxtries + 1`` candidates are simulated
    npts : int, default 1000
        Length of the screening orbit
    Ttr : float, default 1000
        Transient of the screening orbit, in units of dt
    method : str, default 'rk45'
        Integration back-end
    criteria : AcceptanceCriteria or None
        Acceptance thresholds
    rng : None, int or np.random.Generator
        Source of randomness for all draws
    verbose : bool, default False
        Print progress messages

    Returns
    -------
    SearchResult
        ``result.model`` is the accepted model, or None if no candidate
        passed within the retry bound

    Raises
    ------
    ValidationError
        If a parameter or the initial condition is specified incorrectly.
        Not retried.
    """
    if int(n_maxtries) != n_maxtries or n_maxtries < 0:
        raise ValidationError(f"n_maxtries must be a non-negative integer, got {n_maxtries}")

    rng = get_rng(rng)
    if criteria is None:
        criteria = AcceptanceCriteria()

    specs = {
        'c_xy': UncertainValue(c_xy),
        'a1': UncertainValue(a1),
        'a2': UncertainValue(a2),
        'a3': UncertainValue(a3),
        'b1': UncertainValue(b1),
        'b2': UncertainValue(b2),
        'b3': UncertainValue(b3),
        'dt': UncertainValue(dt),
    }
    noise_spec = UncertainValue(observational_noise_level)

    n_tries = 0
    while n_tries <= n_maxtries:
        # Draw parameters; fixed values come back unchanged
        drawn = {name: spec.sample(rng) for name, spec in specs.items()}
        noise_level = noise_spec.sample(rng)
        rui = sample_initial_condition(ui, rng)

        # Without noise while looking for a good orbit
        candidate = RosslerLorenzUnidir(ui=rui, observational_noise_level=0.0, **drawn)

        try:
            pts = candidate.trajectory(npts, sample_dt=1, Ttr=Ttr, method=method)
            accepted = is_well_behaved(pts, criteria)
        except IntegrationError as e:
            if verbose:
                print(f"  Integration failed: {e}")
            accepted = False

        n_tries += 1

        if accepted:
            if verbose:
                print(f"Found attractor after {n_tries} tries "
                      f"(c_xy = {candidate.c_xy:.3f}, a1 = {candidate.a1:.3f}, "
                      f"b2 = {candidate.b2:.3f})")
            return SearchResult(
                model=candidate.with_params(observational_noise_level=noise_level),
                n_tries=n_tries,
            )

        if verbose:
            print("No attractor found. Trying with new initial condition and parameters")

    if verbose:
        print(f"Could not find attractor in {n_tries} tries!")

    return SearchResult(model=None, n_tries=n_tries)


def generate_model_ensemble(n_models: int,
                            rng: Union[None, int, np.random.Generator] = None,
                            verbose: bool = False,
                            **kwargs) -> List[SearchResult]:
    """
    Run the randomized model search several times.

    Parameters
    ----------
    n_models : int
        Number of searches
    rng : None, int or np.random.Generator
        Shared source of randomness; the ensemble is reproducible for a
        fixed seed
    verbose : bool, default False
        Show progress bar
    **kwargs
        Passed to :func:`rand_rossler_lorenz_unidir`

    Returns
    -------
    list of SearchResult
        One result per search, including searches that found no model
    """
    rng = get_rng(rng)
    results = []

    iterator = tqdm(range(n_models), desc="Rössler-Lorenz models", disable=not verbose)

    for _ in iterator:
        results.append(rand_rossler_lorenz_unidir(rng=rng, **kwargs))

    if verbose:
        n_found = sum(r.found for r in results)
        print(f"Found {n_found}/{n_models} models")

    return results
