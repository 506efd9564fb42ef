"""
Base class for continuous-time system models.
"""

import numpy as np
from typing import Any, Union

from ..exceptions import ValidationError
from ..simulation import integrate, add_observational_noise
from ..uncertainty import get_rng


class ContinuousSystemModel:
    """
    Base class for parameterized continuous-time dynamical systems.

    Subclasses are immutable parameter records that define ``dim``, the
    vector field ``eom(u, p, t)`` and the fields ``ui`` (initial condition),
    ``dt`` (time step) and ``observational_noise_level`` (percent of the
    empirical standard deviation added as measurement noise).
    """

    dim: int = 0

    @staticmethod
    def eom(u: np.ndarray, p: Any, t: float) -> np.ndarray:
        """Vector field of the system."""
        raise NotImplementedError

    @property
    def u0(self) -> np.ndarray:
        """Initial condition as a float array."""
        return np.array(self.ui, dtype=float)

    def trajectory(self,
                   npts: int,
                   sample_dt: int = 1,
                   Ttr: float = 1000,
                   method: str = 'rk45',
                   rng: Union[None, int, np.random.Generator] = None,
                   **solver_kwargs) -> np.ndarray:
        """
        Sample an orbit of the system.

        Integrates for ``npts*dt*sample_dt`` time units after discarding a
        transient of ``Ttr*dt`` time units, keeps every ``sample_dt``-th
        state and adds observational noise if the model's noise level is
        positive.

        Parameters
        ----------
        npts : int
            Number of points to return
        sample_dt : int, default 1
            Keep every ``sample_dt``-th integration sample
        Ttr : float, default 1000
            Transient length in units of ``dt``
        method : str, default 'rk45'
            Integration back-end (see ``simulation.get_integrator``)
        rng : None, int or np.random.Generator
            Randomness for the observational noise
        **solver_kwargs
            Extra options for adaptive back-ends

        Returns
        -------
        np.ndarray, shape (npts, dim)
            Sampled trajectory, one column per state variable
        """
        if int(npts) != npts or npts < 1:
            raise ValidationError(f"npts must be a positive integer, got {npts}")
        if int(sample_dt) != sample_dt or sample_dt < 1:
            raise ValidationError(f"sample_dt must be a positive integer, got {sample_dt}")
        if Ttr < 0:
            raise ValidationError(f"Ttr must be non-negative, got {Ttr}")
        npts, sample_dt = int(npts), int(sample_dt)

        T = npts * self.dt * sample_dt
        pts = integrate(self.eom, self.u0, T, self.dt, Ttr=Ttr * self.dt,
                        params=self, method=method, **solver_kwargs)
        pts = pts[::sample_dt][:npts]

        if self.observational_noise_level > 0:
            pts = add_observational_noise(pts, self.observational_noise_level, get_rng(rng))

        return pts

    def _check_initial_condition(self, ui: Any) -> tuple:
        """Coerce ``ui`` to a tuple of ``dim`` floats."""
        try:
            arr = np.asarray(ui, dtype=float)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Initial condition must be numeric: {e}") from e

        if arr.ndim != 1 or arr.size != self.dim:
            raise ValidationError(
                f"Number of elements in initial condition must match {self.dim}, "
                f"got shape {arr.shape}")
        return tuple(float(v) for v in arr)
