"""
ODE integration back-ends for continuous-time system models.

All back-ends share one signature: integrate ``vector_field(u, p, t)`` from
``u0``, discard a transient of length ``Ttr`` and return the states sampled
every ``dt`` time units over the following ``T`` time units.
"""

import numpy as np
from typing import Any, Callable, Dict
from scipy.integrate import solve_ivp

from ..exceptions import IntegrationError, ValidationError

VectorField = Callable[[np.ndarray, Any, float], np.ndarray]

# Default tolerances for the adaptive back-ends
DEFAULT_RTOL = 1e-6
DEFAULT_ATOL = 1e-8


def _check_time_arguments(T: float, dt: float, Ttr: float) -> int:
    if not dt > 0:
        raise ValidationError(f"dt must be positive, got {dt}")
    if not T > 0:
        raise ValidationError(f"T must be positive, got {T}")
    if Ttr < 0:
        raise ValidationError(f"Ttr must be non-negative, got {Ttr}")

    n_samples = int(round(T / dt))
    if n_samples < 1:
        raise ValidationError(f"T={T} is shorter than one time step dt={dt}")
    return n_samples


def _integrate_rk4(vector_field: VectorField,
                   u0: np.ndarray,
                   T: float,
                   dt: float,
                   Ttr: float = 0.0,
                   params: Any = None) -> np.ndarray:
    """
    Classical fourth-order Runge-Kutta with fixed step ``dt``.

    The transient is rounded to a whole number of steps.
    """
    n_samples = _check_time_arguments(T, dt, Ttr)
    n_transient = int(round(Ttr / dt))

    u = np.array(u0, dtype=float)
    out = np.empty((n_samples, u.size), dtype=float)
    t = 0.0

    with np.errstate(over='ignore', invalid='ignore'):
        for i in range(n_transient + n_samples):
            if i >= n_transient:
                out[i - n_transient] = u

            k1 = np.asarray(vector_field(u, params, t))
            k2 = np.asarray(vector_field(u + 0.5 * dt * k1, params, t + 0.5 * dt))
            k3 = np.asarray(vector_field(u + 0.5 * dt * k2, params, t + 0.5 * dt))
            k4 = np.asarray(vector_field(u + dt * k3, params, t + dt))

            u = u + dt * (k1 + 2 * k2 + 2 * k3 + k4) / 6.0
            t += dt

            if not np.all(np.isfinite(u)):
                raise IntegrationError(f"State became non-finite at t = {t:.4g}")

    return out


def _make_solve_ivp_integrator(scipy_method: str) -> Callable[..., np.ndarray]:
    """Wrap ``scipy.integrate.solve_ivp`` with the given adaptive method."""

    def _integrate(vector_field: VectorField,
                   u0: np.ndarray,
                   T: float,
                   dt: float,
                   Ttr: float = 0.0,
                   params: Any = None,
                   rtol: float = DEFAULT_RTOL,
                   atol: float = DEFAULT_ATOL,
                   **kwargs) -> np.ndarray:
        n_samples = _check_time_arguments(T, dt, Ttr)
        t_eval = Ttr + dt * np.arange(n_samples)
        t_end = max(Ttr + T, float(t_eval[-1]))

        def rhs(t, u):
            return vector_field(u, params, t)

        with np.errstate(over='ignore', invalid='ignore'):
            sol = solve_ivp(rhs, (0.0, t_end), np.asarray(u0, dtype=float),
                            method=scipy_method, t_eval=t_eval,
                            rtol=rtol, atol=atol, **kwargs)

        if not sol.success:
            raise IntegrationError(f"{scipy_method} failed: {sol.message}")

        out = sol.y.T
        if out.shape[0] != n_samples or not np.all(np.isfinite(out)):
            raise IntegrationError(f"{scipy_method} produced a non-finite or truncated solution")

        return out

    _integrate.__name__ = f"_integrate_{scipy_method.lower()}"
    _integrate.__doc__ = f"Adaptive integration with solve_ivp(method='{scipy_method}')."
    return _integrate


# Registry of available back-ends
_INTEGRATORS: Dict[str, Callable[..., np.ndarray]] = {
    'rk4': _integrate_rk4,
    'rk23': _make_solve_ivp_integrator('RK23'),
    'rk45': _make_solve_ivp_integrator('RK45'),
    'dop853': _make_solve_ivp_integrator('DOP853'),
    'lsoda': _make_solve_ivp_integrator('LSODA'),
}


def get_integrator(method: str) -> Callable[..., np.ndarray]:
    """
    Get an integration back-end by name.

    Parameters
    ----------
    method : str
        'rk4' (fixed step), or one of the adaptive solve_ivp methods
        'rk23', 'rk45', 'dop853', 'lsoda'

    Returns
    -------
    callable
        Function with the signature of :func:`integrate`
    """
    key = str(method).lower()
    if key not in _INTEGRATORS:
        raise ValidationError(f"Unknown integration method: {method}. "
                              f"Available: {list(_INTEGRATORS.keys())}")
    return _INTEGRATORS[key]


def integrate(vector_field: VectorField,
              u0: np.ndarray,
              T: float,
              dt: float,
              Ttr: float = 0.0,
              params: Any = None,
              method: str = 'rk45',
              **solver_kwargs) -> np.ndarray:
    """
    Integrate an autonomous or non-autonomous vector field.

    Parameters
    ----------
    vector_field : callable
        ``vector_field(u, p, t) -> du/dt``
    u0 : np.ndarray
        Initial state
    T : float
        Length of the recorded time span (after the transient)
    dt : float
        Sampling interval; also the step size of the fixed-step back-end
    Ttr : float, default 0.0
        Transient time integrated and discarded before recording
    params : any
        Passed through to ``vector_field`` as ``p``
    method : str, default 'rk45'
        Integration back-end, see :func:`get_integrator`
    **solver_kwargs
        Extra options for adaptive back-ends (``rtol``, ``atol``, ``max_step``)

    Returns
    -------
    np.ndarray, shape (round(T/dt), len(u0))
        States at times ``Ttr + k*dt``

    Raises
    ------
    ValidationError
        Unknown method or invalid time arguments
    IntegrationError
        The back-end failed or the state became non-finite
    """
    integrator = get_integrator(method)
    if solver_kwargs and integrator is _integrate_rk4:
        raise ValidationError(f"rk4 accepts no solver options, got {sorted(solver_kwargs)}")
    return integrator(vector_field, u0, T, dt, Ttr=Ttr, params=params, **solver_kwargs)
