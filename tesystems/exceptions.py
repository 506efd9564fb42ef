"""
Exceptions raised by TEsystems.
"""


class ValidationError(ValueError):
    """Invalid parameter, initial condition or sampling specification."""


class IntegrationError(RuntimeError):
    """The ODE integrator could not reach the end of the requested time span."""
