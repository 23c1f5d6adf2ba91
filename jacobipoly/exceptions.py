"""Exception hierarchy for the Jacobi polynomial routines."""

__all__ = ['PolylibError', 'InvalidDomainError', 'OrderExceededError',
    'IterationLimitError', 'MisuseError', 'ConvergenceWarning']


class PolylibError(Exception):
    """Base class for unrecoverable errors raised by the core routines."""
    pass


class InvalidDomainError(PolylibError, ValueError):
    """Gamma function argument is not an integer or half-integer."""
    pass


class OrderExceededError(PolylibError, ValueError):
    """Requested polynomial degree exceeds the configured maximum order."""
    pass


class IterationLimitError(PolylibError, RuntimeError):
    """The QL eigenvalue iteration failed to deflate within the iteration cap."""
    pass


class MisuseError(PolylibError, ValueError):
    """Derivatives were requested without the polynomial values they are built from."""
    pass


class ConvergenceWarning(UserWarning):
    """Newton iteration accepted an iterate that did not meet the tolerance."""
    pass
