import numpy as np

from .exceptions import InvalidDomainError

__all__ = ['gamma_function', 'jacobi_mass']


def gamma_function(x):
    """
    Gamma function at integer and half-integer arguments.

    Integers use Γ(x) = (x-1)!, positive half-integers use
    Γ(x) = √π (x-1)(x-2)...(1/2), each built by repeated multiplication.
    Γ(0) is taken as 1 and Γ(-1/2) = -2√π.

    Parameters
    ----------
    x : float
        Integer or half-integer argument

    Returns
    -------
    floating point value of Γ(x)

    """
    x = float(x)
    if x == -0.5:
        return -2.0*np.sqrt(np.pi)
    if x == 0.0:
        return 1.0

    n = int(np.floor(x))
    remainder = x - n
    if x < 0 or remainder not in (0.0, 0.5):
        raise InvalidDomainError(f'Argument is not of integer or half order (x = {x})')

    tmp = x
    if remainder == 0.5:
        gamma = np.sqrt(np.pi)
        for _ in range(n):
            tmp -= 1.0
            gamma *= tmp
    else:
        gamma = 1.0
        for _ in range(n-1):
            tmp -= 1.0
            gamma *= tmp
    return gamma


def jacobi_mass(alpha, beta):
    """
    Integral of the Jacobi weight (1-z)**alpha * (1+z)**beta on (-1,1),
        2**(alpha+beta+1) * Γ(alpha+1) * Γ(beta+1) / Γ(alpha+beta+2)
    """
    apb = alpha + beta
    return 2.0**(apb+1) * gamma_function(alpha+1) * gamma_function(beta+1) / gamma_function(apb+2)
