import numpy as np

from .config import make_config
from .families import QuadratureFamily, make_family
from .gamma import gamma_function
from .jacobi import jacobi_polynomial, jacobi_polynomial_derivative, jacobi_zeros

__all__ = ['cubature', 'gauss', 'gauss_radau_left', 'gauss_radau_right', 'gauss_lobatto']


def _single_point():
    return np.zeros(1, dtype=np.float64), np.full(1, 2.0)


def gauss(n, alpha, beta, config=None):
    """Gauss-Jacobi nodes (zeros of P_n) and weights"""
    apb = alpha + beta
    z = jacobi_zeros(n, alpha, beta, config=config)
    pd = jacobi_polynomial_derivative(z, n, alpha, beta, config=config)

    fac  = 2.0**(apb + 1)*gamma_function(alpha + n + 1)*gamma_function(beta + n + 1)
    fac /= gamma_function(n + 1)*gamma_function(apb + n + 1)

    w = fac/(pd*pd*(1 - z*z))
    return z, w


def gauss_radau_left(n, alpha, beta, config=None):
    """Gauss-Radau-Jacobi nodes and weights with the node z = -1 fixed"""
    if n == 1:
        return _single_point()
    apb = alpha + beta

    z = np.empty(n, dtype=np.float64)
    z[0] = -1.0
    z[1:] = jacobi_zeros(n-1, alpha, beta+1, config=config)
    p = jacobi_polynomial(z, n-1, alpha, beta, config=config)

    fac  = 2.0**apb*gamma_function(alpha + n)*gamma_function(beta + n)
    fac /= gamma_function(n)*(beta + n)*gamma_function(apb + n + 1)

    w = fac*(1 - z)/(p*p)
    w[0] *= beta + 1
    return z, w


def gauss_radau_right(n, alpha, beta, config=None):
    """Gauss-Radau-Jacobi nodes and weights with the node z = +1 fixed"""
    if n == 1:
        return _single_point()
    apb = alpha + beta

    z = np.empty(n, dtype=np.float64)
    z[:-1] = jacobi_zeros(n-1, alpha+1, beta, config=config)
    z[-1] = 1.0
    p = jacobi_polynomial(z, n-1, alpha, beta, config=config)

    fac  = 2.0**apb*gamma_function(alpha + n)*gamma_function(beta + n)
    fac /= gamma_function(n)*(alpha + n)*gamma_function(apb + n + 1)

    w = fac*(1 + z)/(p*p)
    w[-1] *= alpha + 1
    return z, w


def gauss_lobatto(n, alpha, beta, config=None):
    """Gauss-Lobatto-Jacobi nodes and weights with both endpoints fixed"""
    if n == 1:
        return _single_point()
    apb = alpha + beta

    z = np.empty(n, dtype=np.float64)
    z[0], z[-1] = -1.0, 1.0
    z[1:-1] = jacobi_zeros(n-2, alpha+1, beta+1, config=config)
    p = jacobi_polynomial(z, n-1, alpha, beta, config=config)

    fac  = 2.0**(apb + 1)*gamma_function(alpha + n)*gamma_function(beta + n)
    fac /= (n - 1)*gamma_function(n)*gamma_function(apb + n + 1)

    w = fac/(p*p)
    w[0] *= beta + 1
    w[-1] *= alpha + 1
    return z, w


_RULES = {
    QuadratureFamily.GAUSS: gauss,
    QuadratureFamily.GAUSS_RADAU_LEFT: gauss_radau_left,
    QuadratureFamily.GAUSS_RADAU_RIGHT: gauss_radau_right,
    QuadratureFamily.GAUSS_LOBATTO: gauss_lobatto,
}


def cubature(family, n, alpha, beta, config=None):
    """
    Gauss-type quadrature rule for the weighted integral
        I[f] = integrate( (1-z)**alpha * (1+z)**beta * f(z) dz, z, -1, 1 )
    Gauss rules are exact for polynomials of degree 2*n-1, Radau rules
    for degree 2*n-2 and Lobatto rules for degree 2*n-3.

    Parameters
    ----------
    family : QuadratureFamily or str
        One of ['gauss', 'gauss-radau-left', 'gauss-radau-right', 'gauss-lobatto']
    n : int
        Number of quadrature points, n >= 1
    alpha, beta : float
        Jacobi parameters, alpha,beta > -1.  The normalisation constants are
        Gamma function closed forms, so alpha and beta must be integers or
        half-integers
    config : PolylibConfig, dict or None, optional
        Numerical settings, see PolylibConfig

    Returns
    -------
    (z, w) : tuple of np.ndarray
        Ascending quadrature nodes and the matching positive weights

    """
    family = make_family(family)
    config = make_config(config)
    if int(n) != n or n < 1:
        raise ValueError(f'Number of points ({n}) must be a positive integer')
    return _RULES[family](int(n), alpha, beta, config=config)
