import numpy as np

from .config import make_config
from .families import QuadratureFamily, make_family
from .gamma import gamma_function
from .jacobi import jacobi_polynomial_derivative

__all__ = ['derivative_matrix']


# Each family computes the node polynomial derivative pd at every node and
# the diagonal of D.  pd is filled completely before the matrix is assembled.

def _gauss(z, alpha, beta, config):
    n = len(z)
    pd = jacobi_polynomial_derivative(z, n, alpha, beta, config=config)
    diagonal = (alpha - beta + (alpha + beta + 2)*z)/(2*(1 - z*z))
    return pd, diagonal


def _gauss_radau_left(z, alpha, beta, config):
    n = len(z)
    pd, diagonal = np.empty(n), np.empty(n)

    pd[0] = (-1)**(n-1)*gamma_function(n + beta + 1)/(gamma_function(n)*gamma_function(beta + 2))
    zi = z[1:]
    pd[1:] = jacobi_polynomial_derivative(zi, n-1, alpha, beta+1, config=config)*(1 + zi)

    diagonal[0] = -(n + alpha + beta + 1)*(n - 1)/(2*(beta + 2))
    diagonal[1:] = (alpha - beta + 1 + (alpha + beta + 1)*zi)/(2*(1 - zi*zi))
    return pd, diagonal


def _gauss_radau_right(z, alpha, beta, config):
    n = len(z)
    pd, diagonal = np.empty(n), np.empty(n)

    zi = z[:-1]
    pd[:-1] = jacobi_polynomial_derivative(zi, n-1, alpha+1, beta, config=config)*(1 - zi)
    pd[-1] = -gamma_function(n + alpha + 1)/(gamma_function(n)*gamma_function(alpha + 2))

    diagonal[:-1] = (alpha - beta - 1 + (alpha + beta + 1)*zi)/(2*(1 - zi*zi))
    diagonal[-1] = (n + alpha + beta + 1)*(n - 1)/(2*(alpha + 2))
    return pd, diagonal


def _gauss_lobatto(z, alpha, beta, config):
    n = len(z)
    pd, diagonal = np.empty(n), np.empty(n)

    pd[0] = 2*(-1)**n*gamma_function(n + beta)/(gamma_function(n - 1)*gamma_function(beta + 2))
    zi = z[1:-1]
    pd[1:-1] = jacobi_polynomial_derivative(zi, n-2, alpha+1, beta+1, config=config)*(1 - zi*zi)
    pd[-1] = -2*gamma_function(n + alpha)/(gamma_function(n - 1)*gamma_function(alpha + 2))

    diagonal[0] = (alpha - (n - 1)*(n + alpha + beta))/(2*(beta + 2))
    diagonal[1:-1] = (alpha - beta + (alpha + beta)*zi)/(2*(1 - zi*zi))
    diagonal[-1] = -(beta - (n - 1)*(n + alpha + beta))/(2*(alpha + 2))
    return pd, diagonal


_RULES = {
    QuadratureFamily.GAUSS: _gauss,
    QuadratureFamily.GAUSS_RADAU_LEFT: _gauss_radau_left,
    QuadratureFamily.GAUSS_RADAU_RIGHT: _gauss_radau_right,
    QuadratureFamily.GAUSS_LOBATTO: _gauss_lobatto,
}


def _assemble(pd, z, diagonal):
    dz = z[:,np.newaxis] - z[np.newaxis,:]
    np.fill_diagonal(dz, 1.0)
    D = pd[:,np.newaxis]/(pd[np.newaxis,:]*dz)
    np.fill_diagonal(D, diagonal)
    return D


def derivative_matrix(family, z, alpha, beta, config=None):
    """
    Differentiation matrix for the Lagrange interpolants through the nodes z
    of the given family, so that du/dz at z[i] is sum_j D[i,j] * u(z[j]).
    Off-diagonal entries are
        D[i,j] = pd[i] / (pd[j] * (z[i]-z[j]))
    with pd the derivative of the family's node polynomial at each node.
    Diagonal entries use closed-form limits.

    Parameters
    ----------
    family : QuadratureFamily or str
        One of ['gauss', 'gauss-radau-left', 'gauss-radau-right', 'gauss-lobatto']
    z : array_like
        Nodes of the family, as returned by cubature
    alpha, beta : float
        Jacobi parameters used to build the nodes
    config : PolylibConfig, dict or None, optional
        Numerical settings, see PolylibConfig

    Returns
    -------
    np.ndarray of shape (len(z), len(z))

    """
    family = make_family(family)
    config = make_config(config)
    z = np.asarray(z, dtype=np.float64)
    if z.ndim != 1 or len(z) < 1:
        raise ValueError('z must be a non-empty one-dimensional array of nodes')
    if len(z) == 1:
        return np.zeros((1,1), dtype=np.float64)

    pd, diagonal = _RULES[family](z, alpha, beta, config)
    return _assemble(pd, z, diagonal)
