import numpy as np

from .config import make_config
from .families import QuadratureFamily, make_family
from .jacobi import jacobi_polynomial, jacobi_polynomial_derivative

__all__ = ['lagrange_interpolant', 'interpolation_matrix']


# Each family returns the ratio of the node polynomial at z to its derivative
# at node zi, before division by (z - zi).  Derivatives at zi go through the
# parameter-shift form so zi = ±1 is safe.

def _gauss(z, zi, n, alpha, beta, config):
    pd = jacobi_polynomial_derivative(zi, n, alpha, beta, config=config)
    p = jacobi_polynomial(z, n, alpha, beta, config=config)
    return p/pd


def _gauss_radau_left(z, zi, n, alpha, beta, config):
    p = jacobi_polynomial(zi, n-1, alpha, beta+1, config=config)
    pd = jacobi_polynomial_derivative(zi, n-1, alpha, beta+1, config=config)
    h = (1 + zi)*pd + p
    return (1 + z)*jacobi_polynomial(z, n-1, alpha, beta+1, config=config)/h


def _gauss_radau_right(z, zi, n, alpha, beta, config):
    p = jacobi_polynomial(zi, n-1, alpha+1, beta, config=config)
    pd = jacobi_polynomial_derivative(zi, n-1, alpha+1, beta, config=config)
    h = (1 - zi)*pd - p
    return (1 - z)*jacobi_polynomial(z, n-1, alpha+1, beta, config=config)/h


def _gauss_lobatto(z, zi, n, alpha, beta, config):
    p = jacobi_polynomial(zi, n-2, alpha+1, beta+1, config=config)
    pd = jacobi_polynomial_derivative(zi, n-2, alpha+1, beta+1, config=config)
    h = (1 - zi*zi)*pd - 2*zi*p
    return (1 - z*z)*jacobi_polynomial(z, n-2, alpha+1, beta+1, config=config)/h


_RULES = {
    QuadratureFamily.GAUSS: _gauss,
    QuadratureFamily.GAUSS_RADAU_LEFT: _gauss_radau_left,
    QuadratureFamily.GAUSS_RADAU_RIGHT: _gauss_radau_right,
    QuadratureFamily.GAUSS_LOBATTO: _gauss_lobatto,
}


def lagrange_interpolant(family, i, z, nodes, alpha, beta, config=None):
    """
    Evaluate the i-th Lagrange interpolant through the family's node set,
    the polynomial of degree len(nodes)-1 equal to one at nodes[i] and zero
    at every other node.

    Parameters
    ----------
    family : QuadratureFamily or str
        One of ['gauss', 'gauss-radau-left', 'gauss-radau-right', 'gauss-lobatto']
    i : int
        Index of the node where the interpolant is one
    z : float or array_like
        Locations to evaluate the interpolant
    nodes : array_like
        Nodes of the family, as returned by cubature
    alpha, beta : float
        Jacobi parameters used to build the nodes
    config : PolylibConfig, dict or None, optional
        Numerical settings.  Points within config.tolerance of nodes[i]
        evaluate to exactly one

    Returns
    -------
    float or np.ndarray with the shape of z

    """
    family = make_family(family)
    config = make_config(config)
    nodes = np.asarray(nodes, dtype=np.float64)
    n = len(nodes)
    if not 0 <= i < n:
        raise ValueError(f'Node index ({i}) must lie in [0, {n})')

    zarr = np.asarray(z, dtype=np.float64)
    if n == 1:
        h = np.ones_like(zarr)
    else:
        zi = nodes[i]
        dz = zarr - zi
        coincident = np.abs(dz) < config.tolerance
        dz = np.where(coincident, 1.0, dz)
        h = _RULES[family](zarr, zi, n, alpha, beta, config)/dz
        h = np.where(coincident, 1.0, h)
    return h[()] if np.ndim(z) == 0 else h


def interpolation_matrix(family, source, target, alpha, beta, config=None):
    """
    Matrix interpolating nodal values on the family's source nodes to
    arbitrary target points,
        I[row,col] = lagrange_interpolant(family, col, target[row], source, alpha, beta)

    Parameters
    ----------
    family : QuadratureFamily or str
        Family of the source nodes
    source : array_like
        Source nodes, length nz
    target : array_like
        Target points, length mz
    alpha, beta : float
        Jacobi parameters used to build the source nodes
    config : PolylibConfig, dict or None, optional
        Numerical settings, see PolylibConfig

    Returns
    -------
    np.ndarray of shape (mz, nz)

    """
    source = np.asarray(source, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    if source.ndim != 1 or target.ndim != 1:
        raise ValueError('source and target must be one-dimensional arrays')

    I = np.empty((len(target), len(source)), dtype=np.float64)
    for col in range(len(source)):
        I[:,col] = lagrange_interpolant(family, col, target, source, alpha, beta, config=config)
    return I
