import numpy as np

from .config import make_config
from .families import make_family
from .gamma import jacobi_mass
from .jacobi import jacobi_polynomial_derivative, jacobi_zeros
from .cubature import cubature
from .derivative import derivative_matrix
from .interpolation import lagrange_interpolant, interpolation_matrix
from .recurrence import recurrence_coefficients, polynomials

__all__ = ['JacobiSystem']


class JacobiSystem():
    """
    Jacobi weight (1-z)**alpha * (1+z)**beta on (-1,1) paired with a
    Gauss-type node family.  Every operation of the package is available as
    a method, dispatched on the family.

    Parameters
    ----------
    family : QuadratureFamily or str
        One of ['gauss', 'gauss-radau-left', 'gauss-radau-right', 'gauss-lobatto']
    alpha, beta : float
        Jacobi parameters, alpha,beta > -1
    config : PolylibConfig, dict or list of (key,value) pairs, optional
        Numerical settings, see PolylibConfig

    """
    def __init__(self, family, alpha, beta, config=None):
        if alpha <= -1 or beta <= -1:
            raise ValueError(f'alpha ({alpha}) and beta ({beta}) must both be greater than -1')
        self.__family = make_family(family)
        self.__alpha, self.__beta = alpha, beta
        self.__config = make_config(config)

    @property
    def family(self):
        return self.__family

    @property
    def alpha(self):
        return self.__alpha

    @property
    def beta(self):
        return self.__beta

    @property
    def config(self):
        return self.__config

    def __repr__(self):
        return f'JacobiSystem({self.family.value!r}, {self.alpha}, {self.beta})'

    def with_family(self, family):
        return JacobiSystem(family, self.alpha, self.beta, config=self.config)

    def apply_arrow(self, da, db):
        return JacobiSystem(self.family, self.alpha+da, self.beta+db, config=self.config)

    def weight(self, z):
        return (1-z)**self.alpha * (1+z)**self.beta

    def mass(self):
        return jacobi_mass(self.alpha, self.beta)

    def polynomials(self, n, z):
        """Jacobi polynomials of degree 0 to n-1 at z, so that P[k] has degree k"""
        return polynomials(n, self.alpha, self.beta, z)

    def derivatives(self, n, z):
        """Derivatives of the Jacobi polynomials of degree 0 to n-1 at z"""
        z = np.asarray(z, dtype=np.float64)
        return np.array([jacobi_polynomial_derivative(z, k, self.alpha, self.beta, config=self.config) for k in range(n)]).reshape((n,)+np.shape(z))

    def zeros(self, n, algorithm=None):
        return jacobi_zeros(n, self.alpha, self.beta, config=self.config, algorithm=algorithm)

    def recurrence(self, n):
        return recurrence_coefficients(n, self.alpha, self.beta)

    def quadrature(self, n):
        return cubature(self.family, n, self.alpha, self.beta, config=self.config)

    def derivative_matrix(self, z):
        return derivative_matrix(self.family, z, self.alpha, self.beta, config=self.config)

    def basis(self, i, z, nodes):
        return lagrange_interpolant(self.family, i, z, nodes, self.alpha, self.beta, config=self.config)

    def interpolation_matrix(self, source, target):
        return interpolation_matrix(self.family, source, target, self.alpha, self.beta, config=self.config)
