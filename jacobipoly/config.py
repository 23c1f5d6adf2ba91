import numpy as np

__all__ = ['PolylibConfig', 'DEFAULT_CONFIG', 'make_config']


_ALGORITHMS = ('tridiagonal', 'deflation', 'eigh')


class PolylibConfig():
    """
    Immutable numerical settings shared by every routine in the package.

    Parameters
    ----------
    tolerance : float, optional
        Convergence threshold for Newton iteration and the coincidence test
        of the Lagrange interpolants
    max_iterations : int, optional
        Bound on Newton updates per zero and on QL sweeps per row
    max_points : int, optional
        Largest supported number of points.  Polynomial degrees are bounded
        by max_order = 2*max_points-1
    zeros_algorithm : str, optional
        Strategy for the Jacobi zeros, one of ['tridiagonal', 'deflation', 'eigh']
    verbose : bool, optional
        Flag to print iteration diagnostics

    """
    def __init__(self, tolerance=50*np.finfo(np.float64).eps, max_iterations=50, max_points=64,
                 zeros_algorithm='tridiagonal', verbose=False):
        if tolerance <= 0:
            raise ValueError(f'tolerance ({tolerance}) must be positive')
        if int(max_iterations) != max_iterations or max_iterations < 1:
            raise ValueError(f'max_iterations ({max_iterations}) must be a positive integer')
        if int(max_points) != max_points or max_points < 1:
            raise ValueError(f'max_points ({max_points}) must be a positive integer')
        if zeros_algorithm not in _ALGORITHMS:
            raise ValueError(f'Unknown zeros algorithm {zeros_algorithm}')

        self.__tolerance = float(tolerance)
        self.__max_iterations = int(max_iterations)
        self.__max_points = int(max_points)
        self.__zeros_algorithm = zeros_algorithm
        self.__verbose = bool(verbose)

    @property
    def tolerance(self):
        return self.__tolerance

    @property
    def max_iterations(self):
        return self.__max_iterations

    @property
    def max_points(self):
        return self.__max_points

    @property
    def max_order(self):
        return 2*self.__max_points-1

    @property
    def zeros_algorithm(self):
        return self.__zeros_algorithm

    @property
    def verbose(self):
        return self.__verbose

    def as_dict(self):
        return {'tolerance': self.tolerance, 'max_iterations': self.max_iterations,
                'max_points': self.max_points, 'zeros_algorithm': self.zeros_algorithm,
                'verbose': self.verbose}

    def replace(self, **kwargs):
        unknown = set(kwargs) - set(self.as_dict())
        if unknown:
            raise ValueError(f'Unknown config keys: {sorted(unknown)}')
        settings = self.as_dict()
        settings.update(kwargs)
        return PolylibConfig(**settings)

    def __eq__(self, other):
        if not isinstance(other, PolylibConfig):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self):
        return hash(tuple(sorted(self.as_dict().items())))

    def __repr__(self):
        settings = ', '.join(f'{key}={value!r}' for key, value in self.as_dict().items())
        return f'PolylibConfig({settings})'


DEFAULT_CONFIG = PolylibConfig()


def make_config(config=None):
    """Normalise None, a PolylibConfig, a dict or a list of (key,value) pairs into a PolylibConfig"""
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, PolylibConfig):
        return config
    if isinstance(config, (list,tuple)):
        config = dict(config)
    elif not isinstance(config, dict):
        raise ValueError('config must be either None, a PolylibConfig, a list of (key,value) pairs, or a dict')
    return DEFAULT_CONFIG.replace(**config)
