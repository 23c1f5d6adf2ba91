import warnings
import numpy as np
from scipy.linalg import eigvalsh_tridiagonal
from scipy.special import beta as beta_function

from .config import make_config
from .exceptions import OrderExceededError, MisuseError, ConvergenceWarning
from .tools import tri_ql

__all__ = ['jacobi_polynomial', 'jacobi_polynomial_derivative', 'jacobi_zeros',
    'jacobi_zeros_deflation', 'jacobi_zeros_tridiagonal', 'jacobi_zeros_eigh', 'tridiagonal_coefficients']


def _check_order(n, config):
    if n > config.max_order:
        raise OrderExceededError(f'Requested order ({n}) exceeds max_order ({config.max_order})')


def _output(values, z):
    return values[()] if np.ndim(z) == 0 else values


def jacobi_polynomial(z, n, alpha, beta, values=True, derivatives=False, config=None):
    """
    Jacobi polynomial P_n^{alpha,beta}(z) and optionally its derivative,
    evaluated with the three-term recurrence
        a1_k P_k = (a2_k + a3_k z) P_{k-1} - a4_k P_{k-2},  k = 2..n
    The recurrence coefficients are computed once and shared by every point.

    Parameters
    ----------
    z : float or array_like
        Grid locations to evaluate the polynomial
    n : int
        Polynomial degree, 0 <= n <= config.max_order
    alpha, beta : float
        Jacobi parameters, alpha,beta > -1
    values : bool, optional
        Flag to return the polynomial values.  Must be True: derivatives
        are only computed alongside the values
    derivatives : bool, optional
        Flag to also return the derivative, from
            (2n+a+b)(1-z**2) P_n' = n(a-b-(2n+a+b)z) P_n + 2(n+a)(n+b) P_{n-1}
        This form is singular at z = ±1; use jacobi_polynomial_derivative there.
    config : PolylibConfig, dict or None, optional
        Numerical settings, see PolylibConfig

    Returns
    -------
    P, or (P, Pprime) when derivatives is True, with the shape of z

    """
    config = make_config(config)
    if not values:
        if derivatives:
            raise MisuseError('Polynomial values are needed to compute the derivatives')
        raise MisuseError('Nothing to evaluate: both values and derivatives are disabled')
    _check_order(n, config)

    z = np.asarray(z, dtype=np.float64)
    apb, amb = alpha + beta, alpha - beta

    if n == 0:
        P, Pprime = np.ones_like(z), np.zeros_like(z)
    elif n == 1:
        P, Pprime = 0.5*(amb + (apb + 2)*z), np.full_like(z, 0.5*(apb + 2))
    else:
        k = np.arange(2, n+1, dtype=np.float64)
        a1 = 2*k*(k + apb)*(2*k + apb - 2)
        a2 = (2*k + apb - 1)*(apb*amb)/a1
        a3 = (2*k + apb - 2)*(2*k + apb - 1)*(2*k + apb)/a1
        a4 = 2*(k + alpha - 1)*(k + beta - 1)*(2*k + apb)/a1

        Pnm1, P = np.ones_like(z), 0.5*(amb + (apb + 2)*z)
        for j in range(n-1):
            Pnm1, P = P, (a2[j] + a3[j]*z)*P - a4[j]*Pnm1

        Pprime = None
        if derivatives:
            ad4 = 2*n + apb
            ad1 = n*amb/ad4
            ad2 = n*(2*n + apb)/ad4
            ad3 = 2*(n + alpha)*(n + beta)/ad4
            Pprime = ((ad1 - ad2*z)*P + ad3*Pnm1)/(1 - z*z)

    if derivatives:
        return _output(P, z), _output(Pprime, z)
    return _output(P, z)


def jacobi_polynomial_derivative(z, n, alpha, beta, config=None):
    """
    Derivative of the Jacobi polynomial using the parameter-shift identity
        d/dz P_n^{a,b}(z) = 1/2 (a+b+n+1) P_{n-1}^{a+1,b+1}(z)
    Valid on the closed interval [-1,1].
    """
    if n == 0:
        return _output(np.zeros_like(np.asarray(z, dtype=np.float64)), z)
    P = jacobi_polynomial(z, n-1, alpha+1, beta+1, config=config)
    return 0.5*(alpha + beta + n + 1)*P


def jacobi_zeros_deflation(n, alpha, beta, config=None):
    """
    Zeros of P_n^{alpha,beta} by Newton iteration with polynomial deflation.
    The k-th zero starts from the Chebyshev-like guess -cos((2k+1)π/2n),
    averaged with the previous zero, and the already-found zeros are
    divided out of the Newton update.  Zeros come out in ascending order.

    Parameters
    ----------
    n : int
        Polynomial degree
    alpha, beta : float
        Jacobi parameters, alpha,beta > -1
    config : PolylibConfig, dict or None, optional
        Numerical settings.  Uses tolerance, max_iterations and verbose

    Returns
    -------
    np.ndarray of the n zeros

    """
    config = make_config(config)
    _check_order(n, config)
    z = np.zeros(n, dtype=np.float64)
    if n == 0:
        return z

    dth = np.pi/(2.0*n)
    rlast = 0.0
    for k in range(n):
        r = -np.cos((2.0*k + 1.0)*dth)
        if k:
            r = 0.5*(r + rlast)

        converged, iterations, delr = False, 0, np.inf
        for iterations in range(1, config.max_iterations+1):
            poly, pder = jacobi_polynomial(r, n, alpha, beta, derivatives=True, config=config)
            deflation = np.sum(1.0/(r - z[:k]))
            delr = -poly/(pder - deflation*poly)
            r += delr
            if abs(delr) < config.tolerance:
                converged = True
                break

        if not converged:
            warnings.warn(f'Zero {k} of P_{n}^({alpha},{beta}) did not converge within '
                          f'{config.max_iterations} iterations (last update {abs(delr):.3e})',
                          ConvergenceWarning, stacklevel=2)
        if config.verbose:
            print(f'Jacobi zero {k} of {n}: {iterations} Newton iterations')

        z[k] = r
        rlast = r
    return z


def tridiagonal_coefficients(n, alpha, beta):
    """
    Diagonal a and off-diagonal b of the symmetric Jacobi matrix of the
    orthonormal polynomials for the weight (1-z)**alpha * (1+z)**beta.
    Its eigenvalues are the zeros of P_n^{alpha,beta}.

    Only b[:n-1] couples rows of the matrix.  The trailing slot b[n-1]
    holds the mass of the weight function, 2**(alpha+beta+1) B(alpha+1, beta+1),
    valid for every alpha,beta > -1

    Returns
    -------
    (a, b) : tuple of np.ndarray, each of length n

    """
    a, b = np.zeros(n, dtype=np.float64), np.zeros(n, dtype=np.float64)
    if n == 0:
        return a, b

    apb = alpha + beta
    apbi = 2.0 + apb
    a[0] = (beta - alpha)/apbi
    b[0] = np.sqrt(4.0*(1.0 + alpha)*(1.0 + beta)/((apbi + 1.0)*apbi*apbi))

    a2b2 = beta*beta - alpha*alpha
    i = np.arange(1, n-1, dtype=np.float64)
    apbi = 2.0*(i + 1) + apb
    a[1:n-1] = a2b2/((apbi - 2.0)*apbi)
    b[1:n-1] = np.sqrt(4.0*(i + 1)*(i + 1 + alpha)*(i + 1 + beta)*(i + 1 + apb)/((apbi*apbi - 1)*apbi*apbi))

    # For n == 1 the general formula is 0/0 when alpha+beta == 0, so a[0] stands
    if n > 1:
        apbi = 2.0*n + apb
        a[n-1] = a2b2/((apbi - 2.0)*apbi)

    b[n-1] = 2.0**(apb + 1.0)*beta_function(alpha + 1.0, beta + 1.0)
    return a, b


def jacobi_zeros_tridiagonal(n, alpha, beta, config=None):
    """Zeros of P_n^{alpha,beta} as the eigenvalues of the orthonormal Jacobi matrix"""
    config = make_config(config)
    _check_order(n, config)
    if n == 0:
        return np.zeros(0, dtype=np.float64)
    a, b = tridiagonal_coefficients(n, alpha, beta)
    return tri_ql(a, b, config=config)


def jacobi_zeros_eigh(n, alpha, beta, config=None):
    """Zeros of P_n^{alpha,beta} from the LAPACK symmetric tridiagonal eigensolver"""
    config = make_config(config)
    _check_order(n, config)
    if n == 0:
        return np.zeros(0, dtype=np.float64)
    a, b = tridiagonal_coefficients(n, alpha, beta)
    return eigvalsh_tridiagonal(a, b[:n-1])


def jacobi_zeros(n, alpha, beta, config=None, algorithm=None):
    """
    Zeros of the Jacobi polynomial P_n^{alpha,beta} in ascending order

    Parameters
    ----------
    n : int
        Polynomial degree
    alpha, beta : float
        Jacobi parameters, alpha,beta > -1
    config : PolylibConfig, dict or None, optional
        Numerical settings, see PolylibConfig
    algorithm : str, optional
        One of ['tridiagonal', 'deflation', 'eigh'].  None -> config.zeros_algorithm

    Returns
    -------
    np.ndarray of the n zeros

    """
    config = make_config(config)
    if algorithm is None:
        algorithm = config.zeros_algorithm
    algorithms = {'tridiagonal': jacobi_zeros_tridiagonal, 'deflation': jacobi_zeros_deflation,
                  'eigh': jacobi_zeros_eigh}
    if algorithm not in algorithms.keys():
        raise ValueError(f'Unknown algorithm {algorithm}')
    return algorithms[algorithm](n, alpha, beta, config=config)
