import numpy as np
import pytest

from jacobipoly.system import JacobiSystem
from jacobipoly.families import QuadratureFamily
from jacobipoly.config import PolylibConfig, DEFAULT_CONFIG, make_config
from jacobipoly.cubature import cubature
from jacobipoly.derivative import derivative_matrix
from jacobipoly.interpolation import interpolation_matrix
from jacobipoly.recurrence import polynomials
from jacobipoly.jacobi import jacobi_polynomial, jacobi_polynomial_derivative, jacobi_zeros


def check_close(a, b, tol):
    a, b = [np.asarray(m, dtype=np.float64) for m in [a,b]]
    error = np.max(abs(a-b))
    assert error <= tol, f'Error {error} exceeds tolerance {tol}'


def test_system_construction():
    print('test_system_construction')
    S = JacobiSystem('gauss-lobatto', 0.5, 1)
    assert S.family is QuadratureFamily.GAUSS_LOBATTO
    assert (S.alpha, S.beta) == (0.5, 1)
    assert S.config is DEFAULT_CONFIG
    assert repr(S) == "JacobiSystem('gauss-lobatto', 0.5, 1)"

    with pytest.raises(ValueError):
        JacobiSystem('gauss', -1, 0)
    with pytest.raises(ValueError):
        JacobiSystem('gauss', 0, -1.5)
    with pytest.raises(ValueError):
        JacobiSystem('chebyshev', 0, 0)


def test_system_methods():
    print('test_system_methods')
    a, b = 1.5, 0.5
    for family in QuadratureFamily:
        S = JacobiSystem(family, a, b)
        z, w = S.quadrature(7)
        z0, w0 = cubature(family, 7, a, b)
        check_close(z, z0, 0)
        check_close(w, w0, 0)

        check_close(S.derivative_matrix(z), derivative_matrix(family, z, a, b), 0)

        target = np.linspace(-1, 1, 9)
        check_close(S.interpolation_matrix(z, target), interpolation_matrix(family, z, target, a, b), 0)
        check_close(S.basis(2, target, z), interpolation_matrix(family, z, target, a, b)[:,2], 0)

    S = JacobiSystem('gauss', a, b)
    check_close(S.zeros(6), jacobi_zeros(6, a, b), 0)
    check_close(S.zeros(6, algorithm='deflation'), jacobi_zeros(6, a, b, algorithm='deflation'), 0)
    assert len(S.recurrence(4)[3]) == 5


def test_system_polynomials():
    print('test_system_polynomials')
    S = JacobiSystem('gauss', 1, 2)
    z = np.linspace(-1, 1, 15).reshape(3,5)
    P, dP = S.polynomials(6, z), S.derivatives(6, z)
    assert np.shape(P) == np.shape(dP) == (6,3,5)
    for k in range(6):
        check_close(P[k], jacobi_polynomial(z, k, 1, 2), 1e-12)
        check_close(dP[k], jacobi_polynomial_derivative(z, k, 1, 2), 0)

    assert np.shape(S.polynomials(3, 0.2)) == (3,)

    # All degrees come from a single pass of the three-term recurrence
    check_close(P, polynomials(6, 1, 2, z), 0)
    check_close(S.polynomials(40, z), polynomials(40, 1, 2, z), 0)


def test_system_weight_and_mass():
    print('test_system_weight_and_mass')
    S = JacobiSystem('gauss-radau-left', 1, 0.5)
    check_close(S.weight(np.array([-1., 0., 0.5])), [0., 1., 0.5*np.sqrt(1.5)], 1e-15)

    z, w = S.quadrature(5)
    check_close(np.sum(w), S.mass(), 1e-14)


def test_system_arrows():
    print('test_system_arrows')
    S = JacobiSystem('gauss', 0, 0, config={'zeros_algorithm': 'deflation'})
    T = S.apply_arrow(1, -0.5)
    assert (T.alpha, T.beta) == (1, -0.5)
    assert T.family is S.family and T.config is S.config
    assert (S.alpha, S.beta) == (0, 0)

    L = S.with_family('gauss-lobatto')
    assert L.family is QuadratureFamily.GAUSS_LOBATTO
    assert L.config is S.config

    # Interior Lobatto nodes are the Gauss nodes of the (1,1) system
    z, _ = L.quadrature(6)
    check_close(z[1:-1], S.apply_arrow(1, 1).zeros(4), 1e-14)


def test_config():
    print('test_config')
    config = make_config({'max_points': 10, 'verbose': True})
    assert config.max_points == 10 and config.max_order == 19
    assert config.tolerance == DEFAULT_CONFIG.tolerance
    assert config.verbose

    assert make_config([('max_iterations', 20)]) == DEFAULT_CONFIG.replace(max_iterations=20)
    assert make_config(None) is DEFAULT_CONFIG
    assert make_config(config) is config
    assert hash(PolylibConfig(max_points=10, verbose=True)) == hash(config)
    assert config != DEFAULT_CONFIG
    assert 'max_points=10' in repr(config)

    with pytest.raises(ValueError):
        make_config({'max_degree': 3})
    with pytest.raises(ValueError):
        make_config('verbose')
    with pytest.raises(ValueError):
        PolylibConfig(zeros_algorithm='bisection')
    with pytest.raises(ValueError):
        PolylibConfig(tolerance=0)
    with pytest.raises(ValueError):
        PolylibConfig(max_points=2.5)
    with pytest.raises(ValueError):
        PolylibConfig(max_iterations=0)
