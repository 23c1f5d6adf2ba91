import numpy as np
import pytest

from jacobipoly.cubature import cubature
from jacobipoly.derivative import derivative_matrix
from jacobipoly.jacobi import jacobi_polynomial, jacobi_polynomial_derivative


def check_close(a, b, tol):
    a, b = [np.asarray(m, dtype=np.float64) for m in [a,b]]
    error = np.max(abs(a-b))
    assert error <= tol, f'Error {error} exceeds tolerance {tol}'


families = ['gauss', 'gauss-radau-left', 'gauss-radau-right', 'gauss-lobatto']


def test_derivative_exact_for_polynomials():
    print('test_derivative_exact_for_polynomials')
    for family in families:
        for a, b in [(0,0), (0.5,-0.5), (1,2), (-0.5,1.5)]:
            for n in range(2, 21):
                z, _ = cubature(family, n, a, b)
                D = derivative_matrix(family, z, a, b)
                assert np.shape(D) == (n,n)

                # Differentiate a degree n-1 polynomial unrelated to the node parameters
                f = jacobi_polynomial(z, n-1, 0.5, 0.5)
                fprime = jacobi_polynomial_derivative(z, n-1, 0.5, 0.5)
                scale = max(np.max(abs(fprime)), 1.)
                check_close(D @ f / scale, fprime / scale, 1e-9)


def test_derivative_annihilates_constants():
    print('test_derivative_annihilates_constants')
    for family in families:
        for n in [2, 5, 12]:
            z, _ = cubature(family, n, 1.5, 0.5)
            D = derivative_matrix(family, z, 1.5, 0.5)
            check_close(np.sum(D, axis=1)/np.max(abs(D)), 0, 1e-11)


def test_derivative_lobatto_legendre():
    print('test_derivative_lobatto_legendre')
    D = derivative_matrix('gauss-lobatto', [-1., 1.], 0, 0)
    check_close(D, [[-0.5, 0.5], [-0.5, 0.5]], 1e-15)

    z, _ = cubature('gauss-lobatto', 3, 0, 0)
    D = derivative_matrix('gauss-lobatto', z, 0, 0)
    target = [[-1.5,  2., -0.5],
              [-0.5,  0.,  0.5],
              [ 0.5, -2.,  1.5]]
    check_close(D, target, 1e-14)


def test_derivative_single_point():
    print('test_derivative_single_point')
    for family in families:
        D = derivative_matrix(family, [0.], 0, 0)
        check_close(D, [[0.]], 0)
        assert np.shape(D) == (1,1)


def test_derivative_errors():
    print('test_derivative_errors')
    with pytest.raises(ValueError):
        derivative_matrix('gauss', [], 0, 0)
    with pytest.raises(ValueError):
        derivative_matrix('gauss', np.zeros((2,2)), 0, 0)
    with pytest.raises(ValueError):
        derivative_matrix('legendre', [-0.5, 0.5], 0, 0)
