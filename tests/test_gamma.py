import numpy as np
import mpmath
import pytest
from scipy.special import beta as beta_function

from jacobipoly.gamma import gamma_function, jacobi_mass
from jacobipoly.exceptions import InvalidDomainError, PolylibError


def check_close(a, b, tol):
    a, b = [np.asarray(m, dtype=np.float64) for m in [a,b]]
    error = np.max(abs(a-b))
    assert error <= tol, f'Error {error} exceeds tolerance {tol}'


def test_gamma_special_values():
    print('test_gamma_special_values')
    assert gamma_function(5) == 24
    assert gamma_function(1) == 1
    assert gamma_function(0) == 1
    assert gamma_function(0.5) == np.sqrt(np.pi)
    assert gamma_function(-0.5) == -2*np.sqrt(np.pi)
    check_close(gamma_function(1.5), np.sqrt(np.pi)/2, 1e-16)


def test_gamma_against_mpmath():
    print('test_gamma_against_mpmath')
    for x in np.arange(1, 20):
        target = float(mpmath.gamma(int(x)))
        assert gamma_function(x) == target
    for x in np.arange(0.5, 20, 1.0):
        target = float(mpmath.gamma(mpmath.mpf(x)))
        check_close(gamma_function(x)/target, 1, 1e-14)


def test_gamma_invalid_domain():
    print('test_gamma_invalid_domain')
    for x in [0.3, 2.25, -1.5, -1, -2, 1e-3]:
        with pytest.raises(InvalidDomainError):
            gamma_function(x)

    # The domain error is both a package error and a ValueError
    with pytest.raises(PolylibError):
        gamma_function(0.7)
    with pytest.raises(ValueError):
        gamma_function(0.7)


def test_jacobi_mass():
    print('test_jacobi_mass')
    check_close(jacobi_mass(0, 0), 2, 0)
    check_close(jacobi_mass(0.5, 0.5), np.pi/2, 2e-15)
    check_close(jacobi_mass(-0.5, -0.5), np.pi, 2e-15)
    for a in [-0.5, 0, 0.5, 1, 2.5, 4]:
        for b in [-0.5, 0, 0.5, 1, 3]:
            target = 2**(a+b+1) * beta_function(a+1, b+1)
            check_close(jacobi_mass(a, b)/target, 1, 1e-14)
