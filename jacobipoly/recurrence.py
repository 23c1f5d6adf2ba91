import numpy as np

__all__ = ['recurrence_coefficients', 'polynomials']


def recurrence_coefficients(n, alpha, beta):
    """
    Three-term recurrence coefficients of the Jacobi polynomials in the form
        P_{k+1}(z) = gamma[k+1] * ((delta[k]*z - alpha[k]) * P_k(z) - beta[k] * P_{k-1}(z))
    with P_{-1} = 0 and P_0 = gamma[0] = 1.  For k >= 1
        alpha[k] = B_k = -(2k+a+b+1)(a**2-b**2)
        beta[k]  = D_k = 2(k+a)(k+b)(2k+a+b+2)
        delta[k] = C_k = (2k+a+b)(2k+a+b+1)(2k+a+b+2)
        gamma[k+1] = 1/A_k,  A_k = 2(k+1)(k+a+b+1)(2k+a+b)
    A_0 and C_0 vanish when a+b = 0, so the first step uses the reduced form
    P_1 = ((a+b+2)z + a-b)/2 for every parameter choice.

    Parameters
    ----------
    n : int
        Number of recurrence steps
    alpha, beta : float
        Jacobi parameters, alpha,beta > -1

    Returns
    -------
    (alpha, beta, delta, gamma) : tuple of np.ndarray
        alpha, beta and delta have length n, gamma has length n+1

    """
    a, b = alpha, beta
    apb = a + b
    k = np.arange(n, dtype=np.float64)
    with np.errstate(divide='ignore', invalid='ignore'):
        A = 2*(k + 1)*(k + apb + 1)*(2*k + apb)
        B = -(2*k + apb + 1)*(a*a - b*b)
        C = (2*k + apb)*(2*k + apb + 1)*(2*k + apb + 2)
        D = 2*(k + a)*(k + b)*(2*k + apb + 2)
        rgamma = 1/A

    alphas, betas, deltas = B, D, C
    gammas = np.append(1.0, rgamma)
    if n > 0:
        alphas[0], betas[0], deltas[0], gammas[1] = b - a, 0.0, apb + 2, 0.5
    return alphas, betas, deltas, gammas


def polynomials(n, alpha, beta, z):
    """
    Jacobi polynomials P_k^{alpha,beta}(z), k = 0..n-1, evaluated by running
    the recurrence_coefficients recurrence.

    Returns
    -------
    np.ndarray of shape (n,)+np.shape(z), so that the degree k polynomial is P[k]

    """
    z = np.asarray(z, dtype=np.float64)
    P = np.empty((n,) + np.shape(z), dtype=np.float64)
    if n == 0:
        return P

    alphas, betas, deltas, gammas = recurrence_coefficients(n, alpha, beta)
    P[0] = gammas[0]
    if n > 1:
        P[1] = gammas[1]*(deltas[0]*z - alphas[0])*P[0]
    for k in range(1, n-1):
        P[k+1] = gammas[k+1]*((deltas[k]*z - alphas[k])*P[k] - betas[k]*P[k-1])
    return P
