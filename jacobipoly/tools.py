import numpy as np
from math import sqrt

from .config import make_config
from .exceptions import IterationLimitError

__all__ = ['tri_ql']


def tri_ql(d, e, config=None):
    """
    Eigenvalues of a real symmetric tridiagonal matrix by the QL algorithm
    with implicit shifts.

    Each row l is reduced by repeated sweeps: find the first m >= l whose
    off-diagonal entry is negligible next to its diagonal neighbours, shift
    by the eigenvalue of the leading 2x2 block closest to d[l], then chase
    the bulge with Givens rotations from m-1 down to l.

    Parameters
    ----------
    d : array_like
        Diagonal entries, length n
    e : array_like
        Off-diagonal entries with e[i] coupling rows i and i+1.  Length n-1
        or n; when length n the final entry is only used as scratch space
    config : PolylibConfig, dict or None, optional
        Numerical settings, see PolylibConfig.  Uses max_iterations and verbose

    Returns
    -------
    np.ndarray of eigenvalues sorted in ascending order

    """
    config = make_config(config)
    d = [float(v) for v in np.ravel(d)]
    e = [float(v) for v in np.ravel(e)]
    n = len(d)
    if len(e) == n-1:
        e.append(0.0)
    elif len(e) != n:
        raise ValueError(f'Off-diagonal has length {len(e)}, expected {n-1} or {n}')

    total_sweeps = 0
    for l in range(n):
        sweeps = 0
        while True:
            m = l
            while m < n-1:
                dd = abs(d[m]) + abs(d[m+1])
                if abs(e[m]) + dd == dd:
                    break
                m += 1
            if m == l:
                break

            if sweeps == config.max_iterations:
                raise IterationLimitError(f'Too many iterations in TQLI (row {l}, {sweeps} sweeps)')
            sweeps += 1

            # Shift from the leading 2x2 block
            g = (d[l+1] - d[l])/(2.0*e[l])
            r = sqrt(g*g + 1.0)
            g = d[m] - d[l] + e[l]/(g + (-r if g < 0 else r))

            s, c, p = 1.0, 1.0, 0.0
            for i in range(m-1, l-1, -1):
                f, b = s*e[i], c*e[i]
                if abs(f) >= abs(g):
                    c = g/f
                    r = sqrt(c*c + 1.0)
                    e[i+1] = f*r
                    s = 1.0/r
                    c *= s
                else:
                    s = f/g
                    r = sqrt(s*s + 1.0)
                    e[i+1] = g*r
                    c = 1.0/r
                    s *= c
                g = d[i+1] - p
                r = (d[i] - g)*s + 2.0*c*b
                p = s*r
                d[i+1] = g + p
                g = c*r - b

            d[l] -= p
            e[l] = g
            e[m] = 0.0
        total_sweeps += sweeps

    if config.verbose:
        print(f'TQLI converged for n = {n} in {total_sweeps} sweeps')

    return np.sort(np.array(d, dtype=np.float64))
