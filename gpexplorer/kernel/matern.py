# gpexplorer/kernel/matern.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
from math import sqrt
import gpexplorer.num as gnp

# exp(-c h) underflows to 0 well below this scaled distance
_HMAX = 1e3


def maternp_kernel(p: int, h):
    """Matérn kernel with half-integer regularity :math:`\\nu = p + 1/2`.

    Using the half-integer simplification (Abramowitz & Stegun), with
    :math:`c = \\sqrt{2\\nu}`:

    .. math::
        k(h) = \\exp(-c\\,h)\\,
               \\frac{\\Gamma(p+1)}{\\Gamma(2p+1)}
               \\sum_{i=0}^{p} \\frac{(p+i)!}{i!(p-i)!}\\,(2c\\,h)^{\\,p-i}

    p = 0, 1, 2 give the exponential, Matérn 3/2 and Matérn 5/2 kernels.
    The value at h = 0 is exactly 1 and the kernel is 0 for h >= 1e3,
    including h = inf.

    Parameters
    ----------
    p : int
        Nonnegative integer with :math:`\\nu = p+1/2`.
    h : gnp.array
        Scaled distances.

    Returns
    -------
    gnp.array
        Kernel values.
    """
    gln = gnp.compute_gammaln(p)
    h = gnp.minimum(gnp.asarray(h, dtype=gnp.float64), _HMAX)
    c = sqrt(2.0 * p + 1.0)
    twoch = 2.0 * c * h
    # the i = p term of the sum equals 1 after normalization
    polynomial = gnp.ones(h.shape)
    for i in range(p):
        exp_log_combination = gnp.exp(
            gln[p + 1] - gln[2 * p + 1] + gln[p + i + 1] - gln[i + 1] - gln[p - i + 1]
        )
        polynomial += exp_log_combination * (twoch ** (p - i))
    return gnp.exp(-c * h) * polynomial
