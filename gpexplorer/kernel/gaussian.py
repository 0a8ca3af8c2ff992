# gpexplorer/kernel/gaussian.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
import gpexplorer.num as gnp


def gaussian_kernel(h):
    """Gaussian (squared exponential, RBF) kernel.

    .. math::
        k(h) = \\exp(-h^2 / 2)

    Parameters
    ----------
    h : gnp.array, shape (n,)
        Scaled distances between points.

    Returns
    -------
    gnp.array, shape (n,)
        Kernel values.
    """
    return gnp.exp(-0.5 * h * h)
