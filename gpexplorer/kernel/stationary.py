# gpexplorer/kernel/stationary.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Stationary isotropic covariance functions on the real line.

Every kernel of the closed set `KernelId` is of the form

.. math::
    k(x, x') = \\sigma^2 \\rho(|x - x'| / \\ell)

where :math:`\\rho` is one of the correlation functions of this
subpackage, :math:`\\ell > 0` the length scale and :math:`\\sigma^2 > 0`
the signal variance.
"""
from enum import Enum
from functools import partial

import gpexplorer.num as gnp
from gpexplorer.errors import UnknownKernelError
from .exponential import exponential_kernel
from .gaussian import gaussian_kernel
from .matern import maternp_kernel


class KernelId(Enum):
    RBF = "rbf"
    MATERN12 = "matern12"
    MATERN32 = "matern32"
    MATERN52 = "matern52"


_CORRELATIONS = {
    KernelId.RBF: gaussian_kernel,
    KernelId.MATERN12: exponential_kernel,
    KernelId.MATERN32: partial(maternp_kernel, 1),
    KernelId.MATERN52: partial(maternp_kernel, 2),
}


def kernel_id(kernel):
    """Return the `KernelId` named by ``kernel`` (a KernelId or a string).

    Raises
    ------
    UnknownKernelError
        If ``kernel`` does not name one of the supported kernels.
    """
    if isinstance(kernel, KernelId):
        return kernel
    try:
        return KernelId(str(kernel).lower())
    except ValueError:
        supported = ", ".join(k.value for k in KernelId)
        raise UnknownKernelError(
            f"Unknown kernel '{kernel}'. Supported kernels are: {supported}."
        ) from None


def correlation(kernel):
    """Return the correlation function rho(h) of ``kernel``."""
    return _CORRELATIONS[kernel_id(kernel)]


def resolve_kernel(kernel):
    """Resolve ``kernel`` to a pure covariance function.

    The returned function is called as ``k(x, y, lengthscale, variance)``
    and evaluates elementwise on scalars or broadcastable arrays.

    Examples
    --------
    >>> k = resolve_kernel("matern32")
    >>> float(k(0.0, 0.0, 1.0, 2.0))
    2.0
    """
    rho = correlation(kernel)

    def k(x, y, lengthscale, variance):
        h = gnp.abs(gnp.asdouble(x) - gnp.asdouble(y)) / lengthscale
        return variance * rho(h)

    k.__name__ = f"{kernel_id(kernel).value}_covariance"
    return k


def covariance(kernel, x, y, lengthscale, variance, pairwise=False):
    """Covariance between the points x and y.

    Parameters
    ----------
    kernel : KernelId or str
    x : array_like, shape (n,)
    y : array_like, shape (m,) or None
        None means y := x.
    lengthscale : float
    variance : float
    pairwise : bool
        If True, return the vector k(x_i, y_i) (n == m);
        else the (n, m) matrix k(x_i, y_j).

    Returns
    -------
    gnp.array
        (n, m) matrix or (n,) vector if pairwise.
    """
    rho = correlation(kernel)
    if pairwise:
        D = gnp.scaled_distance_elementwise(lengthscale, x, y)
    else:
        D = gnp.scaled_distance(lengthscale, x, x if y is None else y)
    return variance * rho(D)
