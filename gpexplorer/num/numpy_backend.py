# gpexplorer/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""NumPy numerical backend for GPexplorer.

This module defines the NumPy implementation of the gpexplorer.num API.
Every floating array it creates is float64.
"""

from typing import Any, Optional
from gpexplorer.config import get_config, get_logger

ArrayLike = Any

_config = get_config()
_logger = get_logger()
_logger.debug("Using backend: %s", _config.backend)


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy

_np_dtype = numpy.float64
_config.dtype_resolved = _np_dtype

from numpy import (
    isfinite,
    allclose,
    diag,
    diff,
    tril,
    arange,
    abs,
    exp,
    sin,
    sum,
    mean,
    var,
    min,
    argmin,
    max,
    minimum,
    maximum,
    clip,
    matmul,
    all,
)
from numpy.linalg import LinAlgError, cholesky
from numpy import nan
from numpy import finfo, float64
from scipy.special import gammaln
from scipy.linalg import solve_triangular
from scipy.spatial.distance import cdist

# ..................................................

eps = finfo(_np_dtype).eps

# ..................................................


def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.floating):
        return out.astype(_np_dtype, copy=False)
    return out


def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        return x
    elif isinstance(x, (int, float)):
        dt = _np_dtype if isinstance(x, float) else None
        return numpy.array([x], dtype=dt)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.floating):
            return out.astype(_np_dtype, copy=False)
        return out


def asdouble(x):
    return numpy.asarray(x).astype(float64, copy=False)


def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)


def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)


def full(shape, fill_value, dtype=None):
    return numpy.full(shape, fill_value, dtype=_np_dtype if dtype is None else dtype)


def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)


def linspace(start, stop, num=50, endpoint=True, dtype=None):
    return numpy.linspace(
        start,
        stop,
        num=num,
        endpoint=endpoint,
        dtype=_np_dtype if dtype is None else dtype,
    )


# ..................................................

# One global generator; unseeded unless set_seed is called.
_np_rng = numpy.random.default_rng(seed=_config.seed)


def set_seed(seed: Optional[int]) -> None:
    """Set the global NumPy generator seed (None: fresh OS entropy)."""
    global _np_rng
    _np_rng = numpy.random.default_rng(seed=seed)


def default_rng(seed: Optional[int] = None) -> numpy.random.Generator:
    """Return an independent generator, e.g. for reproducible tests."""
    return numpy.random.default_rng(seed=seed)


def get_rng(rng: Optional[numpy.random.Generator] = None) -> numpy.random.Generator:
    """Return ``rng`` if given, else the global generator."""
    return _np_rng if rng is None else rng


def randn(*shape: int, rng=None) -> ArrayLike:
    return get_rng(rng).standard_normal(size=shape, dtype=_np_dtype)


def uniform(low=0.0, high=1.0, size=None, rng=None) -> ArrayLike:
    return get_rng(rng).uniform(low, high, size=size)


# ..................................................


def scaled_distance(lengthscale, x: ArrayLike, y: ArrayLike) -> ArrayLike:
    """Matrix of |x_i - y_j| / lengthscale for 1D inputs."""
    xs = asarray(x).reshape(-1, 1) / lengthscale
    ys = asarray(y).reshape(-1, 1) / lengthscale
    return cdist(xs, ys)


def scaled_distance_elementwise(
    lengthscale, x: ArrayLike, y: Optional[ArrayLike]
) -> ArrayLike:
    """Vector of |x_i - y_i| / lengthscale for 1D inputs."""
    if x is y or y is None:
        return zeros((asarray(x).size,))
    return abs(asarray(x).reshape(-1) - asarray(y).reshape(-1)) / lengthscale
